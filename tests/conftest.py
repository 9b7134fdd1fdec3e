"""Shared fixtures for the local preview test suite."""

from datetime import datetime, timezone

import pytest

from planner_mock.business_logic import ApiContext
from planner_mock.script_run import ScriptRunner
from planner_mock.storage import MemoryStorage, PreviewStore

FIXED_NOW = datetime(2026, 3, 15, 9, 30, 0, 123000, tzinfo=timezone.utc)


@pytest.fixture
def store():
    return PreviewStore(MemoryStorage())


@pytest.fixture
def notifications():
    return []


@pytest.fixture
def ctx(store, notifications):
    return ApiContext(store, clock=lambda: FIXED_NOW, notify=notifications.append)


@pytest.fixture
def runner(ctx):
    return ScriptRunner(ctx, delay=0)
