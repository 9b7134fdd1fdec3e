"""Tests for planner_mock.log_formatter."""

import logging

from planner_mock.log_formatter import CustomFormatter, configure_logging


def make_record(msg, level=logging.INFO):
    return logging.LogRecord("planner_mock.test", level, __file__, 1, msg, None, None)


class FakeSocketIO:
    def __init__(self):
        self.emitted = []

    def emit(self, event, data):
        self.emitted.append((event, data))


class TestCustomFormatter:
    def test_function_calls_are_violet(self):
        formatted = CustomFormatter().format(make_record("Function call received: apiGetProject"))
        assert formatted.startswith(CustomFormatter.COLORS["VIOLET"])
        assert formatted.endswith(CustomFormatter.COLORS["RESET"])
        assert "INFO: Function call received: apiGetProject" in formatted

    def test_latency_is_yellow(self):
        formatted = CustomFormatter().format(make_record("Function execution latency: 0.001 seconds"))
        assert formatted.startswith(CustomFormatter.COLORS["YELLOW"])

    def test_errors_are_red(self):
        formatted = CustomFormatter().format(make_record("API Error: boom", logging.ERROR))
        assert formatted.startswith(CustomFormatter.COLORS["RED"])

    def test_storage_lifecycle_is_green(self):
        formatted = CustomFormatter().format(make_record("Storage reset to seed data"))
        assert formatted.startswith(CustomFormatter.COLORS["GREEN"])

    def test_other_messages_are_white(self):
        formatted = CustomFormatter().format(make_record("hello"))
        assert formatted.startswith(CustomFormatter.COLORS["WHITE"])

    def test_mirrors_to_socketio(self):
        socketio = FakeSocketIO()

        formatted = CustomFormatter(socketio=socketio).format(make_record("hello"))

        assert len(socketio.emitted) == 1
        event, data = socketio.emitted[0]
        assert event == "log_message"
        assert data["message"] == formatted
        assert "timestamp" in data


class TestConfigureLogging:
    def test_adds_handler_once(self):
        configure_logging()
        configure_logging()

        logger = logging.getLogger("planner_mock")
        handlers = [h for h in logger.handlers if isinstance(h.formatter, CustomFormatter)]
        assert len(handlers) == 1
