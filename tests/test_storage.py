"""Tests for planner_mock.storage."""

import json

from planner_mock.config import STORAGE_KEYS
from planner_mock.mock_data import MOCK_PROJECTS, seed_collections
from planner_mock.storage import JsonFileStorage, MemoryStorage, PreviewStore, create_storage


class TestPreviewStore:
    def test_seeds_empty_storage(self, store):
        """All six slots are populated from the seed dataset on first access."""
        assert store.snapshot() == seed_collections()

    def test_slots_hold_json_text(self):
        storage = MemoryStorage()
        PreviewStore(storage)

        raw = storage.get_item(STORAGE_KEYS["PROJECTS"])
        assert isinstance(raw, str)
        assert json.loads(raw)[0]["projectId"] == "PRJ-20251231-0001"

    def test_existing_slots_are_not_reseeded(self):
        storage = MemoryStorage()
        storage.set_item(STORAGE_KEYS["PROJECTS"], json.dumps([{"projectId": "PRJ-20260101-0001"}]))

        store = PreviewStore(storage)

        assert store.read(STORAGE_KEYS["PROJECTS"]) == [{"projectId": "PRJ-20260101-0001"}]
        assert store.read(STORAGE_KEYS["VISIONS"]) == seed_collections()[STORAGE_KEYS["VISIONS"]]

    def test_write_overwrites(self, store):
        store.write(STORAGE_KEYS["RACI"], {"PRJ-X": []})
        assert store.read(STORAGE_KEYS["RACI"]) == {"PRJ-X": []}

    def test_read_absent_slot_returns_none(self, store):
        assert store.read("not_a_slot") is None

    def test_reset_restores_seed(self, store):
        store.write(STORAGE_KEYS["PROJECTS"], [])
        store.write(STORAGE_KEYS["PLANS"], {})
        store.write("leftover", {"a": 1})

        store.reset()

        assert store.snapshot() == seed_collections()
        assert store.read("leftover") is None

    def test_seed_is_not_shared(self, store):
        """Mutating stored data never leaks into the static dataset."""
        projects = store.read(STORAGE_KEYS["PROJECTS"])
        projects[0]["customerName"] = "Changed"
        store.write(STORAGE_KEYS["PROJECTS"], projects)

        assert MOCK_PROJECTS[0]["customerName"] == "Acme Corporation"
        assert seed_collections()[STORAGE_KEYS["PROJECTS"]][0]["customerName"] == "Acme Corporation"


class TestJsonFileStorage:
    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "storage.json"
        PreviewStore(JsonFileStorage(path)).write(STORAGE_KEYS["RACI"], {"PRJ-X": []})

        reopened = PreviewStore(JsonFileStorage(path))

        assert reopened.read(STORAGE_KEYS["RACI"]) == {"PRJ-X": []}

    def test_missing_file_is_empty(self, tmp_path):
        storage = JsonFileStorage(tmp_path / "nested" / "storage.json")
        assert storage.get_item(STORAGE_KEYS["PROJECTS"]) is None

    def test_clear_empties_file(self, tmp_path):
        path = tmp_path / "storage.json"
        storage = JsonFileStorage(path)
        storage.set_item("k", "v")

        storage.clear()

        assert json.loads(path.read_text(encoding="utf-8")) == {}

    def test_keeps_non_ascii_text(self, tmp_path):
        path = tmp_path / "storage.json"
        PreviewStore(JsonFileStorage(path))

        assert "下書き" in path.read_text(encoding="utf-8")


class TestCreateStorage:
    def test_persistent_config(self, tmp_path):
        storage = create_storage({"path": str(tmp_path / "s.json"), "persist": True})
        assert isinstance(storage, JsonFileStorage)

    def test_memory_config(self):
        storage = create_storage({"path": "unused.json", "persist": False})
        assert isinstance(storage, MemoryStorage)
