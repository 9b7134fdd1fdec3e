import json
import logging
import pathlib

from planner_mock.config import STORAGE_CONFIG, STORAGE_KEYS
from planner_mock.mock_data import seed_collections

logger = logging.getLogger(__name__)


class MemoryStorage:
    """Browser-style local storage kept in a dict. Values are strings."""

    def __init__(self):
        self._items = {}

    def get_item(self, key):
        return self._items.get(key)

    def set_item(self, key, value):
        self._items[key] = value

    def clear(self):
        self._items.clear()


class JsonFileStorage:
    """Browser-style local storage persisted as a single JSON file.

    The whole file is rewritten on every set, which is fine for the handful
    of slots the preview keeps.
    """

    def __init__(self, path):
        self.path = pathlib.Path(path)
        self._items = self._load()

    def _load(self):
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _flush(self):
        if self.path.parent != pathlib.Path("."):
            self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self._items, f, indent=2, ensure_ascii=False)

    def get_item(self, key):
        return self._items.get(key)

    def set_item(self, key, value):
        self._items[key] = value
        self._flush()

    def clear(self):
        self._items = {}
        self._flush()


def create_storage(config=None):
    """Build the storage backend described by STORAGE_CONFIG."""
    config = config or STORAGE_CONFIG
    if config.get("persist"):
        logger.info(f"Data is stored in {config['path']}. Call apiInitializeSheets to reset.")
        return JsonFileStorage(config["path"])
    logger.info("Data is stored in memory and is lost on restart.")
    return MemoryStorage()


class PreviewStore:
    """Maps the six planning collections onto local storage slots."""

    def __init__(self, storage=None):
        self.storage = storage if storage is not None else MemoryStorage()
        self.initialize()

    def initialize(self):
        """Populate every absent slot from the seed dataset."""
        for key, value in seed_collections().items():
            if not self.storage.get_item(key):
                self.write(key, value)

    def reset(self):
        """Discard everything and reseed."""
        self.storage.clear()
        self.initialize()
        logger.info("Storage reset to seed data")

    def read(self, collection):
        data = self.storage.get_item(collection)
        return json.loads(data) if data else None

    def write(self, collection, value):
        self.storage.set_item(collection, json.dumps(value, ensure_ascii=False))

    def snapshot(self):
        return {key: self.read(key) for key in STORAGE_KEYS.values()}
