import json
from typing import Any

from helpdesk.core.errors import StorageError
from helpdesk.core.logger import logger
from helpdesk.repositories.storage import KeyValueStorage

BASE_CONFIG_KEY = "base_config"


class BaseConfigRepository:
    """Stores the overrides of the base system configuration as a JSON object."""

    def __init__(self, storage: KeyValueStorage) -> None:
        self.storage = storage

    def load_overrides(self) -> dict[str, Any]:
        try:
            raw = self.storage.get_item(BASE_CONFIG_KEY)
        except StorageError as exc:
            logger.error("Failed to read saved configuration: %s", exc.reason)
            return {}
        if raw is None:
            return {}
        try:
            overrides = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning("Discarding malformed saved configuration: %s", exc)
            return {}
        if not isinstance(overrides, dict):
            logger.warning("Discarding saved configuration that is not an object")
            return {}
        return overrides

    def save(self, config: dict[str, Any]) -> bool:
        try:
            self.storage.set_item(BASE_CONFIG_KEY, json.dumps(config, ensure_ascii=False))
        except StorageError as exc:
            logger.error("Failed to save configuration: %s", exc.reason)
            return False
        return True

    def clear(self) -> bool:
        try:
            self.storage.remove_item(BASE_CONFIG_KEY)
        except StorageError as exc:
            logger.error("Failed to reset configuration: %s", exc.reason)
            return False
        return True
