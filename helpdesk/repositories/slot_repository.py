from typing import Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from helpdesk.core.errors import StorageError
from helpdesk.core.logger import logger
from helpdesk.repositories.storage import KeyValueStorage

T = TypeVar("T")


class SlotRepository(Generic[T]):
    """Serializes a whole collection into a single storage slot as JSON."""

    def __init__(self, storage: KeyValueStorage, key: str, item_type: type[T]) -> None:
        self.storage = storage
        self.key = key
        self.adapter: TypeAdapter[list[T]] = TypeAdapter(list[item_type])

    def load(self) -> list[T] | None:
        """Return the stored collection, or None when the slot is empty or unreadable."""
        try:
            raw = self.storage.get_item(self.key)
        except StorageError as exc:
            logger.error("Failed to read slot '%s': %s", self.key, exc.reason)
            return None
        if raw is None:
            return None
        try:
            return self.adapter.validate_json(raw)
        except ValidationError as exc:
            logger.warning(
                "Discarding malformed data in slot '%s' (%d errors)",
                self.key,
                exc.error_count(),
            )
            return None

    def save(self, items: list[T]) -> bool:
        try:
            self.storage.set_item(self.key, self.dump(items))
        except StorageError as exc:
            logger.error("Failed to persist slot '%s': %s", self.key, exc.reason)
            return False
        return True

    def dump(self, items: list[T], *, indent: int | None = None) -> str:
        return self.adapter.dump_json(items, indent=indent).decode("utf-8")

    def parse_python(self, data: object) -> list[T]:
        return self.adapter.validate_python(data)
