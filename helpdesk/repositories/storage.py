from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Protocol

from psycopg import Connection, Error as PsycopgError

from helpdesk.core.config import Settings
from helpdesk.core.database import get_connection, ping_database
from helpdesk.core.errors import StorageError


class KeyValueStorage(Protocol):
    """String-keyed store holding one serialized collection per slot."""

    name: str

    def get_item(self, key: str) -> str | None:
        """Return the stored value or None when the slot is empty."""

    def set_item(self, key: str, value: str) -> None:
        """Replace the value of a slot."""

    def remove_item(self, key: str) -> None:
        """Drop a slot; missing slots are ignored."""

    def ping(self) -> tuple[bool, str | None]:
        """Lightweight reachability check."""


class InMemoryStorage:
    name = "memory"

    def __init__(self, quota_bytes: int | None = None) -> None:
        self.quota_bytes = quota_bytes
        self._items: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.quota_bytes is not None:
            used = sum(
                len(stored.encode("utf-8"))
                for slot, stored in self._items.items()
                if slot != key
            )
            if used + len(value.encode("utf-8")) > self.quota_bytes:
                raise StorageError(key, "quota exceeded")
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def ping(self) -> tuple[bool, str | None]:
        return True, None


class FileStorage:
    name = "file"

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def _slot_path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get_item(self, key: str) -> str | None:
        path = self._slot_path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(key, str(exc)) from exc

    def set_item(self, key: str, value: str) -> None:
        path = self._slot_path(key)
        tmp_path = path.with_suffix(".tmp")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(value, encoding="utf-8")
            tmp_path.replace(path)
        except OSError as exc:
            raise StorageError(key, str(exc)) from exc

    def remove_item(self, key: str) -> None:
        try:
            self._slot_path(key).unlink(missing_ok=True)
        except OSError as exc:
            raise StorageError(key, str(exc)) from exc

    def ping(self) -> tuple[bool, str | None]:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            return False, str(exc)
        if not self.directory.is_dir():
            return False, f"{self.directory} is not a directory."
        return True, None


class PostgresStorage:
    name = "postgres"

    def __init__(self, database_url: str | None = None) -> None:
        self.database_url = database_url

    @contextmanager
    def _use_connection(self, key: str) -> Iterator[Connection]:
        try:
            with get_connection(self.database_url) as connection:
                yield connection
        except PsycopgError as exc:
            raise StorageError(key, str(exc)) from exc

    def get_item(self, key: str) -> str | None:
        query = "SELECT value FROM storage_slots WHERE key = %s"
        with self._use_connection(key) as connection:
            with connection.cursor() as cursor:
                cursor.execute(query, (key,))
                row = cursor.fetchone()
        if row is None:
            return None
        return row["value"]

    def set_item(self, key: str, value: str) -> None:
        query = """
            INSERT INTO storage_slots (key, value)
            VALUES (%s, %s)
            ON CONFLICT (key) DO UPDATE
            SET value = EXCLUDED.value,
                updated_at = NOW()
        """
        with self._use_connection(key) as connection:
            with connection.cursor() as cursor:
                cursor.execute(query, (key, value))

    def remove_item(self, key: str) -> None:
        with self._use_connection(key) as connection:
            with connection.cursor() as cursor:
                cursor.execute("DELETE FROM storage_slots WHERE key = %s", (key,))

    def ping(self) -> tuple[bool, str | None]:
        return ping_database(self.database_url)


def build_storage(settings: Settings) -> KeyValueStorage:
    if settings.storage_backend == "memory":
        return InMemoryStorage()
    if settings.storage_backend == "postgres":
        return PostgresStorage(database_url=settings.database_url)
    return FileStorage(settings.storage_dir)
