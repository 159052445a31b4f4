from collections.abc import Iterator
from contextlib import contextmanager

from psycopg import Connection, Error as PsycopgError, connect
from psycopg.rows import dict_row

from helpdesk.core.config import get_settings


def get_database_url() -> str:
    return get_settings().database_url


@contextmanager
def get_connection(
    database_url: str | None = None,
    *,
    connect_timeout: int | None = None,
) -> Iterator[Connection]:
    url = database_url or get_database_url()
    options = {} if connect_timeout is None else {"connect_timeout": connect_timeout}
    with connect(url, row_factory=dict_row, **options) as connection:
        yield connection


def ping_database(
    database_url: str | None = None, timeout_seconds: int = 3
) -> tuple[bool, str | None]:
    """Round-trip ``SELECT 1``; returns the failure reason instead of raising."""
    try:
        with get_connection(database_url, connect_timeout=timeout_seconds) as connection:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1 AS alive")
                row = cursor.fetchone()
    except PsycopgError as exc:
        return False, str(exc)
    if row is None or row["alive"] != 1:
        return False, "Database ping returned an unexpected result."
    return True, None
