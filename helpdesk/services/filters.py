"""Predicates and folds shared by the ticket and work order queries."""

from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from typing import Any, TypeVar

T = TypeVar("T")


def contains_text(term: str | None, *fields: str) -> bool:
    """Case-insensitive substring match of ``term`` against any of ``fields``.

    An empty or missing term matches everything.
    """
    if not term:
        return True
    needle = term.lower()
    return any(needle in (value or "").lower() for value in fields)


def within_range(value: Any, lower: Any | None = None, upper: Any | None = None) -> bool:
    """Inclusive range check; a missing bound is unbounded."""
    if lower is not None and value < lower:
        return False
    if upper is not None and value > upper:
        return False
    return True


def matches_value(value: Any, expected: Any | None) -> bool:
    if not expected:
        return True
    return value == expected


def shares_any(values: Iterable[str], wanted: Iterable[str] | None) -> bool:
    wanted_set = set(wanted or ())
    if not wanted_set:
        return True
    return any(value in wanted_set for value in values)


def apply_filters(items: Iterable[T], predicates: list[Callable[[T], bool]]) -> list[T]:
    """Keep items satisfying every predicate, preserving order."""
    return [item for item in items if all(predicate(item) for predicate in predicates)]


def as_utc(moment: datetime | None) -> datetime | None:
    """Treat naive datetimes as UTC so they compare with stored timestamps."""
    if moment is None or moment.tzinfo is not None:
        return moment
    return moment.replace(tzinfo=UTC)
