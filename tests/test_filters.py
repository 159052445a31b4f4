from datetime import UTC, date, datetime

from helpdesk.services.filters import (
    apply_filters,
    as_utc,
    contains_text,
    matches_value,
    shares_any,
    within_range,
)


def test_contains_text_ignores_case_and_empty_terms() -> None:
    assert contains_text("PRESIÓN", "Sistema de presión") is True
    assert contains_text("valve", "Sistema de presión", "") is False
    assert contains_text(None, "anything") is True
    assert contains_text("", "anything") is True


def test_within_range_is_inclusive_and_open_ended() -> None:
    assert within_range(date(2024, 1, 15), date(2024, 1, 15), date(2024, 1, 15)) is True
    assert within_range(date(2024, 1, 16), None, date(2024, 1, 15)) is False
    assert within_range(date(2024, 1, 14), date(2024, 1, 15), None) is False
    assert within_range(date(2024, 1, 14)) is True


def test_matches_value_and_shares_any() -> None:
    assert matches_value("open", None) is True
    assert matches_value("open", "closed") is False
    assert shares_any(["login", "acceso"], ["acceso", "otro"]) is True
    assert shares_any(["login"], ["facturas"]) is False
    assert shares_any([], []) is True


def test_apply_filters_preserves_order() -> None:
    numbers = [5, 3, 8, 1, 9]

    assert apply_filters(numbers, [lambda n: n > 2, lambda n: n < 9]) == [5, 3, 8]
    assert apply_filters(numbers, []) == numbers


def test_as_utc_only_touches_naive_datetimes() -> None:
    aware = datetime(2024, 1, 1, tzinfo=UTC)

    assert as_utc(None) is None
    assert as_utc(aware) is aware
    assert as_utc(datetime(2024, 1, 1)) == aware
