"""Tests for local-time date filtering and admin subscriber filtering."""

from datetime import UTC, date, datetime, timedelta, timezone

import pendulum
import pytest

from order_dashboard.application.filters import (
    filter_orders,
    latest_orders,
    local_bounds,
)
from order_dashboard.domain.order import Order
from order_dashboard.domain.viewer import DateRange, FilterState, ViewerIdentity
from order_dashboard.shared.timeutils import resolve_timezone

CAIRO = timezone(timedelta(hours=2))  # Africa/Cairo outside daylight saving
NEW_YORK = pendulum.timezone("America/New_York")
ADMIN = ViewerIdentity.admin()


def _order(
    order_id: int,
    created_at: datetime | str | None,
    subscriber: str = "little_toes_baheer",
    status: str = "PENDING",
) -> Order:
    return Order(
        id=order_id,
        subscriber_name=subscriber,
        order_id=str(7496366882900 + order_id),
        phone="201114344604",
        status=status,
        created_at=created_at,
    )


def _filters(start: date, end: date, subscriber: str = "All") -> FilterState:
    return FilterState(date_range=DateRange(start=start, end=end), subscriber_filter=subscriber)


NOV_28 = _filters(date(2025, 11, 28), date(2025, 11, 28))


# ---------------------------------------------------------------------------
# Date range: local boundaries
# ---------------------------------------------------------------------------


def test_local_bounds_anchor_to_local_midnight() -> None:
    start, end = local_bounds(DateRange(start=date(2025, 11, 28), end=date(2025, 11, 29)), CAIRO)

    assert start == datetime(2025, 11, 28, 0, 0, tzinfo=CAIRO)
    assert end == datetime(2025, 11, 30, 0, 0, tzinfo=CAIRO)
    assert start.astimezone(UTC) == datetime(2025, 11, 27, 22, 0, tzinfo=UTC)


def test_late_evening_utc_order_counts_for_local_day() -> None:
    """21:30Z is 23:30 in Cairo, so it belongs to Nov 28 locally."""
    order = _order(1, "2025-11-28T21:30:00Z")

    assert filter_orders([order], NOV_28, ADMIN, CAIRO) == [order]


def test_early_local_morning_order_is_not_lost_to_utc_midnight() -> None:
    """00:30 Cairo on Nov 28 is still Nov 27 in UTC but must be shown for Nov 28."""
    order = _order(1, "2025-11-27T22:30:00Z")

    assert filter_orders([order], NOV_28, ADMIN, CAIRO) == [order]
    assert filter_orders([order], NOV_28, ADMIN, UTC) == []


def test_order_after_local_midnight_moves_to_next_day() -> None:
    order = _order(1, "2025-11-28T22:30:00Z")  # 00:30 on Nov 29 in Cairo

    assert filter_orders([order], NOV_28, ADMIN, CAIRO) == []
    nov_29 = _filters(date(2025, 11, 29), date(2025, 11, 29))
    assert filter_orders([order], nov_29, ADMIN, CAIRO) == [order]


def test_start_boundary_is_inclusive_to_the_millisecond() -> None:
    midnight = datetime(2025, 11, 28, 0, 0, tzinfo=CAIRO)
    at_midnight = _order(1, midnight)
    just_before = _order(2, midnight - timedelta(milliseconds=1))

    assert filter_orders([at_midnight, just_before], NOV_28, ADMIN, CAIRO) == [at_midnight]


def test_end_boundary_is_inclusive_through_last_millisecond() -> None:
    last_ms = _order(1, datetime(2025, 11, 28, 23, 59, 59, 999000, tzinfo=CAIRO))
    next_day = _order(2, datetime(2025, 11, 29, 0, 0, tzinfo=CAIRO))

    assert filter_orders([last_ms, next_day], NOV_28, ADMIN, CAIRO) == [last_ms]


def test_sub_millisecond_timestamp_late_in_day_stays_on_that_day() -> None:
    """23:59:59.9995 in Cairo belongs to Nov 28 and to no other day."""
    order = _order(1, "2025-11-28T21:59:59.999500+00:00")
    nov_29 = _filters(date(2025, 11, 29), date(2025, 11, 29))

    assert filter_orders([order], NOV_28, ADMIN, CAIRO) == [order]
    assert filter_orders([order], nov_29, ADMIN, CAIRO) == []


def test_naive_timestamp_is_read_as_local_time() -> None:
    order = _order(1, "2025-11-28T00:15:00")

    assert filter_orders([order], NOV_28, ADMIN, CAIRO) == [order]


@pytest.mark.parametrize("raw", ["garbage", None])
def test_missing_or_unparseable_timestamp_is_always_excluded(raw: str | None) -> None:
    order = _order(1, raw)
    wide = _filters(date(1970, 1, 1), date(2100, 1, 1))

    assert filter_orders([order], wide, ADMIN, CAIRO) == []


def test_inverted_range_matches_nothing() -> None:
    order = _order(1, "2025-11-28T10:00:00Z")

    assert filter_orders([order], _filters(date(2025, 11, 29), date(2025, 11, 27)), ADMIN, CAIRO) == []


# ---------------------------------------------------------------------------
# Date range: daylight saving
# ---------------------------------------------------------------------------


def test_winter_day_uses_standard_time_offset() -> None:
    """Jan 15 in New York starts at 05:00Z (EST, UTC-5)."""
    before = _order(1, "2026-01-15T04:30:00Z")
    after = _order(2, "2026-01-15T05:30:00Z")
    jan_15 = _filters(date(2026, 1, 15), date(2026, 1, 15))

    assert filter_orders([before, after], jan_15, ADMIN, NEW_YORK) == [after]


def test_summer_day_uses_daylight_time_offset() -> None:
    """Jul 15 in New York starts at 04:00Z (EDT, UTC-4), not 05:00Z."""
    before = _order(1, "2026-07-15T03:30:00Z")
    after = _order(2, "2026-07-15T04:30:00Z")
    jul_15 = _filters(date(2026, 7, 15), date(2026, 7, 15))

    assert filter_orders([before, after], jul_15, ADMIN, NEW_YORK) == [after]


def test_range_across_spring_forward_ends_at_daylight_midnight() -> None:
    """Mar 8 2026 starts in EST and ends at 00:00 EDT on Mar 9 (04:00Z)."""
    first = _order(1, "2026-03-08T05:00:00Z")
    last = _order(2, "2026-03-09T03:59:59Z")
    next_day = _order(3, "2026-03-09T04:30:00Z")
    mar_8 = _filters(date(2026, 3, 8), date(2026, 3, 8))

    assert filter_orders([first, last, next_day], mar_8, ADMIN, NEW_YORK) == [first, last]


def test_resolve_timezone_keeps_daylight_saving_rules() -> None:
    tz = resolve_timezone("America/New_York")

    assert datetime(2026, 1, 15, 12, tzinfo=tz).utcoffset() == timedelta(hours=-5)
    assert datetime(2026, 7, 15, 12, tzinfo=tz).utcoffset() == timedelta(hours=-4)


def test_resolve_timezone_defaults_to_machine_zone(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(pendulum, "local_timezone", lambda: NEW_YORK)

    tz = resolve_timezone(None)

    assert datetime(2026, 7, 15, 12, tzinfo=tz).utcoffset() == timedelta(hours=-4)


# ---------------------------------------------------------------------------
# Subscriber filter
# ---------------------------------------------------------------------------


def _mixed_orders() -> list[Order]:
    return [
        _order(1, "2025-11-28T10:00:00Z", "little_toes_baheer"),
        _order(2, "2025-11-28T11:00:00Z", "netaq_aljamal"),
        _order(3, "2025-11-28T12:00:00Z", "different_store"),
        _order(4, "2025-11-28T13:00:00Z", "netaq_aljamal"),
    ]


def test_admin_all_keeps_every_subscriber() -> None:
    orders = _mixed_orders()

    assert filter_orders(orders, NOV_28, ADMIN, CAIRO) == orders


def test_admin_subscriber_filter_is_exact_and_stable() -> None:
    orders = _mixed_orders()
    only_netaq = _filters(date(2025, 11, 28), date(2025, 11, 28), "netaq_aljamal")

    result = filter_orders(orders, only_netaq, ADMIN, CAIRO)

    assert [o.id for o in result] == [2, 4]


def test_admin_subscriber_filter_is_case_sensitive() -> None:
    upper = _filters(date(2025, 11, 28), date(2025, 11, 28), "NETAQ_ALJAMAL")

    assert filter_orders(_mixed_orders(), upper, ADMIN, CAIRO) == []


def test_subscriber_filter_is_ignored_for_non_admin() -> None:
    """Non-admin collections are already scoped; the subscriber test always passes."""
    mine = [_order(1, "2025-11-28T10:00:00Z", "netaq_aljamal")]
    other = _filters(date(2025, 11, 28), date(2025, 11, 28), "different_store")

    assert filter_orders(mine, other, ViewerIdentity.subscriber("netaq_aljamal"), CAIRO) == mine


def test_filter_is_idempotent() -> None:
    orders = _mixed_orders() + [_order(5, "2025-11-30T10:00:00Z")]
    state = _filters(date(2025, 11, 28), date(2025, 11, 28), "netaq_aljamal")

    once = filter_orders(orders, state, ADMIN, CAIRO)

    assert filter_orders(once, state, ADMIN, CAIRO) == once


# ---------------------------------------------------------------------------
# Table selection
# ---------------------------------------------------------------------------


def test_latest_orders_newest_first_with_id_tiebreak() -> None:
    same_time = "2025-11-28T12:00:00Z"
    orders = [
        _order(1, "2025-11-28T10:00:00Z"),
        _order(2, same_time),
        _order(3, same_time),
        _order(4, "2025-11-28T14:00:00Z"),
    ]

    assert [o.id for o in latest_orders(orders, CAIRO)] == [4, 3, 2, 1]


def test_latest_orders_caps_at_limit() -> None:
    start = datetime(2025, 11, 1, tzinfo=UTC)
    orders = [_order(i, start + timedelta(minutes=i)) for i in range(150)]

    rows = latest_orders(orders, CAIRO)

    assert len(rows) == 100
    assert rows[0].id == 149
    assert rows[-1].id == 50


def test_latest_orders_reads_naive_timestamps_in_viewer_zone() -> None:
    """Naive 01:00 in Cairo is 23:00Z the day before, older than 23:30Z."""
    aware = _order(1, "2025-11-27T23:30:00Z")
    naive = _order(2, "2025-11-28T01:00:00")

    assert [o.id for o in latest_orders([naive, aware], CAIRO)] == [1, 2]
