"""In-memory order filtering by local date range and subscriber.

All functions here are pure: they never perform I/O and never mutate their
inputs, so the dashboard can recompute them after every state change.
"""

from collections.abc import Iterable, Sequence
from datetime import datetime, time, timedelta, tzinfo

from order_dashboard.domain.order import Order
from order_dashboard.domain.viewer import (
    ALL_SUBSCRIBERS,
    DateRange,
    FilterState,
    ViewerIdentity,
)

TABLE_LIMIT = 100


def local_bounds(date_range: DateRange, tz: tzinfo) -> tuple[datetime, datetime]:
    """Return ``[start 00:00, day after end 00:00)`` anchored to local midnight in ``tz``.

    The end is exclusive so sub-millisecond timestamps late on the last day still match.
    """
    start = datetime.combine(date_range.start, time.min, tzinfo=tz)
    end = datetime.combine(date_range.end + timedelta(days=1), time.min, tzinfo=tz)
    return start, end


def _localize(created: datetime, tz: tzinfo) -> datetime:
    # offset-less timestamps are wall-clock times in the viewer's zone
    return created if created.tzinfo is not None else created.replace(tzinfo=tz)


def in_date_range(order: Order, start: datetime, end: datetime, tz: tzinfo) -> bool:
    if order.created_at is None:
        return False
    return start <= _localize(order.created_at, tz) < end


def matches_subscriber(
    order: Order, subscriber_filter: str, identity: ViewerIdentity
) -> bool:
    if not identity.is_admin:
        return True
    return subscriber_filter == ALL_SUBSCRIBERS or order.subscriber_name == subscriber_filter


def filter_orders(
    orders: Iterable[Order],
    filters: FilterState,
    identity: ViewerIdentity,
    tz: tzinfo,
) -> list[Order]:
    """Return the orders inside ``filters``, preserving input order."""
    start, end = local_bounds(filters.date_range, tz)
    return [
        order
        for order in orders
        if in_date_range(order, start, end, tz)
        and matches_subscriber(order, filters.subscriber_filter, identity)
    ]


def latest_orders(
    orders: Sequence[Order], tz: tzinfo, limit: int = TABLE_LIMIT
) -> list[Order]:
    """Newest first by ``created_at``, ties broken by descending ``id``."""

    def key(order: Order) -> tuple[float, int]:
        stamp = (
            _localize(order.created_at, tz).timestamp() if order.created_at else float("-inf")
        )
        return stamp, order.id

    return sorted(orders, key=key, reverse=True)[:limit]
