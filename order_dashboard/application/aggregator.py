from collections.abc import Iterable

from order_dashboard.domain.dashboard import ChartSlice, StatusCounters
from order_dashboard.domain.order import Order, OrderStatus

# counter field per canonical status; UNKNOWN only counts toward ``total``
_COUNTER_FIELDS: dict[OrderStatus, str] = {
    OrderStatus.PENDING: "pending",
    OrderStatus.ESCALATED: "escalated",
    OrderStatus.CONFIRMED: "confirmed",
    OrderStatus.REMINDED: "reminded",
    OrderStatus.CANCELLED: "cancelled",
}

_CHART_COLORS: dict[str, str] = {
    "pending": "#f59e0b",
    "escalated": "#ef4444",
    "confirmed": "#22c55e",
    "reminded": "#3b82f6",
    "cancelled": "#64748b",
}


def aggregate(orders: Iterable[Order]) -> StatusCounters:
    """Count orders in one pass: ``total`` plus one counter per canonical status."""
    counts = dict.fromkeys(["total", *_COUNTER_FIELDS.values()], 0)
    for order in orders:
        counts["total"] += 1
        field = _COUNTER_FIELDS.get(order.normalized_status)
        if field:
            counts[field] += 1
    return StatusCounters(**counts)


def unique_subscribers(orders: Iterable[Order]) -> list[str]:
    """Distinct subscriber names, sorted ascending."""
    return sorted({order.subscriber_name for order in orders})


def chart_data(stats: StatusCounters) -> list[ChartSlice]:
    return [
        ChartSlice(name=field.capitalize(), value=getattr(stats, field), color=color)
        for field, color in _CHART_COLORS.items()
    ]
