from datetime import datetime
from enum import StrEnum
from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict, field_validator

from order_dashboard.shared.timeutils import parse_timestamp


class OrderStatus(StrEnum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    ESCALATED = "ESCALATED"
    REMINDED = "REMINDED"
    CANCELLED = "CANCELLED"
    UNKNOWN = "UNKNOWN"  # anything else, including a missing status

    @classmethod
    def classify(cls, raw: str | None) -> "OrderStatus":
        """Map a raw stored status onto a canonical code, case-insensitively."""
        if not raw:
            return cls.UNKNOWN
        try:
            return cls(raw.upper())
        except ValueError:
            return cls.UNKNOWN


class Order(BaseModel):
    """A subscriber's order as stored in the ``Orders`` table.

    Orders are read-only projections of remote rows; the model is frozen.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    subscriber_name: str
    order_id: str  # marketplace order number, e.g. "7496366882903"
    phone: str | None = None
    status: str | None = None  # raw value, e.g. "PENDING" or "confirmed"
    created_at: datetime | None = None  # None when the stored value is unparseable

    @field_validator("order_id", "phone", mode="before")
    @classmethod
    def coerce_to_str(cls, value: Any) -> Any:
        # numeric ids and phone numbers come back as JSON numbers from some stores
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("created_at", mode="before")
    @classmethod
    def parse_created_at(cls, value: Any) -> datetime | None:
        if value is None or isinstance(value, datetime):
            return value
        if isinstance(value, str):
            try:
                return parse_timestamp(value)
            except ValueError:
                pass
        logger.warning(f"Unparseable created_at {value!r}; order excluded from date ranges")
        return None

    @property
    def normalized_status(self) -> OrderStatus:
        return OrderStatus.classify(self.status)
