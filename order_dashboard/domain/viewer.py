"""Viewer identity and the filter state a viewer adjusts on the dashboard."""

from datetime import date, timedelta
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

ALL_SUBSCRIBERS = "All"


class Role(StrEnum):
    admin = "admin"
    subscriber = "subscriber"


class ViewerIdentity(BaseModel):
    """Who is looking at the dashboard.

    ``admin`` sees every subscriber's orders; a subscriber identity only ever
    sees rows whose ``subscriber_name`` equals its ``name``.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    name: str

    @classmethod
    def admin(cls, name: str = "admin") -> "ViewerIdentity":
        return cls(role=Role.admin, name=name)

    @classmethod
    def subscriber(cls, name: str) -> "ViewerIdentity":
        return cls(role=Role.subscriber, name=name)

    @property
    def is_admin(self) -> bool:
        return self.role is Role.admin

    @property
    def scope(self) -> str | None:
        """Subscriber name every store query must be constrained to, or None."""
        return None if self.is_admin else self.name


class DateRange(BaseModel):
    """Inclusive calendar-date range, read in the viewer's local time zone."""

    model_config = ConfigDict(frozen=True)

    start: date
    end: date

    @classmethod
    def default(cls, today: date) -> "DateRange":
        return cls(start=today - timedelta(days=7), end=today + timedelta(days=1))


class FilterState(BaseModel):
    model_config = ConfigDict(frozen=True)

    date_range: DateRange
    subscriber_filter: str = Field(default=ALL_SUBSCRIBERS)
