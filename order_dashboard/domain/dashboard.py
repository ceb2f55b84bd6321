"""Aggregates and the presentation payload handed to the dashboard renderers."""

from pydantic import BaseModel, Field

from .order import Order
from .viewer import ALL_SUBSCRIBERS, FilterState, ViewerIdentity


class StatusCounters(BaseModel):
    total: int = Field(default=0, ge=0)
    pending: int = Field(default=0, ge=0)
    escalated: int = Field(default=0, ge=0)
    confirmed: int = Field(default=0, ge=0)
    reminded: int = Field(default=0, ge=0)
    cancelled: int = Field(default=0, ge=0)


class ChartSlice(BaseModel):
    name: str  # e.g. "Pending"
    value: int
    color: str  # hex colour, e.g. "#f59e0b"


class DashboardView(BaseModel):
    """Everything the presentation layer needs for one render."""

    identity: ViewerIdentity
    filters: FilterState
    stats: StatusCounters
    chart: list[ChartSlice] = Field(default_factory=list)
    filtered_orders: list[Order] = Field(default_factory=list)  # capped table rows
    unique_subscribers: list[str] = Field(default_factory=list)  # admin only
    showing: int = 0
    loaded: int = 0
    mock_mode: bool = False
    error: str | None = None

    @property
    def title(self) -> str:
        return "Admin Master View" if self.identity.is_admin else "Orders Dashboard"

    @property
    def table_title(self) -> str:
        selected = self.filters.subscriber_filter
        if self.identity.is_admin and selected != ALL_SUBSCRIBERS:
            return f"Orders for {selected}"
        return "All Orders List"
