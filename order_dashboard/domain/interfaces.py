from typing import Protocol

from .dashboard import DashboardView
from .order import Order
from .viewer import ViewerIdentity


class IOrderStore(Protocol):
    live: bool

    def fetch_page(
        self, offset: int, limit: int, subscriber_name: str | None = None
    ) -> list[dict]:
        """Return up to ``limit`` raw rows starting at ``offset``.

        When ``subscriber_name`` is given only that subscriber's rows are returned.
        """
        ...


class IOrderService(Protocol):
    def get_visible_orders(self, identity: ViewerIdentity) -> list[Order]: ...


class IAuthService(Protocol):
    def resolve(self, username: str, password: str) -> ViewerIdentity: ...


class IReportService(Protocol):
    def generate(self, view: DashboardView) -> str:
        """Render the dashboard and return the output path."""
        ...
