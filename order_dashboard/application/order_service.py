from order_dashboard.domain.order import Order
from order_dashboard.domain.viewer import ViewerIdentity
from order_dashboard.infrastructure.order_repository import OrderRepository


class OrderService:
    """Application service for order-related operations."""

    def __init__(self, repository: OrderRepository) -> None:
        self._repository = repository

    def get_visible_orders(self, identity: ViewerIdentity) -> list[Order]:
        """Return all orders ``identity`` may see, freshly fetched from the store."""
        return self._repository.fetch_all_orders(identity)
