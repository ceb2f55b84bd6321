from loguru import logger

from order_dashboard.domain.errors import FetchError
from order_dashboard.domain.interfaces import IOrderStore
from order_dashboard.domain.order import Order
from order_dashboard.domain.viewer import ViewerIdentity
from order_dashboard.shared.decorators import log_errors


class OrderRepository:
    """Drains an order store into memory, one fixed-size page at a time."""

    # Supabase caps a single select at 1000 rows by default
    PAGE_SIZE = 1000

    def __init__(self, store: IOrderStore, page_size: int | None = None) -> None:
        self._store = store
        self._page_size = page_size or self.PAGE_SIZE

    @log_errors(wrap=FetchError, message="Failed to load orders.")
    def fetch_all_orders(self, identity: ViewerIdentity) -> list[Order]:
        """Return every order ``identity`` is allowed to see.

        Non-admin viewers are constrained to their own subscriber name on every
        page request. Pages are requested sequentially until one comes back
        shorter than the page size.

        Raises:
            FetchError: if any page request fails; nothing fetched so far is returned.
        """
        scope = identity.scope
        orders: list[Order] = []
        page = 0

        while True:
            rows = self._store.fetch_page(
                offset=page * self._page_size,
                limit=self._page_size,
                subscriber_name=scope,
            )
            logger.debug(f"Page {page}: {len(rows)} row(s) for {identity.name}")

            for row in rows:
                order = self._map(row)
                # the store is trusted for scoping, but rows are re-checked here
                if scope is not None and order.subscriber_name != scope:
                    logger.warning(
                        f"Order {order.id} dropped — belongs to {order.subscriber_name!r}, "
                        f"viewer is {scope!r}"
                    )
                    continue
                orders.append(order)

            if len(rows) < self._page_size:
                break
            page += 1

        logger.info(f"Loaded {len(orders)} order(s) in {page + 1} page(s) for {identity.name}")
        return orders

    @staticmethod
    def _map(row: dict) -> Order:
        """Map a raw ``Orders`` row to an ``Order`` domain object."""
        return Order(
            id=row["id"],
            subscriber_name=row["subscriber_name"],
            order_id=row["order_id"],
            phone=row.get("phone"),
            status=row.get("status"),
            created_at=row.get("created_at"),
        )
