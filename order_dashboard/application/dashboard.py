from datetime import date, tzinfo

from loguru import logger

from order_dashboard.application.aggregator import aggregate, chart_data, unique_subscribers
from order_dashboard.application.filters import filter_orders, latest_orders
from order_dashboard.domain.dashboard import DashboardView
from order_dashboard.domain.errors import AuthError, FetchError
from order_dashboard.domain.interfaces import IAuthService, IOrderService
from order_dashboard.domain.order import Order
from order_dashboard.domain.viewer import (
    ALL_SUBSCRIBERS,
    DateRange,
    FilterState,
    ViewerIdentity,
)
from order_dashboard.shared.timeutils import local_today

LOAD_FAILED = "Failed to load orders."


class DashboardSession:
    """State of one viewer's dashboard: identity, loaded orders and filters.

    Derived data (filtered rows, counters, chart) is never stored; ``view()``
    recomputes it from the current state each time it is called.

    Every identity change bumps ``generation``. A fetch that completes after
    its generation has been superseded is discarded, so one viewer's orders
    are never shown under another viewer's session.
    """

    def __init__(
        self,
        auth_service: IAuthService,
        order_service: IOrderService,
        tz: tzinfo,
        mock_mode: bool = False,
    ) -> None:
        self._auth_service = auth_service
        self._order_service = order_service
        self._tz = tz
        self._mock_mode = mock_mode

        self.identity: ViewerIdentity | None = None
        self.orders: tuple[Order, ...] = ()
        self.filters = FilterState(date_range=DateRange.default(local_today(tz)))
        self.error: str | None = None
        self.generation = 0

    def login(self, username: str, password: str) -> ViewerIdentity:
        """Resolve credentials, start a fresh session and load its orders.

        Raises:
            AuthError: on invalid credentials; the current state is left as is.
        """
        identity = self._auth_service.resolve(username, password)
        self._reset(identity)
        self.refresh()
        return identity

    def logout(self) -> None:
        if self.identity is not None:
            logger.info(f"Logout: {self.identity.name}")
        self._reset(None)

    def refresh(self) -> bool:
        """Re-fetch all visible orders; return True when the result was applied."""
        if self.identity is None:
            raise AuthError("Not logged in")

        identity, generation = self.identity, self.generation
        try:
            orders = self._order_service.get_visible_orders(identity)
        except FetchError:
            if generation == self.generation:
                self.error = LOAD_FAILED
            return False

        if generation != self.generation:
            logger.warning(f"Discarding stale fetch for {identity.name}")
            return False

        self.orders = tuple(orders)
        self.error = None
        return True

    def set_date_range(self, start: date, end: date) -> None:
        self.filters = self.filters.model_copy(
            update={"date_range": DateRange(start=start, end=end)}
        )

    def set_subscriber_filter(self, subscriber: str) -> None:
        if self.identity is None or not self.identity.is_admin:
            logger.warning("Subscriber filter is only available to admin; ignored")
            return
        self.filters = self.filters.model_copy(update={"subscriber_filter": subscriber})

    def view(self) -> DashboardView:
        if self.identity is None:
            raise AuthError("Not logged in")

        filtered = filter_orders(self.orders, self.filters, self.identity, self._tz)
        stats = aggregate(filtered)
        return DashboardView(
            identity=self.identity,
            filters=self.filters,
            stats=stats,
            chart=chart_data(stats),
            filtered_orders=latest_orders(filtered, self._tz),
            unique_subscribers=unique_subscribers(self.orders) if self.identity.is_admin else [],
            showing=len(filtered),
            loaded=len(self.orders),
            mock_mode=self._mock_mode,
            error=self.error,
        )

    def _reset(self, identity: ViewerIdentity | None) -> None:
        self.generation += 1
        self.identity = identity
        self.orders = ()
        self.error = None
        self.filters = FilterState(
            date_range=DateRange.default(local_today(self._tz)),
            subscriber_filter=ALL_SUBSCRIBERS,
        )
