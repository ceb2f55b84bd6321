from datetime import date

from loguru import logger

from order_dashboard.application.dashboard import DashboardSession
from order_dashboard.domain.dashboard import DashboardView
from order_dashboard.domain.interfaces import IReportService


class Executor:
    """Logs a viewer in, applies the requested filters and renders the dashboard."""

    def __init__(self, session: DashboardSession, report_service: IReportService) -> None:
        self._session = session
        self._report_service = report_service

    def run(
        self,
        username: str,
        password: str,
        start: date | None = None,
        end: date | None = None,
        subscriber: str | None = None,
    ) -> tuple[DashboardView, str]:
        """Return the rendered view and the report path.

        Raises:
            AuthError: if the credentials are rejected.
        """
        identity = self._session.login(username, password)
        logger.info(f"Viewing as {identity.name} ({identity.role})")

        if start or end:
            current = self._session.filters.date_range
            self._session.set_date_range(start or current.start, end or current.end)
        if subscriber:
            self._session.set_subscriber_filter(subscriber)

        view = self._session.view()
        logger.info(
            f"Showing {view.showing} of {view.loaded} order(s) — "
            f"pending {view.stats.pending}, escalated {view.stats.escalated}, "
            f"confirmed {view.stats.confirmed}, reminded {view.stats.reminded}, "
            f"cancelled {view.stats.cancelled}"
        )

        report_path = self._report_service.generate(view)
        logger.info(f"Done. Dashboard written to: {report_path}")
        return view, report_path
