import argparse
import getpass
import sys
from datetime import date

import httpx
from loguru import logger

from order_dashboard.application.auth_service import CredentialAuthService
from order_dashboard.application.dashboard import DashboardSession
from order_dashboard.application.html_report import HtmlReportService
from order_dashboard.application.order_service import OrderService
from order_dashboard.domain.errors import AuthError
from order_dashboard.domain.interfaces import IOrderStore
from order_dashboard.entrypoints.executor import Executor
from order_dashboard.entrypoints.settings import Config, config
from order_dashboard.infrastructure.fixtures import sample_rows
from order_dashboard.infrastructure.order_repository import OrderRepository
from order_dashboard.infrastructure.order_store import InMemoryOrderStore, RestOrderStore
from order_dashboard.infrastructure.supabase_client import SupabaseRESTClient
from order_dashboard.shared.timeutils import resolve_timezone


def build_order_store(settings: Config) -> IOrderStore:
    """Pick the order store once, at startup: Supabase when configured, else the fixture."""
    if settings.SUPABASE_URL and settings.SUPABASE_ANON_KEY:
        http_client = httpx.Client(timeout=settings.REQUEST_TIMEOUT)
        client = SupabaseRESTClient(
            client=http_client,
            base_url=settings.SUPABASE_URL,
            api_key=settings.SUPABASE_ANON_KEY,
        )
        return RestOrderStore(client, table=settings.ORDERS_TABLE)
    return InMemoryOrderStore(sample_rows())


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render the order-tracking dashboard.")
    parser.add_argument("--username", help="'admin' or a subscriber name")
    parser.add_argument("--password", help="prompted for when omitted")
    parser.add_argument("--start", type=date.fromisoformat, help="first day, YYYY-MM-DD")
    parser.add_argument("--end", type=date.fromisoformat, help="last day, YYYY-MM-DD")
    parser.add_argument("--subscriber", help="admin only: show a single subscriber")
    parser.add_argument("--output-dir", default=config.REPORT_DIR)
    parser.add_argument("--json", action="store_true", help="print the view payload as JSON")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logger.remove()
    logger.add(sys.stderr, level=config.LOG_LEVEL)

    username = args.username if args.username is not None else input("Username: ")
    password = args.password if args.password is not None else getpass.getpass("Password: ")

    tz = resolve_timezone(config.DASHBOARD_TIMEZONE)
    store = build_order_store(config)
    session = DashboardSession(
        auth_service=CredentialAuthService(
            admin_username=config.ADMIN_USERNAME,
            admin_password=config.ADMIN_PASSWORD,
            user_password=config.USER_PASSWORD,
        ),
        order_service=OrderService(OrderRepository(store, page_size=config.PAGE_SIZE)),
        tz=tz,
        mock_mode=not store.live,
    )
    executor = Executor(session, HtmlReportService(output_dir=args.output_dir, tz=tz))

    try:
        view, _ = executor.run(
            username,
            password,
            start=args.start,
            end=args.end,
            subscriber=args.subscriber,
        )
    except AuthError as exc:
        print(exc, file=sys.stderr)
        return 1

    if args.json:
        print(view.model_dump_json(indent=2))
    return 1 if view.error else 0


if __name__ == "__main__":
    raise SystemExit(main())
