from loguru import logger

from order_dashboard.infrastructure.supabase_client import SupabaseRESTClient


class RestOrderStore:
    """Reads ``Orders`` rows page by page from Supabase."""

    live = True

    def __init__(self, client: SupabaseRESTClient, table: str = "Orders") -> None:
        self._client = client
        self._table = table

    def fetch_page(
        self, offset: int, limit: int, subscriber_name: str | None = None
    ) -> list[dict]:
        # ordering by primary key keeps offset pages from overlapping or skipping rows
        params = {
            "select": "*",
            "order": "id.asc",
            "limit": str(limit),
            "offset": str(offset),
        }
        if subscriber_name is not None:
            params["subscriber_name"] = f"eq.{subscriber_name}"
        return self._client.select(self._table, params)


class InMemoryOrderStore:
    """Serves a fixed list of rows with the same paging contract as the REST store."""

    live = False

    def __init__(self, rows: list[dict]) -> None:
        self._rows = [dict(row) for row in rows]
        logger.warning(f"Using in-memory order fixture ({len(self._rows)} rows) — mock mode")

    def fetch_page(
        self, offset: int, limit: int, subscriber_name: str | None = None
    ) -> list[dict]:
        rows = self._rows
        if subscriber_name is not None:
            rows = [r for r in rows if r.get("subscriber_name") == subscriber_name]
        return [dict(r) for r in rows[offset : offset + limit]]
