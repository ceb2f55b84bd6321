import httpx
from loguru import logger

from order_dashboard.shared.decorators import log_errors


class SupabaseRESTError(Exception):
    """Raised when the Supabase REST (PostgREST) API returns a non-2xx response."""


class SupabaseRESTClient:
    """Thin httpx wrapper for table reads against the Supabase REST API."""

    REST_PATH = "/rest/v1/"

    def __init__(self, client: httpx.Client, base_url: str, api_key: str) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/") + self.REST_PATH
        self._headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Accept": "application/json",
        }

    @log_errors
    def select(self, table: str, params: dict[str, str]) -> list[dict]:
        """GET rows from ``table`` using PostgREST query ``params``.

        Raises:
            SupabaseRESTError: on non-2xx HTTP responses or a non-list body.
            httpx.HTTPError: on transport failures (timeouts, refused connections).
        """
        response = self._client.get(
            self._base_url + table, headers=self._headers, params=params
        )

        if not response.is_success:
            raise SupabaseRESTError(
                f"Supabase REST error {response.status_code}: {response.text}"
            )

        rows = response.json()
        if not isinstance(rows, list):
            raise SupabaseRESTError(f"Expected a list of rows, got {type(rows).__name__}")

        logger.debug(f"[Supabase] {table} {params} → {len(rows)} row(s)")
        return rows
