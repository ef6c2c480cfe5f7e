"""
Airtable REST client.

Only the list-records endpoint is needed: the catalog is a read-only table.
Airtable pages results (100 records max) and returns an `offset` cursor while
more pages remain.
"""
from typing import Any

import httpx

from boutique import config
from boutique.logging import get_logger

logger = get_logger(__name__)


class AirtableClient:
    """Async client for one Airtable table."""

    def __init__(
        self,
        api_key: str | None = None,
        base_id: str | None = None,
        table: str | None = None,
        view: str | None = None,
        api_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.api_key = api_key if api_key is not None else config.AIRTABLE_API_KEY
        self.base_id = base_id if base_id is not None else config.AIRTABLE_BASE_ID
        self.table = table or config.AIRTABLE_TABLE
        self.view = view or config.AIRTABLE_VIEW
        self.api_url = (api_url or config.AIRTABLE_API_URL).rstrip("/")

        self._http_client = http_client

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Lazy creation of the httpx client with timeouts."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(10.0, connect=5.0),
            )
        return self._http_client

    def _validate_config(self) -> None:
        if not self.api_key:
            raise ValueError("AIRTABLE_API_KEY is not set")
        if not self.base_id:
            raise ValueError("AIRTABLE_BASE_ID is not set")

    @property
    def table_url(self) -> str:
        return f"{self.api_url}/{self.base_id}/{self.table}"

    async def list_records(self, filter_by_formula: str | None = None) -> list[dict[str, Any]]:
        """
        Fetch every record of the table, following pagination.

        Raises:
            ValueError: credentials are missing
            httpx.HTTPError: transport or HTTP status failure
        """
        self._validate_config()
        client = await self._get_http_client()

        params: dict[str, str] = {"view": self.view}
        if filter_by_formula:
            params["filterByFormula"] = filter_by_formula

        records: list[dict[str, Any]] = []
        offset: str | None = None
        seen_offsets: set[str] = set()
        while True:
            page_params = dict(params)
            if offset:
                page_params["offset"] = offset

            response = await client.get(
                self.table_url,
                params=page_params,
                headers={"Authorization": f"Bearer {self.api_key}"},
            )
            response.raise_for_status()
            data = response.json()

            records.extend(data.get("records", []))
            next_offset = data.get("offset")
            if not next_offset:
                break
            if next_offset in seen_offsets:
                logger.warning(f"Airtable repeated offset {next_offset!r}, stopping pagination")
                break
            seen_offsets.add(next_offset)
            offset = next_offset

        logger.debug(f"Fetched {len(records)} records from Airtable table {self.table}")
        return records

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
