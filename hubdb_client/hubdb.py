"""
HubDB operations.

Every operation merges its options with the client's base options, delegates to
`create_request` and returns its result unchanged. Any failure is re-raised as a
`HubDBError` carrying the message of the original error only.
"""

import logging
from types import MappingProxyType
from typing import Any, Mapping

from aiohttp import ClientSession

from hubdb_client.constants import HUBDB_ENDPOINTS, TABLE_FIELDS
from hubdb_client.error import HubDBError
from hubdb_client.request import create_request
from hubdb_client.utils import merge_options

logger = logging.getLogger(__name__)


class HubDBClient:
    """Client for the HubDB tables and rows endpoints."""

    defaults: Mapping[str, Any] = MappingProxyType({})

    def __init__(
        self, base_options: Mapping[str, Any] | None = None, session: ClientSession | None = None
    ):
        # own copy, the caller's mapping can change without affecting this client
        self.base_options = dict(base_options or {})
        self.session = session

    async def _call(
        self,
        endpoint: str,
        request_shape: dict,
        options: Mapping[str, Any] | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> Any:
        try:
            merged = merge_options(self.defaults, self.base_options, options, overrides)
            return await create_request(
                HUBDB_ENDPOINTS[endpoint], request_shape, merged, session=self.session
            )
        except Exception as e:
            # some errors, like timeouts, have no message
            message = getattr(e, "message", None) or str(e) or type(e).__name__
            logger.warning(f"HubDB {endpoint} request failed: {message}")
            raise HubDBError(message) from e

    async def create_table(self, opts: Mapping[str, Any] | None = None) -> Any:
        """
        Create a new HubDB table.

        Args:
            opts: Table descriptor with `name`, `useForPages`, `columns` and `publishedAt`,
                any other key is ignored and missing ones are sent as null

        Returns:
            The created table, as returned by the API
        """
        opts = opts or {}
        body = {field: opts.get(field) for field in TABLE_FIELDS}
        return await self._call("tables", {"method": "POST", "body": body})

    async def get_tables(self) -> Any:
        """Get the collection of HubDB tables."""
        return await self._call("tables", {})

    async def get_table_rows(
        self, table_id: int | str, portal_id: int | str, opts: Mapping[str, Any] | None = None
    ) -> Any:
        """
        Get the rows of a HubDB table.

        `portal_id` always takes precedence over a `portalId` key in `opts`.
        """
        return await self._call("rows", {"tableId": table_id}, opts, {"portalId": portal_id})

    async def get_table_by_id(
        self, table_id: int | str, portal_id: int | str, options: Mapping[str, Any] | None = None
    ) -> Any:
        """
        Retrieve a HubDB table by its ID.

        `portal_id` always takes precedence over a `portalId` key in `options`.
        """
        return await self._call("table", {"tableId": table_id}, options, {"portalId": portal_id})


def hubdb_api(base_options: Mapping[str, Any] | None = None, session: ClientSession | None = None):
    return HubDBClient(base_options, session=session)
