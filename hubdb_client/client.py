from typing import Any, Mapping

from aiohttp import ClientSession

from hubdb_client import config
from hubdb_client.hubdb import HubDBClient


class HubSpotClient:
    """
    Entry point of the HubSpot API, exposes the HubDB operations as `.hubdb`.

    Used as an async context manager, it shares one ClientSession between calls:

        async with HubSpotClient({"hapikey": "..."}) as hs:
            tables = await hs.hubdb.get_tables()
    """

    def __init__(
        self, props: Mapping[str, Any] | None = None, session: ClientSession | None = None
    ):
        self.props = dict(props or {})
        self.session = session
        self._own_session = False
        self.hubdb = HubDBClient(self.props, session=session)

    @classmethod
    def from_config(cls, session: ClientSession | None = None) -> "HubSpotClient":
        props = {}
        if config.HUBSPOT_API_KEY:
            props["hapikey"] = config.HUBSPOT_API_KEY
        if config.HUBSPOT_ACCESS_TOKEN:
            props["accessToken"] = config.HUBSPOT_ACCESS_TOKEN
        return cls(props, session=session)

    async def __aenter__(self) -> "HubSpotClient":
        if self.session is None:
            self.session = ClientSession()
            self._own_session = True
            self.hubdb.session = self.session
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        if self._own_session and self.session is not None:
            await self.session.close()
            self.session = None
            self.hubdb.session = None
            self._own_session = False
