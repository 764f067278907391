import aiohttp
import pytest
import pytest_asyncio
from aioresponses import aioresponses

from hubdb_client import config

HUBSPOT_API_BASE_URL = "https://api.example.com"
TABLES_URL = f"{HUBSPOT_API_BASE_URL}/hubdb/api/v2/tables"
TABLE_ID = 1234567
PORTAL_ID = 42
TABLE = {
    "id": TABLE_ID,
    "name": "events",
    "columns": [{"name": "title", "type": "TEXT"}],
    "rowCount": 2,
}
ROWS = {
    "total": 2,
    "objects": [
        {"id": 1, "values": {"1": "Kick-off"}},
        {"id": 2, "values": {"1": "Retro"}},
    ],
}


@pytest.fixture(autouse=True)
def setup():
    config.override(
        HUBSPOT_API_BASE_URL=HUBSPOT_API_BASE_URL,
        HUBSPOT_API_KEY="",
        HUBSPOT_ACCESS_TOKEN="",
        SENTRY_DSN="",
        SENTRY_SAMPLE_RATE=1.0,
        REQUEST_TIMEOUT=15,
    )


@pytest.fixture
def rmock():
    with aioresponses() as m:
        yield m


@pytest_asyncio.fixture
async def client():
    async with aiohttp.ClientSession() as session:
        yield session


def single_request(rmock):
    """The one call recorded by aioresponses"""
    calls = [call for calls in rmock.requests.values() for call in calls]
    assert len(calls) == 1
    return calls[0]
