import sentry_sdk
from sentry_sdk.integrations.aiohttp import AioHttpIntegration

from hubdb_client import config
from hubdb_client.utils import get_app_version


def get_sentry_kwargs():
    """
    Returns Sentry configuration kwargs.

    The integration is created fresh each time so that it hooks into aiohttp
    when sentry_sdk.init() is called, not at import time.
    """
    return {
        "dsn": config.SENTRY_DSN,
        "integrations": [AioHttpIntegration()],
        "environment": config.ENVIRONMENT or "unknown",
        "release": get_app_version(),
        "traces_sample_rate": config.SENTRY_SAMPLE_RATE or 1.0,
    }


def init_sentry() -> bool:
    if not config.SENTRY_DSN:
        return False
    sentry_sdk.init(**get_sentry_kwargs())
    return True
