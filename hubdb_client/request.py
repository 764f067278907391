import json
import logging
from typing import Any, Mapping

import aiohttp

from hubdb_client import config
from hubdb_client.error import handle_exception
from hubdb_client.utils import build_query_params, fill_url_template

logger = logging.getLogger(__name__)

# keys of the request shape that are not URL placeholders
SHAPE_KEYS = ("method", "body")


def _timeout() -> aiohttp.ClientTimeout:
    return aiohttp.ClientTimeout(total=config.REQUEST_TIMEOUT)


def _split_options(options: Mapping[str, Any]) -> tuple[list[tuple[str, str]], dict]:
    """Turn merged options into query parameters and headers"""
    props = dict(options)
    headers = {"Accept": "application/json"}
    # the access token is a header, never a query parameter
    access_token = props.pop("accessToken", None)
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    return build_query_params(props), headers


async def _read_body(res: aiohttp.ClientResponse) -> Any:
    raw = await res.read()
    if not raw:
        return None
    # JSON is UTF-8, error bodies from proxies are not always valid text
    text = raw.decode("utf-8", errors="replace")
    try:
        return json.loads(text)
    except ValueError:
        return text


async def _send(
    session: aiohttp.ClientSession,
    url_template: str,
    request_shape: Mapping[str, Any],
    options: Mapping[str, Any],
) -> Any:
    method = request_shape.get("method", "GET").upper()
    path_params = {k: v for k, v in request_shape.items() if k not in SHAPE_KEYS}
    url = f"{config.HUBSPOT_API_BASE_URL}{fill_url_template(url_template, path_params)}"
    params, headers = _split_options(options)
    kwargs: dict = {"params": params, "headers": headers, "timeout": _timeout()}
    if "body" in request_shape:
        kwargs["json"] = request_shape["body"]
    logger.debug(f"{method} {url}")
    async with session.request(method, url, **kwargs) as res:
        record = await _read_body(res)
        if not res.ok:
            logger.warning(f"{method} {url} failed with status {res.status}")
            handle_exception(res.status, "HubSpot API error", record, path_params.get("tableId"))
        return record


async def create_request(
    url_template: str,
    request_shape: Mapping[str, Any] | None = None,
    options: Mapping[str, Any] | None = None,
    session: aiohttp.ClientSession | None = None,
) -> Any:
    """
    Send a request to the HubSpot API.

    Args:
        url_template: Endpoint path, with `:name` placeholders
        request_shape: `method` and `body` of the request, other keys fill the placeholders
        options: Merged options, sent as query parameters (except `accessToken`)
        session: Session to use, a new one is opened and closed if none is given

    Returns:
        The decoded JSON body of the response, None if it is empty

    Raises:
        RequestError: If the API answers with an error status
        ValueError: If a placeholder of the template has no value
    """
    request_shape = request_shape or {}
    options = options or {}
    own = session is None
    session = session or aiohttp.ClientSession()
    try:
        return await _send(session, url_template, request_shape, options)
    finally:
        if own:
            await session.close()
