"""HTTP client utilities for talking to the upstream node."""

from typing import Any

import httpx

from src.helpers.constants import DEFAULT_TIMEOUT
from src.helpers.errors import NotFoundError, ParseError, UpstreamError
from src.helpers.logging import get_logger


logger = get_logger(__name__)


def create_http_client(
    timeout: float = DEFAULT_TIMEOUT, **kwargs: Any
) -> httpx.AsyncClient:
    """Create a configured httpx AsyncClient.

    Args:
        timeout: Default timeout in seconds (default: DEFAULT_TIMEOUT)
        **kwargs: Additional httpx.AsyncClient kwargs

    Returns:
        Configured AsyncClient instance

    Example:
        ```python
        from src.helpers.http import create_http_client

        async with create_http_client(timeout=10.0) as client:
            response = await client.get("https://example.com")
        ```
    """
    return httpx.AsyncClient(timeout=timeout, **kwargs)


def _decode_json(response: httpx.Response, url: str) -> Any:
    try:
        return response.json()
    except ValueError as e:
        msg = f"invalid JSON from {url}"
        raise ParseError(msg) from e


async def get_json(
    client: httpx.AsyncClient,
    url: str,
    *,
    params: dict[str, Any] | None = None,
    timeout: float | None = None,
    not_found_message: str | None = None,
) -> Any:
    """Fetch JSON data from a URL.

    Args:
        client: HTTP client instance
        url: URL to fetch
        params: Optional query parameters
        timeout: Optional timeout override
        not_found_message: When set, a 404 raises NotFoundError with this
            message instead of UpstreamError

    Returns:
        Parsed JSON data

    Raises:
        NotFoundError: On 404 when ``not_found_message`` is given
        UpstreamError: On transport errors, timeouts and other non-2xx statuses
        ParseError: If the body is not valid JSON

    Example:
        ```python
        async with create_http_client() as client:
            data = await get_json(client, f"{endpoint}/eth/v1/beacon/headers")
        ```
    """
    try:
        if timeout is None:
            response = await client.get(url, params=params)
        else:
            response = await client.get(url, params=params, timeout=timeout)
    except httpx.TimeoutException as e:
        logger.warning("Timeout fetching %s", url)
        msg = f"timeout fetching {url}"
        raise UpstreamError(msg) from e
    except httpx.HTTPError as e:
        logger.warning("HTTP error fetching %s: %s", url, e)
        msg = f"request to {url} failed"
        raise UpstreamError(msg) from e

    if response.status_code == 404 and not_found_message is not None:
        logger.debug("URL not found: %s", url)
        raise NotFoundError(not_found_message)

    if not response.is_success:
        logger.warning(
            "Unexpected status %d from %s: %s",
            response.status_code,
            url,
            response.text[:100] if response.text else "",
        )
        msg = f"unexpected status code {response.status_code} from {url}"
        raise UpstreamError(msg)

    return _decode_json(response, url)


async def post_json(
    client: httpx.AsyncClient,
    url: str,
    data: dict[str, Any] | list[Any],
    *,
    timeout: float | None = None,
) -> Any:
    """Post JSON data to a URL and return the JSON response.

    Args:
        client: HTTP client instance
        url: URL to post to
        data: JSON data to post
        timeout: Optional timeout override

    Returns:
        Parsed JSON response

    Raises:
        UpstreamError: On transport errors, timeouts and non-2xx statuses
        ParseError: If the body is not valid JSON
    """
    try:
        if timeout is None:
            response = await client.post(url, json=data)
        else:
            response = await client.post(url, json=data, timeout=timeout)
    except httpx.TimeoutException as e:
        logger.warning("Timeout posting to %s", url)
        msg = f"timeout posting to {url}"
        raise UpstreamError(msg) from e
    except httpx.HTTPError as e:
        logger.warning("HTTP error posting to %s: %s", url, e)
        msg = f"request to {url} failed"
        raise UpstreamError(msg) from e

    if not response.is_success:
        logger.warning("Unexpected status %d from %s", response.status_code, url)
        msg = f"unexpected status code {response.status_code} from {url}"
        raise UpstreamError(msg)

    return _decode_json(response, url)


__all__ = [
    "create_http_client",
    "get_json",
    "post_json",
]
