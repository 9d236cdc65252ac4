"""HTTP proxy logic for fetching the helloworld service."""

import logging

import httpx

from . import config

logger = logging.getLogger(__name__)

# The one place we forward to, fixed
UPSTREAM_URL = "http://helloworld:5100/helloworld"


class UpstreamError(Exception):
    """The upstream call did not complete successfully.

    Covers connection failures, timeouts and non-2xx responses alike.
    `status_code` is set only when upstream actually answered.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


def create_client() -> httpx.AsyncClient:
    """Build the process-wide client used for every upstream call."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(config.UPSTREAM_TIMEOUT, connect=config.UPSTREAM_CONNECT_TIMEOUT),
    )


async def fetch_upstream_body(client: httpx.AsyncClient) -> str:
    """GET the upstream and return its body as text.

    Exactly one request per call, no headers or body of our own.
    Raises UpstreamError if the request fails or upstream answers non-2xx.
    """
    try:
        response = await client.get(UPSTREAM_URL)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        status_code = e.response.status_code
        logger.error(f"Upstream {UPSTREAM_URL} returned {status_code}")
        raise UpstreamError(f"Upstream returned HTTP {status_code}", status_code=status_code) from e
    except httpx.HTTPError as e:
        logger.error(f"Upstream {UPSTREAM_URL} unreachable: {type(e).__name__}: {e}")
        raise UpstreamError(f"Upstream request failed: {type(e).__name__}") from e

    logger.debug(f"Upstream {response.status_code}, {len(response.content)} bytes")
    return response.text
