import asyncio
import httpx
import logging
from typing import Optional

logger = logging.getLogger(__name__)

_client: Optional[httpx.AsyncClient] = None
_client_loop: Optional[asyncio.AbstractEventLoop] = None


def set_client(client: httpx.AsyncClient) -> httpx.AsyncClient:
    """Installs `client` as the shared client for the running event loop."""
    global _client, _client_loop
    _client = client
    _client_loop = asyncio.get_running_loop()
    return client


def get_client() -> httpx.AsyncClient:
    """Returns the process-wide HTTP client.

    A client is bound to the event loop it was created on, so a new one is created when
    called from a different loop or after the previous one was closed.
    """
    if _client is None or _client.is_closed or _client_loop is not asyncio.get_running_loop():
        set_client(httpx.AsyncClient(follow_redirects=True, timeout=30.0))
        logger.info("HTTP client initialized")
    return _client


async def open_client() -> httpx.AsyncClient:
    await close_client()
    return get_client()


async def close_client():
    global _client, _client_loop
    if _client is not None and not _client.is_closed and _client_loop is asyncio.get_running_loop():
        await _client.aclose()
        logger.info("HTTP client closed")
    _client = None
    _client_loop = None
