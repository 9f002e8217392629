"""Simple HTTP client utilities using httpx.

Requests go out with no timeout and follow redirects, so an outbound
call behaves like a browser ``fetch``: it waits as long as the remote
side takes.
"""

from __future__ import annotations

import httpx
from typing import Any, Dict, Mapping


def build_async_client() -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` without a timeout."""
    return httpx.AsyncClient(timeout=httpx.Timeout(None), follow_redirects=True)


async def post(
    url: str,
    json: Dict[str, Any],
    headers: Mapping[str, str] | None = None,
    client: httpx.AsyncClient | None = None,
) -> httpx.Response:
    """Perform an asynchronous HTTP POST request.

    When ``client`` is given it is used as-is and left open for the
    caller; otherwise a short-lived client is opened for this request.
    """
    if client is not None:
        return await client.post(url, json=json, headers=headers)
    async with build_async_client() as owned:
        return await owned.post(url, json=json, headers=headers)
