"""Simple HTTP client utilities using httpx.

Provider adapters send exactly one POST per request through
:func:`post`.  A fresh client is opened for every call so that no
connection state is shared between requests.
"""

from __future__ import annotations

import httpx
from typing import Any, Dict, Optional


async def post(
    url: str,
    json: Dict[str, Any],
    headers: Optional[Dict[str, str]] = None,
    params: Optional[Dict[str, str]] = None,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    """Perform an asynchronous HTTP POST request and return the buffered response."""
    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        response = await client.post(url, json=json, headers=headers, params=params)
        return response
