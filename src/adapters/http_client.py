"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts and headers for every outbound request.
- Makes testing easy: a `httpx.MockTransport` can be passed straight through.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with shared defaults.

    Credentials are never set here: they go on the individual request that
    needs them, so a remote fetch cannot leak the Pinata token.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "*/*",
    }
    if extra_headers:
        headers.update(extra_headers)

    kwargs: dict[str, object] = {}
    if settings.http_timeout_seconds is not None:
        kwargs["timeout"] = httpx.Timeout(settings.http_timeout_seconds)
    if transport is not None:
        kwargs["transport"] = transport

    return httpx.AsyncClient(
        follow_redirects=True,
        headers=headers,
        **kwargs,
    )
