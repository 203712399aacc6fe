"""Public IPFS helpers.

The two entry points most callers need:

- `get_ipfs_url(cid)`: gateway URL for a CID, pure string formatting.
- `upload_to_ipfs(value)`: upload a file, a data URL or a remote URL and
  return the CID.

Settings are read when the call happens unless an `AppSettings` instance is
injected, so the token can change between calls.
"""

from __future__ import annotations

from typing import Any

import httpx

from adapters.pinata import PinataUploader
from core.config import AppSettings
from core.domain.models import PinResult


def get_ipfs_url(cid: str, settings: AppSettings | None = None) -> str:
    return (settings or AppSettings()).gateway_base_url + cid


def ipfs_uri(cid: str) -> str:
    return f"ipfs://{cid}"


async def upload_to_ipfs(
    value: Any,
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Upload `value` to Pinata and return its CID.

    `value` may be bytes, a binary file object, a `Path`, an `UploadSource`,
    a `data:` URL or an http(s) URL. Raises `IpfsUploadError` subclasses.
    """

    uploader = PinataUploader(settings or AppSettings(), transport=transport)
    return await uploader.upload(value)


async def pin_to_ipfs(
    value: Any,
    settings: AppSettings | None = None,
    *,
    name: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> PinResult:
    """Like `upload_to_ipfs` but returns the full `PinResult`."""

    uploader = PinataUploader(settings or AppSettings(), transport=transport)
    return await uploader.pin(value, name=name)
