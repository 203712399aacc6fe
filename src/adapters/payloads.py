"""Turn an upload source into the binary payload sent to Pinata.

- File: passed through unchanged.
- Data URL: decoded locally, no network access.
- Remote URL: one plain GET, the body is read as bytes.
"""

from __future__ import annotations

import logging
import mimetypes
import posixpath
from urllib.parse import unquote, urlsplit

import httpx

from core.domain.models import DataUrlSource, FileSource, RemoteUrlSource, UploadPayload, UploadSource
from core.domain.sources import decode_data_url

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "upload"


def _filename_for_media_type(media_type: str | None) -> str:
    if not media_type:
        return DEFAULT_FILENAME
    extension = mimetypes.guess_extension(media_type.split(";", 1)[0].strip().lower())
    return f"{DEFAULT_FILENAME}{extension or ''}"


def _filename_from_url(url: str, media_type: str | None) -> str:
    name = posixpath.basename(unquote(urlsplit(url).path))
    return name or _filename_for_media_type(media_type)


def payload_from_data_url(source: DataUrlSource) -> UploadPayload:
    content, media_type = decode_data_url(source.url)
    return UploadPayload(
        content=content,
        filename=_filename_for_media_type(media_type),
        content_type=media_type,
    )


async def fetch_remote_payload(source: RemoteUrlSource, client: httpx.AsyncClient) -> UploadPayload:
    logger.debug("Fetching remote content from %s", source.url)
    response = await client.get(source.url)
    response.raise_for_status()

    content_type = response.headers.get("content-type")
    return UploadPayload(
        content=response.content,
        filename=_filename_from_url(str(response.url), content_type),
        content_type=content_type,
    )


async def resolve_payload(source: UploadSource, client: httpx.AsyncClient) -> UploadPayload:
    """Normalize any source variant into an `UploadPayload`."""

    if isinstance(source, FileSource):
        return UploadPayload(
            content=source.content,
            filename=source.filename,
            content_type=source.content_type,
        )
    if isinstance(source, DataUrlSource):
        return payload_from_data_url(source)
    if isinstance(source, RemoteUrlSource):
        return await fetch_remote_payload(source, client)
    raise ValueError(f"Unsupported upload source: {type(source).__name__}")
