"""Upload source dispatch and data URL decoding.

`coerce_source` is the single place where a loosely typed input (bytes, a
file object, a path, a string) becomes one of the `UploadSource` variants.
Strings are never treated as local paths: only `data:` and `http(s)://`
strings are accepted.
"""

from __future__ import annotations

import base64
import binascii
import os
from pathlib import Path
from typing import Any
from urllib.parse import unquote_to_bytes

from core.domain.models import (
    DataUrlSource,
    FileSource,
    RemoteUrlSource,
    is_data_url,
    is_remote_url,
)

DEFAULT_DATA_URL_MEDIA_TYPE = "text/plain;charset=US-ASCII"

_SOURCE_TYPES = (FileSource, DataUrlSource, RemoteUrlSource)


def file_source_from_path(path: Path) -> FileSource:
    return FileSource(content=path.read_bytes(), filename=path.name or "upload")


def file_source_from_stream(stream: Any) -> FileSource:
    """Read a binary file-like object (anything with `read()`)."""

    content = stream.read()
    if isinstance(content, str):
        raise ValueError("file object must be opened in binary mode")

    name = getattr(stream, "name", None)
    filename = os.path.basename(name) if isinstance(name, str) and name else "upload"
    content_type = getattr(stream, "content_type", None)
    return FileSource(
        content=bytes(content),
        filename=filename,
        content_type=content_type if isinstance(content_type, str) else None,
    )


def coerce_source(value: Any) -> FileSource | DataUrlSource | RemoteUrlSource:
    """Map a caller-supplied value to an upload source variant.

    Raises `ValueError` for anything that is not a file, a data URL or an
    http(s) URL.
    """

    if isinstance(value, _SOURCE_TYPES):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return FileSource(content=bytes(value))
    if isinstance(value, Path):
        return file_source_from_path(value)
    if isinstance(value, str):
        if is_data_url(value):
            return DataUrlSource(url=value)
        if is_remote_url(value):
            return RemoteUrlSource(url=value)
        raise ValueError("Unsupported input: expected a file, a data URL or an http(s) URL.")
    if hasattr(value, "read"):
        return file_source_from_stream(value)
    raise ValueError(f"Unsupported input type: {type(value).__name__}")


def decode_data_url(url: str) -> tuple[bytes, str]:
    """Decode an RFC 2397 data URL into `(content, media_type)`."""

    if not is_data_url(url):
        raise ValueError("Not a data URL")

    header, sep, data = url[len("data:"):].partition(",")
    if not sep:
        raise ValueError("Malformed data URL: missing ','")

    params = [p.strip() for p in header.split(";")]
    is_base64 = bool(params) and params[-1].lower() == "base64"
    if is_base64:
        params = params[:-1]

    parts = [p for p in params if p]
    if not parts:
        media_type = DEFAULT_DATA_URL_MEDIA_TYPE
    elif "/" not in parts[0]:
        # Parameters without a type, e.g. "data:;charset=utf-8,...".
        media_type = ";".join(["text/plain", *parts])
    else:
        media_type = ";".join(parts)

    raw = unquote_to_bytes(data)
    if not is_base64:
        return raw, media_type

    compact = b"".join(raw.split())
    compact += b"=" * (-len(compact) % 4)
    try:
        return base64.b64decode(compact, validate=True), media_type
    except binascii.Error as exc:
        raise ValueError(f"Malformed data URL: invalid base64 ({exc})") from exc
