"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-documenting fields (Field) without coupling the
  core to I/O libraries.
- The upload source is a discriminated union, so callers dispatch on `kind`
  instead of sniffing strings deep inside the uploader.

Note:
- These models describe *what* is uploaded and returned, not *how*.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, ValidationError, ValidatorFunctionWrapHandler, field_validator
from pydantic.config import ConfigDict

DATA_URL_PREFIX = "data:"
REMOTE_URL_PREFIXES = ("http://", "https://")


def is_data_url(value: str) -> bool:
    return value[: len(DATA_URL_PREFIX)].lower() == DATA_URL_PREFIX


def is_remote_url(value: str) -> bool:
    head = value[:8].lower()
    return head.startswith(REMOTE_URL_PREFIXES)


class FileSource(BaseModel):
    """In-memory file content, uploaded as it is."""

    kind: Literal["file"] = "file"
    content: bytes = Field(..., description="Raw file bytes.")
    filename: str = Field(
        default="upload",
        min_length=1,
        max_length=255,
        description="Filename sent in the multipart body.",
    )
    content_type: str | None = Field(
        default=None,
        description="MIME type sent in the multipart body, if known.",
    )


class DataUrlSource(BaseModel):
    """A `data:` URL, decoded locally before upload."""

    kind: Literal["data_url"] = "data_url"
    url: str = Field(..., min_length=len(DATA_URL_PREFIX))

    @field_validator("url")
    @classmethod
    def _check_scheme(cls, value: str) -> str:
        if not is_data_url(value):
            raise ValueError("data URL must start with 'data:'")
        return value


class RemoteUrlSource(BaseModel):
    """An http(s) URL whose body is fetched and then uploaded."""

    kind: Literal["remote_url"] = "remote_url"
    url: str = Field(..., min_length=len("http://") + 1)

    @field_validator("url")
    @classmethod
    def _check_scheme(cls, value: str) -> str:
        if not is_remote_url(value):
            raise ValueError("remote URL must start with 'http://' or 'https://'")
        return value


UploadSource = Annotated[
    Union[FileSource, DataUrlSource, RemoteUrlSource],
    Field(discriminator="kind"),
]


class UploadPayload(BaseModel):
    """Binary payload derived from any `UploadSource`."""

    content: bytes
    filename: str = Field(default="upload", min_length=1)
    content_type: str | None = None


class PinataPinResponse(BaseModel):
    """Metadata returned by `pinFileToIPFS` next to `IpfsHash`.

    Every field is best-effort: a value that does not validate becomes `None`
    instead of failing the upload. `IpfsHash` itself is read by the uploader.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    pin_size: int | None = Field(default=None, alias="PinSize")
    timestamp: str | None = Field(default=None, alias="Timestamp")
    is_duplicate: bool | None = Field(default=None, alias="isDuplicate")

    @field_validator("pin_size", "timestamp", "is_duplicate", mode="wrap")
    @classmethod
    def _drop_invalid(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            validated = handler(value)
        except ValidationError:
            return None
        if isinstance(validated, int) and not isinstance(validated, bool) and validated < 0:
            return None
        return validated


class PinResult(BaseModel):
    """Outcome of a successful pin."""

    cid: str = Field(..., min_length=1, description="Content identifier returned by Pinata.")
    gateway_url: str = Field(..., description="Public gateway URL for the CID.")
    filename: str = Field(..., description="Filename sent with the upload.")
    pin_size: int | None = None
    timestamp: str | None = None
    is_duplicate: bool | None = None
