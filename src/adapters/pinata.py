"""IPFS uploader backed by the Pinata pinning API.

Flow per call:
1. Check the token (no network when it is missing).
2. Normalize the source into bytes (`adapters.payloads`).
3. One multipart POST to `pinFileToIPFS` with a bearer token.
4. Read `IpfsHash` from the JSON reply.

There are no retries and nothing is shared between calls, so one instance
can serve concurrent uploads.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from adapters.http_client import build_async_client
from adapters.payloads import resolve_payload
from core.config import AppSettings
from core.domain.errors import ConfigurationMissingError, InvalidResponseError, UploadFailedError
from core.domain.models import PinataPinResponse, PinResult, UploadPayload
from core.domain.sources import coerce_source
from core.interfaces.uploader import IpfsUploader

logger = logging.getLogger(__name__)


class PinataUploader(IpfsUploader):
    """Pins files on IPFS through Pinata."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def gateway_url(self, cid: str) -> str:
        return f"{self._settings.gateway_base_url}{cid}"

    async def upload(self, source: Any) -> str:
        result = await self.pin(source)
        return result.cid

    async def pin(self, source: Any, *, name: str | None = None) -> PinResult:
        if not self._settings.has_token:
            raise ConfigurationMissingError()
        token = (self._settings.pinata_jwt or "").strip()

        try:
            upload_source = coerce_source(source)
            async with build_async_client(self._settings, transport=self._transport) as client:
                payload = await resolve_payload(upload_source, client)
                logger.debug(
                    "Uploading %s (%d bytes) to %s",
                    payload.filename,
                    len(payload.content),
                    self._settings.pin_file_url,
                )
                response = await client.post(
                    self._settings.pin_file_url,
                    headers={"Authorization": f"Bearer {token}"},
                    files={"file": (payload.filename, payload.content, payload.content_type)},
                    data=self._form_fields(name) or None,
                )
                response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError, OSError) as exc:
            reason = str(exc) or type(exc).__name__
            logger.warning("IPFS upload failed: %s", reason)
            raise UploadFailedError(reason) from exc

        return self._to_result(response, payload)

    def _form_fields(self, name: str | None) -> dict[str, str]:
        form: dict[str, str] = {}
        if self._settings.cid_version is not None:
            form["pinataOptions"] = json.dumps({"cidVersion": self._settings.cid_version})
        if name:
            form["pinataMetadata"] = json.dumps({"name": name})
        return form

    def _to_result(self, response: httpx.Response, payload: UploadPayload) -> PinResult:
        try:
            body = response.json()
        except ValueError as exc:
            logger.warning("Pinata returned a non-JSON body (HTTP %s)", response.status_code)
            raise InvalidResponseError() from exc

        if not isinstance(body, dict):
            raise InvalidResponseError()
        cid = body.get("IpfsHash")
        if not isinstance(cid, str) or not cid:
            logger.warning("Pinata response has no IpfsHash: keys=%s", sorted(body))
            raise InvalidResponseError()

        parsed = PinataPinResponse.model_validate(body)
        logger.info("Pinned %s -> CID %s", payload.filename, cid)
        return PinResult(
            cid=cid,
            gateway_url=self.gateway_url(cid),
            filename=payload.filename,
            pin_size=parsed.pin_size,
            timestamp=parsed.timestamp,
            is_duplicate=parsed.is_duplicate,
        )
