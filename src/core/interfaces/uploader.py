"""IPFS uploader contract.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- Lets the CLI and tests swap the Pinata adapter for a stub.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import PinResult, UploadSource


@runtime_checkable
class IpfsUploader(Protocol):
    """Minimal contract for an IPFS pinning backend.

    Design rules:
    - Methods are async because they perform HTTP I/O.
    - Failures are raised as `core.domain.errors.IpfsUploadError`.
    """

    async def upload(self, source: UploadSource) -> str:
        """Upload the source and return its CID."""

        ...

    async def pin(self, source: UploadSource, *, name: str | None = None) -> PinResult:
        """Upload the source and return the full pin result."""

        ...

    def gateway_url(self, cid: str) -> str:
        ...
