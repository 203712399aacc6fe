"""Upload error taxonomy.

Every failure reaches the caller as an `IpfsUploadError` whose message is
human-readable and stable:

- configuration missing (no token)
- invalid response (no `IpfsHash` in the Pinata reply)
- upload failed (transport, HTTP status or input error, original message kept)
"""

from __future__ import annotations


class IpfsUploadError(RuntimeError):
    """Base class for every upload failure."""


class ConfigurationMissingError(IpfsUploadError):
    def __init__(self) -> None:
        super().__init__("IPFS upload configuration missing.")


class InvalidResponseError(IpfsUploadError):
    def __init__(self) -> None:
        super().__init__("IPFS upload failed: Invalid response from Pinata.")


class UploadFailedError(IpfsUploadError):
    """Wraps the underlying failure, keeping its message."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"IPFS upload failed: {reason}")
