from __future__ import annotations

from typing import Callable

import httpx

TEST_JWT = "TEST_JWT"
PIN_FILE_URL = "https://api.pinata.cloud/pinning/pinFileToIPFS"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it sees."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


def pinned(cid: str = "CID123", **extra) -> httpx.Response:
    return httpx.Response(200, json={"IpfsHash": cid, **extra})
