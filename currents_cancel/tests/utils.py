"""Shared testing utilities for the cancellation tests.

Exports:
    - RecordingReporter: in-memory Reporter capturing every line.
    - CallCounter: mock-transport handler wrapper counting requests.
    - mock_client(handler): ``httpx.Client`` backed by ``httpx.MockTransport``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

import httpx

API_URL = "http://localhost:4000/v1"
CANCEL_PATH = "/runs/cancel-by-github-ci"
GITHUB_RUN_ID = "45166321"
GITHUB_RUN_ATTEMPT = "1"


@dataclass
class RecordingReporter:
    debug_enabled: bool = False
    infos: List[str] = field(default_factory=list)
    debugs: List[str] = field(default_factory=list)
    failures: List[str] = field(default_factory=list)

    def info(self, message: str) -> None:
        self.infos.append(message)

    def debug(self, message: str) -> None:
        self.debugs.append(message)

    def set_failed(self, message: str) -> None:
        self.failures.append(message)


class CallCounter:
    """Wrap a handler and keep every request it saw."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self._handler = handler
        self.requests: List[httpx.Request] = []

    @property
    def calls(self) -> int:
        return len(self.requests)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)


def mock_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def reply(status_code: int, *, json_body: Optional[object] = None, text: str = "") -> Callable[[httpx.Request], httpx.Response]:
    """Handler answering every request with the same response."""

    def handler(_: httpx.Request) -> httpx.Response:
        if json_body is not None:
            return httpx.Response(status_code, json=json_body)
        return httpx.Response(status_code, text=text)

    return handler
