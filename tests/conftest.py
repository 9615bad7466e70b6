"""Pytest configuration - loads .env for integration tests and provides a stub transport."""

from pathlib import Path
from typing import Any

import pytest
from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)


class StubResponse:
    """Canned HTTP response that records whether it was drained and closed."""

    def __init__(self, status: int, body: bytes = b""):
        self.status = status
        self.body = body
        self.drained = False
        self.closed = False

    def read(self) -> bytes:
        self.drained = True
        return self.body

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "StubResponse":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class StubTransport:
    """Records every request and answers with a canned response or error."""

    def __init__(self, response: Any = None, error: BaseException | None = None):
        self.response = response
        self.error = error
        self.requests: list[Any] = []
        self.timeouts: list[float | None] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def open(self, fullurl: Any, data: bytes | None = None, timeout: float | None = None) -> Any:
        self.requests.append(fullurl)
        self.timeouts.append(timeout)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def stub_response():
    """Factory for canned responses."""
    return StubResponse


@pytest.fixture
def stub_transport():
    """Factory for recording transports."""
    return StubTransport
