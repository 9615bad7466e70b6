"""
Core HTTP client for the SLS API.

Handles request construction, headers, status checks, response draining
and JSON encoding/decoding. Transport failures are never wrapped.
"""

import json
import logging
import urllib.error
import urllib.request
from collections.abc import Collection
from typing import Any, Protocol

LOGGER = logging.getLogger(__name__)

# Configuration
DEFAULT_INSTANCE_NAME = "sls-client"
API_VERSION_PREFIX = "/v1"


class SLSClientError(Exception):
    """Base error class for errors raised by the SLS client."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        result: dict[str, Any] = {"error": self.message}
        if self.details:
            result["details"] = self.details
        return result


class ConstructionError(SLSClientError):
    """The HTTP request could not be built (e.g. a malformed URL)."""


class ValidationError(SLSClientError):
    """Validation error for local input issues, raised before any request is sent."""


class SerializationError(SLSClientError):
    """A payload could not be encoded as JSON."""


class UnexpectedStatusError(SLSClientError):
    """The service answered with a status code the operation does not accept."""

    def __init__(self, status: int, expected: Collection[int], details: dict | None = None):
        self.status = status
        self.expected = tuple(expected)
        expected_str = " or ".join(str(code) for code in self.expected)
        super().__init__(f"unexpected status code {status} expected {expected_str}", details)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        result = super().to_dict()
        result["status"] = self.status
        result["expected"] = list(self.expected)
        return result


class DecodeError(SLSClientError):
    """A response body was not the JSON document the operation expected."""


class Transport(Protocol):
    """Anything that can send a urllib request, e.g. ``urllib.request.OpenerDirector``."""

    def open(self, fullurl: urllib.request.Request, data: bytes | None = None, timeout: float = ...) -> Any:
        ...


def set_user_agent(request: urllib.request.Request, instance_name: str) -> None:
    """Identify the calling service on a request."""
    if instance_name:
        request.add_header("User-Agent", instance_name)


class APIClient:
    """
    Low-level HTTP client for the SLS API.

    Handles:
    - User-Agent and bearer token headers
    - Sending requests through the injected transport
    - Status code checks and response draining
    - JSON encoding of request bodies and decoding of responses
    """

    def __init__(
        self,
        base_url: str,
        transport: Transport | None = None,
        instance_name: str = DEFAULT_INSTANCE_NAME,
        api_token: str | None = None,
    ):
        """
        Initialize the API client. No network activity happens here.

        Args:
            base_url: SLS base URL, e.g. http://cray-sls
            transport: Object used to send requests (default: urllib opener)
            instance_name: Name of the calling service, sent as the User-Agent
            api_token: Bearer token for the Authorization header

        """
        self.base_url = base_url.rstrip("/")
        self.transport = transport if transport is not None else urllib.request.build_opener()
        self.instance_name = instance_name
        self.api_token = api_token

    def _build_url(self, path: str) -> str:
        """Build full URL from path."""
        return f"{self.base_url}{path}"

    def _build_request(self, method: str, path: str, body: bytes | None = None) -> urllib.request.Request:
        """Build a request with the standard SLS headers attached."""
        url = self._build_url(path)
        try:
            request = urllib.request.Request(url, data=body, method=method)
        except ValueError as e:
            raise ConstructionError(f"Invalid request URL {url}: {e}") from e

        set_user_agent(request, self.instance_name)
        if self.api_token:
            request.add_header("Authorization", f"Bearer {self.api_token}")
        if body is not None:
            request.add_header("Content-Type", "application/json")
        return request

    def _open(self, request: urllib.request.Request, timeout: float | None) -> Any:
        """Send a request, returning the response even for non-2xx codes."""
        try:
            if timeout is None:
                return self.transport.open(request)
            return self.transport.open(request, timeout=timeout)
        except urllib.error.HTTPError as e:
            # urllib raises for non-2xx codes, but the error is the response
            return e

    def request(
        self,
        method: str,
        path: str,
        body: bytes | None = None,
        expected: Collection[int] = (200,),
        timeout: float | None = None,
    ) -> bytes:
        """
        Make an HTTP request to the API.

        Args:
            method: HTTP method (GET, PUT)
            path: API path (e.g., /v1/hardware)
            body: Encoded request body
            expected: Status codes that count as success
            timeout: Per-call deadline in seconds, passed to the transport

        Returns:
            The raw response body

        Raises:
            ConstructionError: If the request could not be built
            UnexpectedStatusError: If the status code is not in ``expected``

        Transport errors (URLError, TimeoutError, OSError) propagate unchanged.

        """
        request = self._build_request(method, path, body)
        LOGGER.debug("%s %s", method, request.full_url)

        response = self._open(request, timeout)
        with response:
            status = response.status
            # Always drain the body so the connection can be reused
            payload = response.read()

        LOGGER.debug("%s %s returned %d", method, request.full_url, status)
        if status not in expected:
            raise UnexpectedStatusError(status, expected)
        return payload

    # =========================================================================
    # HTTP Methods
    # =========================================================================

    def get(self, path: str, timeout: float | None = None) -> Any:
        """Make a GET request and decode the JSON response."""
        payload = self.request("GET", path, timeout=timeout)
        try:
            return json.loads(payload)
        except ValueError as e:
            raise DecodeError(f"Invalid JSON response from {path}: {e}") from e

    def put(
        self,
        path: str,
        data: Any,
        expected: Collection[int] = (200, 201),
        timeout: float | None = None,
    ) -> None:
        """Make a PUT request with a JSON body, discarding the response body."""
        try:
            body = json.dumps(data).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to encode request body for {path} as JSON: {e}") from e
        self.request("PUT", path, body=body, expected=expected, timeout=timeout)
