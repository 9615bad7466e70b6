"""
Core APIClient tests.

Covers request construction, error types, and one round trip through the
default urllib transport against a local HTTP server.
"""

import json
import threading
import urllib.request
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from sls_client import SLSClient
from sls_client.core.client import (
    APIClient,
    ConstructionError,
    SLSClientError,
    UnexpectedStatusError,
    ValidationError,
    set_user_agent,
)
from sls_client.core.types import NetworkRecord

# =============================================================================
# Errors
# =============================================================================


def test_error_to_dict():
    error = ValidationError("network has empty network name", details={"field": "Name"})
    assert error.to_dict() == {"error": "network has empty network name", "details": {"field": "Name"}}


def test_unexpected_status_error_to_dict():
    error = UnexpectedStatusError(503, (200,))
    assert error.message == "unexpected status code 503 expected 200"
    assert error.to_dict() == {
        "error": "unexpected status code 503 expected 200",
        "status": 503,
        "expected": [200],
    }
    assert isinstance(error, SLSClientError)


# =============================================================================
# Request construction
# =============================================================================


def test_malformed_base_url_is_a_construction_error(stub_transport):
    transport = stub_transport()
    client = APIClient("cray-sls", transport=transport)

    with pytest.raises(ConstructionError):
        client.get("/v1/hardware")

    assert transport.call_count == 0


def test_set_user_agent():
    request = urllib.request.Request("http://cray-sls/v1/hardware")

    set_user_agent(request, "")
    assert not request.has_header("User-agent")

    set_user_agent(request, "cray-power-control")
    assert request.get_header("User-agent") == "cray-power-control"


def test_request_returns_raw_body(stub_transport, stub_response):
    transport = stub_transport(stub_response(200, b"raw"))
    client = APIClient("http://cray-sls", transport=transport)

    assert client.request("GET", "/v1/readiness") == b"raw"


def test_request_checks_expected_codes(stub_transport, stub_response):
    transport = stub_transport(stub_response(202))
    client = APIClient("http://cray-sls", transport=transport)

    assert client.request("PUT", "/v1/networks/HMN", body=b"{}", expected=(202,)) == b""


# =============================================================================
# Default transport
# =============================================================================


class FakeSLSHandler(BaseHTTPRequestHandler):
    """Minimal stand-in for SLS: serves /v1/hardware and accepts network PUTs."""

    received: list[dict] = []

    def do_GET(self):
        if self.path == "/v1/hardware":
            self._reply(200, json.dumps([{"Xname": "x3000c0s1b0n0", "Type": "comptype_node"}]).encode())
        else:
            self._reply(503, b"unavailable")

    def do_PUT(self):
        length = int(self.headers.get("Content-Length", 0))
        FakeSLSHandler.received.append(
            {
                "path": self.path,
                "user_agent": self.headers.get("User-Agent"),
                "authorization": self.headers.get("Authorization"),
                "body": json.loads(self.rfile.read(length)),
            }
        )
        self._reply(201, b"")

    def _reply(self, status: int, body: bytes) -> None:
        self.send_response(status)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def sls_server(monkeypatch):
    for var in ("http_proxy", "HTTP_PROXY", "all_proxy", "ALL_PROXY"):
        monkeypatch.delenv(var, raising=False)
    FakeSLSHandler.received = []
    server = ThreadingHTTPServer(("127.0.0.1", 0), FakeSLSHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


def test_default_transport_round_trip(sls_server):
    client = SLSClient(sls_server, instance_name="test-service").with_api_token("secret")

    hardware = client.get_all_hardware(timeout=5)
    assert [hw.xname for hw in hardware] == ["x3000c0s1b0n0"]

    client.put_network(NetworkRecord(name="HMN", ip_ranges=["10.254.0.0/17"]), timeout=5)
    assert FakeSLSHandler.received == [
        {
            "path": "/v1/networks/HMN",
            "user_agent": "test-service",
            "authorization": "Bearer secret",
            "body": {"Name": "HMN", "FullName": "", "IPRanges": ["10.254.0.0/17"], "Type": ""},
        }
    ]


def test_default_transport_non_2xx_is_status_error(sls_server):
    client = SLSClient(sls_server)

    with pytest.raises(UnexpectedStatusError) as exc_info:
        client.get_dump_state(timeout=5)

    assert exc_info.value.status == 503
