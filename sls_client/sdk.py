"""
SLS SDK - Typed client for the System Layout Service.

Built on top of the core APIClient. Every method makes exactly one request
and keeps no state between calls, so a client can be shared across threads.
"""

import urllib.parse
from collections.abc import Callable
from typing import Any

from sls_client.core.client import (
    API_VERSION_PREFIX,
    DEFAULT_INSTANCE_NAME,
    APIClient,
    DecodeError,
    Transport,
    ValidationError,
)
from sls_client.core.types import HardwareRecord, NetworkRecord, StateDump
from sls_client.core.xname import is_valid_xname


def _path_segment(value: str) -> str:
    """Percent-encode a value for use as a single URL path segment."""
    return urllib.parse.quote(value, safe="")


class SLSClient:
    """
    System Layout Service client.

    Example:
        client = SLSClient("http://cray-sls", instance_name="my-service").with_api_token(token)

        dump = client.get_dump_state()
        for hardware in client.get_all_hardware():
            print(hardware.xname, hardware.type)

        client.put_network(NetworkRecord(name="HMN", ip_ranges=["10.254.0.0/17"]))

    """

    def __init__(
        self,
        base_url: str,
        transport: Transport | None = None,
        instance_name: str = DEFAULT_INSTANCE_NAME,
        xname_validator: Callable[[str], bool] = is_valid_xname,
    ):
        """
        Initialize the SLS client.

        Args:
            base_url: SLS base URL, e.g. http://cray-sls
            transport: Object used to send requests (default: urllib opener)
            instance_name: Name of the calling service, sent as the User-Agent
            xname_validator: Check applied to hardware xnames before writes

        """
        self._client = APIClient(
            base_url=base_url,
            transport=transport,
            instance_name=instance_name,
        )
        self._is_valid_xname = xname_validator

    @property
    def base_url(self) -> str:
        """Get the SLS base URL."""
        return self._client.base_url

    def with_api_token(self, api_token: str | None) -> "SLSClient":
        """Send ``Authorization: Bearer <api_token>`` on all following requests."""
        self._client.api_token = api_token or None
        return self

    # =========================================================================
    # Reads
    # =========================================================================

    def get_dump_state(self, timeout: float | None = None) -> StateDump:
        """
        Get the full SLS state.

        Args:
            timeout: Per-call deadline in seconds

        Returns:
            StateDump with all hardware and networks

        """
        result = self._client.get(f"{API_VERSION_PREFIX}/dumpstate", timeout=timeout)
        try:
            return StateDump.from_dict(result)
        except (AttributeError, KeyError, TypeError) as e:
            raise DecodeError(f"Unexpected dumpstate response: {e!r}") from e

    def get_all_hardware(self, timeout: float | None = None) -> list[HardwareRecord]:
        """
        List every hardware component known to SLS.

        Args:
            timeout: Per-call deadline in seconds

        Returns:
            List of HardwareRecord

        """
        result = self._client.get(f"{API_VERSION_PREFIX}/hardware", timeout=timeout)
        if not isinstance(result, list):
            raise DecodeError(f"Expected a JSON array of hardware, got {type(result).__name__}")
        try:
            return [HardwareRecord.from_dict(item) for item in result]
        except (AttributeError, KeyError, TypeError) as e:
            raise DecodeError(f"Unexpected hardware response: {e!r}") from e

    # =========================================================================
    # Writes
    # =========================================================================

    def put_hardware(self, hardware: HardwareRecord, timeout: float | None = None) -> None:
        """
        Create or update a hardware component.

        SLS answers 201 when the component is new and 200 when it was
        updated; both are success.

        Args:
            hardware: The component to store, keyed by its xname
            timeout: Per-call deadline in seconds

        """
        if not self._is_valid_xname(hardware.xname):
            raise ValidationError(f"hardware has invalid xname {hardware.xname}")

        self._put(f"{API_VERSION_PREFIX}/hardware/{_path_segment(hardware.xname)}", hardware.to_dict(), timeout)

    def put_network(self, network: NetworkRecord, timeout: float | None = None) -> None:
        """
        Create or update a network, keyed by its name.

        Args:
            network: The network to store
            timeout: Per-call deadline in seconds

        """
        if not network.name:
            raise ValidationError("network has empty network name")
        if " " in network.name:
            raise ValidationError(f"network name contains spaces ({network.name})")

        self._put(f"{API_VERSION_PREFIX}/networks/{_path_segment(network.name)}", network.to_dict(), timeout)

    def _put(self, path: str, data: dict[str, Any], timeout: float | None) -> None:
        """PUT a JSON record, accepting both created and updated."""
        self._client.put(path, data, expected=(200, 201), timeout=timeout)
