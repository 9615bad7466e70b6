"""
Core types for the System Layout Service (SLS) API.

These dataclasses mirror the JSON documents SLS stores and returns.
Field names are snake_case in Python and PascalCase on the wire.
"""

from dataclasses import dataclass, field
from typing import Any

# =============================================================================
# Hardware Types
# =============================================================================


@dataclass
class HardwareRecord:
    """A physical or logical hardware component tracked by SLS."""

    xname: str
    type: str = ""
    class_: str = ""
    parent: str = ""
    children: list[str] = field(default_factory=list)
    type_string: str = ""
    last_updated: int | None = None
    last_updated_time: str | None = None
    extra_properties: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HardwareRecord":
        """Create from API response dict."""
        return cls(
            xname=data.get("Xname") or "",
            type=data.get("Type") or "",
            class_=data.get("Class") or "",
            parent=data.get("Parent") or "",
            children=data.get("Children") or [],
            type_string=data.get("TypeString") or "",
            last_updated=data.get("LastUpdated"),
            last_updated_time=data.get("LastUpdatedTime"),
            extra_properties=data.get("ExtraProperties"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request."""
        result: dict[str, Any] = {
            "Parent": self.parent,
            "Xname": self.xname,
            "Type": self.type,
            "Class": self.class_,
            "TypeString": self.type_string,
        }
        if self.children:
            result["Children"] = self.children
        if self.last_updated:
            result["LastUpdated"] = self.last_updated
        if self.last_updated_time:
            result["LastUpdatedTime"] = self.last_updated_time
        if self.extra_properties is not None:
            result["ExtraProperties"] = self.extra_properties
        return result


# =============================================================================
# Network Types
# =============================================================================


@dataclass
class NetworkRecord:
    """A named network definition."""

    name: str
    full_name: str = ""
    ip_ranges: list[str] = field(default_factory=list)
    type: str = ""
    last_updated: int | None = None
    last_updated_time: str | None = None
    extra_properties: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NetworkRecord":
        """Create from API response dict."""
        return cls(
            name=data.get("Name") or "",
            full_name=data.get("FullName") or "",
            ip_ranges=data.get("IPRanges") or [],
            type=data.get("Type") or "",
            last_updated=data.get("LastUpdated"),
            last_updated_time=data.get("LastUpdatedTime"),
            extra_properties=data.get("ExtraProperties"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request."""
        result: dict[str, Any] = {
            "Name": self.name,
            "FullName": self.full_name,
            "IPRanges": self.ip_ranges,
            "Type": self.type,
        }
        if self.last_updated:
            result["LastUpdated"] = self.last_updated
        if self.last_updated_time:
            result["LastUpdatedTime"] = self.last_updated_time
        if self.extra_properties is not None:
            result["ExtraProperties"] = self.extra_properties
        return result


# =============================================================================
# Dump State
# =============================================================================


@dataclass
class StateDump:
    """A point-in-time snapshot of everything SLS knows about."""

    hardware: dict[str, HardwareRecord] = field(default_factory=dict)
    networks: dict[str, NetworkRecord] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StateDump":
        """Create from API response dict."""
        hardware = {}
        for xname, hw_data in (data.get("Hardware") or {}).items():
            hardware[xname] = HardwareRecord.from_dict(hw_data)

        networks = {}
        for name, network_data in (data.get("Networks") or {}).items():
            networks[name] = NetworkRecord.from_dict(network_data)

        return cls(hardware=hardware, networks=networks)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict in the dumpstate layout."""
        return {
            "Hardware": {xname: hw.to_dict() for xname, hw in self.hardware.items()},
            "Networks": {name: network.to_dict() for name, network in self.networks.items()},
        }
