"""
Core layer - Raw types and HTTP client.

This layer provides:
- Typed dataclasses for SLS hardware and network records
- Low-level HTTP client with headers, status checks and error types
- The xname validator
"""

from sls_client.core.client import (
    APIClient,
    ConstructionError,
    DecodeError,
    SerializationError,
    SLSClientError,
    Transport,
    UnexpectedStatusError,
    ValidationError,
    set_user_agent,
)
from sls_client.core.types import HardwareRecord, NetworkRecord, StateDump
from sls_client.core.xname import is_valid_xname, xname_type

__all__ = [
    "APIClient",
    "ConstructionError",
    "DecodeError",
    "HardwareRecord",
    "NetworkRecord",
    "SLSClientError",
    "SerializationError",
    "StateDump",
    "Transport",
    "UnexpectedStatusError",
    "ValidationError",
    "is_valid_xname",
    "set_user_agent",
    "xname_type",
]
