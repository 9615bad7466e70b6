"""
SLS client - Python client for the System Layout Service.

Layers:
- core: Record types, xname validation and the low-level HTTP client
- sdk: SLSClient with one typed method per SLS operation
"""

from sls_client.core.client import (
    ConstructionError,
    DecodeError,
    SerializationError,
    SLSClientError,
    UnexpectedStatusError,
    ValidationError,
)
from sls_client.core.types import HardwareRecord, NetworkRecord, StateDump
from sls_client.sdk import SLSClient

__version__ = "0.1.0"
__all__ = [
    "ConstructionError",
    "DecodeError",
    "HardwareRecord",
    "NetworkRecord",
    "SLSClient",
    "SLSClientError",
    "SerializationError",
    "StateDump",
    "UnexpectedStatusError",
    "ValidationError",
]
