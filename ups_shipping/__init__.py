"""
Async client for the UPS Shipping API.

OAuth client-credentials authentication, Create Shipment and Void Shipment.
"""
from ups_shipping.core.config import Environment, UPSSettings, load_settings
from ups_shipping.core.errors import (
    UPSError,
    TransportError,
    AuthenticationFailed,
    MalformedResponse,
    APIError,
)
from ups_shipping.services.envelope import UPSResult
from ups_shipping.services.ups_client import UPSClient

__version__ = "1.0.0"

__all__ = [
    "Environment",
    "UPSSettings",
    "load_settings",
    "UPSError",
    "TransportError",
    "AuthenticationFailed",
    "MalformedResponse",
    "APIError",
    "UPSResult",
    "UPSClient",
]
