"""
UPS Shipping API Client

Create and void shipments against the UPS Shipping API v2403.

Each call runs the same pipeline:
    build request -> authenticate -> encode -> send -> decode -> classify
Any failing stage aborts the call. Nothing is retried here; retry policy
belongs to the caller.

Usage:
    async with UPSClient(load_settings()) as client:
        result = await client.create_shipment(shipment_request)
        if result.success:
            print(result.response.shipment_results.shipment_identification_number)
        else:
            print(result.error.errors)
"""
import logging
from datetime import datetime
from typing import Callable, Optional, TextIO, Type
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from ups_shipping.core.config import UPSSettings
from ups_shipping.core.errors import TransportError
from ups_shipping.schemas.responses import ShipmentResponse, VoidShipmentResponse
from ups_shipping.schemas.shipment import ShipmentRequest
from ups_shipping.services import envelope
from ups_shipping.services.auth import Authenticator, Credentials
from ups_shipping.services.envelope import UPSResult
from ups_shipping.services.oauth import OAuthTokenIssuer

logger = logging.getLogger(__name__)

# API endpoints
SHIPPING_PATH = "/api/shipments/v2403/ship"
VOID_PATH = f"{SHIPPING_PATH}/cancel"


def dump_request(request: httpx.Request) -> str:
    """Render a request as raw HTTP text."""
    lines = [f"{request.method} {request.url.raw_path.decode('ascii')} HTTP/1.1"]
    lines.extend(f"{name}: {value}" for name, value in request.headers.items())
    body = request.content.decode("utf-8", errors="replace")
    return "\r\n".join(lines) + "\r\n\r\n" + body


def dump_response(response: httpx.Response) -> str:
    """Render a response as raw HTTP text."""
    lines = [f"{response.http_version} {response.status_code} {response.reason_phrase}"]
    lines.extend(f"{name}: {value}" for name, value in response.headers.items())
    body = response.content.decode("utf-8", errors="replace")
    return "\r\n".join(lines) + "\r\n\r\n" + body


class UPSClient:
    """
    UPS Shipping API client.

    Credentials and the cached OAuth token live on the instance; one client
    may be shared by concurrent tasks.

    Args:
        settings: validated UPS settings
        http_client: transport to use; when omitted the client creates
            (and closes) its own httpx.AsyncClient
        log_writer: optional sink receiving raw HTTP dumps of every
            shipment request and response
        clock: time source for token expiry, UTC now by default
    """

    def __init__(
        self,
        settings: UPSSettings,
        http_client: Optional[httpx.AsyncClient] = None,
        log_writer: Optional[TextIO] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.settings = settings
        self.log_writer = log_writer
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=settings.UPS_TIMEOUT_SECONDS)

        self.credentials = Credentials.from_settings(settings)
        self.token_issuer = OAuthTokenIssuer(self._http_client, settings.base_url)
        self.authenticator = Authenticator(self.credentials, self.token_issuer, clock=clock)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client and not self._http_client.is_closed:
            await self._http_client.aclose()

    # ==================== Shipping ====================

    async def create_shipment(self, shipment_request: ShipmentRequest) -> UPSResult[ShipmentResponse]:
        """
        Create a shipment and get its labels.

        Returns:
            UPSResult with the ShipmentResponse, or the UPS error entries

        Raises:
            TransportError, AuthenticationFailed, MalformedResponse
        """
        return await self._call(
            "POST",
            SHIPPING_PATH,
            "ShipmentResponse",
            ShipmentResponse,
            payload=("ShipmentRequest", shipment_request),
        )

    async def void_shipment(self, shipment_identification_number: str) -> UPSResult[VoidShipmentResponse]:
        """
        Void a shipment (before pickup).

        Args:
            shipment_identification_number: 1Z shipment identification number

        Returns:
            UPSResult with the VoidShipmentResponse, or the UPS error entries
        """
        if not shipment_identification_number:
            raise ValueError("shipment_identification_number is required")

        path = f"{VOID_PATH}/{quote(shipment_identification_number, safe='')}"
        return await self._call("DELETE", path, "VoidShipmentResponse", VoidShipmentResponse)

    # ==================== Pipeline ====================

    async def _call(
        self,
        method: str,
        path: str,
        success_key: str,
        model: Type[BaseModel],
        payload: Optional[tuple] = None,
    ) -> UPSResult:
        """Authenticate, send and decode one UPS API call."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        await self.authenticator.prepare(headers)

        content = envelope.encode(*payload) if payload else None

        url = f"{self.settings.base_url}{path}"
        request = self._http_client.build_request(method, url, headers=headers, content=content)
        self._log_http(dump_request, request)

        try:
            response = await self._http_client.send(request)
        except httpx.RequestError as e:
            logger.error(f"UPS API request failed: {method} {path}: {e}")
            raise TransportError(f"Network error: {e}") from e

        logger.debug(f"UPS API {method} {path} -> {response.status_code}")
        self._log_http(dump_response, response)

        # UPS reports business errors as 4xx with an error envelope, so the
        # body decides the outcome, not the status code.
        result = envelope.decode(response.content, success_key, model)
        if not result.success:
            logger.warning(f"UPS API error on {method} {path}: {result.error}")
        return result

    def _log_http(self, dump: Callable, message) -> None:
        if self.log_writer is None:
            return
        self.log_writer.write(dump(message))
