"""
Pytest configuration and fixtures for the UPS client tests.
"""
import asyncio
import copy
from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator, List

import httpx
import pytest
import pytest_asyncio

from ups_shipping.core.config import UPSSettings
from ups_shipping.schemas.shipment import ShipmentRequest

TOKEN_PATH = "/security/v1/oauth/token"


class FakeClock:
    """Controllable time source."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


class FakeUPS:
    """
    Stand-in for the UPS API behind httpx.MockTransport.

    Records every request; answers the token endpoint, the ship endpoint and
    the void endpoint with configurable status and body.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.token_status = 200
        self.token_body = {
            "token_type": "Bearer",
            "issued_at": "1767225600000",
            "client_id": "client-id",
            "access_token": "tok-1",
            "expires_in": "14399",
            "status": "approved",
        }
        self.token_delay = 0.0
        self.api_status = 200
        self.shipment_body = {
            "ShipmentResponse": {
                "Response": {
                    "ResponseStatus": {"Code": "1", "Description": "Success"},
                    "Alert": {"Code": "120900", "Description": "User Id and Shipper Number combination is not qualified"},
                },
                "ShipmentResults": {
                    "ShipmentIdentificationNumber": "1ZISDE016691676846",
                    "PackageResults": {
                        "TrackingNumber": "1ZISDE016691676846",
                        "ShippingLabel": {
                            "ImageFormat": {"Code": "ZPL", "Description": "ZPL"},
                            "GraphicImage": "XlhBXkZPMTA=",
                        },
                    },
                },
            }
        }
        self.void_body = {
            "VoidShipmentResponse": {
                "Response": {"ResponseStatus": {"Code": "1", "Description": "Success"}},
                "SummaryResult": {"Status": {"Code": "1", "Description": "Voided"}},
            }
        }

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.path == TOKEN_PATH:
            if self.token_delay:
                await asyncio.sleep(self.token_delay)
            return httpx.Response(self.token_status, json=self.token_body)

        if request.method == "DELETE":
            return httpx.Response(self.api_status, json=self.void_body)

        return httpx.Response(self.api_status, json=self.shipment_body)

    @property
    def token_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == TOKEN_PATH]

    @property
    def api_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path != TOKEN_PATH]


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep ambient UPS_* variables and any local .env out of settings."""
    for name in UPSSettings.model_fields:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def fake_ups() -> FakeUPS:
    return FakeUPS()


@pytest_asyncio.fixture
async def http_client(fake_ups) -> AsyncGenerator[httpx.AsyncClient, None]:
    """AsyncClient wired to the fake UPS API."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(fake_ups.handler))
    yield client
    await client.aclose()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def oauth_settings() -> UPSSettings:
    """Settings with OAuth client credentials only."""
    return UPSSettings(UPS_CLIENT_ID="client-id", UPS_CLIENT_SECRET="client-secret")


@pytest.fixture
def basic_settings() -> UPSSettings:
    """Settings with access license and username/password, no OAuth."""
    return UPSSettings(
        UPS_USERNAME="mdm-user",
        UPS_PASSWORD="mdm-pass",
        UPS_ACCESS_LICENSE_NUMBER="0D7A1F2B3C4E5F60",
    )


@pytest.fixture
def sample_shipment_data() -> dict:
    """ShipmentRequest body in UPS wire form."""
    return copy.deepcopy({
        "Shipment": {
            "Description": "Comic Books and Collectibles",
            "Shipper": {
                "Name": "MDM Comics",
                "AttentionName": "Shipping Dept",
                "Phone": {"Number": "2125551234"},
                "ShipperNumber": "A1B2C3",
                "Address": {
                    "AddressLine": ["1 Warehouse Way"],
                    "City": "New York",
                    "StateProvinceCode": "NY",
                    "PostalCode": "10001",
                    "CountryCode": "US",
                },
            },
            "ShipTo": {
                "Name": "John Doe",
                "AttentionName": "John Doe",
                "Address": {
                    "AddressLine": ["123 Main Street", "Apt 4B"],
                    "City": "Austin",
                    "StateProvinceCode": "TX",
                    "PostalCode": "78701",
                    "CountryCode": "US",
                    "ResidentialAddressIndicator": "",
                },
            },
            "PaymentInformation": {
                "ShipmentCharge": {"Type": "01", "BillShipper": {"AccountNumber": "A1B2C3"}},
            },
            "Service": {"Code": "03", "Description": "Ground"},
            "Packages": [
                {
                    "Packaging": {"Code": "02"},
                    "Dimensions": {
                        "UnitOfMeasurement": {"Code": "IN"},
                        "Length": "12",
                        "Width": "10",
                        "Height": "2",
                    },
                    "PackageWeight": {"UnitOfMeasurement": {"Code": "LB"}, "Weight": "1.5"},
                }
            ],
        },
        "LabelSpecification": {
            "LabelImageFormat": {"Code": "ZPL"},
            "LabelStockSize": {"Height": "6", "Width": "4"},
        },
    })


@pytest.fixture
def shipment_request(sample_shipment_data) -> ShipmentRequest:
    return ShipmentRequest.model_validate(sample_shipment_data)
