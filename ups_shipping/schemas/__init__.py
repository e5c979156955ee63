from ups_shipping.schemas.oauth import OAuthToken
from ups_shipping.schemas.responses import (
    Alert,
    ErrorDetail,
    ErrorResponse,
    PackageResults,
    ShipmentResponse,
    VoidShipmentResponse,
)
from ups_shipping.schemas.shipment import ShipmentRequest
