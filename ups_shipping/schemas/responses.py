"""
Shipment Response Schemas for the UPS Shipping API v2403

UPS serializes repeatable elements (Alert, PackageResults, ...) as a bare
object when there is exactly one and as an array otherwise. OneOrMany
normalizes every such field to a list at decode time so callers never see
the difference.

Unknown fields are ignored; UPS adds elements between API versions.
"""
from typing import Annotated, Any, List, Optional, TypeVar

from pydantic import BaseModel, BeforeValidator, Field

from ups_shipping.schemas.shipment import UPSModel

T = TypeVar("T")


def _one_or_many(value: Any) -> Any:
    """Wrap a single object in a list; absent or null becomes empty."""
    if value is None:
        return []
    if isinstance(value, dict):
        return [value]
    return value


OneOrMany = Annotated[List[T], BeforeValidator(_one_or_many)]


# ==================== Common ====================


class ResponseStatus(UPSModel):
    """Transaction status. Code 1 = Successful."""
    code: str = ""
    description: str = ""


class Alert(UPSModel):
    """Warning returned alongside a successful response."""
    code: str = ""
    description: str = ""


class Response(UPSModel):
    # TransactionReference is not decoded; UPS echoes it inconsistently.
    response_status: ResponseStatus = Field(default_factory=ResponseStatus)
    alerts: OneOrMany[Alert] = Field(default_factory=list, alias="Alert")


# ==================== Create Shipment ====================


class ImageFormat(UPSModel):
    """Label image format. EPL, SPL, ZPL, GIF or PNG."""
    code: str = ""
    description: str = ""


class ShippingLabel(UPSModel):
    image_format: ImageFormat = Field(default_factory=ImageFormat)
    # Base64 encoded label
    graphic_image: str = ""
    # Mail Innovations CN22 labels with more than 3 commodities
    graphic_image_part: str = ""


class PackageResults(UPSModel):
    tracking_number: str = ""
    shipping_label: Optional[ShippingLabel] = None


class ShipmentResults(UPSModel):
    # 1Z number of the first package in the shipment
    shipment_identification_number: str = ""
    package_results: OneOrMany[PackageResults] = Field(default_factory=list)


class ShipmentResponse(UPSModel):
    """Success payload of the ship endpoint."""
    response: Response = Field(default_factory=Response)
    shipment_results: ShipmentResults = Field(default_factory=ShipmentResults)


# ==================== Void Shipment ====================


class Status(UPSModel):
    code: str = ""
    description: str = ""


class SummaryResult(UPSModel):
    status: Status = Field(default_factory=Status)


class PackageLevelResult(UPSModel):
    status: Status = Field(default_factory=Status)
    tracking_number: str = ""


class VoidShipmentResponse(UPSModel):
    """Success payload of the void endpoint."""
    response: Response = Field(default_factory=Response)
    summary_result: SummaryResult = Field(default_factory=SummaryResult)
    package_level_result: OneOrMany[PackageLevelResult] = Field(default_factory=list)

    @property
    def voided(self) -> bool:
        return self.summary_result.status.code == "1"


# ==================== Errors ====================


class ErrorDetail(BaseModel):
    code: str
    message: str


class ErrorResponse(BaseModel):
    """Structured error envelope, sent by UPS under the "response" key."""
    errors: List[ErrorDetail] = Field(default_factory=list)

    def __str__(self) -> str:
        return "".join(f"{e.code}:{e.message}" for e in self.errors)
