"""
Shipment Request Schemas for the UPS Shipping API v2403

Pydantic models for the ShipmentRequest payload. Python attributes are
snake_case; the wire names are the UPS PascalCase names (aliases).
Length limits are the ones UPS documents for each element and are checked
when a model is built.

Optional fields default to None and are left out of the request body;
every other field is always sent.
"""
from typing import Annotated, List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_pascal


AddressLine = Annotated[str, Field(min_length=1, max_length=35)]


class UPSModel(BaseModel):
    """Base for UPS wire models."""
    model_config = {"alias_generator": to_pascal, "populate_by_name": True}


# ==================== Parties ====================


class Phone(UPSModel):
    """Phone number container."""
    number: str = Field(..., min_length=1, max_length=15)
    extension: Optional[str] = Field(None, max_length=4)


class ShipperAddress(UPSModel):
    """Shipper address. Up to three address lines."""
    address_lines: List[AddressLine] = Field(..., alias="AddressLine", min_length=1, max_length=3)
    city: str = Field(..., min_length=1, max_length=30)
    # Required for US/CA/IE shippers
    state_province_code: str = Field("", max_length=5)
    # Required for countries with postal codes
    postal_code: str = Field("", max_length=9)
    country_code: str = Field(..., min_length=2, max_length=2)


class Shipper(UPSModel):
    """Shipper (account owner) container."""
    name: str = Field(..., min_length=1, max_length=35)
    attention_name: str = Field("", max_length=35)
    company_displayable_name: Optional[str] = Field(None, max_length=35)
    tax_identification_number: Optional[str] = Field(None, max_length=15)
    phone: Optional[Phone] = None
    shipper_number: str = Field(..., min_length=6, max_length=6, description="UPS account number")
    fax_number: Optional[str] = Field(None, max_length=14)
    e_mail_address: Optional[str] = Field(None, max_length=50)
    address: ShipperAddress


class ShipToAddress(UPSModel):
    """Ship To / Ship From address. Only the first two lines are printed on the label."""
    address_lines: List[AddressLine] = Field(..., alias="AddressLine", min_length=1, max_length=3)
    city: str = Field(..., min_length=1, max_length=30)
    state_province_code: Optional[str] = Field(None, max_length=5)
    postal_code: str = Field("", max_length=9)
    country_code: str = Field(..., min_length=2, max_length=2)
    # Presence of the indicator flags a residential address
    residential_address_indicator: Optional[str] = None


class ShipTo(UPSModel):
    """Consignee container."""
    name: str = Field(..., min_length=1, max_length=35)
    attention_name: str = Field("", max_length=35)
    company_displayable_name: Optional[str] = Field(None, max_length=35)
    tax_identification_number: Optional[str] = Field(None, max_length=15)
    phone: Optional[Phone] = None
    shipper_number: Optional[str] = Field(None, min_length=6, max_length=6)
    fax_number: Optional[str] = Field(None, max_length=15)
    e_mail_address: Optional[str] = Field(None, max_length=50)
    address: ShipToAddress
    # UPS Access Point location
    location_id: Optional[str] = Field(None, alias="LocationID", max_length=10)


class TaxIDType(UPSModel):
    code: str


class ShipFrom(UPSModel):
    """Ship From container. Required for return shipments and international forms."""
    name: str = Field(..., min_length=1, max_length=35)
    attention_name: str = Field("", max_length=35)
    company_displayable_name: str = Field("", max_length=35)
    tax_identification_number: str = Field("", max_length=15)
    tax_id_type: Optional[TaxIDType] = Field(None, alias="TaxIDType")
    phone: Optional[Phone] = None
    shipper_number: str = Field(..., min_length=6, max_length=6)
    fax_number: str = Field("", max_length=15)
    address: ShipToAddress
    location_id: str = Field("", alias="LocationID", max_length=10)


# ==================== Payment ====================


class CreditCard(UPSModel):
    """Credit card billing. Type codes: 01 AmEx, 03 Discover, 04 MasterCard, 06 VISA..."""
    type: str = Field(..., min_length=2, max_length=2)
    number: str = Field(..., min_length=9, max_length=16)
    expiration_date: str = Field(..., min_length=6, max_length=6, description="mmyyyy")
    security_code: str = Field(..., min_length=3, max_length=4)


class BillShipper(UPSModel):
    account_number: str = Field(..., min_length=6, max_length=6)
    credit_card: Optional[CreditCard] = None


class ShipmentCharge(UPSModel):
    """Shipment charge. Type 01 = Transportation, 02 = Duties and Taxes."""
    type: str = Field(..., min_length=2, max_length=2)
    bill_shipper: Optional[BillShipper] = None


class PaymentInformation(UPSModel):
    shipment_charge: ShipmentCharge


class FRSPaymentInformationType(UPSModel):
    """Ground Freight Pricing payer. 01 = Prepaid, 02 = FreightCollect, 03 = BillThirdParty."""
    code: str = Field(..., min_length=2, max_length=2)
    description: Optional[str] = Field(None, max_length=50)


class FRSPaymentInformationAddress(UPSModel):
    postal_code: Optional[str] = Field(None, max_length=9)
    country_code: str = Field(..., min_length=2, max_length=2)


class FRSPaymentInformation(UPSModel):
    """Ground Freight Pricing payment information."""
    type: FRSPaymentInformationType
    account_number: str = Field(..., min_length=6, max_length=6)
    address: Optional[FRSPaymentInformationAddress] = None


# ==================== Shipment Options ====================


class ReferenceNumber(UPSModel):
    bar_code_indicator: Optional[str] = None
    code: Optional[str] = Field(None, max_length=2)
    value: Optional[str] = Field(None, max_length=35)


class Service(UPSModel):
    """UPS service. e.g. 01 Next Day Air, 03 Ground, 11 Standard."""
    code: Optional[str] = Field(None, min_length=2, max_length=2)
    description: Optional[str] = Field(None, max_length=35)


class EMail(UPSModel):
    """Notification e-mail container."""
    e_mail_address: str = Field(..., min_length=1, max_length=50)
    undeliverable_e_mail_address: Optional[str] = Field(None, max_length=50)
    from_e_mail_address: Optional[str] = Field(None, max_length=50)
    from_name: Optional[str] = Field(None, max_length=35)
    memo: Optional[str] = Field(None, max_length=150)
    return_of_document_indicator: Optional[str] = None
    import_control_indicator: Optional[str] = None
    commercial_invoice_removal_indicator: Optional[str] = None
    exchange_forward_indicator: Optional[str] = None
    hold_for_pickup_indicator: Optional[str] = None
    dropoff_at_ups_facility_indicator: Optional[str] = Field(None, alias="DropoffAtUPSFacilityIndicator")
    lift_gate_for_pick_up_indicator: Optional[str] = None
    lift_gate_for_delivery_indicator: Optional[str] = None
    sdl_shipment_indicator: Optional[str] = Field(None, alias="SDLShipmentIndicator")
    epra_release_code: Optional[str] = Field(None, alias="EPRAReleaseCode", max_length=6)


class Notification(UPSModel):
    """Quantum View notification. 6 = Ship, 7 = Exception, 8 = Delivery."""
    notification_code: str = Field(..., min_length=1, max_length=3)
    e_mail: EMail


class ShipmentServiceOptions(UPSModel):
    saturday_delivery_indicator: Optional[str] = None
    saturday_pickup_indicator: Optional[str] = None
    deliver_to_addressee_only_indicator: Optional[str] = None
    direct_delivery_only_indicator: Optional[str] = None
    notifications: Optional[List[Notification]] = Field(None, alias="Notification", max_length=3)


# ==================== Packages ====================


class Packaging(UPSModel):
    """Packaging type. 02 = Customer Supplied Package."""
    code: str = Field(..., min_length=2, max_length=2)
    description: Optional[str] = Field(None, max_length=35)


class DimensionsUnitOfMeasurement(UPSModel):
    """IN or CM."""
    code: str = Field(..., min_length=2, max_length=2)
    description: Optional[str] = Field(None, max_length=35)


class Dimensions(UPSModel):
    unit_of_measurement: DimensionsUnitOfMeasurement
    length: str = Field(..., min_length=1, max_length=3)
    width: str = Field(..., min_length=1, max_length=3)
    height: str = Field(..., min_length=1, max_length=3)


class DimWeightUnitOfMeasurement(UPSModel):
    code: str = Field(..., min_length=3, max_length=3)
    description: Optional[str] = Field(None, max_length=35)


class DimWeight(UPSModel):
    unit_of_measurement: DimWeightUnitOfMeasurement
    weight: str = Field(..., min_length=6, max_length=6)


class PackageWeightUnitOfMeasurement(UPSModel):
    """LBS or KGS."""
    code: str = Field(..., min_length=2, max_length=2)
    description: Optional[str] = Field(None, max_length=35)


class PackageWeight(UPSModel):
    unit_of_measurement: PackageWeightUnitOfMeasurement
    weight: str = Field("", max_length=5)


class Package(UPSModel):
    """A single package of the shipment."""
    description: Optional[str] = Field(None, max_length=35)
    pallet_description: Optional[str] = Field(None, max_length=150)
    num_of_pieces: Optional[str] = Field(None, max_length=5)
    unit_price: Optional[str] = Field(None, max_length=12)
    packaging: Packaging
    dimensions: Dimensions
    dim_weight: Optional[DimWeight] = None
    package_weight: Optional[PackageWeight] = None
    large_package_indicator: Optional[str] = None
    additional_handling_indicator: Optional[str] = None
    oversize_indicator: Optional[str] = None
    minimum_billable_weight_indicator: Optional[str] = None


# ==================== Shipment ====================


class Shipment(UPSModel):
    """Shipment container."""
    description: str = Field(..., min_length=1, max_length=50)
    shipper: Shipper
    ship_to: ShipTo
    ship_from: Optional[ShipFrom] = None
    payment_information: Optional[PaymentInformation] = None
    frs_payment_information: Optional[FRSPaymentInformation] = Field(None, alias="FRSPaymentInformation")
    goods_not_in_free_circulation_indicator: Optional[str] = None
    movement_reference_number: Optional[str] = None
    reference_number: Optional[ReferenceNumber] = None
    service: Service
    num_of_pieces_in_shipment: Optional[str] = Field(None, max_length=5)
    # Mail Innovations
    usps_endorsement: Optional[str] = Field(None, alias="USPSEndorsement", max_length=1)
    mi_label_cn22_indicator: Optional[str] = Field(None, alias="MILabelCN22Indicator")
    sub_classification: Optional[str] = None
    cost_center: Optional[str] = None
    cost_center_barcode_indicator: Optional[str] = None
    package_id: Optional[str] = Field(None, alias="PackageID", max_length=30)
    package_id_barcode_indicator: Optional[str] = Field(None, alias="PackageIDBarcodeIndicator", max_length=30)
    irregular_indicator: Optional[str] = Field(None, max_length=30)
    mi_dual_return_shipment_key: Optional[str] = Field(None, alias="MIDualReturnShipmentKey", max_length=50)
    mi_dual_return_shipment_indicator: Optional[str] = Field(None, alias="MIDualReturnShipmentIndicator")
    rating_method_requested_indicator: Optional[str] = None
    tax_information_indicator: Optional[str] = None
    shipment_service_options: Optional[ShipmentServiceOptions] = None
    locale: Optional[str] = Field(None, max_length=5)
    master_carton_id: Optional[str] = Field(None, alias="MasterCartonID", max_length=24)
    master_carton_indicator: Optional[str] = None
    shipment_value_threshold_code: Optional[str] = Field(None, max_length=2)
    packages: List[Package] = Field(..., alias="Packages")
    # yyyyMMdd, future-dated shipments only
    shipment_date: Optional[str] = None


# ==================== Label ====================


class LabelImageFormat(UPSModel):
    """EPL, SPL, ZPL, GIF or PNG."""
    code: str = Field(..., min_length=1, max_length=4)
    description: Optional[str] = Field(None, max_length=35)


class LabelStockSize(UPSModel):
    """Label size in inches. Height 6 or 8, width 4."""
    height: str = Field(..., min_length=1, max_length=3)
    width: str = Field(..., min_length=1, max_length=3)


class Instruction(UPSModel):
    code: str = Field(..., min_length=2, max_length=2)
    description: Optional[str] = Field(None, max_length=35)


class LabelSpecification(UPSModel):
    label_image_format: LabelImageFormat
    # Required when the label format is GIF
    http_user_agent: Optional[str] = Field(None, alias="HTTPUserAgent", max_length=64)
    label_stock_size: LabelStockSize
    instruction: Optional[Instruction] = None
    character_set: Optional[str] = None


class ShipmentRequest(UPSModel):
    """Top-level payload sent as {"ShipmentRequest": ...}."""
    shipment: Shipment
    label_specification: Optional[LabelSpecification] = None
