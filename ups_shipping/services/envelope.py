"""
Request/response envelopes for the UPS JSON APIs.

Requests are wrapped one level deep under the operation name
({"ShipmentRequest": {...}}). Responses carry either the success payload
under its own name or a structured error under "response":

    {"ShipmentResponse": {...}}
    {"response": {"errors": [{"code": "...", "message": "..."}]}}

An error envelope always wins; whatever sits in the success slot next to it
is never decoded.
"""
import json
from dataclasses import dataclass
from typing import Generic, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ups_shipping.core.errors import APIError, MalformedResponse
from ups_shipping.schemas.responses import ErrorResponse

T = TypeVar("T", bound=BaseModel)

ERROR_KEY = "response"


@dataclass
class UPSResult(Generic[T]):
    """Outcome of a UPS call: exactly one of response / error is set."""
    response: Optional[T] = None
    error: Optional[ErrorResponse] = None

    def __post_init__(self):
        if (self.response is None) == (self.error is None):
            raise ValueError("UPSResult needs exactly one of response or error")

    @property
    def success(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the success payload or raise APIError."""
        if self.error is not None:
            raise APIError(self.error.errors)
        return self.response


def encode(name: str, payload: BaseModel) -> bytes:
    """Serialize payload as {name: payload} with UPS field names."""
    body = {name: payload.model_dump(mode="json", by_alias=True, exclude_none=True)}
    return json.dumps(body, indent=2).encode("utf-8")


def decode(body: bytes, success_key: str, model: Type[T]) -> UPSResult[T]:
    """
    Decode a UPS response envelope.

    Args:
        body: raw response body
        success_key: name of the success slot, e.g. "ShipmentResponse"
        model: model for the success payload

    Raises:
        MalformedResponse: body is not JSON, not an object, has neither slot,
            or a slot does not match its model
    """
    try:
        envelope = json.loads(body)
    except ValueError as e:
        raise MalformedResponse(f"Response body is not valid JSON: {e}") from e

    if not isinstance(envelope, dict):
        raise MalformedResponse(
            f"Expected a JSON object, got {type(envelope).__name__}",
            details={"body": body[:500].decode("utf-8", errors="replace")},
        )

    error_slot = envelope.get(ERROR_KEY)
    if error_slot is not None:
        try:
            error = ErrorResponse.model_validate(error_slot)
        except ValidationError as e:
            raise MalformedResponse(f"Invalid error envelope: {e}") from e
        return UPSResult(error=error)

    success_slot = envelope.get(success_key)
    if success_slot is None:
        raise MalformedResponse(
            f"Response has neither {success_key} nor an error envelope",
            details={"keys": sorted(envelope)},
        )

    try:
        response = model.model_validate(success_slot)
    except ValidationError as e:
        raise MalformedResponse(f"Invalid {success_key}: {e}") from e

    return UPSResult(response=response)
