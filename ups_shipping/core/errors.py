"""
UPS client error types

Infrastructure failures (network, token endpoint, undecodable bodies) are
raised. A structured UPS error envelope is a normal outcome and is returned
as a failed UPSResult; APIError is its exception form for callers that
prefer to raise.
"""
from typing import Any, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ups_shipping.schemas.responses import ErrorDetail


class UPSError(Exception):
    """Base UPS client error with details."""

    code = "UPS_ERROR"

    def __init__(self, message: str, code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.code = code or self.code
        self.details = details or {}
        super().__init__(message)


class TransportError(UPSError):
    """The HTTP request could not be sent or no response was received."""

    code = "NETWORK_ERROR"


class AuthenticationFailed(UPSError):
    """The OAuth token endpoint answered with something other than 200."""

    code = "AUTH_FAILED"

    def __init__(self, status_code: int, reason: str = "", details: Optional[Dict[str, Any]] = None):
        self.status_code = status_code
        self.reason = reason
        super().__init__(
            f"unknown status code: ({status_code}) {reason}".rstrip(),
            details=details,
        )


class MalformedResponse(UPSError):
    """A response body failed to decode into the expected shape."""

    code = "MALFORMED_RESPONSE"


class APIError(UPSError):
    """UPS returned a structured error envelope."""

    code = "API_ERROR"

    def __init__(self, errors: List["ErrorDetail"]):
        self.errors = list(errors)
        super().__init__(
            "".join(f"{e.code}:{e.message}" for e in self.errors),
            details={"errors": [{"code": e.code, "message": e.message} for e in self.errors]},
        )
