"""
UPS OAuth token response.

Decoded strictly: unknown fields and non-string values are rejected.
"""
from pydantic import BaseModel, field_validator

# UPS issues tokens valid for about four hours; anything past a year is bogus
MAX_EXPIRES_IN = 365 * 24 * 60 * 60


class OAuthToken(BaseModel):
    model_config = {"extra": "forbid", "strict": True}

    token_type: str
    issued_at: str = ""
    client_id: str = ""
    access_token: str
    # Lifetime in seconds, sent as a string
    expires_in: str
    status: str = ""

    @field_validator("expires_in")
    @classmethod
    def validate_expires_in(cls, v):
        if not (v.isascii() and v.isdigit()):
            raise ValueError(f"expires_in must be a non-negative integer, got {v[:20]!r}")
        # Length check first; int() refuses very long digit strings
        digits = v.lstrip("0")
        if len(digits) > len(str(MAX_EXPIRES_IN)) or int(digits or "0") > MAX_EXPIRES_IN:
            raise ValueError(f"expires_in exceeds {MAX_EXPIRES_IN} seconds")
        return digits or "0"

    @property
    def expires_in_seconds(self) -> int:
        return int(self.expires_in)

    @property
    def bearer(self) -> str:
        """Value for the Authorization header, e.g. "Bearer eyJ..."."""
        return f"{self.token_type} {self.access_token}"
