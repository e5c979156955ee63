"""
UPS client configuration

One settings object per client, validated when it is built:
- Environment is chosen once (sandbox or production), never negotiated
- Credential pairs must be complete (username+password, client id+secret)
- Basic and OAuth credentials may both be set; both get attached
"""
import logging
from enum import Enum

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Environment(str, Enum):
    """UPS API base URLs."""
    TESTING = "https://wwwcie.ups.com"
    PRODUCTION = "https://onlinetools.ups.com"


class UPSSettings(BaseSettings):
    # Environment - sandbox unless explicitly disabled
    UPS_USE_SANDBOX: bool = True

    # Basic credentials (sent as Username/Password headers)
    UPS_USERNAME: str = ""
    UPS_PASSWORD: str = ""

    # OAuth client credentials
    UPS_CLIENT_ID: str = ""
    UPS_CLIENT_SECRET: str = ""

    # Static API key, always attached when set
    UPS_ACCESS_LICENSE_NUMBER: str = ""

    # Only used when the client creates its own httpx.AsyncClient
    UPS_TIMEOUT_SECONDS: float = Field(30.0, gt=0)

    @property
    def environment(self) -> Environment:
        return Environment.TESTING if self.UPS_USE_SANDBOX else Environment.PRODUCTION

    @property
    def base_url(self) -> str:
        return self.environment.value

    @property
    def has_basic_auth(self) -> bool:
        return bool(self.UPS_USERNAME and self.UPS_PASSWORD)

    @property
    def has_oauth(self) -> bool:
        return bool(self.UPS_CLIENT_ID and self.UPS_CLIENT_SECRET)

    @model_validator(mode="after")
    def validate_credential_pairs(self):
        """Reject half-configured credential pairs."""
        errors = []

        if bool(self.UPS_USERNAME) != bool(self.UPS_PASSWORD):
            errors.append("UPS_USERNAME and UPS_PASSWORD must be set together")

        if bool(self.UPS_CLIENT_ID) != bool(self.UPS_CLIENT_SECRET):
            errors.append("UPS_CLIENT_ID and UPS_CLIENT_SECRET must be set together")

        if errors:
            raise ValueError(
                "INVALID UPS CONFIGURATION:\n" + "\n".join(f"  - {e}" for e in errors)
            )

        if not (self.has_basic_auth or self.has_oauth or self.UPS_ACCESS_LICENSE_NUMBER):
            logger.warning("No UPS credentials configured; requests will be sent unauthenticated")

        return self

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


def load_settings(**overrides) -> UPSSettings:
    """Build settings from the environment (and .env), applying keyword overrides."""
    try:
        return UPSSettings(**overrides)
    except ValueError as e:
        logger.error(f"UPS settings validation failed: {e}")
        raise
