from ups_shipping.core.config import Environment, UPSSettings, load_settings
from ups_shipping.core.errors import (
    UPSError,
    TransportError,
    AuthenticationFailed,
    MalformedResponse,
    APIError,
)
