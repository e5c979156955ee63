"""
Credential store and per-request authentication for the UPS client.

Every outgoing request goes through Authenticator.prepare(), which attaches:
- AccessLicenseNumber, whenever a license number is configured
- Username / Password, whenever both are configured
- Authorization, whenever a bearer token is cached

With OAuth client credentials configured, a missing or expired token is
refreshed first. The expiry check, the token request and the store run
under one lock, so concurrent callers share a single refresh.
"""
import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, MutableMapping, Optional

from ups_shipping.core.config import UPSSettings
from ups_shipping.services.oauth import OAuthTokenIssuer

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class AccessToken:
    """Cached bearer token."""
    scheme: str
    value: str
    valid_until: datetime

    @property
    def authorization(self) -> str:
        return f"{self.scheme} {self.value}"

    def is_valid(self, now: datetime) -> bool:
        # A token expiring exactly now is already unusable
        return now < self.valid_until


@dataclass
class Credentials:
    """Static credentials plus the mutable cached token, owned by one client."""
    username: str = ""
    password: str = ""
    client_id: str = ""
    client_secret: str = ""
    access_license_number: str = ""
    token: Optional[AccessToken] = None

    @classmethod
    def from_settings(cls, settings: UPSSettings) -> "Credentials":
        return cls(
            username=settings.UPS_USERNAME,
            password=settings.UPS_PASSWORD,
            client_id=settings.UPS_CLIENT_ID,
            client_secret=settings.UPS_CLIENT_SECRET,
            access_license_number=settings.UPS_ACCESS_LICENSE_NUMBER,
        )

    @property
    def has_basic_auth(self) -> bool:
        return bool(self.username and self.password)

    @property
    def has_oauth(self) -> bool:
        return bool(self.client_id and self.client_secret)


class Authenticator:
    """Attaches credential headers and keeps the OAuth token fresh."""

    def __init__(
        self,
        credentials: Credentials,
        token_issuer: OAuthTokenIssuer,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.credentials = credentials
        self.token_issuer = token_issuer
        self._clock = clock or utcnow
        self._lock = asyncio.Lock()

    async def prepare(self, headers: MutableMapping[str, str]) -> None:
        """Add authentication headers, refreshing the token if needed."""
        creds = self.credentials

        if creds.access_license_number:
            headers["AccessLicenseNumber"] = creds.access_license_number

        token = await self._ensure_token()

        if creds.has_basic_auth:
            headers["Username"] = creds.username
            headers["Password"] = creds.password

        if token:
            headers["Authorization"] = token.authorization

    async def _ensure_token(self) -> Optional[AccessToken]:
        creds = self.credentials
        if not creds.has_oauth:
            return creds.token

        async with self._lock:
            if creds.token is None or not creds.token.is_valid(self._clock()):
                await self._refresh_token()
            return creds.token

    async def _refresh_token(self) -> None:
        """Fetch a new token. Called with the lock held; failures propagate."""
        creds = self.credentials
        logger.debug("Requesting new UPS OAuth token")

        oauth_token = await self.token_issuer.acquire_token(creds.client_id, creds.client_secret)

        issued_at = self._clock()
        creds.token = AccessToken(
            scheme=oauth_token.token_type,
            value=oauth_token.access_token,
            valid_until=issued_at + timedelta(seconds=oauth_token.expires_in_seconds),
        )

    async def invalidate(self) -> None:
        """Drop the cached token so the next request fetches a new one."""
        async with self._lock:
            self.credentials.token = None
