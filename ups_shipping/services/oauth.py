"""
UPS OAuth 2.0 client-credentials token exchange.

The issuer only talks to the token endpoint and decodes the answer.
Caching and expiry bookkeeping belong to the Authenticator.
"""
import base64
import logging

import httpx
from pydantic import ValidationError

from ups_shipping.core.errors import AuthenticationFailed, MalformedResponse, TransportError
from ups_shipping.schemas.oauth import OAuthToken

logger = logging.getLogger(__name__)

OAUTH_TOKEN_PATH = "/security/v1/oauth/token"


class OAuthTokenIssuer:
    """Requests access tokens from the UPS identity endpoint."""

    def __init__(self, http_client: httpx.AsyncClient, base_url: str):
        self.http_client = http_client
        self.base_url = base_url

    async def acquire_token(self, client_id: str, client_secret: str) -> OAuthToken:
        """
        Exchange client credentials for an access token.

        Raises:
            TransportError: request could not be sent
            AuthenticationFailed: status other than 200
            MalformedResponse: body is not a valid token response
        """
        url = f"{self.base_url}{OAUTH_TOKEN_PATH}"

        # Basic auth header
        auth_string = f"{client_id}:{client_secret}"
        auth_header = base64.b64encode(auth_string.encode()).decode()

        try:
            response = await self.http_client.post(
                url,
                headers={
                    "Authorization": f"Basic {auth_header}",
                    "Content-Type": "application/x-www-form-urlencoded",
                },
                data={"grant_type": "client_credentials"},
            )
        except httpx.RequestError as e:
            logger.error(f"UPS OAuth request failed: {e}")
            raise TransportError(f"Network error during authentication: {e}") from e

        if response.status_code != 200:
            logger.error(f"UPS OAuth failed: {response.status_code} - {response.text[:500]}")
            raise AuthenticationFailed(
                response.status_code,
                response.reason_phrase,
                details={"status": response.status_code},
            )

        try:
            token = OAuthToken.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"UPS OAuth token response rejected: {e.error_count()} error(s)")
            raise MalformedResponse(f"Invalid OAuth token response: {e}") from e

        logger.info(f"UPS OAuth token obtained, expires in {token.expires_in_seconds}s")
        return token
