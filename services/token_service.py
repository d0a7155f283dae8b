# services/token_service.py
import logging
from typing import Optional

import httpx

from config.settings import Settings
from shared.errors import TokenAcquisitionError

logger = logging.getLogger(__name__)


class TokenService:
    """
    Client-credential grant against the Microsoft identity platform.

    A new token is requested on every call; nothing is cached between
    inbound requests.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        config = settings.get_token_config()
        self.client_id = config["client_id"]
        self.client_secret = config["client_secret"]
        self.token_url = f"{config['authority']}/oauth2/v2.0/token"
        self.scope = config["scope"]
        self.timeout = config["timeout"]
        self.transport = transport

        logger.info(f"TokenService initialized with authority: {config['authority']}")
        if not self.client_id or not self.client_secret:
            logger.warning("CLIENT_ID or CLIENT_SECRET is not set, token requests will fail")

    async def acquire_token(self) -> str:
        """
        Exchange client credentials for an access token

        Returns:
            Bearer access token

        Raises:
            TokenAcquisitionError: If the identity provider rejects the request
                or cannot be reached
        """
        form = {
            "grant_type": "client_credentials",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "scope": self.scope,
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(self.token_url, data=form)
        except httpx.HTTPError as e:
            logger.error(f"Token endpoint unreachable: {e}")
            raise TokenAcquisitionError(str(e) or e.__class__.__name__) from e

        if response.status_code != 200:
            logger.error(f"Token request failed {response.status_code}: {response.text}")
            raise TokenAcquisitionError(self._error_message(response))

        try:
            data = response.json()
        except ValueError as e:
            raise TokenAcquisitionError("Token endpoint returned invalid JSON") from e

        token = data.get("access_token")
        if not token:
            logger.error(f"Unexpected token response structure: {list(data.keys())}")
            raise TokenAcquisitionError("Token endpoint returned no access_token")

        logger.debug(f"Access token acquired, expires in {data.get('expires_in')}s")
        return token

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Prefer the identity provider's error_description when present"""
        try:
            body = response.json()
        except ValueError:
            body = {}

        if isinstance(body, dict):
            if description := body.get("error_description"):
                return description
            if error := body.get("error"):
                return str(error)

        return f"Request failed with status code {response.status_code}"
