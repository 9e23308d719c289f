"""
Zoom Server-to-Server OAuth token exchange.

Handles:
- Basic authorization from client_id:client_secret
- account_credentials grant against the Zoom token endpoint
- Optional in-process token reuse until expiry
"""

import base64
import logging
import threading
import time
from dataclasses import dataclass
from typing import Any

import requests

from .config import DEFAULT_EXPIRY_MARGIN, DEFAULT_TIMEOUT, ZOOM_OAUTH_URL, ZoomCredentials
from .errors import AuthError

logger = logging.getLogger(__name__)

# Zoom S2S tokens are valid for one hour
DEFAULT_EXPIRES_IN = 3600


@dataclass(frozen=True)
class AccessToken:
    """Bearer token returned by the token endpoint."""

    value: str
    expires_at: float

    def is_expired(self, margin: float = 0) -> bool:
        return time.monotonic() >= self.expires_at - margin

    def __repr__(self) -> str:
        return f"AccessToken(value=***, expires_at={self.expires_at})"


def basic_auth_header(client_id: str, client_secret: str) -> str:
    """Build the Basic authorization value for the token endpoint."""
    raw = f"{client_id}:{client_secret}".encode()
    return "Basic " + base64.b64encode(raw).decode("ascii")


class ZoomCredentialExchanger:
    """
    Exchanges account credentials for a short-lived access token.

    With cache_tokens disabled (the default) every call to fetch_token()
    goes to Zoom. With it enabled, one token is held per exchanger and
    handed out until it is within expiry_margin seconds of expiring.
    """

    def __init__(
        self,
        credentials: ZoomCredentials,
        token_url: str = ZOOM_OAUTH_URL,
        timeout: float = DEFAULT_TIMEOUT,
        cache_tokens: bool = False,
        expiry_margin: float = DEFAULT_EXPIRY_MARGIN,
    ) -> None:
        self.credentials = credentials
        self.token_url = token_url
        self.timeout = timeout
        self.cache_tokens = cache_tokens
        # Never hand out a token past expires_at
        self.expiry_margin = max(0, expiry_margin)

        self._token: AccessToken | None = None
        self._lock = threading.Lock()

    def fetch_token(self) -> AccessToken:
        """
        Get an access token for the configured account.

        Returns:
            AccessToken usable as a Bearer credential

        Raises:
            AuthError: If Zoom rejects the credentials, the response is
                malformed, or the request fails at the transport level
        """
        if not self.cache_tokens:
            return self._request_token()

        with self._lock:
            if self._token is None or self._token.is_expired(self.expiry_margin):
                self._token = self._request_token()
            return self._token

    def clear_cache(self) -> None:
        """Drop any cached token."""
        with self._lock:
            self._token = None

    def _request_token(self) -> AccessToken:
        """POST the account_credentials grant and parse the token."""
        try:
            resp = requests.post(
                self.token_url,
                data={
                    "grant_type": "account_credentials",
                    "account_id": self.credentials.account_id,
                },
                headers={
                    "Authorization": basic_auth_header(
                        self.credentials.client_id, self.credentials.client_secret
                    ),
                    "Content-Type": "application/x-www-form-urlencoded",
                },
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise AuthError(f"Token request failed: {e}") from e

        if not resp.ok:
            raise AuthError(f"Token exchange failed: {resp.status_code} {resp.text}")

        try:
            data: Any = resp.json()
        except ValueError as e:
            raise AuthError("Token response is not valid JSON") from e

        access_token = data.get("access_token") if isinstance(data, dict) else None
        if not access_token or not isinstance(access_token, str):
            raise AuthError("Token response has no access_token")

        expires_in = data.get("expires_in", DEFAULT_EXPIRES_IN)
        if not isinstance(expires_in, (int, float)):
            expires_in = DEFAULT_EXPIRES_IN

        logger.debug("Obtained Zoom access token (expires_in=%s)", expires_in)
        return AccessToken(value=access_token, expires_at=time.monotonic() + expires_in)
