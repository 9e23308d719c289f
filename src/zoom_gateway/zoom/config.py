"""
Zoom Server-to-Server OAuth configuration.

Environment variables:
    ZOOM_CLIENT_ID: OAuth client ID
    ZOOM_CLIENT_SECRET: OAuth client secret
    ZOOM_ACCOUNT_ID: Zoom account ID the app is installed on
    ZOOM_OAUTH_URL: Token endpoint (default: https://zoom.us/oauth/token)
    ZOOM_API_BASE: REST API base URL (default: https://api.zoom.us/v2)
    ZOOM_HTTP_TIMEOUT: Outbound request timeout in seconds (default: 30)
    ZOOM_TOKEN_CACHE: "true" to reuse tokens until they expire (default: "false")
    ZOOM_TOKEN_EXPIRY_MARGIN: Seconds before expiry a cached token is dropped (default: 300)
"""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

ZOOM_OAUTH_URL = "https://zoom.us/oauth/token"
ZOOM_API_BASE = "https://api.zoom.us/v2"

DEFAULT_TIMEOUT = 30.0
DEFAULT_EXPIRY_MARGIN = 300


@dataclass(frozen=True)
class ZoomCredentials:
    """Account-level client credentials for the S2S OAuth app."""

    client_id: str
    client_secret: str
    account_id: str

    def __repr__(self) -> str:
        return f"ZoomCredentials(client_id=***, client_secret=***, account_id={self.account_id!r})"


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "")
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid %s=%r, using default %s", name, raw, default)
        return default


class ZoomConfig:
    """
    Configuration for the Zoom integration.

    Reads from environment variables once, at construction. Missing
    credentials are reported by validate() but do not prevent the
    config from being built; Zoom rejects them at token exchange.
    """

    def __init__(self) -> None:
        # OAuth credentials
        self.client_id = os.getenv("ZOOM_CLIENT_ID", "")
        self.client_secret = os.getenv("ZOOM_CLIENT_SECRET", "")
        self.account_id = os.getenv("ZOOM_ACCOUNT_ID", "")

        # Endpoints
        self.oauth_url = os.getenv("ZOOM_OAUTH_URL", ZOOM_OAUTH_URL)
        self.api_base = os.getenv("ZOOM_API_BASE", ZOOM_API_BASE).rstrip("/")

        self.timeout = _float_env("ZOOM_HTTP_TIMEOUT", DEFAULT_TIMEOUT)

        # Token caching
        self.cache_tokens = os.getenv("ZOOM_TOKEN_CACHE", "false").lower() == "true"
        margin = int(_float_env("ZOOM_TOKEN_EXPIRY_MARGIN", DEFAULT_EXPIRY_MARGIN))
        self.expiry_margin_invalid = margin < 0
        self.expiry_margin = max(0, margin)

    @property
    def credentials(self) -> ZoomCredentials:
        return ZoomCredentials(
            client_id=self.client_id,
            client_secret=self.client_secret,
            account_id=self.account_id,
        )

    @property
    def is_configured(self) -> bool:
        """Check if all three credentials are present."""
        return bool(self.client_id and self.client_secret and self.account_id)

    def validate(self) -> list[str]:
        """
        Validate configuration and return list of errors.

        Returns:
            List of error strings (empty if valid)
        """
        errors = []

        if not self.client_id:
            errors.append("ZOOM_CLIENT_ID is required")
        if not self.client_secret:
            errors.append("ZOOM_CLIENT_SECRET is required")
        if not self.account_id:
            errors.append("ZOOM_ACCOUNT_ID is required")
        if self.timeout <= 0:
            errors.append("ZOOM_HTTP_TIMEOUT must be positive")
        if self.expiry_margin_invalid:
            errors.append("ZOOM_TOKEN_EXPIRY_MARGIN must not be negative")

        return errors

    def to_dict(self) -> dict:
        """Return safe (no secrets) configuration summary."""
        return {
            "configured": self.is_configured,
            "oauth_url": self.oauth_url,
            "api_base": self.api_base,
            "timeout": self.timeout,
            "cache_tokens": self.cache_tokens,
            "expiry_margin": self.expiry_margin,
        }


# Singleton instance
_config: ZoomConfig | None = None


def get_zoom_config() -> ZoomConfig:
    """Get the Zoom config singleton."""
    global _config
    if _config is None:
        _config = ZoomConfig()
    return _config
