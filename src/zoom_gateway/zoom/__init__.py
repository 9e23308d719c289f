"""
Zoom integration package.

Provides Server-to-Server OAuth token exchange and the authenticated
relay of meeting/user reads to the Zoom REST API.
"""

from .client import ResourceKind, ZoomResourceRelay
from .config import ZoomConfig, ZoomCredentials, get_zoom_config
from .errors import AuthError, UpstreamError, ZoomError
from .oauth import AccessToken, ZoomCredentialExchanger

__all__ = [
    "AccessToken",
    "AuthError",
    "ResourceKind",
    "UpstreamError",
    "ZoomConfig",
    "ZoomCredentialExchanger",
    "ZoomCredentials",
    "ZoomError",
    "ZoomResourceRelay",
    "get_zoom_config",
]
