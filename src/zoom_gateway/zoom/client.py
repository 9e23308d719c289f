"""
Zoom REST API v2 relay.

Fetches a fresh access token and forwards one read to the Zoom API,
returning the decoded JSON body untouched.

API docs: https://developers.zoom.us/docs/api/
"""

import logging
from enum import Enum
from typing import Any
from urllib.parse import quote

import requests

from .config import DEFAULT_TIMEOUT, ZOOM_API_BASE, ZoomConfig
from .errors import AuthError, UpstreamError
from .oauth import ZoomCredentialExchanger

logger = logging.getLogger(__name__)


class ResourceKind(Enum):
    """Zoom resources the gateway can read."""

    USER_MEETINGS = "user_meetings"
    MEETING_PARTICIPANTS = "meeting_participants"
    MEETING_DETAILS = "meeting_details"


# kind -> (path template, query params)
_RESOURCES: dict[ResourceKind, tuple[str, dict[str, str] | None]] = {
    ResourceKind.USER_MEETINGS: ("/users/{id}/meetings", {"type": "past"}),
    ResourceKind.MEETING_PARTICIPANTS: ("/metrics/meetings/{id}/participants", None),
    ResourceKind.MEETING_DETAILS: ("/meetings/{id}", None),
}


class ZoomResourceRelay:
    """Relays authenticated reads to the Zoom REST API."""

    def __init__(
        self,
        exchanger: ZoomCredentialExchanger,
        api_base: str = ZOOM_API_BASE,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.exchanger = exchanger
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout

    def build_request(self, kind: ResourceKind, identifier: str) -> tuple[str, dict[str, str] | None]:
        """
        Resolve the URL and query params for a resource read.

        Args:
            kind: Resource to read
            identifier: User ID/email or meeting ID, depending on kind

        Returns:
            Tuple of (url, params)
        """
        path, params = _RESOURCES[kind]
        url = self.api_base + path.format(id=quote(identifier, safe="@"))
        return url, dict(params) if params else None

    def relay(self, kind: ResourceKind, identifier: str) -> Any:
        """
        Read one resource from Zoom.

        Args:
            kind: Resource to read
            identifier: User ID/email or meeting ID

        Returns:
            Decoded JSON body from Zoom, unmodified

        Raises:
            ValueError: If identifier is empty
            UpstreamError: If token exchange or the API call fails
        """
        if not identifier:
            raise ValueError("identifier is required")

        url, params = self.build_request(kind, identifier)

        try:
            token = self.exchanger.fetch_token()
        except AuthError as e:
            raise UpstreamError(str(e)) from e

        try:
            resp = requests.get(
                url,
                headers={"Authorization": f"Bearer {token.value}"},
                params=params,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise UpstreamError(f"Zoom request failed: {e}") from e

        if not resp.ok:
            raise UpstreamError(
                f"Failed to fetch {kind.value}: {resp.status_code} {resp.text}"
            )

        try:
            return resp.json()
        except ValueError as e:
            raise UpstreamError(f"Zoom returned non-JSON body for {kind.value}") from e

    def get_user_meetings(self, user_id: str) -> Any:
        """List a user's past meetings."""
        return self.relay(ResourceKind.USER_MEETINGS, user_id)

    def get_meeting_participants(self, meeting_id: str) -> Any:
        """List participants of a meeting (dashboard metrics)."""
        return self.relay(ResourceKind.MEETING_PARTICIPANTS, meeting_id)

    def get_meeting_details(self, meeting_id: str) -> Any:
        return self.relay(ResourceKind.MEETING_DETAILS, meeting_id)


def create_relay(config: ZoomConfig) -> ZoomResourceRelay:
    """Build a relay wired to a config's credentials and endpoints."""
    exchanger = ZoomCredentialExchanger(
        config.credentials,
        token_url=config.oauth_url,
        timeout=config.timeout,
        cache_tokens=config.cache_tokens,
        expiry_margin=config.expiry_margin,
    )
    return ZoomResourceRelay(exchanger, api_base=config.api_base, timeout=config.timeout)
