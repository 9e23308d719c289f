"""
Flask routes relaying reads to Zoom.

Provides:
- /user/<user_id>/meetings - Past meetings for a user (ID or email)
- /meeting/<meeting_id>/participants - Participants of a meeting
- /meeting/<meeting_id>/details - Meeting details
"""

import logging

from flask import Blueprint, current_app, jsonify

from .client import ResourceKind, ZoomResourceRelay
from .errors import ZoomError

logger = logging.getLogger(__name__)

zoom_bp = Blueprint("zoom", __name__)

RELAY_EXTENSION = "zoom_relay"

# kind -> client-facing failure message
FAILURE_MESSAGES = {
    ResourceKind.USER_MEETINGS: "Failed to get user meetings",
    ResourceKind.MEETING_PARTICIPANTS: "Failed to get meeting participants",
    ResourceKind.MEETING_DETAILS: "Failed to get meeting details",
}


def get_relay() -> ZoomResourceRelay:
    """Get the relay registered on the current app."""
    return current_app.extensions[RELAY_EXTENSION]


def _relay_response(kind: ResourceKind, identifier: str):
    try:
        payload = get_relay().relay(kind, identifier)
    except (ZoomError, ValueError) as e:
        # Provider detail stays in the logs
        logger.error("Zoom %s relay failed: %s", kind.value, e)
        return jsonify({"error": FAILURE_MESSAGES[kind]}), 500

    return jsonify(payload)


@zoom_bp.route("/user/<user_id>/meetings")
def user_meetings(user_id: str):
    """Retrieve a user's past meetings."""
    return _relay_response(ResourceKind.USER_MEETINGS, user_id)


@zoom_bp.route("/meeting/<meeting_id>/participants")
def meeting_participants(meeting_id: str):
    """Retrieve the participants of a meeting."""
    return _relay_response(ResourceKind.MEETING_PARTICIPANTS, meeting_id)


@zoom_bp.route("/meeting/<meeting_id>/details")
def meeting_details(meeting_id: str):
    """Retrieve the details of a meeting."""
    return _relay_response(ResourceKind.MEETING_DETAILS, meeting_id)
