"""Exceptions raised by the Zoom integration."""


class ZoomError(Exception):
    """Base class for Zoom integration failures."""


class AuthError(ZoomError):
    """Credential exchange with the Zoom token endpoint failed."""


class UpstreamError(ZoomError):
    """A Zoom API read failed (including a cascaded token failure)."""
