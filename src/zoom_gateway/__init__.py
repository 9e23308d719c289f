"""
Zoom Gateway.

Read-only HTTP gateway over the Zoom REST API using
Server-to-Server OAuth credentials.
"""

__version__ = "1.0.0"
