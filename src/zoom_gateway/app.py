"""
Zoom Gateway application factory.

Builds the Flask app: Zoom relay routes, API docs, CORS headers,
request logging, and JSON 404/500 handlers.
"""

import logging
import os
import time

from flask import Flask, g, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from .docs import docs_bp
from .zoom.client import create_relay
from .zoom.config import ZoomConfig, get_zoom_config
from .zoom.routes import RELAY_EXTENSION, zoom_bp

logger = logging.getLogger(__name__)


def _cors_origins(raw: str) -> str | list[str]:
    """Parse CORS_ORIGINS: "*" or a comma-separated list of origins."""
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    if not origins or "*" in origins:
        return "*"
    return origins


def create_app(config: ZoomConfig | None = None) -> Flask:
    """
    Create the gateway app.

    Args:
        config: Zoom configuration (defaults to the env-backed singleton)

    Returns:
        Configured Flask application
    """
    config = config or get_zoom_config()

    app = Flask(__name__)

    port = int(os.getenv("PORT", 5000))
    app.config["BASE_URL"] = os.getenv("BASE_URL", f"http://localhost:{port}")
    app.config["CORS_ORIGINS"] = _cors_origins(os.getenv("CORS_ORIGINS", "*"))

    for error in config.validate():
        logger.warning("Zoom configuration: %s", error)

    app.extensions[RELAY_EXTENSION] = create_relay(config)

    app.register_blueprint(zoom_bp)
    app.register_blueprint(docs_bp)

    CORS(
        app,
        origins=app.config["CORS_ORIGINS"],
        methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.route("/")
    def health():
        """API health check."""
        return jsonify({"message": "API is Live!"})

    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def log_request(response):
        # Route pattern, not the path: identifiers may be user emails
        path = request.url_rule.rule if request.url_rule else request.path
        started = g.get("request_started")
        elapsed_ms = (time.perf_counter() - started) * 1000 if started else 0.0
        logger.info(
            "%s %s %s %.1f ms",
            request.method,
            path,
            response.status_code,
            elapsed_ms,
        )
        return response

    @app.errorhandler(NotFound)
    @app.errorhandler(MethodNotAllowed)
    def route_not_found(_e):
        return jsonify({"success": False, "message": "API route does not exist"}), 404

    @app.errorhandler(Exception)
    def unhandled_error(e):
        if isinstance(e, HTTPException):
            return e
        rule = request.url_rule.rule if request.url_rule else request.path
        logger.exception("Unhandled error on %s %s", request.method, rule)
        return jsonify({"success": False, "status": 500, "message": str(e)}), 500

    return app
