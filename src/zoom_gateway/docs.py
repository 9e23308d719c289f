"""
Interactive API documentation.

Serves an OpenAPI 3.0 document at /docs/openapi.json and a Swagger UI
page at /docs that renders it.
"""

from flask import Blueprint, current_app, jsonify, render_template_string

from . import __version__

docs_bp = Blueprint("docs", __name__)

SWAGGER_UI_VERSION = "5"

SWAGGER_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{{ title }}</title>
  <link rel="stylesheet" href="https://unpkg.com/swagger-ui-dist@{{ ui_version }}/swagger-ui.css">
</head>
<body>
  <div id="swagger-ui"></div>
  <script src="https://unpkg.com/swagger-ui-dist@{{ ui_version }}/swagger-ui-bundle.js"></script>
  <script>
    window.ui = SwaggerUIBundle({ url: "{{ spec_url }}", dom_id: "#swagger-ui" });
  </script>
</body>
</html>
"""


def _path_param(name: str, description: str) -> dict:
    return {
        "in": "path",
        "name": name,
        "required": True,
        "description": description,
        "schema": {"type": "string"},
    }


def _error_response(description: str) -> dict:
    return {
        "description": description,
        "content": {
            "application/json": {
                "schema": {
                    "type": "object",
                    "properties": {"error": {"type": "string"}},
                }
            }
        },
    }


def build_openapi(server_url: str) -> dict:
    """Build the OpenAPI document for the gateway routes."""
    return {
        "openapi": "3.0.0",
        "info": {
            "title": "Zoom Gateway",
            "version": __version__,
            "description": "Read-only gateway over the Zoom REST API.",
        },
        "servers": [{"url": server_url}],
        "paths": {
            "/user/{userId}/meetings": {
                "get": {
                    "summary": "Retrieve all past meetings for a user",
                    "parameters": [_path_param("userId", "The user's Zoom ID or email address.")],
                    "responses": {
                        "200": {
                            "description": "A list of meetings.",
                            "content": {
                                "application/json": {
                                    "schema": {
                                        "type": "object",
                                        "properties": {
                                            "meetings": {
                                                "type": "array",
                                                "items": {
                                                    "type": "object",
                                                    "properties": {
                                                        "id": {"type": "string"},
                                                        "topic": {"type": "string"},
                                                        "start_time": {"type": "string", "format": "date-time"},
                                                    },
                                                },
                                            }
                                        },
                                    }
                                }
                            },
                        },
                        "500": _error_response("Failed to retrieve user meetings."),
                    },
                }
            },
            "/meeting/{meetingId}/participants": {
                "get": {
                    "summary": "Get participants of a meeting",
                    "parameters": [_path_param("meetingId", "The meeting ID.")],
                    "responses": {
                        "200": {"description": "A list of participants."},
                        "500": _error_response("Failed to retrieve meeting participants."),
                    },
                }
            },
            "/meeting/{meetingId}/details": {
                "get": {
                    "summary": "Get meeting details",
                    "parameters": [_path_param("meetingId", "The meeting ID.")],
                    "responses": {
                        "200": {"description": "The details of the meeting."},
                        "500": _error_response("Failed to retrieve meeting details."),
                    },
                }
            },
            "/": {
                "get": {
                    "summary": "API health check",
                    "responses": {"200": {"description": "Service is live."}},
                }
            },
        },
    }


@docs_bp.route("/docs/openapi.json")
def openapi_json():
    """Return the OpenAPI document."""
    return jsonify(build_openapi(current_app.config["BASE_URL"]))


@docs_bp.route("/docs")
def swagger_ui():
    """Render the Swagger UI page."""
    return render_template_string(
        SWAGGER_PAGE,
        title="Zoom Gateway API",
        ui_version=SWAGGER_UI_VERSION,
        spec_url="/docs/openapi.json",
    )
