"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and makes fixtures
available to all test modules.
"""

import os
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

# Add src to Python path so we can import zoom_gateway without installing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from zoom_gateway.app import create_app  # noqa: E402
from zoom_gateway.zoom.config import ZoomConfig  # noqa: E402

ZOOM_ENV = {
    "ZOOM_CLIENT_ID": "test-client-id",
    "ZOOM_CLIENT_SECRET": "test-client-secret",
    "ZOOM_ACCOUNT_ID": "test-account-id",
}


@pytest.fixture
def zoom_config() -> ZoomConfig:
    """ZoomConfig built from a fixed test environment."""
    with patch.dict(os.environ, ZOOM_ENV, clear=True):
        return ZoomConfig()


@pytest.fixture
def app(zoom_config: ZoomConfig):
    """Gateway app wired to the test credentials."""
    app = create_app(config=zoom_config)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


def make_response(status_code: int = 200, json_data=None, text: str = "") -> MagicMock:
    """Build a fake requests.Response."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 300
    resp.text = text
    if isinstance(json_data, Exception):
        resp.json.side_effect = json_data
    else:
        resp.json.return_value = json_data
    return resp


@pytest.fixture
def fake_response():
    """Factory for fake requests.Response objects."""
    return make_response
