"""Tests for Zoom configuration."""

import os
from unittest.mock import patch

from zoom_gateway.zoom.config import (
    DEFAULT_EXPIRY_MARGIN,
    ZOOM_API_BASE,
    ZOOM_OAUTH_URL,
    ZoomConfig,
    ZoomCredentials,
)


class TestZoomConfig:
    """Tests for ZoomConfig."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = ZoomConfig()
            assert config.client_id == ""
            assert config.client_secret == ""
            assert config.account_id == ""
            assert config.oauth_url == ZOOM_OAUTH_URL
            assert config.api_base == ZOOM_API_BASE
            assert config.timeout == 30.0
            assert config.cache_tokens is False
            assert config.expiry_margin == DEFAULT_EXPIRY_MARGIN
            assert not config.is_configured

    def test_configured_from_env(self):
        env = {
            "ZOOM_CLIENT_ID": "cid",
            "ZOOM_CLIENT_SECRET": "secret",
            "ZOOM_ACCOUNT_ID": "acct",
            "ZOOM_API_BASE": "https://proxy.example.com/v2/",
            "ZOOM_HTTP_TIMEOUT": "5",
            "ZOOM_TOKEN_CACHE": "TRUE",
        }
        with patch.dict(os.environ, env, clear=True):
            config = ZoomConfig()
            assert config.is_configured
            assert config.api_base == "https://proxy.example.com/v2"
            assert config.timeout == 5.0
            assert config.cache_tokens is True
            assert config.credentials == ZoomCredentials("cid", "secret", "acct")

    def test_negative_expiry_margin_clamped_and_reported(self):
        env = {"ZOOM_TOKEN_CACHE": "true", "ZOOM_TOKEN_EXPIRY_MARGIN": "-600"}
        with patch.dict(os.environ, env, clear=True):
            config = ZoomConfig()
            assert config.expiry_margin == 0
            assert any("ZOOM_TOKEN_EXPIRY_MARGIN" in e for e in config.validate())

    def test_invalid_timeout_falls_back(self):
        with patch.dict(os.environ, {"ZOOM_HTTP_TIMEOUT": "soon"}, clear=True):
            config = ZoomConfig()
            assert config.timeout == 30.0

    def test_validate_missing_fields(self):
        with patch.dict(os.environ, {}, clear=True):
            errors = ZoomConfig().validate()
            assert len(errors) == 3
            assert any("ZOOM_CLIENT_ID" in e for e in errors)
            assert any("ZOOM_CLIENT_SECRET" in e for e in errors)
            assert any("ZOOM_ACCOUNT_ID" in e for e in errors)

    def test_validate_all_configured(self, zoom_config):
        assert zoom_config.validate() == []

    def test_to_dict_no_secrets(self, zoom_config):
        d = zoom_config.to_dict()
        assert "test-client-secret" not in str(d)
        assert "test-client-id" not in str(d)
        assert d["configured"] is True

    def test_credentials_repr_hides_secrets(self, zoom_config):
        text = repr(zoom_config.credentials)
        assert "test-client-secret" not in text
        assert "test-client-id" not in text
