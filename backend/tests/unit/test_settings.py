"""Unit tests for configuration."""

import pytest
from pydantic import ValidationError

from infrastructure.config.settings import Settings, normalize_shop_domain, validate_host_url
from infrastructure.config.version import ApiVersion
from shared.exceptions import ConfigurationError


def make_settings(**overrides) -> Settings:
    values = {"SHOPIFY_SHOP_DOMAIN": "my-shop", **overrides}
    return Settings(_env_file=None, **values)


class TestShopDomain:
    """Test shop domain normalization."""

    @pytest.mark.parametrize("value", [
        "my-shop",
        "my-shop.myshopify.com",
        "https://my-shop.myshopify.com/",
        "MY-SHOP",
    ])
    def test_normalized(self, value):
        """Test names, domains and URLs all normalize to the full domain."""
        assert normalize_shop_domain(value) == "my-shop.myshopify.com"

    @pytest.mark.parametrize("value", ["example.com", "-shop", "shop_name", ""])
    def test_rejected(self, value):
        """Test foreign domains and malformed names are rejected."""
        with pytest.raises(ConfigurationError):
            normalize_shop_domain(value)


class TestHostUrl:
    """Test proxy host validation."""

    def test_valid(self):
        """Test a URL with scheme and host passes without trailing slash."""
        assert validate_host_url("https://proxy.example.com/") == "https://proxy.example.com"

    @pytest.mark.parametrize("value", ["proxy.example.com", "https://", "not a url"])
    def test_invalid(self, value):
        """Test URLs missing a scheme or host are rejected."""
        with pytest.raises(ConfigurationError):
            validate_host_url(value)


class TestApiVersion:
    """Test API version parsing."""

    def test_latest_is_stable(self):
        """Test the default version is a known release."""
        latest = ApiVersion.latest()
        assert latest == "2025-10"
        assert latest.is_stable

    def test_unstable(self):
        """Test the unstable channel is accepted."""
        version = ApiVersion("UNSTABLE")
        assert version == "unstable"
        assert not version.is_stable

    def test_custom_version(self):
        """Test well-formed unknown versions are accepted as custom."""
        version = ApiVersion("2026-01")
        assert version == "2026-01"
        assert not version.is_stable

    @pytest.mark.parametrize("value", ["2025-13", "2025-00", "25-01", "latest", ""])
    def test_invalid(self, value):
        """Test malformed versions raise configuration errors."""
        with pytest.raises(ConfigurationError, match="Invalid API version"):
            ApiVersion(value)


class TestSettings:
    """Test the settings model."""

    def test_defaults(self):
        """Test defaults for an otherwise empty configuration."""
        settings = make_settings()

        assert settings.shop_domain == "my-shop.myshopify.com"
        assert settings.version == ApiVersion.latest()
        assert settings.http_tries == 1
        assert settings.host is None
        assert settings.base_uri == "https://my-shop.myshopify.com"
        assert settings.rest_base_path == "/admin/api/2025-10"

    def test_host_overrides_base_uri(self):
        """Test a proxy host becomes the request origin."""
        settings = make_settings(SHOPIFY_HOST="http://localhost:3000/")
        assert settings.base_uri == "http://localhost:3000"

    def test_env_vars(self, monkeypatch):
        """Test values are read from the environment."""
        monkeypatch.setenv("SHOPIFY_SHOP_DOMAIN", "env-shop")
        monkeypatch.setenv("SHOPIFY_API_VERSION", "2024-07")
        monkeypatch.setenv("SHOPIFY_HTTP_TRIES", "4")

        settings = Settings(_env_file=None)

        assert settings.shop_domain == "env-shop.myshopify.com"
        assert settings.api_version == "2024-07"
        assert settings.http_tries == 4

    @pytest.mark.parametrize("overrides", [
        {"SHOPIFY_SHOP_DOMAIN": "example.com"},
        {"SHOPIFY_API_VERSION": "v2"},
        {"SHOPIFY_HOST": "localhost"},
        {"SHOPIFY_HTTP_TRIES": 0},
    ])
    def test_invalid_values(self, overrides):
        """Test invalid configuration fails validation."""
        with pytest.raises(ValidationError):
            make_settings(**overrides)

    def test_mask_sensitive(self):
        """Test the access token is masked."""
        masked = make_settings(SHOPIFY_ACCESS_TOKEN="shpat_abcdef1234").mask_sensitive()
        assert masked["access_token"] == "***1234"
