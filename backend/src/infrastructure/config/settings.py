"""SDK configuration settings."""

import re
from functools import lru_cache
from typing import Optional
from urllib.parse import urlsplit

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shared.exceptions import ConfigurationError
from .version import ApiVersion


SHOP_DOMAIN_SUFFIX = ".myshopify.com"
_SHOP_NAME = re.compile(r"^[a-z0-9](?:[a-z0-9-]*[a-z0-9])?$")


def normalize_shop_domain(domain: str) -> str:
    """Return the full ``*.myshopify.com`` domain for a shop name or domain."""
    value = (domain or "").strip().lower()
    for scheme in ("https://", "http://"):
        if value.startswith(scheme):
            value = value[len(scheme):]
    value = value.rstrip("/")

    if value.endswith(SHOP_DOMAIN_SUFFIX):
        shop_name = value[: -len(SHOP_DOMAIN_SUFFIX)]
    elif "." in value:
        raise ConfigurationError("shop_domain", f"'{value}' is not a myshopify.com domain")
    else:
        shop_name = value
        value = f"{value}{SHOP_DOMAIN_SUFFIX}"

    if not _SHOP_NAME.match(shop_name):
        raise ConfigurationError("shop_domain", f"Invalid shop domain '{value}'")
    return value


def validate_host_url(url: str) -> str:
    """Check that a proxy host carries both a scheme and a host name."""
    parts = urlsplit(url.strip())
    if not parts.scheme or not parts.scheme.isalpha() or not parts.hostname:
        raise ConfigurationError("host", f"Invalid host URL '{url}'")
    return url.strip().rstrip("/")


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Shopify
    shop_domain: str = Field(alias="SHOPIFY_SHOP_DOMAIN")
    access_token: str = Field(default="", alias="SHOPIFY_ACCESS_TOKEN")
    api_version: str = Field(default=ApiVersion.STABLE[-1], alias="SHOPIFY_API_VERSION")
    host: Optional[str] = Field(default=None, alias="SHOPIFY_HOST")
    user_agent_prefix: Optional[str] = Field(default=None, alias="SHOPIFY_USER_AGENT_PREFIX")

    # HTTP
    http_timeout: float = Field(default=30.0, alias="SHOPIFY_HTTP_TIMEOUT")
    http_tries: int = Field(default=1, ge=1, alias="SHOPIFY_HTTP_TRIES")
    retry_wait_time: float = Field(default=1.0, ge=0, alias="SHOPIFY_RETRY_WAIT_TIME")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=True, alias="LOG_JSON")

    @field_validator("shop_domain")
    @classmethod
    def check_shop_domain(cls, v: str) -> str:
        try:
            return normalize_shop_domain(v)
        except ConfigurationError as e:
            raise ValueError(e.message) from e

    @field_validator("api_version")
    @classmethod
    def check_api_version(cls, v: str) -> str:
        try:
            return str(ApiVersion(v))
        except ConfigurationError as e:
            raise ValueError(e.message) from e

    @field_validator("host")
    @classmethod
    def check_host(cls, v: Optional[str]) -> Optional[str]:
        if not v:
            return None
        try:
            return validate_host_url(v)
        except ConfigurationError as e:
            raise ValueError(e.message) from e

    @property
    def version(self) -> ApiVersion:
        """Configured API version as a value object."""
        return ApiVersion(self.api_version)

    @property
    def base_uri(self) -> str:
        """Origin requests are sent to, the proxy host when one is set."""
        if self.host:
            return self.host
        return f"https://{self.shop_domain}"

    @property
    def rest_base_path(self) -> str:
        """Path prefix of the Admin REST API."""
        return f"/admin/api/{self.api_version}"

    def mask_sensitive(self) -> dict:
        """Get settings with masked sensitive values."""
        data = self.model_dump()
        token = data.get("access_token")
        if token:
            data["access_token"] = "***" + token[-4:] if len(token) > 4 else "****"
        return data


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
