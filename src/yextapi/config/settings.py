"""Configuration settings using Pydantic Settings.

Provides typed client configuration with environment variable support.

Usage:
    from yextapi.config import ClientSettings

    # Load from environment variables (YEXT_*)
    settings = ClientSettings()

    # Or override with explicit values
    settings = ClientSettings(api_key="...", account_id="12345")
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Configuration for the API client.

    Attributes:
        api_key: API key sent with every request (prefer environment variable).
        account_id: Account the resource paths are scoped to ("me" = key's own account).
        base_url: API root, without the ``/accounts/...`` suffix.
        version: API version date sent as the ``v`` query parameter.
        timeout: Request timeout in seconds.

    Environment Variables:
        YEXT_API_KEY
        YEXT_ACCOUNT_ID
        YEXT_BASE_URL
        YEXT_VERSION
        YEXT_TIMEOUT
    """

    model_config = SettingsConfigDict(
        env_prefix="YEXT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: str | None = None
    account_id: str = "me"
    base_url: str = "https://api.yext.com/v2"
    version: str = "20180226"
    timeout: float = 60.0
