"""Configuration module using Pydantic Settings.

Usage:
    from yextapi.config import ClientSettings

    settings = ClientSettings(account_id="12345")
"""

from yextapi.config.settings import ClientSettings

__all__ = [
    "ClientSettings",
]
