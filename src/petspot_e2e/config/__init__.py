"""Configuration module for PetSpot E2E.

Usage:
    from petspot_e2e.config import get_settings

    settings = get_settings()  # Cached singleton
    print(settings.web_base_url)
"""

from petspot_e2e.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
