"""Scenario tags used for suite selection."""

from typing import Final

WEB: Final[str] = "web"
ANDROID: Final[str] = "android"
IOS: Final[str] = "ios"
MOBILE: Final[str] = "mobile"

# Exclusion tags
PENDING: Final[str] = "pending"
PENDING_WEB: Final[str] = "pending-web"
LEGACY: Final[str] = "legacy"

# Scenario behaviour
LOCATION: Final[str] = "location"
SMOKE: Final[str] = "smoke"

PLATFORM_TAGS: Final[frozenset[str]] = frozenset({WEB, ANDROID, IOS})
