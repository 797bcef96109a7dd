"""Platform detection from scenario tags."""

from collections.abc import Iterable

from petspot_e2e.constants.tags import ANDROID, IOS, PLATFORM_TAGS, WEB
from petspot_e2e.core.exceptions import ConfigurationError


def detect_platform(tags: Iterable[str], configured: str | None = None) -> str | None:
    """Decide which platform a scenario runs on.

    An explicitly configured platform (the runner's ``--platform``) wins.
    Otherwise a single platform tag decides; ``None`` means the scenario is
    tagged for both mobile platforms (or none) and both apps are needed.

    Raises:
        ConfigurationError: If the configured platform is unknown.
    """
    if configured:
        platform = configured.lower()
        if platform not in PLATFORM_TAGS:
            raise ConfigurationError(f"Unknown platform: {configured}")
        return platform

    names = {tag.lstrip("@").lower() for tag in tags}
    has_web, has_android, has_ios = WEB in names, ANDROID in names, IOS in names
    if has_web and not (has_android or has_ios):
        return WEB
    if has_ios and not has_android:
        return IOS
    if has_android and not has_ios:
        return ANDROID
    return None
