"""Wait and timeout constants."""

from typing import Final

# Explicit waits used by page objects when no timeout is passed
DEFAULT_WAIT_TIMEOUT_SECONDS: Final[float] = 10.0
DEFAULT_POLL_INTERVAL_SECONDS: Final[float] = 0.5

# App preparation
APP_BUILD_TIMEOUT_SECONDS: Final[int] = 15 * 60
