"""Suite runners for web, Android and iOS."""

from petspot_e2e.runners.suite import SuiteRunner
from petspot_e2e.runners.suites import ANDROID_RUNNER, IOS_RUNNER, RUNNERS, WEB_RUNNER
from petspot_e2e.runners.tag_expression import TagExpression, TagExpressionError

__all__ = [
    "ANDROID_RUNNER",
    "IOS_RUNNER",
    "RUNNERS",
    "WEB_RUNNER",
    "SuiteRunner",
    "TagExpression",
    "TagExpressionError",
]
