"""Unit tests for wait_for_condition."""

from unittest.mock import MagicMock

import pytest

from petspot_e2e.core.exceptions import ElementNotFoundError
from petspot_e2e.helpers.waits import wait_for_condition


@pytest.mark.unit
class TestWaitForCondition:
    """Tests for the polling helper."""

    def test_returns_first_matching_result(self) -> None:
        action = MagicMock(side_effect=["false", "false", "true"])

        result = wait_for_condition(
            action=action,
            condition=lambda value: value == "true",
            timeout_seconds=1.0,
            poll_interval_seconds=0.0,
        )

        assert result == "true"
        assert action.call_count == 3

    def test_times_out_with_last_result(self) -> None:
        with pytest.raises(TimeoutError, match="Tab not selected. Last result: false"):
            wait_for_condition(
                action=lambda: "false",
                condition=lambda value: value == "true",
                timeout_seconds=0.05,
                poll_interval_seconds=0.01,
                error_message="Tab not selected",
            )

    def test_ignored_exceptions_count_as_not_yet(self) -> None:
        action = MagicMock(side_effect=[ElementNotFoundError("//x"), "ready"])

        result = wait_for_condition(
            action=action,
            condition=lambda value: value == "ready",
            timeout_seconds=1.0,
            poll_interval_seconds=0.0,
            ignored_exceptions=(ElementNotFoundError,),
        )

        assert result == "ready"

    def test_timeout_reports_last_error(self) -> None:
        def _missing() -> str:
            raise ElementNotFoundError("//*[@content-desc='landingPage.list']")

        with pytest.raises(TimeoutError, match="Last error: No element matches"):
            wait_for_condition(
                action=_missing,
                condition=lambda value: True,
                timeout_seconds=0.05,
                poll_interval_seconds=0.01,
                ignored_exceptions=(ElementNotFoundError,),
            )

    def test_other_exceptions_propagate(self) -> None:
        def _broken() -> str:
            raise RuntimeError("driver crashed")

        with pytest.raises(RuntimeError, match="driver crashed"):
            wait_for_condition(action=_broken, condition=lambda value: True, timeout_seconds=1.0)
