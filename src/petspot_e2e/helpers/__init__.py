"""
Test Helpers

Pure functions for common test operations.

Usage:
    from petspot_e2e.helpers import wait_for_condition
"""

from petspot_e2e.helpers.waits import wait_for_condition

__all__ = ["wait_for_condition"]
