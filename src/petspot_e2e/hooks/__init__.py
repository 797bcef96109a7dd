"""Scenario lifecycle support: platform detection and app preparation."""

from petspot_e2e.hooks.app_builder import AppBuilder, get_app_builder
from petspot_e2e.hooks.platform import detect_platform

__all__ = ["AppBuilder", "detect_platform", "get_app_builder"]
