"""Test-run settings using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """PetSpot E2E configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PETSPOT_E2E_",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # Logging
    debug: bool = Field(default=False, description="Pretty console logs instead of JSON")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Minimum log level"
    )

    # Web
    web_base_url: str = Field(
        default="http://localhost:3000", description="Base URL of the web app under test"
    )
    headless: bool = Field(default=True, description="Run the browser headless")
    slow_mo: int = Field(default=0, ge=0, description="Playwright slow_mo in milliseconds")
    viewport_width: int = Field(default=1920, ge=320)
    viewport_height: int = Field(default=1080, ge=240)

    # Timeouts (seconds)
    default_timeout_seconds: float = Field(
        default=10.0, gt=0, description="Explicit wait used by page objects"
    )
    navigation_timeout_seconds: float = Field(
        default=30.0, gt=0, description="Page load timeout"
    )

    # Backend (scenario test data)
    api_base_url: str = Field(
        default="http://localhost:3000", description="Backend REST API used to create test data"
    )
    admin_token: str = Field(default="", description="Admin token for deleting test data")
    api_request_timeout_seconds: float = Field(default=30.0, gt=0)

    # Appium
    appium_server_url: str = Field(
        default="http://127.0.0.1:4723", description="Appium server URL"
    )
    appium_request_timeout_seconds: float = Field(default=60.0, gt=0)

    android_platform_version: str = Field(default="14")
    android_device_name: str = Field(default="Android Emulator")
    android_app_package: str = Field(default="com.intive.aifirst.petspot")
    ios_platform_version: str = Field(default="18.1")
    ios_device_name: str = Field(default="iPhone 15")
    ios_bundle_id: str = Field(default="com.intive.aifirst.petspot.PetSpot")

    # App artifacts
    project_root: Path = Field(
        default=Path(".."), description="Root of the mobile app sources (Gradle/Xcode)"
    )
    apps_dir: Path = Field(default=Path("apps"), description="Where built apps are copied")
    android_build_command: str = Field(default="./gradlew :composeApp:assembleDebug --quiet")
    android_build_output: Path = Field(
        default=Path("composeApp/build/outputs/apk/debug/composeApp-debug.apk")
    )
    ios_build_command: str = Field(
        default=(
            "xcodebuild -project iosApp/iosApp.xcodeproj -scheme iosApp "
            "-sdk iphonesimulator -configuration Debug -derivedDataPath iosApp/build build"
        )
    )
    ios_build_output: Path = Field(
        default=Path("iosApp/build/Build/Products/Debug-iphonesimulator/PetSpot.app")
    )
    skip_app_build: bool = Field(
        default=False, description="Skip building mobile apps before scenarios"
    )

    # Output
    reports_dir: Path = Field(default=Path("reports"))
    screenshots_dir: Path = Field(default=Path("reports/screenshots"))

    @field_validator("web_base_url", "appium_server_url", "api_base_url")
    @classmethod
    def validate_http_url(cls, v: str) -> str:
        """Validate URL scheme and drop the trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @property
    def android_app_path(self) -> Path:
        return self.apps_dir / "petspot-android.apk"

    @property
    def ios_app_path(self) -> Path:
        return self.apps_dir / "petspot-ios.app"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
