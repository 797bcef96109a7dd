"""Build and stage the mobile apps before mobile scenarios run.

Each platform is built at most once per process: uninstall the previous
install (best effort), run the build command, then copy the artifact into
the apps directory where the Appium capabilities point.
"""

from __future__ import annotations

import shlex
import shutil
import subprocess
from functools import lru_cache
from pathlib import Path

import structlog

from petspot_e2e.config.settings import Settings, get_settings
from petspot_e2e.constants.tags import ANDROID, IOS
from petspot_e2e.constants.timeouts import APP_BUILD_TIMEOUT_SECONDS
from petspot_e2e.core.exceptions import AppBuildError

log = structlog.get_logger(__name__)


class AppBuilder:
    """Builds the Android APK and the iOS simulator bundle on demand.

    Attributes:
        settings: Build commands, artifact paths and the apps directory.
        built: Platforms already prepared in this process.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.built: set[str] = set()

    def ensure_apps_built(self, platform: str | None) -> None:
        """Prepare the app for a platform, or both apps when platform is None.

        Raises:
            AppBuildError: If a build command fails or its artifact is missing.
        """
        platforms = [ANDROID, IOS] if platform is None else [platform.lower()]
        for name in platforms:
            if name in self.built:
                continue
            if name == ANDROID:
                self._prepare_android()
            elif name == IOS:
                self._prepare_ios()
            else:
                raise AppBuildError(name, "no mobile app for this platform")
            self.built.add(name)
            log.info("app_ready", platform=name)

    def _prepare_android(self) -> None:
        self._uninstall(ANDROID, ["adb", "uninstall", self.settings.android_app_package])
        self._run(ANDROID, shlex.split(self.settings.android_build_command))
        source = self.settings.project_root / self.settings.android_build_output
        self._copy(ANDROID, source, self.settings.android_app_path)

    def _prepare_ios(self) -> None:
        self._uninstall(
            IOS, ["xcrun", "simctl", "uninstall", "booted", self.settings.ios_bundle_id]
        )
        self._run(IOS, shlex.split(self.settings.ios_build_command))
        source = self.settings.project_root / self.settings.ios_build_output
        self._copy(IOS, source, self.settings.ios_app_path)

    def _uninstall(self, platform: str, command: list[str]) -> None:
        # A missing app or device is expected on a clean machine.
        try:
            subprocess.run(
                command,
                cwd=self.settings.project_root,
                capture_output=True,
                text=True,
                check=True,
                timeout=60,
            )
            log.info("app_uninstalled", platform=platform)
        except (OSError, subprocess.SubprocessError) as e:
            log.info("app_uninstall_skipped", platform=platform, error=str(e))

    def _run(self, platform: str, command: list[str]) -> None:
        log.info("app_build_started", platform=platform, command=" ".join(command))
        try:
            result = subprocess.run(
                command,
                cwd=self.settings.project_root,
                capture_output=True,
                text=True,
                timeout=APP_BUILD_TIMEOUT_SECONDS,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise AppBuildError(platform, f"build command could not run: {e}") from e

        if result.returncode != 0:
            log.error(
                "app_build_failed",
                platform=platform,
                returncode=result.returncode,
                output=result.stdout[-2000:] + result.stderr[-2000:],
            )
            raise AppBuildError(platform, f"build failed with exit code {result.returncode}")
        log.info("app_build_succeeded", platform=platform)

    def _copy(self, platform: str, source: Path, destination: Path) -> None:
        if not source.exists():
            raise AppBuildError(platform, f"build artifact not found: {source}")
        destination.parent.mkdir(parents=True, exist_ok=True)
        try:
            if source.is_dir():
                shutil.rmtree(destination, ignore_errors=True)
                shutil.copytree(source, destination)
            else:
                shutil.copy2(source, destination)
        except OSError as e:
            raise AppBuildError(platform, f"failed to copy {source}: {e}") from e
        log.info("app_copied", platform=platform, destination=str(destination))


@lru_cache
def get_app_builder() -> AppBuilder:
    """Process-wide builder, so each app is built once per run."""
    return AppBuilder(get_settings())
