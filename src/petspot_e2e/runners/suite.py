"""Suite runner configuration.

A runner is static data: which feature directories to collect, which tag
expression selects scenarios, which step modules to load and which report
plugins to enable. ``build_args`` turns that into a pytest command line.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest
import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator

from petspot_e2e.runners.tag_expression import TagExpression

log = structlog.get_logger(__name__)

PLUGIN_KINDS = ("pretty", "html", "json", "junit")

# Options that would replace the runner's own -m filter (pytest keeps the last -m).
MARKER_OPTIONS = ("-m", "--markers")


def check_extra_args(extra_args: Sequence[str]) -> None:
    """Reject pytest options that override scenario selection.

    Raises:
        ValueError: If a marker option is present; use ``--tags`` instead.
    """
    for arg in extra_args:
        option = arg.partition("=")[0]
        if option in MARKER_OPTIONS or (arg.startswith("-m") and not arg.startswith("--")):
            raise ValueError(
                f"{arg!r} would override the suite's tag filter; use --tags instead"
            )


class SuiteRunner(BaseModel):
    """One platform's test suite.

    Attributes:
        name: Platform name, also passed to hooks as ``--platform``.
        features: Directories holding the pytest-bdd binding modules.
        tags: Cucumber tag expression selecting scenarios.
        glue: Step definition and hook modules loaded as pytest plugins.
        plugins: Report plugins as ``kind`` or ``kind:path``.
        skip_app_build: Passed to hooks as ``--skip-app-build``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    features: tuple[str, ...]
    tags: str
    glue: tuple[str, ...]
    plugins: tuple[str, ...] = Field(default=("pretty",))
    skip_app_build: bool = False

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: str) -> str:
        TagExpression.parse(v)
        return v

    @field_validator("plugins")
    @classmethod
    def validate_plugins(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        for plugin in v:
            kind, _, path = plugin.partition(":")
            if kind not in PLUGIN_KINDS:
                raise ValueError(f"Unknown report plugin: {plugin}")
            if kind != "pretty" and not path:
                raise ValueError(f"Report plugin needs a path: {plugin}")
        return v

    @property
    def tag_expression(self) -> TagExpression:
        return TagExpression.parse(self.tags)

    def effective_tags(self, extra_tags: str | None = None) -> TagExpression:
        """The runner's own expression, AND-ed with an optional user filter."""
        expression = self.tag_expression
        if extra_tags:
            expression = expression.and_(TagExpression.parse(extra_tags))
        return expression

    def selects(self, scenario_tags: Sequence[str], extra_tags: str | None = None) -> bool:
        """Whether a scenario with these tags runs under this runner."""
        return self.effective_tags(extra_tags).evaluate(scenario_tags)

    def marker_expression(self, extra_tags: str | None = None) -> str:
        return self.effective_tags(extra_tags).marker_expression()

    def report_paths(self) -> list[Path]:
        return [
            Path(plugin.partition(":")[2])
            for plugin in self.plugins
            if plugin.partition(":")[2]
        ]

    def _plugin_args(self) -> list[str]:
        args: list[str] = []
        for plugin in self.plugins:
            kind, _, path = plugin.partition(":")
            if kind == "pretty":
                args += ["--gherkin-terminal-reporter", "-v"]
            elif kind == "html":
                args += [f"--html={path}", "--self-contained-html"]
            elif kind == "json":
                args.append(f"--cucumberjson={path}")
            elif kind == "junit":
                args.append(f"--junitxml={path}")
        return args

    def build_args(
        self,
        extra_tags: str | None = None,
        extra_args: Sequence[str] = (),
        skip_app_build: bool | None = None,
    ) -> list[str]:
        """Build the pytest argument list.

        Args:
            extra_tags: User tag expression, AND-ed with the runner's own.
            extra_args: Passed through to pytest after everything else.
                Marker options are rejected, see ``check_extra_args``.
            skip_app_build: Overrides the runner's default when not None.
        """
        check_extra_args(extra_args)
        args: list[str] = [*self.features, "-m", self.marker_expression(extra_tags)]
        for module in self.glue:
            args += ["-p", module]
        args += ["--platform", self.name]
        skip = self.skip_app_build if skip_app_build is None else skip_app_build
        if skip:
            args.append("--skip-app-build")
        args += self._plugin_args()
        args += list(extra_args)
        return args

    def run(
        self,
        extra_tags: str | None = None,
        extra_args: Sequence[str] = (),
        skip_app_build: bool | None = None,
    ) -> int:
        """Run the suite in-process; returns pytest's exit code."""
        for path in self.report_paths():
            path.parent.mkdir(parents=True, exist_ok=True)
        args = self.build_args(extra_tags, extra_args, skip_app_build)
        log.info("suite_run_started", runner=self.name, args=args)
        exit_code = int(pytest.main(args))
        log.info("suite_run_finished", runner=self.name, exit_code=exit_code)
        return exit_code
