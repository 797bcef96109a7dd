"""Command line entry point for the PetSpot E2E suites.

Usage:
    # Web suite against a running web app
    petspot-e2e web

    # Only smoke scenarios, browser visible
    petspot-e2e web --tags "@smoke" --headed

    # Android with the apps already built
    petspot-e2e android --skip-app-build

    # Anything unrecognised is passed to pytest, except -m (use --tags)
    petspot-e2e ios -x --lf
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

import structlog

from petspot_e2e.config.logging import configure_logging
from petspot_e2e.runners.suite import check_extra_args
from petspot_e2e.runners.suites import RUNNERS
from petspot_e2e.runners.tag_expression import TagExpression, TagExpressionError

log = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="petspot-e2e",
        description="Run the PetSpot end-to-end suites",
    )
    parser.add_argument("platform", choices=sorted(RUNNERS), help="Suite to run")
    parser.add_argument(
        "--tags",
        default=None,
        help="Extra tag expression, AND-ed with the suite's own (e.g. '@smoke')",
    )
    parser.add_argument(
        "--skip-app-build",
        action="store_true",
        default=None,
        help="Use already built mobile apps",
    )
    parser.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser (web suite)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run the selected suite; returns the exit code."""
    parser = build_parser()
    args, pytest_args = parser.parse_known_args(argv)

    if args.tags:
        try:
            TagExpression.parse(args.tags)
        except TagExpressionError as e:
            parser.error(str(e))
    try:
        check_extra_args(pytest_args)
    except ValueError as e:
        parser.error(str(e))

    configure_logging()
    runner = RUNNERS[args.platform]
    extra_args = list(pytest_args)
    if args.headed:
        extra_args.append("--headed")

    log.info("cli_started", platform=args.platform, tags=args.tags)
    return runner.run(
        extra_tags=args.tags,
        extra_args=extra_args,
        skip_app_build=args.skip_app_build,
    )


if __name__ == "__main__":
    sys.exit(main())
