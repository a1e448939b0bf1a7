"""Command line interface for seedbed."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Sequence, TextIO

from .config import CreateOptions
from .errors import BootstrapError, CloneFailed, DirectoryConflict, InvalidProjectName
from .naming import validate_package_name
from .scaffold import ProjectBootstrapper
from .telemetry import JsonlTelemetry, LoggingTelemetry, Telemetry


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Bootstrap theme projects from starter templates")
    subparsers = parser.add_subparsers(dest="command", required=True)

    create_parser = subparsers.add_parser("create", help="create a new theme from a starter")
    create_parser.add_argument("name", help="Package name of the new theme, also used as its directory")
    create_parser.add_argument(
        "starter",
        help="Local starter directory or hosted git repository (e.g. github:owner/repo#branch)",
    )
    create_parser.add_argument(
        "--skip-install",
        action="store_true",
        help="Do not install theme dependencies",
    )
    create_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show output of git and detailed progress",
    )
    create_parser.add_argument(
        "--telemetry-log",
        metavar="PATH",
        help="Append analytics events as JSON lines to PATH",
    )

    check_parser = subparsers.add_parser("check-name", help="validate a theme name without creating anything")
    check_parser.add_argument("name", help="Package name to validate")

    return parser


def report_error(error: BootstrapError, stream: TextIO) -> None:
    """Write a human readable description of ``error`` to ``stream``."""

    if isinstance(error, InvalidProjectName):
        print(f"{error}:", file=stream)
        for problem in error.problems:
            print(f"  *  {problem}", file=stream)
        return

    if isinstance(error, DirectoryConflict):
        print(file=stream)
        print(f"{error}:", file=stream)
        print(file=stream)
        for conflict in error.conflicts:
            print(f"  {conflict}", file=stream)
        print(file=stream)
        print("Either try using a new directory name, or remove the files listed above.", file=stream)
        return

    if isinstance(error, CloneFailed):
        print(file=stream)
        print("There was an error while cloning the git repo:", file=stream)
        print(file=stream)
        print(error.reason, file=stream)
        if error.output:
            print(error.output.rstrip(), file=stream)
        return

    print(str(error), file=stream)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(format="%(message)s", level=logging.DEBUG if verbose else logging.INFO)


def _handle_create(args: argparse.Namespace) -> int:
    _configure_logging(args.verbose)
    telemetry: Telemetry = JsonlTelemetry(args.telemetry_log) if args.telemetry_log else LoggingTelemetry()
    options = CreateOptions(skip_install=args.skip_install, verbose=args.verbose)
    bootstrapper = ProjectBootstrapper(telemetry=telemetry)
    try:
        root = asyncio.run(bootstrapper.create(args.name, args.starter, options))
    except BootstrapError as exc:
        report_error(exc, sys.stderr)
        return exc.exit_code
    print(f"Theme created at {root}")
    return 0


def _handle_check_name(args: argparse.Namespace) -> int:
    result = validate_package_name(args.name)
    if result.valid_for_new_packages:
        print(f'"{args.name}" is a valid theme name')
        return 0
    report_error(InvalidProjectName(args.name, result.errors, result.warnings), sys.stderr)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "create":
        return _handle_create(args)
    if args.command == "check-name":
        return _handle_check_name(args)
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
