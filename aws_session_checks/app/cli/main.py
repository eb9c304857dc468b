#!/usr/bin/env python3
"""
AWS Session Checks CLI
Monitoring plugins for Client VPN sessions and WorkSpaces
"""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from aws_session_checks import __version__
from aws_session_checks.checks.generic import AVAILABLE_CHECKS
from aws_session_checks.core.engine.executor import run_check
from aws_session_checks.core.formatting.reports import build_unknown_line
from aws_session_checks.core.runtime.config import (
    AVAILABLE_BACKENDS,
    DEFAULT_BACKEND,
    DEFAULT_METADATA_TIMEOUT,
    DEFAULT_TIMEOUT,
    CheckConfig,
)

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)

UNKNOWN_EXIT_CODE = 3


class PluginArgumentParser(argparse.ArgumentParser):
    """Usage errors exit UNKNOWN; argparse's default of 2 would read as CRITICAL."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(UNKNOWN_EXIT_CODE, f"{self.prog}: error: {message}\n")


def show_version():
    """Display version information."""
    console.print(f"[bold cyan]AWS Session Checks[/bold cyan] v{__version__}")


def setup_logging(verbose=False):
    """Send log records to stderr so stdout keeps only the status line."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def add_common_arguments(parser):
    parser.add_argument(
        "--version", "-V", action="store_true", help="Show version information"
    )
    parser.add_argument(
        "--region",
        default=None,
        help="AWS region override (defaults to the instance metadata region)",
    )
    parser.add_argument(
        "--backend",
        choices=AVAILABLE_BACKENDS,
        default=DEFAULT_BACKEND,
        help=f"How to reach AWS (default: {DEFAULT_BACKEND})",
    )
    parser.add_argument("--profile", help="AWS profile name")
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"Seconds allowed per AWS call (default: {DEFAULT_TIMEOUT:g})",
    )
    parser.add_argument(
        "--metadata-timeout",
        type=float,
        default=DEFAULT_METADATA_TIMEOUT,
        help=f"Seconds allowed per instance metadata request (default: {DEFAULT_METADATA_TIMEOUT:g})",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Debug logging on stderr"
    )


def execute(check_name, args):
    """Run *check_name*, print its status line and return the exit code."""
    setup_logging(args.verbose)
    try:
        config = CheckConfig.from_args(args)
    except ValueError as exc:
        result = build_unknown_line(exc)
        print(result.text)
        return result.exit_code

    result = run_check(AVAILABLE_CHECKS[check_name], config)
    print(result.text)
    return result.exit_code


def main(argv=None):
    parser = PluginArgumentParser(
        description="AWS Session Checks - monitoring plugins for Client VPN and WorkSpaces",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:

  aws-session-checks client-vpn-connected
  aws-session-checks workspaces-health --region eu-west-1
  aws-session-checks workspaces-connected --backend boto3 --profile ops

Exit codes: 0 OK, 2 CRITICAL, 3 UNKNOWN
        """,
    )
    parser.add_argument(
        "check",
        nargs="?",
        choices=list(AVAILABLE_CHECKS.keys()),
        help="Check to run",
    )
    add_common_arguments(parser)
    args = parser.parse_args(argv)

    if args.version:
        show_version()
        sys.exit(0)

    if not args.check:
        parser.error("a check name is required")

    sys.exit(execute(args.check, args))


def _single_check_main(check_name, argv=None):
    checker = AVAILABLE_CHECKS[check_name]
    parser = PluginArgumentParser(
        prog=f"check_aws_{check_name.replace('-', '_')}",
        description=checker.description,
    )
    add_common_arguments(parser)
    args = parser.parse_args(argv)

    if args.version:
        show_version()
        sys.exit(0)

    sys.exit(execute(check_name, args))


def client_vpn_connected(argv=None):
    _single_check_main("client-vpn-connected", argv)


def workspaces_connected(argv=None):
    _single_check_main("workspaces-connected", argv)


def workspaces_health(argv=None):
    _single_check_main("workspaces-health", argv)


if __name__ == "__main__":
    main()
