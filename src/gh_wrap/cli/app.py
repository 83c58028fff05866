"""CLI application entry point and command routing for gh-wrap.

This module is the **sole error boundary** for the entire application.
It catches :class:`~gh_wrap.exceptions.GhError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via
Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — commands are built through
  :class:`~gh_wrap.client.GhClient` and executed by the infra layer.
* gh's own output goes to stdout untouched; everything else (spinner,
  errors, logs) goes to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from gh_wrap.cli import exit_codes
from gh_wrap.cli.console import configure_logging, console, escape
from gh_wrap.client import GhClient
from gh_wrap.core.command import BoundCommand
from gh_wrap.core.models import DEFAULT_GH_PATH
from gh_wrap.exceptions import CommandFailedError, GhError
from gh_wrap.version import __version__

logger = logging.getLogger(__name__)

GH_PATH_ENV_VAR: str = "GH_WRAP_GH_PATH"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Sub-commands:
    * ``gh-wrap doctor``  — environment diagnostics
    * ``gh-wrap repos``   — list repositories
    * ``gh-wrap prs``     — list pull requests
    * ``gh-wrap issues``  — list issues
    """
    parser = argparse.ArgumentParser(
        prog="gh-wrap",
        description="Typed wrapper around the GitHub CLI.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every gh invocation to stderr.",
    )
    parser.add_argument(
        "--gh-path",
        default=os.environ.get(GH_PATH_ENV_VAR) or DEFAULT_GH_PATH,
        help=f"gh binary to run (default: ${GH_PATH_ENV_VAR} or '{DEFAULT_GH_PATH}').",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    subparsers.add_parser("doctor", help="Check that gh is installed and usable.")

    repos = subparsers.add_parser("repos", help="List repositories.")
    repos.add_argument("owner", nargs="?", default=None, help="User or organisation.")
    repos.add_argument("--limit", type=int, default=None)

    prs = subparsers.add_parser("prs", help="List pull requests.")
    prs.add_argument("--state", default=None, help="open, closed, merged or all.")
    prs.add_argument("--limit", type=int, default=None)
    prs.add_argument("--author", default=None)

    issues = subparsers.add_parser("issues", help="List issues.")
    issues.add_argument("--state", default=None, help="open, closed or all.")
    issues.add_argument("--limit", type=int, default=None)
    issues.add_argument("--author", default=None)
    issues.add_argument("--label", default=None)
    issues.add_argument("--assignee", default=None)

    return parser


# ---------------------------------------------------------------------------
# Command construction
# ---------------------------------------------------------------------------

def _repos_command(client: GhClient, args: argparse.Namespace) -> BoundCommand:
    command = client.repo().list()
    if args.owner is not None:
        command = command.owner(args.owner)
    if args.limit is not None:
        command = command.limit(args.limit)
    return command


def _prs_command(client: GhClient, args: argparse.Namespace) -> BoundCommand:
    command = client.pr().list()
    if args.state is not None:
        command = command.state(args.state)
    if args.limit is not None:
        command = command.limit(args.limit)
    if args.author is not None:
        command = command.author(args.author)
    return command


def _issues_command(client: GhClient, args: argparse.Namespace) -> BoundCommand:
    command = client.issue().list()
    if args.state is not None:
        command = command.state(args.state)
    if args.limit is not None:
        command = command.limit(args.limit)
    if args.author is not None:
        command = command.author(args.author)
    if args.label is not None:
        command = command.label(args.label)
    if args.assignee is not None:
        command = command.assignee(args.assignee)
    return command


_LISTINGS = {
    "repos": ("Listing repositories", _repos_command),
    "prs": ("Listing pull requests", _prs_command),
    "issues": ("Listing issues", _issues_command),
}


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_listing(args: argparse.Namespace) -> int:
    """Build the listing command, run it, and echo gh's output."""
    from gh_wrap.cli.progress import RichSpinner

    message, build = _LISTINGS[args.command]
    client = GhClient.builder().gh_path(args.gh_path).build()
    command = build(client, args)

    with RichSpinner(message):
        output = command.execute()

    sys.stdout.write(output)
    sys.stdout.flush()
    return exit_codes.SUCCESS


def _handle_doctor(args: argparse.Namespace) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from gh_wrap.cli.doctor import run_doctor

    return run_doctor(args.gh_path)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the gh-wrap CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command == "doctor":
        return _handle_doctor(args)

    return _handle_listing(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CommandFailedError as exc:
        console.print(f"[bold red]gh exited with code {exc.code}.[/bold red]")
        if exc.stderr.strip():
            console.print(escape(exc.stderr.rstrip()))
        sys.exit(exit_codes.GENERAL_ERROR)
    except GhError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        logger.debug("Unhandled exception", exc_info=True)
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
