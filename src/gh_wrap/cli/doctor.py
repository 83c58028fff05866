"""``gh-wrap doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment can run gh commands.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.  No business logic resides
here; it purely collects and displays diagnostic data.
"""

from __future__ import annotations

import logging
import platform
import sys

from gh_wrap.cli import exit_codes
from gh_wrap.cli.console import console
from gh_wrap.core.models import DEFAULT_GH_PATH, ExecutorConfig
from gh_wrap.exceptions import GhNotFoundError
from gh_wrap.infra.gh_detector import detect_gh
from gh_wrap.infra.gh_executor import GhExecutor
from gh_wrap.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    major, minor = sys.version_info[:2]
    ok = (major, minor) >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _gh_version_check(gh_path: str) -> tuple[str, str, str]:
    """Return (label, value, status) for the gh version probe row."""
    executor = GhExecutor(ExecutorConfig(gh_path=gh_path))
    try:
        version_text = executor.check_installation()
    except GhNotFoundError as exc:
        logger.debug("gh version probe failed: %s", exc)
        return "gh", "NOT FOUND", "[red]FAIL[/red]"

    first_line = version_text.strip().splitlines()[0] if version_text.strip() else "unknown"
    return "gh", first_line, "[green]OK[/green]"


def _gh_path_check(gh_path: str) -> tuple[str, str, str]:
    """Return (label, value, status) for the resolved gh location row."""
    status_obj = detect_gh(gh_path)
    if status_obj.found:
        path_str = str(status_obj.path) if status_obj.path else "found"
        return "gh path", path_str, "[green]OK[/green]"
    return "gh path", f"{gh_path} not on PATH", "[yellow]WARN[/yellow]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    release = platform.release()
    machine = platform.machine()
    value = f"{system_display} {release} ({machine})"
    return "OS", value, "[green]OK[/green]"


def _ghwrap_version_check() -> tuple[str, str, str]:
    return "gh-wrap", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\ngh-wrap doctor", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<36} {'Status':<8}", file=sys.stderr)
    print("-" * 60, file=sys.stderr)
    for label, value, status in checks:
        plain_status = _status_plain(status)
        print(f"{label:<12} {value:<36} {plain_status:<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(gh_path: str = DEFAULT_GH_PATH) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    checks = [
        _ghwrap_version_check(),
        _python_version_check(),
        _gh_version_check(gh_path),
        _gh_path_check(gh_path),
        _os_check(),
    ]

    has_failure = any("FAIL" in status for _, _, status in checks)

    rich_available = True
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="gh-wrap doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)

        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    # Show install guidance when gh cannot be located.
    gh_status = detect_gh(gh_path)
    if not gh_status.found and gh_status.install_commands:
        if rich_available:
            console.print("[yellow]gh is not installed.[/yellow]")
            console.print("Install using one of the following commands:\n")
            for cmd in gh_status.install_commands:
                console.print(f"  [bold]{cmd}[/bold]")
            console.print()
        else:
            print("gh is not installed.", file=sys.stderr)
            print("Install using one of the following commands:\n", file=sys.stderr)
            for cmd in gh_status.install_commands:
                print(f"  {cmd}", file=sys.stderr)
            print(file=sys.stderr)

    if has_failure:
        if rich_available:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            print("Some checks failed.", file=sys.stderr)
        return exit_codes.GENERAL_ERROR

    if rich_available:
        console.print("[bold green]All checks passed.[/bold green]")
    else:
        print("All checks passed.", file=sys.stderr)
    return exit_codes.SUCCESS
