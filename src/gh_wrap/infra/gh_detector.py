"""Infrastructure: locating the gh binary and platform install guidance.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.  Running
  ``gh --version`` is :meth:`GhExecutor.check_installation`'s job.
* No PATH modification, no automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from gh_wrap.core.models import DEFAULT_GH_PATH


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class GhStatus:
    """Result of a gh lookup.

    Attributes
    ----------
    found : bool
        Whether *gh_path* resolved to an executable.
    path : Path | None
        Absolute path to the gh binary, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing gh on the current
        platform.  Empty when gh is already present.
    """

    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_gh(gh_path: str = DEFAULT_GH_PATH) -> GhStatus:
    """Resolve *gh_path* the way the OS would when spawning it.

    Returns a :class:`GhStatus` either way — the caller decides whether
    to abort or merely warn.
    """
    result = shutil.which(gh_path)

    if result is not None:
        resolved = Path(result).resolve()
        return GhStatus(
            found=True,
            path=resolved,
            install_commands=(),
        )

    return GhStatus(
        found=False,
        path=None,
        install_commands=_platform_install_commands(),
    )


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands() -> tuple[str, ...]:
    """Return install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return (
            "winget install --id GitHub.cli",
            "choco install gh",
        )
    if system == "linux":
        return (
            "sudo apt install gh",
            "sudo dnf install gh",
            "sudo pacman -S github-cli",
        )
    if system == "darwin":
        return ("brew install gh",)
    return ("Please install gh from https://cli.github.com/",)
