"""Domain models for gh-wrap.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and trivial derived properties.  They carry
zero I/O and zero dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_GH_PATH: str = "gh"
"""Bare executable name, resolved through ``PATH`` at spawn time."""

DEFAULT_ENCODING: str = "utf-8"
"""Encoding used to decode captured standard output."""

UNKNOWN_EXIT_CODE: int = -1
"""Reported when the platform cannot provide a real exit status."""


# ---------------------------------------------------------------------------
# Executor configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ExecutorConfig:
    """Configuration shared read-only by every command of one client."""

    gh_path: str = DEFAULT_GH_PATH
    """Name or path of the gh binary (absolute, relative, or bare)."""

    encoding: str = DEFAULT_ENCODING
    """Strict decoding applied to stdout of successful runs."""


# ---------------------------------------------------------------------------
# Raw process outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ExecutionOutcome:
    """Raw result of one subprocess run.

    Produced and consumed within a single executor call; never retained.
    """

    exit_code: int
    """Exit status, normalised to ``-1`` when the process was killed by a signal."""

    stdout: bytes
    """Captured standard output."""

    stderr: bytes
    """Captured standard error."""

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0

    @property
    def stderr_text(self) -> str:
        """Standard error decoded leniently; never raises."""
        return self.stderr.decode(DEFAULT_ENCODING, errors="replace")

    @staticmethod
    def normalise_exit_code(returncode: int | None) -> int:
        """Map a ``Popen.returncode`` onto the public exit-code contract.

        POSIX reports signal termination as a negative number; that and
        a missing status both collapse to :data:`UNKNOWN_EXIT_CODE`.
        """
        if returncode is None or returncode < 0:
            return UNKNOWN_EXIT_CODE
        return returncode
