"""Custom exception hierarchy for gh-wrap.

Every failure that crosses a layer boundary must inherit from
:class:`GhError`.  Raw ``OSError``, ``UnicodeDecodeError`` and
``json.JSONDecodeError`` instances must NEVER propagate beyond the
infrastructure layer — they are caught there and re-raised as one of
the typed subclasses defined here, chained with ``from``.

Hierarchy
---------
GhError
├── GhNotFoundError
├── ExecutionFailedError
├── CommandFailedError
├── JsonParseError
├── DecodingError
├── GhIOError
└── InvalidCommandError

The set is closed: callers may rely on catching these seven classes
(or :class:`GhError` itself) to handle every outcome of a command.
"""

from __future__ import annotations


class GhError(Exception):
    """Base exception for all gh-wrap errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Binary discovery ------------------------------------------------------

class GhNotFoundError(GhError):
    """Raised when the gh binary cannot be located or fails its version probe."""


# --- Process spawning ------------------------------------------------------

class ExecutionFailedError(GhError):
    """Raised when a command invocation cannot spawn the gh process."""


class GhIOError(GhError):
    """Raised for lower-level OS I/O failures during spawn or stream capture."""


# --- Process outcome -------------------------------------------------------

class CommandFailedError(GhError):
    """Raised when gh ran but exited with a non-zero status.

    Attributes
    ----------
    code : int
        The process exit code, or ``-1`` when the platform could not
        report one (e.g. the process was killed by a signal).
    stderr : str
        Full captured standard-error text, decoded leniently.
    """

    def __init__(self, code: int, stderr: str, *, hint: str | None = None) -> None:
        super().__init__(
            f"Command failed with exit code {code}: {stderr.strip()}",
            hint=hint,
        )
        self.code: int = code
        self.stderr: str = stderr


# --- Output interpretation -------------------------------------------------

class DecodingError(GhError):
    """Raised when captured stdout is not valid text in the configured encoding."""


class JsonParseError(GhError):
    """Raised when captured stdout cannot be parsed as JSON."""


# --- Caller misuse ---------------------------------------------------------

class InvalidCommandError(GhError):
    """Raised when a command is misconfigured before anything is spawned."""


def append_install_suggestion(hint: str) -> str:
    """Append gh installation guidance to an existing hint text.

    The suggestion is appended only once and preserves the original
    hint content verbatim.
    """
    marker = "Install the GitHub CLI:"
    if marker in hint:
        return hint
    return "\n".join(
        (
            hint,
            marker,
            "    https://cli.github.com/",
        )
    )
