"""Protocols (interfaces) consumed by the core layer.

These define the contracts that commands and infrastructure adapters
must satisfy.  Core code depends ONLY on these protocols — never on
concrete implementations — so any object with the right methods plugs
in structurally (no explicit inheritance required).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol


class GhCommand(Protocol):
    """Anything that can turn its configuration into gh arguments."""

    def build_args(self) -> list[str]:
        """Return the ordered argument tokens, subcommand path first."""
        ...  # pragma: no cover


class CommandRunner(Protocol):
    """Contract for process execution backends.

    Implementations spawn the gh binary with the given tokens, block
    until it exits, and map every failure onto a
    :class:`~gh_wrap.exceptions.GhError` subclass.
    """

    def run(self, args: Sequence[str]) -> str:
        """Run gh with *args* and return its decoded standard output.

        Raises
        ------
        CommandFailedError
            When gh exits with a non-zero status.
        ExecutionFailedError
            When the process cannot be spawned.
        GhIOError
            For other OS-level I/O failures.
        DecodingError
            When standard output is not valid text.
        """
        ...  # pragma: no cover

    def run_json(self, args: Sequence[str]) -> Any:
        """Like :meth:`run`, then parse standard output as JSON.

        Raises
        ------
        JsonParseError
            When standard output is not valid JSON.
        """
        ...  # pragma: no cover
