"""Command contract — binds one argument configuration to one runner.

Dispatch depends only on the :class:`~gh_wrap.core.protocols.GhCommand`
capability: :func:`execute_command` never looks at which concrete
command it was handed.

A command value is immutable.  Configuration methods on concrete
commands return new values via :func:`dataclasses.replace`.  Calling
:meth:`BoundCommand.execute` twice reissues the identical invocation;
whether that is safe (``create``/``merge``/``close`` mutate remote
state) is the caller's call.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, TypeVar

from gh_wrap.core.arguments import ArgumentBuilder
from gh_wrap.core.protocols import CommandRunner, GhCommand
from gh_wrap.exceptions import InvalidCommandError

_C = TypeVar("_C", bound="BoundCommand")


# ---------------------------------------------------------------------------
# Generic dispatch
# ---------------------------------------------------------------------------

def execute_command(command: GhCommand, runner: CommandRunner) -> str:
    """Build *command*'s arguments once and run them through *runner*."""
    return runner.run(command.build_args())


def execute_command_json(command: GhCommand, runner: CommandRunner) -> Any:
    """Same as :func:`execute_command`, parsing stdout as JSON."""
    return runner.run_json(command.build_args())


# ---------------------------------------------------------------------------
# Shared command value
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class BoundCommand:
    """An argument configuration paired with the runner that executes it.

    Concrete operations subclass this only to expose the configuration
    calls meaningful for them; all state lives in the two fields below.
    """

    runner: CommandRunner
    arguments: ArgumentBuilder

    def build_args(self) -> list[str]:
        return self.arguments.build()

    def execute(self) -> str:
        """Run the command and return gh's standard output unchanged."""
        return execute_command(self, self.runner)

    def execute_json(self) -> Any:
        """Run the command and return its standard output parsed as JSON."""
        return execute_command_json(self, self.runner)

    # ------------------------------------------------------------------
    # Helpers for subclasses
    # ------------------------------------------------------------------

    def _flag(self: _C, name: str) -> _C:
        return dataclasses.replace(self, arguments=self.arguments.with_flag(name))

    def _option(self: _C, name: str, value: str) -> _C:
        return dataclasses.replace(
            self, arguments=self.arguments.with_option(name, value),
        )

    def _positional(self: _C, value: str) -> _C:
        return dataclasses.replace(
            self, arguments=self.arguments.with_positional(value),
        )


def positive_int(name: str, value: int) -> str:
    """Render *value* as a token, rejecting non-positive numbers.

    Raises
    ------
    InvalidCommandError
        If *value* is not an ``int`` greater than zero.
    """
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidCommandError(
            f"{name} must be a positive integer, got {value!r}.",
        )
    return str(value)


def json_fields_token(fields: tuple[str, ...]) -> str:
    """Join ``--json`` field names, rejecting an empty selection."""
    cleaned = [field.strip() for field in fields if field.strip()]
    if not cleaned:
        raise InvalidCommandError(
            "At least one JSON field name is required.",
            hint='e.g. .json_fields("number", "title", "url")',
        )
    return ",".join(cleaned)
