"""Core layer — argument building, command values, and contracts.

Rules
-----
* No ``print()`` calls.
* No process spawning, filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* Everything here is immutable once constructed.
"""

from gh_wrap.core.arguments import ArgumentBuilder
from gh_wrap.core.command import BoundCommand, execute_command, execute_command_json
from gh_wrap.core.models import ExecutionOutcome, ExecutorConfig
from gh_wrap.core.protocols import CommandRunner, GhCommand

__all__: list[str] = [
    "ArgumentBuilder",
    "BoundCommand",
    "CommandRunner",
    "ExecutionOutcome",
    "ExecutorConfig",
    "GhCommand",
    "execute_command",
    "execute_command_json",
]
