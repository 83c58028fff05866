"""gh-wrap — typed, composable wrapper around the GitHub CLI (``gh``).

Commands are built through immutable fluent builders and executed as
one blocking ``gh`` subprocess each; every failure surfaces as a
:class:`~gh_wrap.exceptions.GhError` subclass.
"""

from gh_wrap.client import GhClient, GhClientBuilder
from gh_wrap.core.arguments import ArgumentBuilder
from gh_wrap.core.command import BoundCommand, execute_command, execute_command_json
from gh_wrap.core.models import ExecutorConfig
from gh_wrap.core.protocols import CommandRunner, GhCommand
from gh_wrap.exceptions import (
    CommandFailedError,
    DecodingError,
    ExecutionFailedError,
    GhError,
    GhIOError,
    GhNotFoundError,
    InvalidCommandError,
    JsonParseError,
)
from gh_wrap.infra.gh_executor import GhExecutor
from gh_wrap.version import __version__

__all__: list[str] = [
    "ArgumentBuilder",
    "BoundCommand",
    "CommandFailedError",
    "CommandRunner",
    "DecodingError",
    "ExecutionFailedError",
    "ExecutorConfig",
    "GhClient",
    "GhClientBuilder",
    "GhCommand",
    "GhError",
    "GhExecutor",
    "GhIOError",
    "GhNotFoundError",
    "InvalidCommandError",
    "JsonParseError",
    "__version__",
    "execute_command",
    "execute_command_json",
]
