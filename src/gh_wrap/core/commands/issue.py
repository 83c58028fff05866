"""``gh issue`` commands."""

from __future__ import annotations

from dataclasses import dataclass

from gh_wrap.core.arguments import ArgumentBuilder
from gh_wrap.core.command import BoundCommand, json_fields_token, positive_int
from gh_wrap.core.protocols import CommandRunner


class IssueCommands:
    """Namespace for ``gh issue`` subcommands sharing one runner."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner: CommandRunner = runner

    def _numbered(self, action: str, number: int) -> ArgumentBuilder:
        return ArgumentBuilder.start("issue", action).with_positional(
            positive_int("number", number),
        )

    def create(self) -> IssueCreateCommand:
        return IssueCreateCommand(
            self._runner, ArgumentBuilder.start("issue", "create"),
        )

    def list(self) -> IssueListCommand:
        return IssueListCommand(self._runner, ArgumentBuilder.start("issue", "list"))

    def view(self, number: int) -> IssueViewCommand:
        return IssueViewCommand(self._runner, self._numbered("view", number))

    def close(self, number: int) -> IssueCloseCommand:
        return IssueCloseCommand(self._runner, self._numbered("close", number))

    def reopen(self, number: int) -> IssueReopenCommand:
        return IssueReopenCommand(self._runner, self._numbered("reopen", number))


@dataclass(frozen=True, slots=True)
class IssueCreateCommand(BoundCommand):
    """``gh issue create``"""

    def title(self, title: str) -> IssueCreateCommand:
        return self._option("--title", title)

    def body(self, body: str) -> IssueCreateCommand:
        return self._option("--body", body)

    def label(self, label: str) -> IssueCreateCommand:
        """Add a label; may be called repeatedly."""
        return self._option("--label", label)

    def assignee(self, assignee: str) -> IssueCreateCommand:
        return self._option("--assignee", assignee)

    def web(self) -> IssueCreateCommand:
        return self._flag("--web")


@dataclass(frozen=True, slots=True)
class IssueListCommand(BoundCommand):
    """``gh issue list``"""

    def state(self, state: str) -> IssueListCommand:
        """Filter by state: ``open``, ``closed`` or ``all``."""
        return self._option("--state", state)

    def limit(self, limit: int) -> IssueListCommand:
        return self._option("--limit", positive_int("limit", limit))

    def author(self, author: str) -> IssueListCommand:
        return self._option("--author", author)

    def assignee(self, assignee: str) -> IssueListCommand:
        return self._option("--assignee", assignee)

    def label(self, label: str) -> IssueListCommand:
        return self._option("--label", label)

    def json_fields(self, *fields: str) -> IssueListCommand:
        return self._option("--json", json_fields_token(fields))


@dataclass(frozen=True, slots=True)
class IssueViewCommand(BoundCommand):
    """``gh issue view <number>``"""

    def web(self) -> IssueViewCommand:
        return self._flag("--web")

    def json_fields(self, *fields: str) -> IssueViewCommand:
        return self._option("--json", json_fields_token(fields))


@dataclass(frozen=True, slots=True)
class IssueCloseCommand(BoundCommand):
    """``gh issue close <number>``"""


@dataclass(frozen=True, slots=True)
class IssueReopenCommand(BoundCommand):
    """``gh issue reopen <number>``"""
