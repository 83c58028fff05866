"""``gh pr`` commands."""

from __future__ import annotations

from dataclasses import dataclass

from gh_wrap.core.arguments import ArgumentBuilder
from gh_wrap.core.command import BoundCommand, json_fields_token, positive_int
from gh_wrap.core.protocols import CommandRunner


class PrCommands:
    """Namespace for ``gh pr`` subcommands sharing one runner."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner: CommandRunner = runner

    def _numbered(self, action: str, number: int) -> ArgumentBuilder:
        return ArgumentBuilder.start("pr", action).with_positional(
            positive_int("number", number),
        )

    def create(self) -> PrCreateCommand:
        return PrCreateCommand(self._runner, ArgumentBuilder.start("pr", "create"))

    def list(self) -> PrListCommand:
        return PrListCommand(self._runner, ArgumentBuilder.start("pr", "list"))

    def view(self, number: int) -> PrViewCommand:
        return PrViewCommand(self._runner, self._numbered("view", number))

    def checkout(self, number: int) -> PrCheckoutCommand:
        return PrCheckoutCommand(self._runner, self._numbered("checkout", number))

    def merge(self, number: int) -> PrMergeCommand:
        return PrMergeCommand(self._runner, self._numbered("merge", number))

    def close(self, number: int) -> PrCloseCommand:
        return PrCloseCommand(self._runner, self._numbered("close", number))


@dataclass(frozen=True, slots=True)
class PrCreateCommand(BoundCommand):
    """``gh pr create``"""

    def title(self, title: str) -> PrCreateCommand:
        return self._option("--title", title)

    def body(self, body: str) -> PrCreateCommand:
        return self._option("--body", body)

    def base(self, base: str) -> PrCreateCommand:
        """Branch the pull request merges into."""
        return self._option("--base", base)

    def head(self, head: str) -> PrCreateCommand:
        """Branch that contains the commits."""
        return self._option("--head", head)

    def draft(self) -> PrCreateCommand:
        return self._flag("--draft")

    def web(self) -> PrCreateCommand:
        return self._flag("--web")


@dataclass(frozen=True, slots=True)
class PrListCommand(BoundCommand):
    """``gh pr list``"""

    def state(self, state: str) -> PrListCommand:
        """Filter by state: ``open``, ``closed``, ``merged`` or ``all``."""
        return self._option("--state", state)

    def limit(self, limit: int) -> PrListCommand:
        return self._option("--limit", positive_int("limit", limit))

    def author(self, author: str) -> PrListCommand:
        return self._option("--author", author)

    def json_fields(self, *fields: str) -> PrListCommand:
        return self._option("--json", json_fields_token(fields))


@dataclass(frozen=True, slots=True)
class PrViewCommand(BoundCommand):
    """``gh pr view <number>``"""

    def web(self) -> PrViewCommand:
        return self._flag("--web")

    def json_fields(self, *fields: str) -> PrViewCommand:
        return self._option("--json", json_fields_token(fields))


@dataclass(frozen=True, slots=True)
class PrCheckoutCommand(BoundCommand):
    """``gh pr checkout <number>``"""


@dataclass(frozen=True, slots=True)
class PrMergeCommand(BoundCommand):
    """``gh pr merge <number>``

    gh rejects more than one of ``--merge``/``--squash``/``--rebase``;
    that rule is not checked here.
    """

    def merge(self) -> PrMergeCommand:
        return self._flag("--merge")

    def squash(self) -> PrMergeCommand:
        return self._flag("--squash")

    def rebase(self) -> PrMergeCommand:
        return self._flag("--rebase")

    def auto(self) -> PrMergeCommand:
        """Merge automatically once requirements are met."""
        return self._flag("--auto")


@dataclass(frozen=True, slots=True)
class PrCloseCommand(BoundCommand):
    """``gh pr close <number>``"""

    def delete_branch(self) -> PrCloseCommand:
        return self._flag("--delete-branch")
