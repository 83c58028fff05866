"""``gh repo`` commands."""

from __future__ import annotations

from dataclasses import dataclass

from gh_wrap.core.arguments import ArgumentBuilder
from gh_wrap.core.command import BoundCommand, json_fields_token, positive_int
from gh_wrap.core.protocols import CommandRunner


class RepoCommands:
    """Namespace for ``gh repo`` subcommands sharing one runner."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner: CommandRunner = runner

    def clone(self, repo: str) -> RepoCloneCommand:
        """Clone *repo* (``owner/name`` or URL)."""
        return RepoCloneCommand(
            self._runner,
            ArgumentBuilder.start("repo", "clone").with_positional(repo),
        )

    def create(self, name: str) -> RepoCreateCommand:
        return RepoCreateCommand(
            self._runner,
            ArgumentBuilder.start("repo", "create").with_positional(name),
        )

    def fork(self, repo: str) -> RepoForkCommand:
        return RepoForkCommand(
            self._runner,
            ArgumentBuilder.start("repo", "fork").with_positional(repo),
        )

    def list(self) -> RepoListCommand:
        return RepoListCommand(self._runner, ArgumentBuilder.start("repo", "list"))

    def view(self, repo: str | None = None) -> RepoViewCommand:
        """View *repo*, or the repository of the current directory when ``None``."""
        arguments = ArgumentBuilder.start("repo", "view")
        if repo is not None:
            arguments = arguments.with_positional(repo)
        return RepoViewCommand(self._runner, arguments)


@dataclass(frozen=True, slots=True)
class RepoCloneCommand(BoundCommand):
    """``gh repo clone <repo>``"""


@dataclass(frozen=True, slots=True)
class RepoCreateCommand(BoundCommand):
    """``gh repo create <name>``"""

    def public(self) -> RepoCreateCommand:
        return self._flag("--public")

    def private(self) -> RepoCreateCommand:
        return self._flag("--private")

    def description(self, description: str) -> RepoCreateCommand:
        return self._option("--description", description)

    def homepage(self, url: str) -> RepoCreateCommand:
        return self._option("--homepage", url)

    def with_readme(self) -> RepoCreateCommand:
        """Initialise the repository with a README."""
        return self._flag("--add-readme")


@dataclass(frozen=True, slots=True)
class RepoForkCommand(BoundCommand):
    """``gh repo fork <repo>``"""

    def clone(self) -> RepoForkCommand:
        """Clone the fork after creating it."""
        return self._flag("--clone")


@dataclass(frozen=True, slots=True)
class RepoListCommand(BoundCommand):
    """``gh repo list [owner]``"""

    def owner(self, owner: str) -> RepoListCommand:
        return self._positional(owner)

    def limit(self, limit: int) -> RepoListCommand:
        return self._option("--limit", positive_int("limit", limit))

    def json_fields(self, *fields: str) -> RepoListCommand:
        return self._option("--json", json_fields_token(fields))


@dataclass(frozen=True, slots=True)
class RepoViewCommand(BoundCommand):
    """``gh repo view [repo]``"""

    def web(self) -> RepoViewCommand:
        return self._flag("--web")

    def json_fields(self, *fields: str) -> RepoViewCommand:
        return self._option("--json", json_fields_token(fields))
