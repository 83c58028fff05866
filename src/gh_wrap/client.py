"""Client facade — the entry point for library users.

A :class:`GhClient` owns one :class:`~gh_wrap.infra.gh_executor.GhExecutor`
and hands it to every command namespace it creates, so all commands of
one client share the same read-only configuration.

Usage::

    client = GhClient()
    print(client.pr().list().state("open").limit(10).execute())

    custom = GhClient.builder().gh_path("/usr/local/bin/gh").build()
"""

from __future__ import annotations

import codecs
import dataclasses
from dataclasses import dataclass

from gh_wrap.core.commands import IssueCommands, PrCommands, RepoCommands
from gh_wrap.core.models import ExecutorConfig
from gh_wrap.exceptions import InvalidCommandError
from gh_wrap.infra.gh_executor import GhExecutor


class GhClient:
    """Entry point for all gh operations."""

    def __init__(self, executor: GhExecutor | None = None) -> None:
        self._executor: GhExecutor = executor if executor is not None else GhExecutor()

    @staticmethod
    def builder() -> GhClientBuilder:
        return GhClientBuilder()

    @property
    def executor(self) -> GhExecutor:
        return self._executor

    def check_installation(self) -> str:
        """Return ``gh --version`` output or raise :class:`GhNotFoundError`."""
        return self._executor.check_installation()

    def repo(self) -> RepoCommands:
        return RepoCommands(self._executor)

    def pr(self) -> PrCommands:
        return PrCommands(self._executor)

    def issue(self) -> IssueCommands:
        return IssueCommands(self._executor)


@dataclass(frozen=True, slots=True)
class GhClientBuilder:
    """Fluent configuration for :class:`GhClient`.

    Each call returns a new builder; :meth:`build` freezes the result
    into an :class:`ExecutorConfig`.
    """

    config: ExecutorConfig = ExecutorConfig()

    def gh_path(self, path: str) -> GhClientBuilder:
        """Use *path* instead of resolving ``gh`` through ``PATH``."""
        return GhClientBuilder(dataclasses.replace(self.config, gh_path=path))

    def encoding(self, encoding: str) -> GhClientBuilder:
        """Decode gh's standard output with *encoding*.

        Raises
        ------
        InvalidCommandError
            If *encoding* is not a codec Python knows.
        """
        try:
            codecs.lookup(encoding)
        except LookupError as exc:
            raise InvalidCommandError(
                f"Unknown output encoding {encoding!r}.",
                hint='e.g. "utf-8" or "latin-1"',
            ) from exc
        return GhClientBuilder(dataclasses.replace(self.config, encoding=encoding))

    def build(self) -> GhClient:
        return GhClient(GhExecutor(self.config))
