"""Tests for the client facade (client.py)."""

from __future__ import annotations

import sys
from unittest.mock import patch

import pytest

from gh_wrap.client import GhClient, GhClientBuilder
from gh_wrap.core.commands import IssueCommands, PrCommands, RepoCommands
from gh_wrap.core.models import ExecutorConfig
from gh_wrap.exceptions import GhError, GhNotFoundError, InvalidCommandError
from gh_wrap.infra.gh_executor import GhExecutor


class TestConstruction:
    def test_default_client(self) -> None:
        client = GhClient()
        assert client.executor.config == ExecutorConfig()

    def test_builder_custom_path(self) -> None:
        client = GhClient.builder().gh_path("/usr/local/bin/gh").build()
        assert client.executor.gh_path == "/usr/local/bin/gh"

    def test_builder_encoding(self) -> None:
        client = GhClient.builder().encoding("latin-1").build()
        assert client.executor.config.encoding == "latin-1"
        assert client.executor.gh_path == "gh"

    def test_builder_is_immutable(self) -> None:
        base = GhClient.builder()
        custom = base.gh_path("/opt/gh")
        assert base.config.gh_path == "gh"
        assert custom.config.gh_path == "/opt/gh"
        assert isinstance(custom, GhClientBuilder)

    def test_explicit_executor(self) -> None:
        executor = GhExecutor(ExecutorConfig(gh_path="x"))
        assert GhClient(executor).executor is executor


class TestNamespaces:
    def test_namespace_types(self) -> None:
        client = GhClient()
        assert isinstance(client.repo(), RepoCommands)
        assert isinstance(client.pr(), PrCommands)
        assert isinstance(client.issue(), IssueCommands)

    def test_all_commands_share_one_executor(self) -> None:
        client = GhClient()
        commands = [
            client.repo().list(),
            client.pr().list(),
            client.issue().view(1),
        ]
        assert all(command.runner is client.executor for command in commands)

    def test_end_to_end_through_real_process(self) -> None:
        client = GhClient.builder().gh_path(sys.executable).build()
        assert "Python" in client.check_installation()

    @patch.object(GhExecutor, "run", return_value="#1  Fix bug\n")
    def test_execute_routes_through_executor(self, mock_run: object) -> None:
        client = GhClient()
        assert client.pr().list().state("open").limit(5).execute() == "#1  Fix bug\n"
        mock_run.assert_called_once_with(  # type: ignore[attr-defined]
            ["pr", "list", "--state", "open", "--limit", "5"],
        )


class TestCheckInstallation:
    def test_missing_binary(self) -> None:
        client = GhClient.builder().gh_path("/nonexistent/gh").build()
        with pytest.raises(GhNotFoundError):
            client.check_installation()

    def test_unknown_encoding_rejected_by_builder(self) -> None:
        builder = GhClient.builder().gh_path(sys.executable)
        with pytest.raises(InvalidCommandError, match="no-such-codec") as exc_info:
            builder.encoding("no-such-codec")
        assert isinstance(exc_info.value.__cause__, LookupError)

    def test_unknown_encoding_through_explicit_executor(self) -> None:
        executor = GhExecutor(
            ExecutorConfig(gh_path=sys.executable, encoding="no-such-codec"),
        )
        with pytest.raises(GhError):
            GhClient(executor).check_installation()
