"""Tests for the argument builder (core/arguments.py).

Coverage:
* Subcommand path leads, tokens follow call order.
* Token counts per configuration call.
* Functional updates — earlier builders never change.
* ``build()`` is side-effect free.
* ``start()`` precondition.
"""

from __future__ import annotations

import pytest

from gh_wrap.core.arguments import ArgumentBuilder
from gh_wrap.exceptions import InvalidCommandError


class TestOrdering:
    def test_pr_list_example(self) -> None:
        tokens = (
            ArgumentBuilder.start("pr", "list")
            .with_option("--state", "open")
            .with_option("--limit", "5")
            .build()
        )
        assert tokens == ["pr", "list", "--state", "open", "--limit", "5"]

    def test_call_order_is_preserved(self) -> None:
        tokens = (
            ArgumentBuilder.start("repo", "create")
            .with_positional("my-repo")
            .with_flag("--public")
            .with_option("--description", "demo")
            .with_flag("--add-readme")
            .build()
        )
        assert tokens == [
            "repo", "create", "my-repo", "--public",
            "--description", "demo", "--add-readme",
        ]

    def test_reordered_calls_give_reordered_tokens(self) -> None:
        base = ArgumentBuilder.start("pr", "list")
        a = base.with_flag("--web").with_option("--limit", "1").build()
        b = base.with_option("--limit", "1").with_flag("--web").build()
        assert a != b
        assert sorted(a) == sorted(b)

    def test_path_always_first(self) -> None:
        tokens = ArgumentBuilder.start("issue", "view").with_flag("--web").build()
        assert tokens[:2] == ["issue", "view"]

    def test_with_positionals_appends_in_order(self) -> None:
        tokens = ArgumentBuilder.start("api").with_positionals("a", "b", "c").build()
        assert tokens == ["api", "a", "b", "c"]


class TestTokenCounts:
    @pytest.mark.parametrize("name", ["--web", "--draft", "-d"])
    def test_flag_adds_one_token(self, name: str) -> None:
        base = ArgumentBuilder.start("pr", "create")
        assert len(base.with_flag(name)) == len(base) + 1

    @pytest.mark.parametrize(
        ("name", "value"),
        [("--title", "Fix bug"), ("--body", "line 1\nline 2"), ("--limit", "10")],
    )
    def test_option_adds_name_then_value(self, name: str, value: str) -> None:
        base = ArgumentBuilder.start("pr", "create")
        tokens = base.with_option(name, value).build()
        assert len(tokens) == len(base) + 2
        assert tokens[-2:] == [name, value]

    def test_positional_adds_one_token(self) -> None:
        base = ArgumentBuilder.start("repo", "clone")
        assert base.with_positional("cli/cli").build() == ["repo", "clone", "cli/cli"]


class TestVerbatimValues:
    def test_shell_metacharacters_untouched(self) -> None:
        value = "$(rm -rf /); `echo hi` && 'quoted' \"double\""
        tokens = ArgumentBuilder.start("issue", "create").with_option("--body", value).build()
        assert tokens[-1] == value

    def test_empty_value_kept(self) -> None:
        tokens = ArgumentBuilder.start("issue", "create").with_option("--body", "").build()
        assert tokens == ["issue", "create", "--body", ""]


class TestImmutability:
    def test_configuration_returns_new_builder(self) -> None:
        base = ArgumentBuilder.start("pr", "list")
        extended = base.with_flag("--web")
        assert base.build() == ["pr", "list"]
        assert extended.build() == ["pr", "list", "--web"]

    def test_branches_do_not_alias(self) -> None:
        base = ArgumentBuilder.start("pr", "list")
        left = base.with_option("--state", "open")
        right = base.with_option("--state", "closed")
        assert left.build()[-1] == "open"
        assert right.build()[-1] == "closed"

    def test_frozen(self) -> None:
        builder = ArgumentBuilder.start("pr", "list")
        with pytest.raises(AttributeError):
            builder.tokens = ("x",)  # type: ignore[misc]


class TestBuild:
    def test_build_is_idempotent(self) -> None:
        builder = ArgumentBuilder.start("repo", "list")
        assert builder.build() == ["repo", "list"]
        assert builder.build() == ["repo", "list"]
        assert builder.build() == ["repo", "list"]

    def test_mutating_result_does_not_affect_builder(self) -> None:
        builder = ArgumentBuilder.start("repo", "list")
        tokens = builder.build()
        tokens.append("--limit")
        assert builder.build() == ["repo", "list"]


class TestStart:
    def test_empty_path_rejected(self) -> None:
        with pytest.raises(InvalidCommandError, match="subcommand"):
            ArgumentBuilder.start()

    def test_single_token_path(self) -> None:
        assert ArgumentBuilder.start("status").build() == ["status"]


class TestDirectConstruction:
    def test_empty_tokens_rejected(self) -> None:
        with pytest.raises(InvalidCommandError, match="subcommand"):
            ArgumentBuilder(tokens=())

    def test_list_is_copied_into_tuple(self) -> None:
        source = ["pr", "list"]
        builder = ArgumentBuilder(tokens=source)  # type: ignore[arg-type]
        source.append("--web")
        assert isinstance(builder.tokens, tuple)
        assert builder.build() == ["pr", "list"]
