"""Tests for domain models (core/models.py).

All models are frozen dataclasses — these tests verify defaults,
immutability, and the small derived properties.
"""

from __future__ import annotations

import pytest

from gh_wrap.core.models import (
    DEFAULT_ENCODING,
    DEFAULT_GH_PATH,
    UNKNOWN_EXIT_CODE,
    ExecutionOutcome,
    ExecutorConfig,
)


# ---------------------------------------------------------------------------
# ExecutorConfig
# ---------------------------------------------------------------------------

class TestExecutorConfig:
    def test_defaults(self) -> None:
        config = ExecutorConfig()
        assert config.gh_path == DEFAULT_GH_PATH == "gh"
        assert config.encoding == DEFAULT_ENCODING == "utf-8"

    def test_custom_path(self) -> None:
        assert ExecutorConfig(gh_path="/custom/path/gh").gh_path == "/custom/path/gh"

    def test_frozen(self) -> None:
        config = ExecutorConfig()
        with pytest.raises(AttributeError):
            config.gh_path = "other"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert ExecutorConfig(gh_path="a") == ExecutorConfig(gh_path="a")
        assert ExecutorConfig(gh_path="a") != ExecutorConfig(gh_path="b")


# ---------------------------------------------------------------------------
# ExecutionOutcome
# ---------------------------------------------------------------------------

class TestExecutionOutcome:
    def test_zero_exit_succeeded(self) -> None:
        assert ExecutionOutcome(exit_code=0, stdout=b"", stderr=b"").succeeded

    @pytest.mark.parametrize("code", [1, 2, 127, UNKNOWN_EXIT_CODE])
    def test_non_zero_exit_failed(self, code: int) -> None:
        assert not ExecutionOutcome(exit_code=code, stdout=b"", stderr=b"").succeeded

    def test_stderr_text_is_lenient(self) -> None:
        outcome = ExecutionOutcome(exit_code=1, stdout=b"", stderr=b"bad \xff byte")
        assert outcome.stderr_text == "bad � byte"

    def test_frozen(self) -> None:
        outcome = ExecutionOutcome(exit_code=0, stdout=b"", stderr=b"")
        with pytest.raises(AttributeError):
            outcome.exit_code = 1  # type: ignore[misc]


class TestNormaliseExitCode:
    @pytest.mark.parametrize("code", [0, 1, 4, 255])
    def test_real_codes_pass_through(self, code: int) -> None:
        assert ExecutionOutcome.normalise_exit_code(code) == code

    @pytest.mark.parametrize("code", [-9, -15, None])
    def test_signal_or_missing_becomes_unknown(self, code: int | None) -> None:
        assert ExecutionOutcome.normalise_exit_code(code) == -1
