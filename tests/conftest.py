"""Shared pytest fixtures and configuration for the gh-wrap test suite.

Guidelines
----------
* No internet access and no real ``gh`` binary in any test.
* Process-level tests spawn the running Python interpreter in place of
  gh, so exit codes and stream capture are exercised for real.
* Everything else mocks at the ``subprocess.run`` boundary.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator

import pytest

from gh_wrap.core.models import ExecutorConfig
from gh_wrap.infra.gh_executor import GhExecutor

MISSING_BINARY: str = "/nonexistent/path/to/gh"


@pytest.fixture
def python_executor() -> GhExecutor:
    """Executor whose "gh" is the current Python interpreter."""
    return GhExecutor(ExecutorConfig(gh_path=sys.executable))


@pytest.fixture
def missing_executor() -> GhExecutor:
    """Executor pointing at a binary that does not exist."""
    return GhExecutor(ExecutorConfig(gh_path=MISSING_BINARY))


@pytest.fixture(autouse=True)
def _reset_cli_logging() -> Iterator[None]:
    """Drop handlers installed by ``configure_logging`` between tests."""
    yield
    package_logger = logging.getLogger("gh_wrap")
    for handler in list(package_logger.handlers):
        if handler.get_name() == "gh_wrap.cli":
            package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
