"""subprocess-backed implementation of :class:`~gh_wrap.core.protocols.CommandRunner`.

This module is the **only** place in the codebase that spawns the gh
binary.  All ``OSError``, ``UnicodeDecodeError`` and JSON errors are
caught here and re-raised as typed
:class:`~gh_wrap.exceptions.GhError` subclasses — nothing raw escapes
the infrastructure boundary.

Every call is one synchronous, blocking subprocess run: an explicit
argv (never a shell), stdin closed, stdout and stderr buffered in full
until the process exits.  There is no timeout; a hung gh hangs the
caller.
"""

from __future__ import annotations

import json
import logging
import shlex
import subprocess
from collections.abc import Sequence
from typing import Any

from gh_wrap.core.models import ExecutionOutcome, ExecutorConfig
from gh_wrap.exceptions import (
    CommandFailedError,
    DecodingError,
    ExecutionFailedError,
    GhIOError,
    GhNotFoundError,
    InvalidCommandError,
    JsonParseError,
    append_install_suggestion,
)

logger = logging.getLogger(__name__)


class GhExecutor:
    """Concrete :class:`CommandRunner` that shells out to gh.

    Usage::

        executor = GhExecutor(ExecutorConfig(gh_path="/usr/local/bin/gh"))
        print(executor.run(["pr", "list", "--limit", "5"]))

    The configuration is frozen, so a single executor can be shared by
    any number of commands and threads.
    """

    def __init__(self, config: ExecutorConfig | None = None) -> None:
        self._config: ExecutorConfig = config if config is not None else ExecutorConfig()

    @property
    def config(self) -> ExecutorConfig:
        return self._config

    @property
    def gh_path(self) -> str:
        return self._config.gh_path

    # ------------------------------------------------------------------
    # Availability probe
    # ------------------------------------------------------------------

    def check_installation(self) -> str:
        """Run ``gh --version`` and return its output.

        Both "could not spawn" and "ran but failed" mean gh is not
        usable, so both raise :class:`GhNotFoundError`.  An unknown
        configured encoding raises :class:`DecodingError`, as in :meth:`run`.
        """
        try:
            outcome = self._spawn(["--version"])
        except (ExecutionFailedError, GhIOError) as exc:
            raise GhNotFoundError(
                f"GitHub CLI not found at {self.gh_path!r}.",
                hint=append_install_suggestion(
                    "Make sure gh is installed and on your PATH, "
                    "or pass an explicit path.",
                ),
            ) from exc

        if not outcome.succeeded:
            raise GhNotFoundError(
                f"{self.gh_path!r} --version exited with code {outcome.exit_code}.",
                hint=outcome.stderr_text.strip() or None,
            )
        return self._decode_stdout(outcome.stdout, errors="replace")

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def run(self, args: Sequence[str]) -> str:
        """Run gh with *args* and return stdout as text.

        Raises
        ------
        InvalidCommandError
            If *args* is a bare string or any token is not a ``str``.
        ExecutionFailedError
            If the binary is missing or not executable.
        GhIOError
            For any other OS-level failure while spawning or reading.
        CommandFailedError
            If gh exits with a non-zero status.
        DecodingError
            If stdout is not valid in the configured encoding.
        """
        outcome = self._spawn(args)
        if not outcome.succeeded:
            raise CommandFailedError(outcome.exit_code, outcome.stderr_text)
        return self._decode_stdout(outcome.stdout)

    def run_json(self, args: Sequence[str]) -> Any:
        """Run gh with *args* and parse stdout as JSON.

        Raises
        ------
        JsonParseError
            If stdout is not a valid JSON document.
        """
        text = self.run(args)
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise JsonParseError(
                f"Failed to parse JSON output: {exc}",
                hint="Did the command include --json?",
            ) from exc

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _spawn(self, args: Sequence[str]) -> ExecutionOutcome:
        """Spawn gh once and collect its raw outcome."""
        if isinstance(args, (str, bytes)):
            raise InvalidCommandError(
                f"Command arguments must be a sequence of tokens, got {args!r}.",
                hint='e.g. ["pr", "list"] rather than "pr list"',
            )
        tokens = list(args)
        bad = [token for token in tokens if not isinstance(token, str)]
        if bad:
            raise InvalidCommandError(
                f"Command arguments must be strings, got {bad!r}.",
            )

        argv = [self._config.gh_path, *tokens]
        logger.debug("Running gh command: %s", shlex.join(argv))

        try:
            completed = subprocess.run(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=False,
            )
        except (FileNotFoundError, PermissionError, NotADirectoryError) as exc:
            raise ExecutionFailedError(
                f"Could not execute {self._config.gh_path!r}: {exc}",
                hint=append_install_suggestion(
                    "Check that gh is installed and executable.",
                ),
            ) from exc
        except OSError as exc:
            raise GhIOError(f"I/O error while running gh: {exc}") from exc

        outcome = ExecutionOutcome(
            exit_code=ExecutionOutcome.normalise_exit_code(completed.returncode),
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
        logger.debug("gh exited with code %d", outcome.exit_code)
        return outcome

    def _decode_stdout(self, stdout: bytes, errors: str = "strict") -> str:
        try:
            return stdout.decode(self._config.encoding, errors)
        except UnicodeDecodeError as exc:
            raise DecodingError(
                f"gh output is not valid {self._config.encoding}: {exc}",
            ) from exc
        except LookupError as exc:
            raise DecodingError(
                f"Unknown output encoding {self._config.encoding!r}.",
            ) from exc
