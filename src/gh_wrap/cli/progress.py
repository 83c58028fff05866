"""Rich spinner shown on stderr while a blocking gh call runs.

gh output is buffered until the process exits, so there is no real
progress to report — only a "still working" indicator.  The spinner is
transient and written to stderr, leaving stdout clean for gh's output.

Design
------
* :class:`RichSpinner` wraps :meth:`rich.console.Console.status`.
* Without Rich (or when stderr is not a terminal) it degrades to a no-op.
* ``start``/``stop`` are idempotent.
"""

from __future__ import annotations

from typing import Any

from gh_wrap.cli.console import get_rich_console


class RichSpinner:
    """Context manager displaying *message* next to a spinner.

    Usage::

        with RichSpinner("Listing pull requests"):
            output = command.execute()
    """

    def __init__(self, message: str) -> None:
        self._message: str = message
        self._status: Any = None
        self._started: bool = False

        rich_console = get_rich_console()
        if rich_console is not None and rich_console.is_terminal:
            self._status = rich_console.status(
                f"[bold blue]{message}…[/bold blue]",
                spinner="dots",
            )

    @property
    def enabled(self) -> bool:
        return self._status is not None

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> RichSpinner:
        self.start()
        return self

    def __exit__(self, *_args: object) -> None:
        self.stop()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        if self._status is not None and not self._started:
            self._status.start()
            self._started = True

    def stop(self) -> None:
        """Stop the spinner (idempotent)."""
        if self._started:
            self._status.stop()
            self._started = False
