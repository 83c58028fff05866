"""CLI console and logging helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``, ``doctor``)
remain functional even when Rich is not installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

LOG_FORMAT: str = "%(levelname)s %(name)s: %(message)s"
_HANDLER_NAME: str = "gh_wrap.cli"


def get_rich_console() -> Any | None:
	"""Create a Rich console targeting stderr, or ``None`` without Rich."""
	try:
		from rich.console import Console
	except ModuleNotFoundError:
		return None
	return Console(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		rich_console = get_rich_console()
		if rich_console is None:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()


def escape(text: str) -> str:
	"""Escape Rich markup in *text*; identity when Rich is missing."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


def configure_logging(verbose: bool = False) -> logging.Handler:
	"""Attach one stderr handler to the ``gh_wrap`` logger.

	Uses ``rich.logging.RichHandler`` when Rich is importable, a plain
	``StreamHandler`` otherwise.  A second call replaces the handler
	installed by the first.
	"""
	handler: logging.Handler
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter(LOG_FORMAT))
	else:
		handler = RichHandler(
			console=get_rich_console(),
			show_path=False,
			markup=False,
		)
		handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

	handler.set_name(_HANDLER_NAME)
	package_logger = logging.getLogger("gh_wrap")
	for existing in list(package_logger.handlers):
		if existing.get_name() == _HANDLER_NAME:
			package_logger.removeHandler(existing)
	package_logger.addHandler(handler)
	package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
	return handler
