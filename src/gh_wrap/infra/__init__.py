"""Infrastructure layer — external system integration.

This layer owns every interaction with the gh binary and the operating
system.  Every raw OS or decoding exception is caught here and
re-raised as a :class:`~gh_wrap.exceptions.GhError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from gh_wrap.infra.gh_detector import GhStatus, detect_gh
from gh_wrap.infra.gh_executor import GhExecutor

__all__: list[str] = [
    "GhExecutor",
    "GhStatus",
    "detect_gh",
]
