"""Immutable argument-sequence builder.

An :class:`ArgumentBuilder` accumulates the ordered tokens of one gh
invocation.  Every configuration call returns a **new** builder, so a
builder value can be shared or branched without any holder observing
another's changes.

Rules
-----
* Token order is exactly call order; the subcommand path always leads.
* Values pass through verbatim.  No shell escaping is done because the
  executor never goes through a shell.
* No per-subcommand grammar checks — legality of flag combinations is
  left to the calling layer (or to gh itself).
"""

from __future__ import annotations

from dataclasses import dataclass

from gh_wrap.exceptions import InvalidCommandError


@dataclass(frozen=True, slots=True)
class ArgumentBuilder:
    """Fluent accumulator for one gh argument sequence.

    Usage::

        args = (
            ArgumentBuilder.start("pr", "list")
            .with_option("--state", "open")
            .with_option("--limit", "5")
            .build()
        )
        # ["pr", "list", "--state", "open", "--limit", "5"]
    """

    tokens: tuple[str, ...]

    def __post_init__(self) -> None:
        # Direct construction gets the same guarantees as ``start()``.
        object.__setattr__(self, "tokens", tuple(self.tokens))
        if not self.tokens:
            raise InvalidCommandError(
                "A command needs at least one subcommand token.",
                hint='e.g. ArgumentBuilder.start("repo", "list")',
            )

    @classmethod
    def start(cls, *subcommand_path: str) -> ArgumentBuilder:
        """Begin a sequence whose leading tokens are *subcommand_path*.

        Raises
        ------
        InvalidCommandError
            If no subcommand token is given.
        """
        return cls(tokens=subcommand_path)

    # ------------------------------------------------------------------
    # Configuration calls
    # ------------------------------------------------------------------

    def with_flag(self, name: str) -> ArgumentBuilder:
        """Append a boolean flag such as ``--web``."""
        return ArgumentBuilder(tokens=(*self.tokens, name))

    def with_option(self, name: str, value: str) -> ArgumentBuilder:
        """Append *name* followed by *value*, e.g. ``--repo owner/name``."""
        return ArgumentBuilder(tokens=(*self.tokens, name, value))

    def with_positional(self, value: str) -> ArgumentBuilder:
        """Append a bare token."""
        return ArgumentBuilder(tokens=(*self.tokens, value))

    def with_positionals(self, *values: str) -> ArgumentBuilder:
        return ArgumentBuilder(tokens=(*self.tokens, *values))

    # ------------------------------------------------------------------
    # Terminal operation
    # ------------------------------------------------------------------

    def build(self) -> list[str]:
        """Return the finished token list.

        Each call hands out a fresh list; mutating it does not affect
        the builder.
        """
        return list(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)
