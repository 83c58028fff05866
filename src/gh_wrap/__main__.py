"""Allow ``python -m gh_wrap`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m gh_wrap`` behaves identically to the ``gh-wrap`` console
script.
"""

from __future__ import annotations

from gh_wrap.cli.app import cli

if __name__ == "__main__":
    cli()
