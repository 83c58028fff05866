"""Per-resource command namespaces (``repo``, ``pr``, ``issue``)."""

from gh_wrap.core.commands.issue import (
    IssueCloseCommand,
    IssueCommands,
    IssueCreateCommand,
    IssueListCommand,
    IssueReopenCommand,
    IssueViewCommand,
)
from gh_wrap.core.commands.pr import (
    PrCheckoutCommand,
    PrCloseCommand,
    PrCommands,
    PrCreateCommand,
    PrListCommand,
    PrMergeCommand,
    PrViewCommand,
)
from gh_wrap.core.commands.repo import (
    RepoCloneCommand,
    RepoCommands,
    RepoCreateCommand,
    RepoForkCommand,
    RepoListCommand,
    RepoViewCommand,
)

__all__: list[str] = [
    "IssueCloseCommand",
    "IssueCommands",
    "IssueCreateCommand",
    "IssueListCommand",
    "IssueReopenCommand",
    "IssueViewCommand",
    "PrCheckoutCommand",
    "PrCloseCommand",
    "PrCommands",
    "PrCreateCommand",
    "PrListCommand",
    "PrMergeCommand",
    "PrViewCommand",
    "RepoCloneCommand",
    "RepoCommands",
    "RepoCreateCommand",
    "RepoForkCommand",
    "RepoListCommand",
    "RepoViewCommand",
]
