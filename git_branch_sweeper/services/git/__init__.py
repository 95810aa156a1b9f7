"""Git-related services for git-branch-sweeper."""

from .operations import GitOperations
from .github import GitHubService, PullRequestPages
from .branch_queries import sanitize_branches

__all__ = [
    "GitOperations",
    "GitHubService",
    "PullRequestPages",
    "sanitize_branches",
]
