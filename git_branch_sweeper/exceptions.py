"""Custom exceptions for git-branch-sweeper"""

from typing import Optional


class GitBranchSweeperError(Exception):
    """Base exception for all git-branch-sweeper errors."""
    pass


class GitOperationError(GitBranchSweeperError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, branch: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.branch = branch
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if branch:
            error_msg += f" for branch '{branch}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class GitHubAPIError(GitBranchSweeperError):
    """Exception raised for errors in GitHub API operations."""

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation
        self.message = message

        error_msg = f"GitHub API operation '{operation}' failed"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class GhCliError(GitBranchSweeperError):
    """Exception raised when a `gh` CLI invocation fails."""

    def __init__(self, command: str, message: Optional[str] = None):
        self.command = command
        self.message = message

        error_msg = f"gh command '{command}' failed"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class BranchListingError(GitOperationError):
    """Exception raised when local branches cannot be listed."""

    def __init__(self, message: Optional[str] = None):
        super().__init__("list_branches", message=message)


class BranchDeletionError(GitOperationError):
    """Exception raised when a local branch cannot be deleted."""

    def __init__(self, branch: str, message: Optional[str] = None):
        super().__init__("delete_branch", branch, message)


class PullRequestFetchError(GitHubAPIError):
    """Exception raised when pull requests for a branch cannot be fetched."""

    def __init__(self, branch: str, message: Optional[str] = None):
        self.branch = branch
        detail = f"branch '{branch}'"
        if message:
            detail += f": {message}"
        super().__init__("fetch_pull_requests", detail)


class TokenRetrievalError(GhCliError):
    """Exception raised when no access token can be obtained from gh."""

    def __init__(self, message: Optional[str] = None):
        super().__init__("auth token", message)


class RepoResolutionError(GhCliError):
    """Exception raised when the current GitHub repository cannot be resolved."""

    def __init__(self, message: Optional[str] = None):
        super().__init__("repo view", message)
