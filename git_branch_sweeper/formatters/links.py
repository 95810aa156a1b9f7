"""GitHub link formatting utilities."""

from typing import Sequence

from git_branch_sweeper.constants import GITHUB_WEB_URL


def format_pr_url(owner: str, repo: str, number: int) -> str:
    """
    Build the web URL of a pull request.

    Args:
        owner: Repository owner login
        repo: Repository name
        number: Pull request number

    Returns:
        URL such as https://github.com/acme/widgets/pull/42
    """
    return f"{GITHUB_WEB_URL}/{owner}/{repo}/pull/{number}"


def format_pr_urls(urls: Sequence[str]) -> str:
    """Join pull request URLs for a single report line."""
    return ", ".join(urls)
