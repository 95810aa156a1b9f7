"""Formatting utilities for git-branch-sweeper."""

from .links import format_pr_url, format_pr_urls

__all__ = [
    "format_pr_url",
    "format_pr_urls",
]
