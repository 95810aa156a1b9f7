"""Normalization of `git branch --list` output into deletion candidates."""

from typing import Iterable, List

from git_branch_sweeper.constants import CURRENT_BRANCH_MARKER, WORKTREE_BRANCH_MARKER
from git_branch_sweeper.logging_config import get_logger

logger = get_logger(__name__)


def _strip_marker(line: str) -> str:
    """Remove the current-branch or other-worktree prefix git prints."""
    stripped = line.strip()
    for marker in (CURRENT_BRANCH_MARKER, WORKTREE_BRANCH_MARKER):
        if stripped.startswith(marker):
            return stripped[len(marker):].strip()
    return stripped


def sanitize_branches(raw_lines: Iterable[str], default_branch: str) -> List[str]:
    """
    Turn raw branch listing lines into candidate branch names.

    Args:
        raw_lines: Lines as printed by `git branch --list`
        default_branch: The repository's default branch, never a candidate

    Returns:
        Branch names in listing order, without markers, blanks, the default
        branch or detached-HEAD pseudo entries
    """
    branches: List[str] = []
    for line in raw_lines:
        branch = _strip_marker(line)
        if not branch or branch == default_branch:
            continue
        if branch.startswith("(") and branch.endswith(")"):
            # e.g. "(HEAD detached at 1a2b3c4)"
            logger.debug(f"Ignoring pseudo branch entry: {branch}")
            continue
        branches.append(branch)

    logger.debug(f"Found {len(branches)} candidate branches (default: {default_branch})")
    return branches
