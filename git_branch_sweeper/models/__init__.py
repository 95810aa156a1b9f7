"""Data models for git-branch-sweeper."""

from .pull_request import PullRequest, PullRequestSet, PullRequestState
from .repository import RepositoryIdentity
from .sweep import BranchOutcome, DeletionDecision, SweepStats

__all__ = [
    "PullRequest",
    "PullRequestSet",
    "PullRequestState",
    "RepositoryIdentity",
    "BranchOutcome",
    "DeletionDecision",
    "SweepStats",
]
