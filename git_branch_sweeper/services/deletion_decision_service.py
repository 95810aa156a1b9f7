"""Deletion policy for branches based on their pull requests."""

from git_branch_sweeper.models.pull_request import PullRequestSet
from git_branch_sweeper.models.sweep import DeletionDecision


class DeletionDecisionService:
    """Decides whether a branch may be deleted."""

    @staticmethod
    def decide(pull_requests: PullRequestSet, force: bool = False) -> DeletionDecision:
        """
        Apply the deletion rule to a branch's pull requests.

        A branch is deletable once every pull request from it is merged
        (`merged` wins over `state`). With force, a branch whose pull requests
        include a closed one and none are open is deletable as well.

        Args:
            pull_requests: Every pull request whose head is the branch
            force: Allow deleting branches with closed, unmerged pull requests

        Returns:
            The decision, with the blocking reasons set when not deletable
        """
        all_merged = pull_requests.all_merged
        any_closed = pull_requests.any_closed
        none_open = pull_requests.none_open

        can_delete = all_merged or (any_closed and none_open and force)
        if can_delete:
            return DeletionDecision(can_delete=True, forced=not all_merged)

        return DeletionDecision(
            can_delete=False,
            blocked_by_open=not none_open,
            blocked_by_closed=any_closed,
        )

    @staticmethod
    def can_delete(pull_requests: PullRequestSet, force: bool = False) -> bool:
        """Shortcut for ``decide(...).can_delete``."""
        return DeletionDecisionService.decide(pull_requests, force).can_delete
