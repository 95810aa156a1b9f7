"""Core functionality for git-branch-sweeper"""

from typing import Optional, Union

from git_branch_sweeper.config import Config
from git_branch_sweeper.exceptions import BranchDeletionError
from git_branch_sweeper.logging_config import get_logger
from git_branch_sweeper.models.repository import RepositoryIdentity
from git_branch_sweeper.models.sweep import BranchOutcome, SweepStats
from git_branch_sweeper.services.deletion_decision_service import DeletionDecisionService
from git_branch_sweeper.services.display_service import DisplayService
from git_branch_sweeper.services.gh_cli import GhCliService
from git_branch_sweeper.services.git import GitHubService, GitOperations, sanitize_branches

logger = get_logger(__name__)


class BranchSweeper:
    """Deletes local branches whose pull requests no longer need them."""

    def __init__(
        self,
        repo_path: str,
        config: Union[Config, dict],
        git_service: Optional[GitOperations] = None,
        gh_cli: Optional[GhCliService] = None,
        github_service: Optional[GitHubService] = None,
        display_service: Optional[DisplayService] = None,
    ):
        """Initialize BranchSweeper.

        Args:
            repo_path: Path inside the git repository
            config: Configuration dict or Config object
            git_service: Local git access (defaults to GitOperations)
            gh_cli: gh CLI access (defaults to GhCliService)
            github_service: Pull request source (defaults to GitHubService)
            display_service: User-facing output (defaults to DisplayService)
        """
        self.repo_path = repo_path
        if isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config
        self.safe_mode = self.config.safe
        self.force_mode = self.config.force

        self.git_service = git_service or GitOperations(self.repo_path, self.config)
        self.gh_cli = gh_cli or GhCliService(self.repo_path)
        self.github_service = github_service or GitHubService(self.config)
        self.display_service = display_service or DisplayService(
            verbose=self.config.verbose, debug=self.config.debug
        )

        self.repository: Optional[RepositoryIdentity] = None
        self.stats = SweepStats()

    def run(self) -> SweepStats:
        """Sweep every local branch once, in listing order.

        Raises:
            TokenRetrievalError, RepoResolutionError, BranchListingError,
            PullRequestFetchError: Fatal; the sweep stops at the first one
        """
        token = self.gh_cli.get_auth_token()
        self.github_service.setup_github_api(token)
        try:
            self.repository = self.gh_cli.get_repository()

            raw_branches = self.git_service.list_local_branches()
            branches = sanitize_branches(raw_branches, self.repository.default_branch)
            logger.info(f"Checking {len(branches)} branches in {self.repository.full_name}")

            for branch in branches:
                self.process_branch(branch)
        finally:
            self.github_service.close()

        self.display_service.print_summary(self.stats, self.safe_mode)
        return self.stats

    def process_branch(self, branch: str) -> BranchOutcome:
        """Fetch, decide and act on a single branch.

        Raises:
            PullRequestFetchError: If the branch's pull requests cannot be fetched
        """
        assert self.repository is not None, "repository must be resolved first"
        owner, name = self.repository.owner, self.repository.name

        pull_requests = self.github_service.fetch_pull_requests(owner, name, branch)
        if not pull_requests:
            self.display_service.print_no_pull_requests(branch)
            self.stats.skipped_no_prs += 1
            return BranchOutcome.NO_PULL_REQUESTS

        decision = DeletionDecisionService.decide(pull_requests, self.force_mode)
        logger.debug(f"Decision for {branch}: {decision}")

        if decision.can_delete:
            if decision.forced:
                self.display_service.print_forced_deletion(branch)
            return self.delete_branch(branch)

        if decision.blocked_by_open:
            self.display_service.print_open_pull_requests(
                branch, pull_requests.unmerged_urls(owner, name)
            )
            self.stats.blocked_open += 1
        if decision.blocked_by_closed:
            self.display_service.print_closed_pull_requests(
                branch, pull_requests.closed_urls(owner, name)
            )
            self.stats.blocked_closed += 1
        return BranchOutcome.BLOCKED

    def delete_branch(self, branch: str) -> BranchOutcome:
        """Delete a branch, or only announce it in safe mode.

        Deletion failures are reported and never abort the sweep.
        """
        self.display_service.print_deleting(branch)
        if self.safe_mode:
            self.display_service.print_safe_mode_skip()
            self.stats.skipped_safe += 1
            return BranchOutcome.SAFE_MODE_SKIPPED

        try:
            self.git_service.delete_local_branch(branch)
        except BranchDeletionError as e:
            logger.warning(f"Could not delete {branch}: {e}")
            self.display_service.print_deletion_failed(branch, e)
            self.stats.failed += 1
            return BranchOutcome.DELETION_FAILED

        self.display_service.print_deleted(branch)
        self.stats.deleted += 1
        return BranchOutcome.DELETED
