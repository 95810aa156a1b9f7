"""Git operations service"""

from typing import List, TYPE_CHECKING, Union

import git

from git_branch_sweeper.exceptions import BranchDeletionError, BranchListingError
from git_branch_sweeper.logging_config import get_logger

if TYPE_CHECKING:
    from git_branch_sweeper.config import Config

logger = get_logger(__name__)


class GitOperations:
    """Service for the local Git operations the sweeper needs."""

    def __init__(self, repo_path: str, config: Union["Config", dict]):
        """Initialize the service.

        Args:
            repo_path: Path inside the git repository (string path, not repo object)
            config: Configuration dictionary or Config object
        """
        self.repo_path = repo_path
        self.config = config
        self.debug_mode = config.get("debug", False)

    def _get_repo(self) -> git.Repo:
        """Open the repository containing repo_path.

        GitPython repos are lightweight - they don't clone, just open the existing repo.
        """
        return git.Repo(self.repo_path, search_parent_directories=True)

    def list_local_branches(self) -> List[str]:
        """Return the raw lines of `git branch --list`.

        Raises:
            BranchListingError: If the repository cannot be opened or git fails
        """
        try:
            repo = self._get_repo()
            output = repo.git.branch("--list", "--no-color")
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise BranchListingError(f"not a git repository: {e}") from e
        except git.exc.GitCommandError as e:
            raise BranchListingError(str(e)) from e

        lines = output.splitlines()
        logger.debug(f"git branch --list returned {len(lines)} lines")
        return lines

    def delete_local_branch(self, branch_name: str) -> None:
        """Force-delete a local branch (`git branch -D`).

        Squash and rebase merges leave the branch's commits unreachable from
        the default branch, so a plain `-d` would refuse.

        Raises:
            BranchDeletionError: If git refuses or the repository cannot be opened
        """
        try:
            repo = self._get_repo()
            repo.delete_head(branch_name, force=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise BranchDeletionError(branch_name, f"not a git repository: {e}") from e
        except git.exc.GitCommandError as e:
            raise BranchDeletionError(branch_name, str(e)) from e

        logger.info(f"Deleted local branch {branch_name}")
