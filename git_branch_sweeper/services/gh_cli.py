"""Access to the GitHub CLI (`gh`) for authentication and repository identity."""

import json
import subprocess
from typing import List

from git_branch_sweeper.exceptions import RepoResolutionError, TokenRetrievalError
from git_branch_sweeper.logging_config import get_logger
from git_branch_sweeper.models.repository import RepositoryIdentity

logger = get_logger(__name__)


def _describe_failure(error: subprocess.CalledProcessError) -> str:
    """Pick the most useful text out of a failed gh invocation."""
    stderr = (error.stderr or "").strip()
    stdout = (error.stdout or "").strip()
    return stderr or stdout or f"exit status {error.returncode}"


class GhCliService:
    """Runs `gh` commands on behalf of the sweeper.

    Each command runs exactly once; its exit status decides success.
    """

    def __init__(self, repo_path: str):
        self.repo_path = repo_path

    def _run(self, args: List[str]) -> str:
        """Run `gh` with args and return stdout.

        Raises:
            FileNotFoundError: If gh is not installed
            subprocess.CalledProcessError: If gh exits non-zero
        """
        cmd = ["gh", *args]
        logger.debug(f"$ {' '.join(cmd)}")
        result = subprocess.run(
            cmd,
            cwd=self.repo_path,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout

    def get_auth_token(self) -> str:
        """Return the access token gh is logged in with.

        Raises:
            TokenRetrievalError: If gh is missing, not logged in or prints nothing
        """
        try:
            output = self._run(["auth", "token"])
        except FileNotFoundError as e:
            raise TokenRetrievalError("gh CLI not found in PATH") from e
        except subprocess.CalledProcessError as e:
            raise TokenRetrievalError(_describe_failure(e)) from e

        token = output.strip()
        if not token:
            raise TokenRetrievalError("gh returned an empty token")
        return token

    def get_repository(self) -> RepositoryIdentity:
        """Resolve owner, name and default branch of the current repository.

        Raises:
            RepoResolutionError: If gh fails or its JSON is not usable
        """
        try:
            output = self._run(["repo", "view", "--json", "owner,name,defaultBranchRef"])
        except FileNotFoundError as e:
            raise RepoResolutionError("gh CLI not found in PATH") from e
        except subprocess.CalledProcessError as e:
            raise RepoResolutionError(_describe_failure(e)) from e

        try:
            payload = json.loads(output)
        except json.JSONDecodeError as e:
            raise RepoResolutionError(f"gh printed invalid JSON: {e}") from e

        try:
            repository = RepositoryIdentity.from_gh_json(payload)
        except ValueError as e:
            raise RepoResolutionError(str(e)) from e

        logger.info(
            f"Repository {repository.full_name} (default branch: {repository.default_branch})"
        )
        return repository
