"""GitHub API integration service"""

from typing import Any, Callable, Dict, Iterator, List, Optional, TYPE_CHECKING, Union

import requests
from github import Auth, Github, GithubException

from git_branch_sweeper.constants import DEFAULT_PAGE_SIZE, PULL_REQUESTS_QUERY
from git_branch_sweeper.exceptions import PullRequestFetchError
from git_branch_sweeper.logging_config import get_logger
from git_branch_sweeper.models.pull_request import PullRequest, PullRequestSet

if TYPE_CHECKING:
    from git_branch_sweeper.config import Config

logger = get_logger(__name__)

# Takes GraphQL variables, returns the `pullRequests` connection object
PageQuery = Callable[[Dict[str, Any]], Dict[str, Any]]


class PullRequestPages:
    """Lazy, restartable sequence of pull request pages for one head branch.

    Every iteration starts from the first page. Iteration ends when a page
    comes back without nodes or the server reports no further page.
    """

    def __init__(
        self,
        query_page: PageQuery,
        owner: str,
        repo: str,
        branch: str,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self.query_page = query_page
        self.owner = owner
        self.repo = repo
        self.branch = branch
        self.page_size = page_size

    def __iter__(self) -> Iterator[List[PullRequest]]:
        variables: Dict[str, Any] = {
            "repositoryOwner": self.owner,
            "repositoryName": self.repo,
            "branchName": self.branch,
            "pageSize": self.page_size,
            "cursor": None,  # null cursor requests the first page
        }
        while True:
            connection = self.query_page(dict(variables))
            nodes = connection.get("nodes") or []
            if not nodes:
                return

            yield [PullRequest.from_node(node) for node in nodes]

            page_info = connection.get("pageInfo") or {}
            if not page_info.get("hasNextPage"):
                return
            variables["cursor"] = page_info.get("endCursor")


class GitHubService:
    """Fetches pull request state from the GitHub GraphQL API."""

    def __init__(self, config: Union["Config", dict]):
        """Initialize the service.

        Note: setup_github_api must be called with a token before fetching.
        """
        self.config = config
        self.debug_mode = config.get("debug", False)
        self.page_size = config.get("page_size", DEFAULT_PAGE_SIZE)
        self.github: Optional[Github] = None

    def setup_github_api(self, token: str) -> None:
        """Create the authenticated API client."""
        self.github = Github(auth=Auth.Token(token))
        logger.debug("[GitHub] API client created")

    def _query_page(self, variables: Dict[str, Any]) -> Dict[str, Any]:
        """Run one page of the pull request query."""
        assert self.github is not None, "setup_github_api must be called first"

        logger.debug(
            f"[GitHub] Querying pull requests for {variables['branchName']} "
            f"(cursor={variables['cursor']})"
        )
        _, data = self.github.requester.graphql_query(PULL_REQUESTS_QUERY, variables)

        repository = (data.get("data") or {}).get("repository")
        if repository is None:
            raise PullRequestFetchError(
                variables["branchName"],
                f"repository {variables['repositoryOwner']}/{variables['repositoryName']} not found",
            )
        return repository["pullRequests"]

    def iter_pull_request_pages(self, owner: str, repo: str, branch: str) -> PullRequestPages:
        """Pages of pull requests whose head branch is `branch`."""
        return PullRequestPages(self._query_page, owner, repo, branch, self.page_size)

    def fetch_pull_requests(self, owner: str, repo: str, branch: str) -> PullRequestSet:
        """Fetch every pull request whose head branch is `branch`.

        Returns:
            The accumulated pull requests; empty when the branch has none

        Raises:
            PullRequestFetchError: On any transport, API or payload error
        """
        try:
            pull_requests = [
                pr for page in self.iter_pull_request_pages(owner, repo, branch) for pr in page
            ]
        except PullRequestFetchError:
            raise
        except GithubException as e:
            raise PullRequestFetchError(branch, f"GitHub returned {e.status}: {e.data}") from e
        except requests.exceptions.RequestException as e:
            raise PullRequestFetchError(branch, f"network error: {e}") from e
        except (KeyError, TypeError, ValueError) as e:
            raise PullRequestFetchError(branch, f"unexpected response payload: {e!r}") from e

        logger.debug(f"[GitHub] Branch {branch} has {len(pull_requests)} pull request(s)")
        return PullRequestSet(pull_requests)

    def close(self) -> None:
        """Close the GitHub API connection to clean up resources."""
        if self.github:
            try:
                self.github.close()
                logger.debug("[GitHub] Closed GitHub API connection")
            except Exception as e:
                logger.debug(f"[GitHub] Error closing GitHub API connection: {e}")
            self.github = None
