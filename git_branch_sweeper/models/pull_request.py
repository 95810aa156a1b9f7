"""Pull request model and related enums"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Tuple

from git_branch_sweeper.formatters.links import format_pr_url


class PullRequestState(Enum):
    """State of a pull request as reported by the GraphQL API."""
    OPEN = "OPEN"
    CLOSED = "CLOSED"
    MERGED = "MERGED"


@dataclass(frozen=True)
class PullRequest:
    """Summary of a single pull request whose head is a local branch."""
    number: int
    merged: bool
    state: PullRequestState

    def __post_init__(self):
        if self.number < 1:
            raise ValueError(f"Pull request number must be positive, got {self.number}")

    @classmethod
    def from_node(cls, node: Dict[str, Any]) -> "PullRequest":
        """Build a PullRequest from a GraphQL ``pullRequests.nodes`` entry.

        Raises:
            KeyError: If a required field is missing
            ValueError: If the state is not a known pull request state
        """
        return cls(
            number=int(node["number"]),
            merged=bool(node["merged"]),
            state=PullRequestState(node["state"]),
        )


class PullRequestSet:
    """Ordered pull requests fetched for one branch.

    An empty set means the branch never had a pull request. A failed fetch
    never produces a set at all.
    """

    def __init__(self, pull_requests: Iterable[PullRequest] = ()):
        self._pull_requests: Tuple[PullRequest, ...] = tuple(pull_requests)

    def __iter__(self) -> Iterator[PullRequest]:
        return iter(self._pull_requests)

    def __len__(self) -> int:
        return len(self._pull_requests)

    def __bool__(self) -> bool:
        return bool(self._pull_requests)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PullRequestSet):
            return NotImplemented
        return self._pull_requests == other._pull_requests

    def __repr__(self) -> str:
        return f"PullRequestSet({list(self._pull_requests)!r})"

    @property
    def all_merged(self) -> bool:
        """True when every pull request was merged (vacuously true when empty)."""
        return all(pr.merged for pr in self._pull_requests)

    @property
    def any_closed(self) -> bool:
        return any(pr.state is PullRequestState.CLOSED for pr in self._pull_requests)

    @property
    def any_open(self) -> bool:
        return any(pr.state is PullRequestState.OPEN for pr in self._pull_requests)

    @property
    def none_open(self) -> bool:
        return not self.any_open

    def unmerged_urls(self, owner: str, repo: str) -> List[str]:
        """Links to every pull request that was not merged, open or closed."""
        return [
            format_pr_url(owner, repo, pr.number)
            for pr in self._pull_requests
            if not pr.merged
        ]

    def closed_urls(self, owner: str, repo: str) -> List[str]:
        """Links to every pull request in the CLOSED state."""
        return [
            format_pr_url(owner, repo, pr.number)
            for pr in self._pull_requests
            if pr.state is PullRequestState.CLOSED
        ]
