"""Repository identity model"""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class RepositoryIdentity:
    """Owner, name and default branch of the GitHub repository being swept."""
    owner: str
    name: str
    default_branch: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    @classmethod
    def from_gh_json(cls, payload: Dict[str, Any]) -> "RepositoryIdentity":
        """Build from ``gh repo view --json owner,name,defaultBranchRef`` output.

        Raises:
            ValueError: If any of the three fields is missing or empty
        """
        if not isinstance(payload, dict):
            raise ValueError("expected a JSON object describing the repository")

        owner = (payload.get("owner") or {}).get("login")
        name = payload.get("name")
        default_branch = (payload.get("defaultBranchRef") or {}).get("name")

        if not owner:
            raise ValueError("repository owner is missing")
        if not name:
            raise ValueError("repository name is missing")
        if not default_branch:
            raise ValueError(f"repository {owner}/{name} has no default branch")

        return cls(owner=owner, name=name, default_branch=default_branch)
