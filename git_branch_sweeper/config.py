"""Configuration handling for git-branch-sweeper"""

from dataclasses import dataclass

from git_branch_sweeper.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE


@dataclass
class Config:
    """Run configuration for git-branch-sweeper with validation."""

    # Deletion modes
    safe: bool = False  # Report what would be deleted, delete nothing
    force: bool = False  # Also delete branches whose PRs were all closed unmerged

    # Output
    verbose: bool = False
    debug: bool = False

    # GitHub integration
    page_size: int = DEFAULT_PAGE_SIZE  # Pull requests requested per GraphQL page

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_page_size()

    def _validate_page_size(self):
        """Validate page_size is within GitHub's GraphQL limits."""
        if not 1 <= self.page_size <= MAX_PAGE_SIZE:
            raise ValueError(
                f"page_size must be between 1 and {MAX_PAGE_SIZE}, got {self.page_size}"
            )

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "safe": self.safe,
            "force": self.force,
            "verbose": self.verbose,
            "debug": self.debug,
            "page_size": self.page_size,
        }

    def get(self, key: str, default=None):
        """Get config value by key, mirroring dict access."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = {"safe", "force", "verbose", "debug", "page_size"}

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
