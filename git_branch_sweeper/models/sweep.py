"""Models describing deletion decisions and sweep results"""
from dataclasses import dataclass
from enum import Enum


class BranchOutcome(Enum):
    """What happened to a branch during a sweep."""
    NO_PULL_REQUESTS = "no-pull-requests"
    DELETED = "deleted"
    SAFE_MODE_SKIPPED = "safe-mode-skipped"
    DELETION_FAILED = "deletion-failed"
    BLOCKED = "blocked"


@dataclass(frozen=True)
class DeletionDecision:
    """Whether a branch may be deleted and, if not, what blocks it."""
    can_delete: bool
    forced: bool = False  # Deletable only because force mode is on
    blocked_by_open: bool = False
    blocked_by_closed: bool = False


@dataclass
class SweepStats:
    """Counters collected over one run."""
    deleted: int = 0
    skipped_safe: int = 0
    skipped_no_prs: int = 0
    blocked_open: int = 0
    blocked_closed: int = 0
    failed: int = 0
