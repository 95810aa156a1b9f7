"""Display service for the sweep report"""
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from git_branch_sweeper.constants import FORCE_HINT
from git_branch_sweeper.formatters import format_pr_urls
from git_branch_sweeper.logging_config import get_logger
from git_branch_sweeper.models.sweep import SweepStats

console = Console(soft_wrap=True)
logger = get_logger(__name__)


class DisplayService:
    """Prints everything the user sees on stdout."""

    def __init__(self, output: Optional[Console] = None, verbose: bool = False, debug: bool = False):
        self.console = output if output is not None else console
        self.verbose = verbose
        self.debug_mode = debug

    def print_no_pull_requests(self, branch: str) -> None:
        self.console.print(f"[dim]No pull requests found for branch {escape(branch)}[/dim]")

    def print_open_pull_requests(self, branch: str, urls: Sequence[str]) -> None:
        self.console.print(
            f"[yellow]Branch {escape(branch)} has open pull requests:[/yellow] {format_pr_urls(urls)}"
        )

    def print_closed_pull_requests(self, branch: str, urls: Sequence[str]) -> None:
        """Report closed, unmerged pull requests and how to delete anyway."""
        self.console.print(
            f"[yellow]Branch {escape(branch)} has closed pull requests:[/yellow] {format_pr_urls(urls)}"
        )
        self.console.print(f"[dim]{FORCE_HINT}[/dim]")

    def print_forced_deletion(self, branch: str) -> None:
        self.console.print(
            f"[yellow]Deleting branch `{escape(branch)}` even with closed pull requests[/yellow]"
        )

    def print_deleting(self, branch: str) -> None:
        self.console.print(f"Deleting branch: {escape(branch)}")

    def print_safe_mode_skip(self) -> None:
        self.console.print("[cyan]Safe mode enabled, skipping deletion...[/cyan]")

    def print_deleted(self, branch: str) -> None:
        self.console.print(f"[green]Deleted branch {escape(branch)}[/green]")

    def print_deletion_failed(self, branch: str, error: Exception) -> None:
        self.console.print(f"[red]Failed to delete branch {escape(branch)}: {escape(str(error))}[/red]")

    def print_summary(self, stats: SweepStats, safe_mode: bool = False) -> None:
        """Print the end-of-run counters."""
        if safe_mode:
            deleted = f"{stats.skipped_safe} would be deleted (safe mode)"
        else:
            deleted = f"{stats.deleted} deleted"

        parts = [
            deleted,
            f"{stats.blocked_open} with open PRs",
            f"{stats.blocked_closed} with closed PRs",
            f"{stats.skipped_no_prs} without PRs",
        ]
        if stats.failed:
            parts.append(f"[red]{stats.failed} failed[/red]")

        self.console.print()
        self.console.print(f"[bold]Summary:[/bold] {', '.join(parts)}")
        logger.debug(f"Sweep stats: {stats}")
