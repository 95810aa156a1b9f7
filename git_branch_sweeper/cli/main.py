"""Command-line entry point for git-branch-sweeper"""

import os
import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from git_branch_sweeper.cli.args import parse_args
from git_branch_sweeper.config import Config
from git_branch_sweeper.core import BranchSweeper
from git_branch_sweeper.exceptions import GitBranchSweeperError
from git_branch_sweeper.logging_config import get_logger, setup_logging

console = Console(soft_wrap=True)
logger = get_logger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the application.

    Fatal errors are printed and the run simply ends; the exit status does
    not distinguish them from success.
    """
    parsed_args = parse_args(argv)
    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

    try:
        config = Config(
            safe=parsed_args.safe,
            force=parsed_args.force,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )

        if parsed_args.debug:
            console.print("[yellow]Debug mode enabled[/yellow]")
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        sweeper = BranchSweeper(os.getcwd(), config)
        sweeper.run()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except GitBranchSweeperError as e:
        logger.debug(f"Sweep aborted: {e!r}")
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if parsed_args.debug:
            console.print_exception()
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if parsed_args.debug:
            console.print_exception()

    return 0


if __name__ == "__main__":
    sys.exit(main())
