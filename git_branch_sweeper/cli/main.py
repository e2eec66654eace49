"""Command-line interface for git-branch-sweeper"""

import sys

from rich.console import Console

from git_branch_sweeper.cli.args import parse_args
from git_branch_sweeper.config import Config
from git_branch_sweeper.constants import EXIT_INTERRUPTED
from git_branch_sweeper.core.sweeper import BranchSweeper
from git_branch_sweeper.ui.prompt import ConsoleSelectionPrompt
from git_branch_sweeper.utils.logging import get_log_file, setup_logging

console = Console()


def build_config(parsed_args) -> Config:
    """Build config from parsed arguments."""
    return Config(
        base_branch=parsed_args.base,
        remote_enabled=parsed_args.remote,
        stale_days=parsed_args.stale,
        dry_run=parsed_args.dry_run,
        protected_branches=list(parsed_args.protected),
        ignore_patterns=list(parsed_args.ignore),
        interactive=parsed_args.interactive,
        verbose=parsed_args.verbose,
        debug=parsed_args.debug,
    )


def main(argv=None) -> int:
    """Main entry point for the application."""
    parsed_args = None
    try:
        parsed_args = parse_args(argv)

        # Setup logging before anything talks to git
        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

        try:
            config = build_config(parsed_args)
        except ValueError as e:
            console.print(f"[red]Invalid configuration: {e}[/red]")
            return 1

        if config.debug:
            console.print("[yellow]Debug mode enabled[/yellow]")
            console.print(f"[dim]Log file: {get_log_file()}[/dim]")
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        if config.interactive:
            from git_branch_sweeper.ui.selection_app import TuiSelectionPrompt

            prompt = TuiSelectionPrompt(remote_name=config.remote_name)
        else:
            prompt = ConsoleSelectionPrompt(remote_name=config.remote_name)

        sweeper = BranchSweeper.from_path(parsed_args.repo, config, prompt=prompt)
        sweeper.run()
        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user (SIGINT).[/yellow]")
        return EXIT_INTERRUPTED
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        console.print("[red]An unrecoverable error occurred during execution. Exiting.[/red]")
        if parsed_args is not None and parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
