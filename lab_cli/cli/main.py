"""Command-line entry point for lab-cli"""

import os
import sys

from rich.console import Console
from rich.markup import escape

from lab_cli.cli.args import parse_args
from lab_cli.config import Config
from lab_cli.constants import EXIT_CODE_ERROR, EXIT_CODE_OK
from lab_cli.core import Lab
from lab_cli.logging_config import setup_logging
from lab_cli.models.options import (
    BrowseOptions,
    CreateIssueOptions,
    GlobalOptions,
    ProjectSearchOptions,
    SearchOptions,
)

console = Console(stderr=True)


def _search_options(parsed_args) -> SearchOptions:
    return SearchOptions(
        line=parsed_args.line,
        state=parsed_args.state,
        scope=parsed_args.scope,
        order_by=parsed_args.order_by,
        sort=parsed_args.sort,
        all_repository=parsed_args.all_repository,
    )


def run_command(lab: Lab, parsed_args) -> int:
    """Dispatch parsed arguments to the matching Lab operation."""
    global_options = GlobalOptions(repository=parsed_args.repository)
    command = parsed_args.command

    if command == "browse":
        lab.browse(
            BrowseOptions(reference=parsed_args.reference, print_url=parsed_args.print_url),
            global_options,
        )
    elif command == "add-issue":
        lab.add_issue(
            CreateIssueOptions(
                title=parsed_args.title,
                description=parsed_args.description,
                assignee_id=parsed_args.assignee_id,
                milestone_id=parsed_args.milestone_id,
                labels=parsed_args.labels,
            ),
            global_options,
        )
    elif command == "issue":
        lab.list_issues(_search_options(parsed_args), global_options)
    elif command in ("merge-request", "mr"):
        lab.list_merge_requests(_search_options(parsed_args), global_options)
    elif command == "project":
        lab.list_projects(
            ProjectSearchOptions(
                line=parsed_args.line,
                order_by=parsed_args.order_by,
                sort=parsed_args.sort,
                owned=parsed_args.owned,
                search=parsed_args.search,
            ),
            global_options,
        )
    else:
        console.print(f"[red]Error: Unknown command '{escape(command)}'[/red]")
        return EXIT_CODE_ERROR

    return EXIT_CODE_OK


def main(argv=None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)

    try:
        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

        config = Config.load(verbose=parsed_args.verbose, debug=parsed_args.debug)

        if parsed_args.debug:
            console.print("[yellow]Debug mode enabled[/yellow]")
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                if key == "tokens":
                    value = sorted(value)  # Domains only, never the secrets
                console.print(f"  {key}: {escape(str(value))}")

        lab = Lab(os.getcwd(), config)
        return run_command(lab, parsed_args)
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return EXIT_CODE_ERROR
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if parsed_args.debug:
            console.print_exception()
        return EXIT_CODE_ERROR


if __name__ == "__main__":
    sys.exit(main())
