"""Command-line argument parsing for lab-cli."""

import argparse
from lab_cli.__version__ import __version__
from lab_cli.constants import (
    DEFAULT_LINE,
    ISSUE_STATES,
    MERGE_REQUEST_STATES,
    ORDER_BY,
    PROJECT_ORDER_BY,
    SCOPES,
    SORT_ORDERS,
)


def _add_repository_option(parser):
    parser.add_argument(
        "-r",
        "--repository",
        metavar="NAMESPACE/PROJECT",
        help="Target a project instead of the one behind the current git remote",
    )


def _add_search_options(parser, states):
    group = parser.add_argument_group("Search Options")
    group.add_argument(
        "-n", "--line", type=int, default=DEFAULT_LINE, help=f"Number of items to show (default: {DEFAULT_LINE})"
    )
    group.add_argument("--state", choices=states, default="opened", help="Filter by state (default: opened)")
    group.add_argument("--scope", choices=SCOPES, default="all", help="Filter by scope (default: all)")
    group.add_argument(
        "--order-by", choices=ORDER_BY, default="updated_at", help="Order by field (default: updated_at)"
    )
    group.add_argument("--sort", choices=SORT_ORDERS, default="desc", help="Sort order (default: desc)")
    group.add_argument(
        "-A",
        "--all-repository",
        action="store_true",
        help="Search every project visible to you instead of the current one",
    )


def build_parser():
    """Build the argument parser with one subparser per command."""
    parser = argparse.ArgumentParser(
        prog="lab",
        description="Command-line client for GitLab issues, merge requests and projects",
        epilog="Setup: Requires GITLAB_TOKEN environment variable or a token in ~/.lab-cli/config.json. "
        "Create one under User Settings > Access Tokens (scope: api)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"lab-cli {__version__}")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    subparsers.required = True

    browse = subparsers.add_parser("browse", help="Browse project, issue or merge request")
    browse.add_argument(
        "reference",
        nargs="?",
        help="Issue (#12, i12, I12) or merge request (!34, m34, M34); the project page if omitted",
    )
    browse.add_argument(
        "-p", "--print-url", action="store_true", help="Print the URL instead of opening a browser"
    )
    _add_repository_option(browse)

    add_issue = subparsers.add_parser("add-issue", help="Add issue")
    add_issue.add_argument("-t", "--title", default="", help="The title of an issue")
    add_issue.add_argument("-d", "--description", default="", help="The description of an issue")
    add_issue.add_argument(
        "-a", "--assignee-id", type=int, help="The ID of a user to assign issue"
    )
    add_issue.add_argument(
        "-m", "--milestone-id", type=int, help="The ID of a milestone to assign issue"
    )
    add_issue.add_argument("-l", "--labels", help="Comma-separated label names for an issue")
    _add_repository_option(add_issue)

    issue = subparsers.add_parser("issue", help="Browse issue")
    _add_search_options(issue, ISSUE_STATES)
    _add_repository_option(issue)

    merge_request = subparsers.add_parser(
        "merge-request", aliases=["mr"], help="Browse merge request"
    )
    _add_search_options(merge_request, MERGE_REQUEST_STATES)
    _add_repository_option(merge_request)

    project = subparsers.add_parser("project", help="Browse project")
    project.add_argument(
        "-n", "--line", type=int, default=DEFAULT_LINE, help=f"Number of projects to show (default: {DEFAULT_LINE})"
    )
    project.add_argument(
        "--order-by",
        choices=PROJECT_ORDER_BY,
        default="last_activity_at",
        help="Order by field (default: last_activity_at)",
    )
    project.add_argument("--sort", choices=SORT_ORDERS, default="desc", help="Sort order (default: desc)")
    project.add_argument("--owned", action="store_true", help="Only projects you own")
    project.add_argument("--search", help="Only projects matching this text")
    _add_repository_option(project)

    return parser


def parse_args(argv=None):
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)
