"""Row builders for command output."""

import re

from lab_cli.constants import COLUMN_DELIMITER
from lab_cli.formatters.references import (
    format_issue_reference,
    format_merge_request_reference,
    parse_repository_full_name,
)

LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")


def remove_line_break(text: str) -> str:
    return LINE_BREAK_PATTERN.sub("", text)


def _cell(value) -> str:
    # A delimiter inside a cell would split it into two columns
    return remove_line_break(str(value or "")).replace(COLUMN_DELIMITER, " ")


def format_issue_row(issue, all_repository: bool = False) -> str:
    """
    Format an issue as a delimited row.

    Args:
        issue: python-gitlab issue object
        all_repository: Include the project column

    Returns:
        "#iid|title" or "#iid|namespace/project|title"
    """
    cells = [format_issue_reference(issue.iid)]
    if all_repository:
        cells.append(parse_repository_full_name(issue.web_url))
    cells.append(_cell(issue.title))
    return COLUMN_DELIMITER.join(cells)


def format_merge_request_row(merge_request, all_repository: bool = False) -> str:
    """Format a merge request as "!iid|title", with the project column when listing everything."""
    cells = [format_merge_request_reference(merge_request.iid)]
    if all_repository:
        cells.append(parse_repository_full_name(merge_request.web_url))
    cells.append(_cell(merge_request.title))
    return COLUMN_DELIMITER.join(cells)


def format_project_row(project) -> str:
    """Format a project as "namespace/name|description"."""
    namespace = project.namespace
    namespace_name = namespace.get("name", "") if isinstance(namespace, dict) else str(namespace)
    return COLUMN_DELIMITER.join(
        [f"{namespace_name}/{project.name}", _cell(project.description)]
    )
