"""Formatting utilities for lab-cli.

This package provides formatting functions for command output,
organized into logical modules:
- columns: Column alignment of delimited rows
- references: Issue and merge request references
- rows: Row builders for issues, merge requests and projects
"""

from .columns import format_columns

from .references import (
    format_issue_reference,
    format_merge_request_reference,
    parse_repository_full_name,
)

from .rows import (
    remove_line_break,
    format_issue_row,
    format_merge_request_row,
    format_project_row,
)

__all__ = [
    # Columns
    "format_columns",
    # References
    "format_issue_reference",
    "format_merge_request_reference",
    "parse_repository_full_name",
    # Rows
    "remove_line_break",
    "format_issue_row",
    "format_merge_request_row",
    "format_project_row",
]
