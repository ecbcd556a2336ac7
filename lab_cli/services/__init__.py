"""Services for lab-cli."""

from .git_service import GitService
from .gitlab_service import GitLabService
from .editor_service import Editor, create_issue_message, parse_title_and_description
from .display_service import DisplayService

__all__ = [
    "GitService",
    "GitLabService",
    "Editor",
    "create_issue_message",
    "parse_title_and_description",
    "DisplayService",
]
