"""Reference model and related enums"""
from enum import Enum


class BrowseType(Enum):
    """Kind of entity a reference such as ``#12`` or ``!34`` points at."""
    ISSUE = "issue"
    MERGE_REQUEST = "merge_request"

    @property
    def url_path(self) -> str:
        """Path segment of the entity in a GitLab project URL."""
        return "issues" if self is BrowseType.ISSUE else "merge_requests"
