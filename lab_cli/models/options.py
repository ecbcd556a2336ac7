"""Command option models with validation."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from lab_cli.constants import (
    DEFAULT_LINE,
    MERGE_REQUEST_STATES,
    ORDER_BY,
    PROJECT_ORDER_BY,
    SCOPES,
    SORT_ORDERS,
)


@dataclass
class GlobalOptions:
    """Options shared by every command that targets a project."""

    repository: Optional[str] = None  # namespace/project

    def __post_init__(self):
        self._validate_repository()

    def _validate_repository(self):
        """Validate repository is 'namespace/project' when given."""
        if self.repository is None:
            return
        namespace, _, project = self.repository.strip().strip("/").rpartition("/")
        if not namespace or not project:
            raise ValueError(
                f"Invalid repository option value: '{self.repository}' (expected namespace/project)"
            )

    def namespace_and_project(self) -> Tuple[str, str]:
        """Split the repository option on its last slash."""
        if self.repository is None:
            raise ValueError("repository is not set")
        namespace, _, project = self.repository.strip().strip("/").rpartition("/")
        return namespace, project


@dataclass
class SearchOptions:
    """Options for listing issues and merge requests."""

    line: int = DEFAULT_LINE
    state: str = "opened"
    scope: str = "all"
    order_by: str = "updated_at"
    sort: str = "desc"
    all_repository: bool = False

    def __post_init__(self):
        if self.line <= 0:
            raise ValueError(f"line must be positive, got {self.line}")
        # Issue states are a subset of merge request states
        _check_choice("state", self.state, MERGE_REQUEST_STATES)
        _check_choice("scope", self.scope, SCOPES)
        _check_choice("order_by", self.order_by, ORDER_BY)
        _check_choice("sort", self.sort, SORT_ORDERS)

    def to_list_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for a single-page python-gitlab list call."""
        return {
            "state": self.state,
            "scope": self.scope,
            "order_by": self.order_by,
            "sort": self.sort,
            "per_page": self.line,
            "page": 1,
        }


@dataclass
class ProjectSearchOptions:
    """Options for listing projects."""

    line: int = DEFAULT_LINE
    order_by: str = "last_activity_at"
    sort: str = "desc"
    owned: bool = False
    search: Optional[str] = None

    def __post_init__(self):
        if self.line <= 0:
            raise ValueError(f"line must be positive, got {self.line}")
        _check_choice("order_by", self.order_by, PROJECT_ORDER_BY)
        _check_choice("sort", self.sort, SORT_ORDERS)

    def to_list_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {
            "order_by": self.order_by,
            "sort": self.sort,
            "per_page": self.line,
            "page": 1,
        }
        if self.owned:
            kwargs["owned"] = True
        if self.search:
            kwargs["search"] = self.search
        return kwargs


@dataclass
class CreateIssueOptions:
    """Fields of a new issue."""

    title: str = ""
    description: str = ""
    assignee_id: Optional[int] = None
    milestone_id: Optional[int] = None
    labels: Optional[str] = None  # Comma-separated label names

    def to_payload(self) -> Dict[str, Any]:
        """Request body for the issue creation endpoint."""
        payload: Dict[str, Any] = {
            "title": self.title,
            "description": self.description,
        }
        if self.assignee_id is not None:
            payload["assignee_ids"] = [self.assignee_id]
        if self.milestone_id is not None:
            payload["milestone_id"] = self.milestone_id
        if self.labels:
            payload["labels"] = ",".join(
                label.strip() for label in self.labels.split(",") if label.strip()
            )
        return payload


@dataclass
class BrowseOptions:
    """Options for the browse command."""

    reference: Optional[str] = None
    print_url: bool = False


def _check_choice(name: str, value: str, allowed: list) -> None:
    if value not in allowed:
        raise ValueError(f"{name} must be one of {allowed}, got '{value}'")
