"""Data models for lab-cli."""

from .reference import BrowseType
from .remote import RemoteInfo
from .options import (
    GlobalOptions,
    SearchOptions,
    ProjectSearchOptions,
    CreateIssueOptions,
    BrowseOptions,
)

__all__ = [
    "BrowseType",
    "RemoteInfo",
    "GlobalOptions",
    "SearchOptions",
    "ProjectSearchOptions",
    "CreateIssueOptions",
    "BrowseOptions",
]
