"""Issue and merge request reference formatting."""

from urllib.parse import urlparse

from lab_cli.constants import ISSUE_MARKER, MERGE_REQUEST_MARKER

ENTITY_SEGMENTS = ("issues", "merge_requests")


def format_issue_reference(iid: int) -> str:
    return f"{ISSUE_MARKER}{iid}"


def format_merge_request_reference(iid: int) -> str:
    return f"{MERGE_REQUEST_MARKER}{iid}"


def parse_repository_full_name(web_url: str) -> str:
    """
    Extract "namespace/project" from an issue or merge request web URL.

    Handles both https://host/ns/proj/issues/1 and
    https://host/ns/proj/-/merge_requests/1.
    """
    segments = [s for s in urlparse(web_url).path.split("/") if s]

    if "-" in segments:
        return "/".join(segments[:segments.index("-")])

    for index in range(len(segments) - 1, -1, -1):
        if segments[index] in ENTITY_SEGMENTS:
            return "/".join(segments[:index])

    return "/".join(segments)
