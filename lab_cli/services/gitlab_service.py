"""GitLab API integration service"""
from typing import List, Optional

import gitlab
from gitlab.exceptions import GitlabError

from lab_cli.exceptions import GitLabAPIError
from lab_cli.logging_config import get_logger
from lab_cli.models.options import CreateIssueOptions, ProjectSearchOptions, SearchOptions

logger = get_logger(__name__)


class GitLabService:
    """Thin wrapper over python-gitlab with one method per API call the CLI needs."""

    def __init__(self, domain: str, token: str):
        """Initialize the service.

        Args:
            domain: GitLab host, e.g. gitlab.com
            token: Private token for the host
        """
        self.domain = domain
        self.url = f"https://{domain}"
        self.gl: Optional[gitlab.Gitlab] = gitlab.Gitlab(self.url, private_token=token)
        logger.debug(f"[GitLab] Client created for {self.url}")

    def _client(self, operation: str) -> gitlab.Gitlab:
        if self.gl is None:
            raise GitLabAPIError(operation, "client closed")
        return self.gl

    def _project(self, operation: str, repository_full_name: str):
        """Project handle without fetching it."""
        return self._client(operation).projects.get(repository_full_name, lazy=True)

    def create_issue(self, repository_full_name: str, options: CreateIssueOptions):
        """Create an issue and return it."""
        try:
            project = self._project("create_issue", repository_full_name)
            issue = project.issues.create(options.to_payload())
            logger.debug(f"[GitLab] Created issue #{issue.iid} in {repository_full_name}")
            return issue
        except GitlabError as e:
            raise GitLabAPIError("create_issue", str(e))

    def list_issues(self, options: SearchOptions) -> List:
        """List issues across every project visible to the user."""
        try:
            return list(self._client("list_issues").issues.list(**options.to_list_kwargs()))
        except GitlabError as e:
            raise GitLabAPIError("list_issues", str(e))

    def list_project_issues(self, repository_full_name: str, options: SearchOptions) -> List:
        """List issues of one project."""
        try:
            project = self._project("list_project_issues", repository_full_name)
            return list(project.issues.list(**options.to_list_kwargs()))
        except GitlabError as e:
            raise GitLabAPIError("list_project_issues", str(e))

    def list_merge_requests(self, options: SearchOptions) -> List:
        """List merge requests across every project visible to the user."""
        try:
            client = self._client("list_merge_requests")
            return list(client.mergerequests.list(**options.to_list_kwargs()))
        except GitlabError as e:
            raise GitLabAPIError("list_merge_requests", str(e))

    def list_project_merge_requests(self, repository_full_name: str, options: SearchOptions) -> List:
        """List merge requests of one project."""
        try:
            project = self._project("list_project_merge_requests", repository_full_name)
            return list(project.mergerequests.list(**options.to_list_kwargs()))
        except GitlabError as e:
            raise GitLabAPIError("list_project_merge_requests", str(e))

    def list_projects(self, options: ProjectSearchOptions) -> List:
        """List projects visible to the user."""
        try:
            return list(self._client("list_projects").projects.list(**options.to_list_kwargs()))
        except GitlabError as e:
            raise GitLabAPIError("list_projects", str(e))

    def close(self) -> None:
        """Close the HTTP session to clean up resources."""
        if self.gl:
            try:
                self.gl.session.close()
                logger.debug("[GitLab] Closed GitLab API connection")
            except Exception as e:
                logger.debug(f"[GitLab] Error closing GitLab API connection: {e}")
            self.gl = None
