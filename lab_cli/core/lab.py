"""Core functionality for lab-cli"""

import sys
from dataclasses import replace
from typing import Optional, Union

from rich.prompt import Prompt

from lab_cli.config import Config
from lab_cli.exceptions import AuthenticationError, GitOperationError
from lab_cli.formatters import (
    format_issue_reference,
    format_issue_row,
    format_merge_request_row,
    format_project_row,
)
from lab_cli.logging_config import get_logger
from lab_cli.models.options import (
    BrowseOptions,
    CreateIssueOptions,
    GlobalOptions,
    ProjectSearchOptions,
    SearchOptions,
)
from lab_cli.models.remote import RemoteInfo
from lab_cli.services.display_service import DisplayService
from lab_cli.services.editor_service import Editor, create_issue_message
from lab_cli.services.git_service import GitService
from lab_cli.services.gitlab_service import GitLabService
from lab_cli.utils.browser import open_url
from lab_cli.utils.reference import split_prefix_and_number

logger = get_logger(__name__)


class Lab:
    """Runs lab commands against the GitLab project of a working directory."""

    def __init__(self, repo_path: str, config: Union[Config, dict]):
        """Initialize Lab.

        Args:
            repo_path: Working directory, normally inside a git checkout
            config: Configuration dict or Config object
        """
        self.repo_path = repo_path
        if isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config
        self.verbose = self.config.get("verbose", False)
        self.debug_mode = self.config.get("debug", False)

        self.git_service = GitService(self.repo_path)
        self.display_service = DisplayService(verbose=self.verbose, debug=self.debug_mode)

    def resolve_remote(self, global_options: Optional[GlobalOptions] = None) -> RemoteInfo:
        """
        Work out which project a command targets.

        An explicit --repository uses the first preferred domain; otherwise
        the project comes from the git remotes.
        """
        if global_options and global_options.repository:
            namespace, project = global_options.namespace_and_project()
            remote = RemoteInfo(
                domain=self.config.preferred_domains[0],
                namespace=namespace,
                repository=project,
            )
            logger.debug(f"Using repository option: {remote.repository_full_name()}")
            return remote

        return self.git_service.find_gitlab_remote(self.config.preferred_domains)

    def get_private_token(self, domain: str) -> str:
        """
        Private token for a domain.

        Falls back to asking the user when running in a terminal; the answer
        is saved to the config file.

        Raises:
            AuthenticationError: If no token is configured and nobody can be asked
        """
        token = self.config.get_token(domain)
        if token:
            return token

        if not sys.stdin.isatty():
            raise AuthenticationError(domain)

        token = Prompt.ask(f"Please input GitLab private token for {domain}", password=True).strip()
        if not token:
            raise AuthenticationError(domain)

        self.config.set_token(domain, token)
        self.config.save()
        logger.info(f"Saved private token for {domain}")
        return token

    def get_client(self, remote: RemoteInfo) -> GitLabService:
        return GitLabService(remote.domain, self.get_private_token(remote.domain))

    def browse(self, options: BrowseOptions, global_options: Optional[GlobalOptions] = None) -> str:
        """
        Open the project, an issue or a merge request in the browser.

        Returns:
            The URL that was opened (or printed)
        """
        path = ""
        if options.reference:
            browse_type, number = split_prefix_and_number(options.reference)
            path = f"/{browse_type.url_path}/{number}"

        url = self.resolve_remote(global_options).base_url() + path

        if options.print_url:
            self.display_service.message(url)
        else:
            open_url(url)
        return url

    def add_issue(
        self, options: CreateIssueOptions, global_options: Optional[GlobalOptions] = None
    ) -> Optional[int]:
        """
        Create an issue in the target project.

        When the title or the description is missing, both are collected in
        the user's editor.

        Returns:
            The new issue's iid, or None if the title was left empty
        """
        if not options.title or not options.description:
            editor = Editor(
                "ISSUE",
                "issue",
                create_issue_message(options.title, options.description),
                editor_command=self.git_service.get_editor(),
                git_dir=self.git_service.get_git_dir(),
            )
            try:
                title, description = editor.edit_title_and_description()
                options = replace(options, title=title, description=description)
            finally:
                editor.delete_file()

        if not options.title:
            logger.info("Empty issue title, nothing to create")
            return None

        remote = self.resolve_remote(global_options)
        client = self.get_client(remote)
        try:
            issue = client.create_issue(remote.repository_full_name(), options)
        finally:
            client.close()

        self.display_service.message(format_issue_reference(issue.iid))
        return issue.iid

    def list_issues(self, options: SearchOptions, global_options: Optional[GlobalOptions] = None) -> None:
        remote = self.resolve_remote(global_options)
        client = self.get_client(remote)
        try:
            if options.all_repository:
                issues = client.list_issues(options)
            else:
                issues = client.list_project_issues(remote.repository_full_name(), options)
        finally:
            client.close()

        self.display_service.display_rows(
            [format_issue_row(issue, options.all_repository) for issue in issues]
        )

    def list_merge_requests(
        self, options: SearchOptions, global_options: Optional[GlobalOptions] = None
    ) -> None:
        remote = self.resolve_remote(global_options)
        client = self.get_client(remote)
        try:
            if options.all_repository:
                merge_requests = client.list_merge_requests(options)
            else:
                merge_requests = client.list_project_merge_requests(
                    remote.repository_full_name(), options
                )
        finally:
            client.close()

        self.display_service.display_rows(
            [format_merge_request_row(mr, options.all_repository) for mr in merge_requests]
        )

    def list_projects(
        self, options: ProjectSearchOptions, global_options: Optional[GlobalOptions] = None
    ) -> None:
        """List projects on the GitLab host of the current remote."""
        try:
            domain = self.resolve_remote(global_options).domain
        except GitOperationError as e:
            # Projects only need a host, so outside a checkout use the preferred one
            domain = self.config.preferred_domains[0]
            logger.debug(f"No project remote ({e}), listing projects on {domain}")

        client = GitLabService(domain, self.get_private_token(domain))
        try:
            projects = client.list_projects(options)
        finally:
            client.close()

        self.display_service.display_rows([format_project_row(project) for project in projects])
