"""Git remote and repository service"""
import os
from typing import List, Optional, Tuple

import git

from lab_cli.exceptions import GitOperationError, RemoteNotFoundError
from lab_cli.logging_config import get_logger
from lab_cli.models.remote import RemoteInfo

logger = get_logger(__name__)

DEFAULT_EDITOR = "vi"


class GitService:
    """Service for reading the local git repository."""

    def __init__(self, repo_path: str):
        """Initialize the service.

        Args:
            repo_path: Path inside the git repository (string path, not repo object)
        """
        self.repo_path = repo_path
        self.remote_name = "origin"

    def _get_repo(self) -> git.Repo:
        """Open the repository, searching parent directories."""
        try:
            return git.Repo(self.repo_path, search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise GitOperationError("open_repository", f"Not a git repository: {e}")

    def get_remote_infos(self) -> List[Tuple[str, RemoteInfo]]:
        """
        Parse every remote of the repository.

        Returns:
            List of (remote name, RemoteInfo) with origin first. Remotes whose
            URL does not name a project are skipped.
        """
        repo = self._get_repo()
        try:
            remotes = sorted(repo.remotes, key=lambda r: r.name != self.remote_name)
            result = []
            for remote in remotes:
                for url in remote.urls:
                    info = RemoteInfo.from_url(url)
                    if info is None:
                        logger.debug(f"Skipping remote {remote.name} with unparseable URL {url}")
                        continue
                    result.append((remote.name, info))
                    break
            return result
        finally:
            repo.close()

    def find_gitlab_remote(self, preferred_domains: List[str]) -> RemoteInfo:
        """
        Pick the remote that points at a GitLab host.

        Domains are tried in order of preference; for each one, origin wins
        over other remotes.

        Raises:
            RemoteNotFoundError: If no remote is on a preferred domain
        """
        remote_infos = self.get_remote_infos()
        for domain in preferred_domains:
            for name, info in remote_infos:
                if info.domain == domain:
                    logger.debug(f"Using remote {name}: {info.repository_full_name()} on {domain}")
                    return info
        raise RemoteNotFoundError(preferred_domains)

    def get_git_dir(self) -> Optional[str]:
        """Path of the .git directory, or None outside a repository."""
        try:
            repo = self._get_repo()
        except GitOperationError:
            return None
        try:
            return repo.git_dir
        finally:
            repo.close()

    def get_editor(self) -> str:
        """Editor command, as git would choose it."""
        try:
            repo = self._get_repo()
        except GitOperationError:
            repo = None

        if repo is not None:
            try:
                editor = repo.git.var("GIT_EDITOR")
                if editor:
                    return editor
            except git.exc.GitCommandError as e:
                logger.debug(f"git var GIT_EDITOR failed: {e}")
            finally:
                repo.close()

        return os.environ.get("VISUAL") or os.environ.get("EDITOR") or DEFAULT_EDITOR
