"""Pytest fixtures for lab-cli tests"""
import tempfile
from pathlib import Path
from unittest.mock import Mock
import pytest
import git

from lab_cli.config import Config


def make_issue(iid, title, web_url=""):
    issue = Mock()
    issue.iid = iid
    issue.title = title
    issue.web_url = web_url
    return issue


def make_project(namespace_name, name, description):
    project = Mock()
    # Mock(name=...) names the mock itself, so set the attribute afterwards
    project.name = name
    project.namespace = {"name": namespace_name, "path": namespace_name}
    project.description = description
    return project


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config(temp_dir):
    """Create a configuration with a token for gitlab.com."""
    return Config(
        preferred_domains=["gitlab.com"],
        tokens={"gitlab.com": "test_token_for_testing"},
        config_path=temp_dir / "config.json",
    )


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with a GitLab remote."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)
    repo.create_remote("origin", "git@gitlab.com:namespace/repository.git")

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_remotes(git_repo):
    """Git repository with remotes on several hosts."""
    git_repo.create_remote("github", "https://github.com/someone/repository.git")
    git_repo.create_remote("company", "ssh://git@gitlab.example.com:2222/group/sub/tool.git")
    yield git_repo


@pytest.fixture
def mock_gitlab_service():
    """Create a mock GitLabService."""
    from lab_cli.services.gitlab_service import GitLabService

    service = Mock(spec=GitLabService)
    service.create_issue = Mock(return_value=make_issue(42, "Created"))
    service.list_issues = Mock(return_value=[])
    service.list_project_issues = Mock(return_value=[])
    service.list_merge_requests = Mock(return_value=[])
    service.list_project_merge_requests = Mock(return_value=[])
    service.list_projects = Mock(return_value=[])
    return service


@pytest.fixture
def sample_issues():
    """Issues as returned by python-gitlab."""
    return [
        make_issue(1, "First issue", "https://gitlab.com/namespace/repository/-/issues/1"),
        make_issue(12, "Second issue", "https://gitlab.com/other/project/issues/12"),
    ]


@pytest.fixture
def sample_merge_requests():
    """Merge requests as returned by python-gitlab."""
    return [
        make_issue(3, "Add feature", "https://gitlab.com/namespace/repository/-/merge_requests/3"),
        make_issue(34, "Fix bug", "https://gitlab.com/group/sub/tool/merge_requests/34"),
    ]


@pytest.fixture
def sample_projects():
    """Projects as returned by python-gitlab."""
    return [
        make_project("namespace1", "name1", "description1\ndescription1"),
        make_project("namespace2", "name2", "description2\ndescription2"),
    ]
