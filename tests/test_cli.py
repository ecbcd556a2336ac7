"""Tests for the command-line interface"""
from unittest.mock import patch

import pytest

from lab_cli.cli.args import parse_args
from lab_cli.cli.main import main
from lab_cli.exceptions import GitLabAPIError
from lab_cli.models.options import CreateIssueOptions


@pytest.fixture
def isolated_config(temp_dir, monkeypatch):
    """Point the config file at a temporary location."""
    monkeypatch.setenv("LAB_CONFIG", str(temp_dir / "config.json"))
    # Keep the root logger handlers pytest installed
    with patch("lab_cli.cli.main.setup_logging"):
        yield temp_dir / "config.json"


@pytest.fixture
def mock_lab(isolated_config):
    with patch("lab_cli.cli.main.Lab") as mock_lab_class:
        yield mock_lab_class.return_value


class TestParseArgs:
    """Test argument parsing."""

    def test_browse(self):
        """Test the browse command."""
        args = parse_args(["browse", "#12", "-p"])

        assert args.command == "browse"
        assert args.reference == "#12"
        assert args.print_url is True
        assert args.repository is None

    def test_add_issue(self):
        """Test the add-issue flags."""
        args = parse_args([
            "add-issue", "-t", "Title", "-d", "Body", "-a", "3", "-m", "7", "-l", "bug,ui",
            "-r", "namespace/project",
        ])

        assert (args.title, args.description) == ("Title", "Body")
        assert (args.assignee_id, args.milestone_id) == (3, 7)
        assert args.labels == "bug,ui"
        assert args.repository == "namespace/project"

    def test_issue_defaults(self):
        """Test listing defaults."""
        args = parse_args(["issue"])

        assert args.line == 20
        assert args.state == "opened"
        assert args.all_repository is False

    def test_issue_rejects_merged_state(self):
        """Test issues cannot be filtered by merged."""
        with pytest.raises(SystemExit):
            parse_args(["issue", "--state", "merged"])

    def test_merge_request_alias(self):
        """Test mr is an alias of merge-request."""
        args = parse_args(["mr", "--state", "merged", "-A", "-n", "5"])

        assert args.command == "mr"
        assert args.state == "merged"
        assert args.all_repository is True
        assert args.line == 5

    def test_project(self):
        """Test the project command."""
        args = parse_args(["project", "--owned", "--search", "lab", "--order-by", "name"])

        assert args.owned is True
        assert args.search == "lab"
        assert args.order_by == "name"

    def test_command_required(self):
        """Test a command must be given."""
        with pytest.raises(SystemExit):
            parse_args([])


class TestMain:
    """Test the entry point."""

    def test_browse_dispatch(self, mock_lab):
        """Test browse is dispatched with its options."""
        assert main(["browse", "!34", "-r", "group/project"]) == 0

        options, global_options = mock_lab.browse.call_args.args
        assert options.reference == "!34"
        assert global_options.repository == "group/project"

    def test_add_issue_dispatch(self, mock_lab):
        """Test add-issue forwards every flag."""
        assert main(["add-issue", "-t", "Title", "-d", "Body", "-l", "bug"]) == 0

        options = mock_lab.add_issue.call_args.args[0]
        assert options == CreateIssueOptions(title="Title", description="Body", labels="bug")

    @pytest.mark.parametrize("command", ["merge-request", "mr"])
    def test_merge_request_dispatch(self, mock_lab, command):
        """Test both merge request spellings."""
        assert main([command, "-A"]) == 0

        assert mock_lab.list_merge_requests.call_args.args[0].all_repository is True

    def test_issue_and_project_dispatch(self, mock_lab):
        """Test the listing commands."""
        assert main(["issue", "--scope", "assigned_to_me"]) == 0
        assert main(["project", "-n", "3"]) == 0

        assert mock_lab.list_issues.call_args.args[0].scope == "assigned_to_me"
        assert mock_lab.list_projects.call_args.args[0].line == 3

    def test_error_exit_code(self, mock_lab):
        """Test errors are reported with a non-zero exit code."""
        mock_lab.list_issues.side_effect = GitLabAPIError("list_project_issues", "404 Not Found")

        with patch("lab_cli.cli.main.console") as mock_console:
            assert main(["issue"]) == 1

        printed = mock_console.print.call_args.args[0]
        assert "404 Not Found" in printed

    def test_invalid_option_value(self, mock_lab):
        """Test option validation errors exit non-zero."""
        with patch("lab_cli.cli.main.console"):
            assert main(["issue", "-n", "0"]) == 1
            assert main(["browse", "-r", "no-slash"]) == 1

        mock_lab.list_issues.assert_not_called()
        mock_lab.browse.assert_not_called()

    def test_keyboard_interrupt(self, mock_lab):
        """Test Ctrl-C exits non-zero."""
        mock_lab.list_projects.side_effect = KeyboardInterrupt

        with patch("lab_cli.cli.main.console"):
            assert main(["project"]) == 1

    def test_invalid_config_file(self, isolated_config):
        """Test a broken config file is reported."""
        isolated_config.write_text("{broken")

        with patch("lab_cli.cli.main.console") as mock_console:
            assert main(["project"]) == 1

        assert "Invalid JSON" in mock_console.print.call_args.args[0]
