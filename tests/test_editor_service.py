"""Tests for the editor service"""
import subprocess
from unittest.mock import patch

import pytest

from lab_cli.exceptions import EditorError
from lab_cli.services.editor_service import (
    Editor,
    create_issue_message,
    parse_title_and_description,
)


def write_on_edit(content):
    """subprocess.run replacement that plays the user typing into the editor."""
    def fake_run(command, check):
        with open(command[-1], "w") as f:
            f.write(content)
        return subprocess.CompletedProcess(command, 0)
    return fake_run


class TestIssueMessage:
    """Test the editor template."""

    def test_template(self):
        """Test title and description are placed in the template."""
        message = create_issue_message("Title", "Body")

        assert message == (
            "<!-- Write a message for this issue. The first block of text is the title -->\n"
            "Title\n"
            "\n"
            "<!-- the rest is the description.  -->\n"
            "Body\n"
        )

    def test_template_round_trip(self):
        """Test an untouched template parses back to its inputs."""
        assert parse_title_and_description(create_issue_message("Title", "Body")) == ("Title", "Body")

    def test_empty_template(self):
        """Test an untouched empty template gives an empty title."""
        assert parse_title_and_description(create_issue_message("", "")) == ("", "")


class TestParseTitleAndDescription:
    """Test parsing edited messages."""

    def test_multi_line_title(self):
        """Test the first block is joined into one title."""
        title, description = parse_title_and_description("Fix the\nlogin page\n\nIt breaks.\n\nOften.")

        assert title == "Fix the login page"
        assert description == "It breaks.\n\nOften."

    def test_leading_blank_lines(self):
        """Test blank lines before the title are skipped."""
        assert parse_title_and_description("\n\n  Title  \n") == ("Title", "")

    def test_multi_line_comments_removed(self):
        """Test comments spanning lines are dropped."""
        message = "<!--\nnotes\n-->\nTitle\n\nBody <!-- hidden --> text"

        assert parse_title_and_description(message) == ("Title", "Body  text")


class TestEditor:
    """Test running the editor."""

    def test_file_in_git_dir(self, temp_dir):
        """Test the message file lives in the git directory."""
        editor = Editor("ISSUE", "issue", "", "vi", git_dir=str(temp_dir))

        assert editor.file_path == temp_dir / "ISSUE_EDITMSG"

    def test_edit_title_and_description(self, temp_dir):
        """Test the edited file is parsed."""
        editor = Editor("ISSUE", "issue", create_issue_message("", ""), "vim -f", git_dir=str(temp_dir))

        with patch("lab_cli.services.editor_service.subprocess.run",
                   side_effect=write_on_edit("New title\n\nDetails")) as mock_run:
            result = editor.edit_title_and_description()

        assert result == ("New title", "Details")
        command = mock_run.call_args.args[0]
        assert command == ["vim", "-f", str(temp_dir / "ISSUE_EDITMSG")]

    def test_initial_message_written(self, temp_dir):
        """Test the editor sees the prefilled message."""
        editor = Editor("ISSUE", "issue", "prefilled", "true", git_dir=str(temp_dir))
        seen = {}

        def fake_run(command, check):
            with open(command[-1]) as f:
                seen["content"] = f.read()
            return subprocess.CompletedProcess(command, 0)

        with patch("lab_cli.services.editor_service.subprocess.run", side_effect=fake_run):
            editor.edit()

        assert seen["content"] == "prefilled"

    def test_editor_failure(self, temp_dir):
        """Test a failing editor aborts."""
        editor = Editor("ISSUE", "issue", "", "vi", git_dir=str(temp_dir))

        with patch("lab_cli.services.editor_service.subprocess.run",
                   side_effect=subprocess.CalledProcessError(1, ["vi"])):
            with pytest.raises(EditorError, match="exited with status 1"):
                editor.edit()

    def test_editor_missing(self, temp_dir):
        """Test a missing editor binary."""
        editor = Editor("ISSUE", "issue", "", "no-such-editor", git_dir=str(temp_dir))

        with patch("lab_cli.services.editor_service.subprocess.run", side_effect=FileNotFoundError()):
            with pytest.raises(EditorError, match="Editor not found"):
                editor.edit()

    def test_delete_file(self, temp_dir):
        """Test the message file is removed, twice without error."""
        editor = Editor("ISSUE", "issue", "text", "vi", git_dir=str(temp_dir))
        editor.file_path.write_text("text")

        editor.delete_file()
        editor.delete_file()

        assert not editor.file_path.exists()
