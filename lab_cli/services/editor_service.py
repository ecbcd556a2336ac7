"""Editor service for composing issue titles and descriptions"""
import re
import shlex
import subprocess
import tempfile
from pathlib import Path
from typing import Optional, Tuple

from lab_cli.constants import ISSUE_MESSAGE_TEMPLATE
from lab_cli.exceptions import EditorError
from lab_cli.logging_config import get_logger

logger = get_logger(__name__)

COMMENT_PATTERN = re.compile(r"<!--.*?-->", re.DOTALL)


def create_issue_message(title: str, description: str) -> str:
    """Render the editor template prefilled with what the user already gave."""
    return ISSUE_MESSAGE_TEMPLATE.format(title=title, description=description)


def parse_title_and_description(message: str) -> Tuple[str, str]:
    """
    Split an edited message into title and description.

    HTML comments are dropped. The first block of non-blank lines is the
    title (lines joined with spaces); everything after it is the description.

    Returns:
        Tuple of (title, description); both empty if nothing was written
    """
    lines = COMMENT_PATTERN.sub("", message).splitlines()

    # Skip leading blank lines
    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1

    end = start
    while end < len(lines) and lines[end].strip():
        end += 1

    title = " ".join(line.strip() for line in lines[start:end])
    description = "\n".join(lines[end:]).strip()
    return title, description


class Editor:
    """A message file opened in the user's editor."""

    def __init__(
        self,
        program: str,
        topic: str,
        message: str,
        editor_command: str,
        git_dir: Optional[str] = None,
    ):
        """
        Args:
            program: Upper-case file stem, e.g. "ISSUE" for ISSUE_EDITMSG
            topic: What is being edited, used in messages
            message: Initial file content
            editor_command: Editor to launch, may include arguments
            git_dir: Directory for the message file (temp dir when None)
        """
        self.topic = topic
        self.message = message
        self.editor_command = editor_command
        directory = Path(git_dir) if git_dir else Path(tempfile.gettempdir())
        self.file_path = directory / f"{program}_EDITMSG"

    def edit(self) -> str:
        """Write the message, run the editor and return the edited text."""
        self.file_path.write_text(self.message)

        command = shlex.split(self.editor_command) + [str(self.file_path)]
        logger.debug(f"Launching editor for {self.topic}: {command}")
        try:
            subprocess.run(command, check=True)
        except FileNotFoundError:
            raise EditorError(f"Editor not found: {self.editor_command}")
        except subprocess.CalledProcessError as e:
            raise EditorError(
                f"Editor '{self.editor_command}' exited with status {e.returncode}; {self.topic} aborted"
            )

        return self.file_path.read_text()

    def edit_title_and_description(self) -> Tuple[str, str]:
        return parse_title_and_description(self.edit())

    def delete_file(self) -> None:
        """Remove the message file if it exists."""
        try:
            self.file_path.unlink()
        except FileNotFoundError:
            pass
