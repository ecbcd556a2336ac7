"""Browser launcher lookup."""

import shlex
import shutil
import subprocess
import sys
from typing import Optional

from lab_cli.constants import BROWSER_CANDIDATES
from lab_cli.exceptions import BrowserNotFoundError
from lab_cli.logging_config import get_logger

logger = get_logger(__name__)


def search_browser_launcher(platform: str) -> Optional[str]:
    """
    Find the command used to open URLs on a platform.

    Args:
        platform: Value of ``sys.platform``

    Returns:
        Launcher command, or None if nothing suitable is installed
    """
    if platform == "darwin":
        return "open"
    if platform == "win32":
        return "cmd /c start"

    for candidate in BROWSER_CANDIDATES:
        path = shutil.which(candidate)
        if path:
            return path
    return None


def open_url(url: str, platform: Optional[str] = None) -> None:
    """Open a URL with the platform's browser launcher."""
    platform = platform or sys.platform
    launcher = search_browser_launcher(platform)
    if not launcher:
        raise BrowserNotFoundError(platform)

    if platform == "win32":
        # "start" treats the first quoted argument as a window title
        command = shlex.split(launcher) + ["", url]
    else:
        command = [launcher, url]

    logger.debug(f"Opening {url} with {launcher}")
    subprocess.Popen(command, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
