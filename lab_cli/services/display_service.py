"""Display service for command output"""
from typing import List

from rich.console import Console

from lab_cli.formatters import format_columns
from lab_cli.logging_config import get_logger

console = Console()
logger = get_logger(__name__)


class DisplayService:
    def __init__(self, verbose: bool = False, debug: bool = False):
        self.verbose = verbose
        self.debug_mode = debug

    def message(self, text: str) -> None:
        """Print plain text exactly as given."""
        # Titles may contain [brackets] and :shortcodes:, both left as typed
        console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def display_rows(self, rows: List[str]) -> None:
        """Print delimited rows aligned into columns."""
        logger.debug(f"Displaying {len(rows)} rows")
        if not rows:
            if self.verbose:
                console.print("[dim]No results[/dim]")
            return
        self.message(format_columns(rows))
