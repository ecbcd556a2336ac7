"""Utility functions for lab-cli.

This package provides utility modules:
- reference: Parsing of ``#12`` / ``!34`` style entity references
- browser: Locating a browser launcher and opening URLs
"""

from .reference import BROWSE_TYPE_PREFIXES, split_prefix_and_number
from .browser import search_browser_launcher, open_url

__all__ = [
    # Reference
    "BROWSE_TYPE_PREFIXES",
    "split_prefix_and_number",
    # Browser
    "search_browser_launcher",
    "open_url",
]
