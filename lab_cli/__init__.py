"""
lab-cli - A command-line client for GitLab issues, merge requests and projects
"""

from .__version__ import __version__
from .core import Lab
from .cli.main import main

__all__ = ["Lab", "main", "__version__"]
