"""Core functionality for lab-cli."""

from .lab import Lab

__all__ = ["Lab"]
