"""Custom exceptions for lab-cli"""

from typing import List, Optional


class LabError(Exception):
    """Base exception for all lab-cli errors."""
    pass


class InvalidArgumentError(LabError):
    """Exception raised when a reference has no known prefix."""

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"Invalid arg: {argument}")


class InvalidBrowsingNumberError(LabError):
    """Exception raised when a reference prefix is followed by something other than a number."""

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"Invalid browsing number: {argument}")


class GitOperationError(LabError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class RemoteNotFoundError(GitOperationError):
    """Exception raised when no remote points at a preferred GitLab domain."""

    def __init__(self, domains: List[str]):
        self.domains = domains
        super().__init__(
            "find_remote", f"No remote found for GitLab domains: {', '.join(domains)}"
        )


class GitLabAPIError(LabError):
    """Exception raised for errors in GitLab API operations."""

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation
        self.message = message

        error_msg = f"GitLab API operation '{operation}' failed"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class AuthenticationError(LabError):
    """Exception raised when no private token is available for a domain."""

    def __init__(self, domain: str):
        self.domain = domain
        super().__init__(
            f"No private token for {domain}. "
            f"Set GITLAB_TOKEN or add it to the config file"
        )


class EditorError(LabError):
    """Exception raised when the message editor cannot be run."""
    pass


class BrowserNotFoundError(LabError):
    """Exception raised when no browser launcher is available."""

    def __init__(self, platform: str):
        self.platform = platform
        super().__init__(f"No browser launcher found for platform '{platform}'")


class ConfigError(LabError):
    """Exception raised when the config file cannot be read or written."""
    pass
