"""Git remote model"""
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse


@dataclass(frozen=True)
class RemoteInfo:
    """A GitLab project as seen through a git remote."""
    domain: str
    namespace: str  # May contain sub-groups, e.g. "group/sub"
    repository: str

    def repository_full_name(self) -> str:
        return f"{self.namespace}/{self.repository}"

    def api_url(self) -> str:
        return f"https://{self.domain}"

    def base_url(self) -> str:
        return f"{self.api_url()}/{self.repository_full_name()}"

    @classmethod
    def from_path(cls, domain: str, path: str) -> Optional["RemoteInfo"]:
        """Build a RemoteInfo from a ``namespace/.../repository`` path."""
        path = path.strip("/")
        if path.endswith(".git"):
            path = path[:-4]

        segments = [segment for segment in path.split("/") if segment]
        if not domain or len(segments) < 2:
            return None

        return cls(
            domain=domain,
            namespace="/".join(segments[:-1]),
            repository=segments[-1],
        )

    @classmethod
    def from_url(cls, url: str) -> Optional["RemoteInfo"]:
        """
        Parse a git remote URL.

        Handles SCP-like SSH URLs (git@gitlab.com:group/repo.git) and
        scheme URLs (ssh://, https://, http://, git://).

        Returns:
            RemoteInfo, or None if the URL does not name a project
        """
        url = url.strip()
        if not url:
            return None

        if "://" not in url:
            # SCP-like syntax: [user@]host:path
            if ":" not in url:
                return None
            host, path = url.split(":", 1)
            host = host.rsplit("@", 1)[-1]
            return cls.from_path(host, path)

        parsed_url = urlparse(url)
        return cls.from_path(parsed_url.hostname or "", parsed_url.path)
