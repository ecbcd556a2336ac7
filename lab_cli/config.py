"""Configuration handling for lab-cli"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from lab_cli.constants import (
    CONFIG_DIR_NAME,
    CONFIG_ENV_VAR,
    CONFIG_FILE_NAME,
    DEFAULT_DOMAIN,
    TOKEN_ENV_VAR,
)
from lab_cli.exceptions import ConfigError
from lab_cli.logging_config import get_logger

logger = get_logger(__name__)

# Fields written to the config file; the rest only live for one run
PERSISTED_FIELDS = ("preferred_domains", "tokens")


def default_config_path() -> Path:
    """Config file location, overridable through the LAB_CONFIG environment variable."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME


@dataclass
class Config:
    """Configuration for lab-cli with validation."""

    # GitLab hosts, in order of preference
    preferred_domains: List[str] = field(default_factory=lambda: [DEFAULT_DOMAIN])
    # Private tokens keyed by domain
    tokens: Dict[str, str] = field(default_factory=dict)

    # Execution modes
    verbose: bool = False
    debug: bool = False

    config_path: Optional[Path] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_preferred_domains()
        self._validate_tokens()

    def _validate_preferred_domains(self):
        """Validate preferred_domains is a non-empty list of host names."""
        if not isinstance(self.preferred_domains, list):
            raise ValueError("preferred_domains must be a list")

        self.preferred_domains = [d.strip() for d in self.preferred_domains if d and d.strip()]
        if not self.preferred_domains:
            raise ValueError("preferred_domains cannot be empty")

    def _validate_tokens(self):
        """Validate tokens maps domain names to strings."""
        if not isinstance(self.tokens, dict):
            raise ValueError("tokens must be a mapping of domain to token")
        for domain, token in self.tokens.items():
            if not isinstance(token, str):
                raise ValueError(f"token for '{domain}' must be a string")

    def get_token(self, domain: str) -> Optional[str]:
        """Private token for a domain from the config file or the GITLAB_TOKEN variable."""
        return self.tokens.get(domain) or os.environ.get(TOKEN_ENV_VAR) or None

    def set_token(self, domain: str, token: str) -> None:
        self.tokens[domain] = token

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "preferred_domains": self.preferred_domains,
            "tokens": self.tokens,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        known_fields = {"preferred_domains", "tokens", "verbose", "debug", "config_path"}

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)

    @classmethod
    def load(cls, path: Optional[Path] = None, **overrides) -> "Config":
        """
        Load configuration from a JSON file.

        A missing file yields the defaults.

        Args:
            path: Config file path (defaults to ~/.lab-cli/config.json)
            **overrides: Run-time values such as verbose and debug

        Raises:
            ConfigError: If the file is not valid JSON or has invalid values
        """
        path = Path(path) if path else default_config_path()
        data: dict = {}

        if path.exists():
            try:
                with open(path, "r") as f:
                    data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(f"Invalid JSON in config file {path}: {e}")
            except OSError as e:
                raise ConfigError(f"Failed to read config file {path}: {e}")

            if not isinstance(data, dict):
                raise ConfigError(f"Config file {path} must contain a JSON object")
            logger.debug(f"Loaded config from {path}")
        else:
            logger.debug(f"No config file at {path}, using defaults")

        values = {k: v for k, v in data.items() if k in PERSISTED_FIELDS}
        values.update(overrides)
        values["config_path"] = path

        try:
            return cls.from_dict(values)
        except ValueError as e:
            raise ConfigError(f"Invalid config file {path}: {e}")

    def save(self) -> None:
        """Write the persisted fields to the config file using an atomic rename."""
        path = self.config_path or default_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)

        data = {key: getattr(self, key) for key in PERSISTED_FIELDS}
        temp_file = path.with_suffix(".tmp")
        try:
            with open(temp_file, "w") as f:
                json.dump(data, f, indent=2)
                f.flush()
            # Tokens are secrets
            os.chmod(temp_file, 0o600)
            temp_file.replace(path)
            logger.debug(f"Saved config to {path}")
        except OSError as e:
            raise ConfigError(f"Failed to write config file {path}: {e}")
        finally:
            if temp_file.exists():
                temp_file.unlink()
