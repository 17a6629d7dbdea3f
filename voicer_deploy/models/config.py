"""Configuration data models"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..api.exceptions import ConfigError
from ..constants import (
    DEFAULT_APP_DIR,
    DEFAULT_BRANCH,
    DEFAULT_ENV_PATH,
    DEFAULT_LOG_FILE,
    DEFAULT_MANIFEST,
    DEFAULT_REMOTE,
    DEFAULT_RESTART_PAUSE,
    DEFAULT_SERVICES,
    DEFAULT_STATE_FILE_NAME,
)


@dataclass
class DeployConfig:
    """Deployment configuration passed to the orchestrator

    Paths left as None are derived from ``app_dir`` and ``env_path``
    in ``__post_init__``.
    """

    app_dir: str = DEFAULT_APP_DIR
    env_path: str = DEFAULT_ENV_PATH
    python_path: Optional[str] = None
    pip_path: Optional[str] = None
    services: List[str] = field(default_factory=lambda: list(DEFAULT_SERVICES))
    state_file: Optional[str] = None
    log_file: str = DEFAULT_LOG_FILE
    remote: str = DEFAULT_REMOTE
    branch: str = DEFAULT_BRANCH
    manifest: str = DEFAULT_MANIFEST
    restart_pause: float = DEFAULT_RESTART_PAUSE
    use_sudo: bool = True

    def __post_init__(self):
        """Derive dependent paths and validate"""
        self._check_path_types()

        if self.python_path is None:
            self.python_path = str(Path(self.env_path) / "bin" / "python")
        if self.pip_path is None:
            self.pip_path = str(Path(self.env_path) / "bin" / "pip")
        if self.state_file is None:
            self.state_file = str(Path(self.app_dir) / DEFAULT_STATE_FILE_NAME)

        self.validate()

    def _check_path_types(self) -> None:
        """Reject non-string path values before paths are derived from them"""
        for key in ("app_dir", "env_path", "log_file"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f"'{key}' must be a non-empty string")

        for key in ("python_path", "pip_path", "state_file"):
            value = getattr(self, key)
            if value is not None and (not isinstance(value, str) or not value.strip()):
                raise ConfigError(f"'{key}' must be a non-empty string")

    def validate(self) -> None:
        """Validate configuration values

        Raises:
            ConfigError: If any value is invalid
        """
        if not isinstance(self.services, list) or not self.services:
            raise ConfigError("'services' must be a non-empty list of service names")
        for name in self.services:
            if not isinstance(name, str) or not name.strip():
                raise ConfigError(f"Invalid service name: {name!r}")

        for key in ("app_dir", "remote", "branch", "manifest"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f"'{key}' must be a non-empty string")

        try:
            self.restart_pause = float(self.restart_pause)
        except (TypeError, ValueError):
            raise ConfigError(f"'restart_pause' must be a number, got {self.restart_pause!r}")
        if self.restart_pause < 0:
            raise ConfigError("'restart_pause' must not be negative")

    @property
    def app_path(self) -> Path:
        return Path(self.app_dir)

    @property
    def state_path(self) -> Path:
        return Path(self.state_file)

    @property
    def log_path(self) -> Path:
        return Path(os.path.expanduser(self.log_file))

    @property
    def remote_ref(self) -> str:
        """Remote branch the working tree is reset to"""
        return f"{self.remote}/{self.branch}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "app_dir": self.app_dir,
            "env_path": self.env_path,
            "python_path": self.python_path,
            "pip_path": self.pip_path,
            "services": list(self.services),
            "state_file": self.state_file,
            "log_file": self.log_file,
            "remote": self.remote,
            "branch": self.branch,
            "manifest": self.manifest,
            "restart_pause": self.restart_pause,
            "use_sudo": self.use_sudo,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'DeployConfig':
        """Create from dictionary

        Unknown keys are rejected so that typos in the config file
        surface instead of silently falling back to defaults.
        """
        data = dict(data or {})

        known = set(cls.__dataclass_fields__)
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        services = data.get("services")
        if services is not None and not isinstance(services, list):
            raise ConfigError("'services' must be a list of service names")

        use_sudo = data.get("use_sudo")
        if use_sudo is not None and not isinstance(use_sudo, bool):
            raise ConfigError("'use_sudo' must be true or false")

        return cls(**data)
