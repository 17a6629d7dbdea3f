"""Configuration loading service"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from ..api.exceptions import ConfigError
from ..constants import (
    ENV_APP_DIR,
    ENV_CONFIG_PATH,
    ENV_ENV_PATH,
    ENV_LOG_FILE,
    ENV_SERVICES,
    ENV_STATE_FILE,
    PROJECT_CONFIG_FILE,
)
from ..models.config import DeployConfig

logger = logging.getLogger(__name__)

# Environment variables that override single config keys
ENV_OVERRIDES = {
    ENV_APP_DIR: "app_dir",
    ENV_ENV_PATH: "env_path",
    ENV_STATE_FILE: "state_file",
    ENV_LOG_FILE: "log_file",
}


class ConfigService:
    """Service for resolving and loading deployment configuration"""

    def __init__(self,
                 config_path: Optional[Union[str, Path]] = None,
                 environ: Optional[Mapping[str, str]] = None,
                 cwd: Optional[Union[str, Path]] = None):
        """Initialize config service

        Args:
            config_path: Explicit configuration file
            environ: Environment mapping (defaults to os.environ)
            cwd: Directory searched for the project config file
        """
        self.environ = os.environ if environ is None else environ
        self.cwd = Path(cwd) if cwd else Path.cwd()
        self.explicit_path = Path(config_path) if config_path else None

    def resolve_path(self) -> Optional[Path]:
        """Find the configuration file to use

        Returns:
            Path to the file, or None to use built-in defaults

        Raises:
            ConfigError: If an explicitly requested file does not exist
        """
        if self.explicit_path:
            if not self.explicit_path.exists():
                raise ConfigError(f"Configuration file not found: {self.explicit_path}")
            return self.explicit_path

        env_path = self.environ.get(ENV_CONFIG_PATH)
        if env_path:
            path = Path(env_path)
            if not path.exists():
                raise ConfigError(f"Configuration file not found: {path} (from {ENV_CONFIG_PATH})")
            return path

        project_file = self.cwd / PROJECT_CONFIG_FILE
        if project_file.exists():
            return project_file

        return None

    def read_file(self, path: Path) -> Dict[str, Any]:
        """Read a YAML config file, expanding environment variables

        Raises:
            ConfigError: If the file is not a valid YAML mapping
        """
        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()

        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration in {path} must be a mapping")
        return data

    def apply_env_overrides(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply single-key overrides from the environment"""
        data = dict(data)
        for env_name, key in ENV_OVERRIDES.items():
            value = self.environ.get(env_name)
            if value:
                data[key] = value

        services = self.environ.get(ENV_SERVICES)
        if services:
            data["services"] = [s.strip() for s in services.split(",") if s.strip()]
        return data

    def load(self) -> DeployConfig:
        """Load configuration

        Returns:
            DeployConfig built from file, environment and defaults

        Raises:
            ConfigError: If the configuration is invalid
        """
        data: Dict[str, Any] = {}
        path = self.resolve_path()
        if path:
            logger.info(f"Loading configuration from {path}")
            data = self.read_file(path)
        else:
            logger.debug("No configuration file found, using defaults")

        data = self.apply_env_overrides(data)
        return DeployConfig.from_dict(data)


def load_config(config_path: Optional[Union[str, Path]] = None) -> DeployConfig:
    """Load configuration using the standard lookup order"""
    return ConfigService(config_path).load()
