"""Voicer Deploy - pull, install and restart the Voicer platform services.

Synchronizes the platform checkout with its remote branch, reinstalls
Python dependencies when the requirements file changed, and restarts and
verifies the selected systemd services.
"""

from .__version__ import __version__, __version_info__, __license__

# Core API
from .api.deployer import Deployer, deploy

# Data models
from .models import DeployConfig, DeployResult, DeployPhase, ServiceCheck

# Exceptions
from .api.exceptions import (
    DeployToolError,
    CommandError,
    ConfigError,
    SyncError,
    DependencyInstallError,
    RestartError,
    HealthCheckError,
    StateError,
)

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__license__",

    # Main classes
    "Deployer",
    "deploy",

    # Data models
    "DeployConfig",
    "DeployResult",
    "DeployPhase",
    "ServiceCheck",

    # Exceptions
    "DeployToolError",
    "CommandError",
    "ConfigError",
    "SyncError",
    "DependencyInstallError",
    "RestartError",
    "HealthCheckError",
    "StateError",
]
