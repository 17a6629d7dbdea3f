"""Public API for voicer-deploy"""

from .exceptions import (
    DeployToolError,
    CommandError,
    ConfigError,
    SyncError,
    DependencyInstallError,
    ServiceError,
    RestartError,
    HealthCheckError,
    StateError,
)

__all__ = [
    "DeployToolError",
    "CommandError",
    "ConfigError",
    "SyncError",
    "DependencyInstallError",
    "ServiceError",
    "RestartError",
    "HealthCheckError",
    "StateError",
]
