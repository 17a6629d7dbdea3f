"""Core adapters for voicer-deploy"""

from .deployment_recorder import DeploymentRecorder
from .package_installer import PipInstaller
from .service_manager import SystemdManager

__all__ = [
    "DeploymentRecorder",
    "PipInstaller",
    "SystemdManager",
]
