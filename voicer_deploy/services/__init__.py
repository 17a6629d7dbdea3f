"""Deployment services"""

from .change_detector import ChangeDetector
from .config_service import ConfigService, load_config
from .dependency_updater import DependencyUpdater, manifest_changed
from .deploy_service import DeployService
from .health_verifier import HealthVerifier
from .selection import classify_service, select_services
from .service_restarter import ServiceRestarter

__all__ = [
    "ChangeDetector",
    "ConfigService",
    "load_config",
    "DependencyUpdater",
    "manifest_changed",
    "DeployService",
    "HealthVerifier",
    "classify_service",
    "select_services",
    "ServiceRestarter",
]
