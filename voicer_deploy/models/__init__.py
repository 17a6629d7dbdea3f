"""Data models for voicer-deploy"""

from .config import DeployConfig
from .result import (
    ChangeSet,
    DeployPhase,
    DeployResult,
    ErrorDetail,
    OperationStatus,
    Result,
    ServiceCheck,
    ServiceStepResult,
)

__all__ = [
    # Config models
    "DeployConfig",

    # Result models
    "Result",
    "ErrorDetail",
    "OperationStatus",
    "DeployPhase",
    "DeployResult",
    "ChangeSet",
    "ServiceCheck",
    "ServiceStepResult",
]
