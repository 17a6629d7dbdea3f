"""Operation result models"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional


class OperationStatus(Enum):
    """Operation status"""
    SUCCESS = "success"
    FAILED = "failed"
    IN_PROGRESS = "in_progress"


class DeployPhase(Enum):
    """Stages of a deployment run"""
    START = "start"
    PULL = "pull"
    SHORT_CIRCUIT_DONE = "short_circuit_done"
    DEPS = "deps"
    RESTART = "restart"
    VERIFY = "verify"
    DONE = "done"
    FAILED = "failed"


class ServiceCheck(Enum):
    """Outcome of checking a service name against the canonical list"""
    KNOWN = "known"
    UNKNOWN_WARNED = "unknown_warned"


@dataclass
class ErrorDetail:
    """Detailed error information"""

    code: str
    message: str
    context: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat()
        }


@dataclass
class Result:
    """Base result class"""

    status: OperationStatus
    message: str = ""
    errors: List[ErrorDetail] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    start_time: datetime = field(default_factory=datetime.now)
    end_time: Optional[datetime] = None

    @property
    def is_success(self) -> bool:
        """Check if operation was successful"""
        return self.status == OperationStatus.SUCCESS

    @property
    def is_failed(self) -> bool:
        """Check if operation failed"""
        return self.status == OperationStatus.FAILED

    @property
    def duration(self) -> Optional[float]:
        """Get operation duration in seconds"""
        if self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return None

    def add_error(self, code: str, message: str, **context) -> None:
        """Add an error"""
        self.errors.append(ErrorDetail(code=code, message=message, context=context))

    def add_warning(self, message: str) -> None:
        """Add a warning"""
        self.warnings.append(message)

    def complete(self, status: Optional[OperationStatus] = None) -> None:
        """Mark operation as complete"""
        self.end_time = datetime.now()
        if status:
            self.status = status


@dataclass
class ChangeSet:
    """Outcome of synchronizing the working tree"""

    previous_commit: Optional[str]
    current_commit: str
    head_before: Optional[str] = None
    changed_files: List[str] = field(default_factory=list)
    fresh_deploy: bool = False
    diff_fallback: bool = False

    @property
    def unchanged(self) -> bool:
        """True when the recorded commit already matches the remote tip"""
        return self.previous_commit is not None and self.previous_commit == self.current_commit


@dataclass
class ServiceStepResult:
    """Result of restarting or verifying a single service"""

    service: str
    status: OperationStatus
    check: ServiceCheck = ServiceCheck.KNOWN
    status_detail: Optional[str] = None
    error: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "service": self.service,
            "status": self.status.value,
            "check": self.check.value,
            "status_detail": self.status_detail,
            "error": self.error,
        }


@dataclass
class DeployResult(Result):
    """Result of a deployment run"""

    phase: DeployPhase = DeployPhase.START
    services: List[str] = field(default_factory=list)
    previous_commit: Optional[str] = None
    current_commit: Optional[str] = None
    head_before: Optional[str] = None
    changed_files: List[str] = field(default_factory=list)
    dependencies_installed: bool = False
    restarts: List[ServiceStepResult] = field(default_factory=list)
    health_checks: List[ServiceStepResult] = field(default_factory=list)
    service_checks: Dict[str, ServiceCheck] = field(default_factory=dict)
    failed_phase: Optional[DeployPhase] = None
    failed_service: Optional[str] = None
    status_detail: Optional[str] = None
    marker_written: bool = False
    log_written: bool = False

    @property
    def short_circuited(self) -> bool:
        """True when the run ended early because nothing changed"""
        return self.phase == DeployPhase.SHORT_CIRCUIT_DONE

    @property
    def restarted_services(self) -> List[str]:
        return [r.service for r in self.restarts if r.is_success]

    @property
    def verified_services(self) -> List[str]:
        return [r.service for r in self.health_checks if r.is_success]

    def fail(self, code: str, message: str, **context) -> None:
        """Record an error and move the run to the FAILED phase"""
        self.add_error(code, message, **context)
        self.failed_phase = self.phase
        self.phase = DeployPhase.FAILED
        self.message = message
        self.complete(OperationStatus.FAILED)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "status": self.status.value,
            "phase": self.phase.value,
            "message": self.message,
            "services": list(self.services),
            "previous_commit": self.previous_commit,
            "current_commit": self.current_commit,
            "head_before": self.head_before,
            "changed_files": list(self.changed_files),
            "dependencies_installed": self.dependencies_installed,
            "restarts": [r.to_dict() for r in self.restarts],
            "health_checks": [r.to_dict() for r in self.health_checks],
            "service_checks": {k: v.value for k, v in self.service_checks.items()},
            "failed_phase": self.failed_phase.value if self.failed_phase else None,
            "failed_service": self.failed_service,
            "marker_written": self.marker_written,
            "log_written": self.log_written,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": self.warnings,
            "duration": self.duration
        }
