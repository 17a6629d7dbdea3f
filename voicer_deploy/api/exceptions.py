"""Exception definitions for voicer-deploy"""

from typing import List, Optional, Sequence

from ..constants import ErrorCode


class DeployToolError(Exception):
    """Base exception for voicer-deploy"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class CommandError(DeployToolError):
    """External command exited with a non-zero status"""

    def __init__(self,
                 command: Sequence[str],
                 returncode: int,
                 stdout: str = "",
                 stderr: str = ""):
        self.command: List[str] = list(command)
        self.returncode = returncode
        self.stdout = stdout or ""
        self.stderr = stderr or ""

        message = f"Command failed with exit code {returncode}: {' '.join(self.command)}"
        detail = self.stderr.strip() or self.stdout.strip()
        if detail:
            message = f"{message}\n{detail}"
        super().__init__(message, ErrorCode.COMMAND_FAILED)


class ConfigError(DeployToolError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_ERROR)


class SyncError(DeployToolError):
    """Fetching or resetting the working tree failed"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.SYNC_FAILED)


class DependencyInstallError(DeployToolError):
    """Package installation failed"""

    def __init__(self, message: str, manifest: str):
        super().__init__(message, ErrorCode.DEPENDENCY_INSTALL_FAILED)
        self.manifest = manifest


class ServiceError(DeployToolError):
    """Base for failures tied to a single service"""

    def __init__(self, message: str, service: str,
                 status_detail: Optional[str] = None, error_code: str = None):
        super().__init__(message, error_code)
        self.service = service
        self.status_detail = status_detail


class RestartError(ServiceError):
    """Service restart failed"""

    def __init__(self, service: str, status_detail: Optional[str] = None,
                 reason: Optional[str] = None):
        message = f"Failed to restart {service}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, service, status_detail, ErrorCode.RESTART_FAILED)


class HealthCheckError(ServiceError):
    """Service is not active after restart"""

    def __init__(self, service: str, status_detail: Optional[str] = None):
        super().__init__(
            f"{service} FAILED to start",
            service,
            status_detail,
            ErrorCode.HEALTH_CHECK_FAILED
        )


class StateError(DeployToolError):
    """Commit marker or deploy log could not be read or written"""

    def __init__(self, message: str, error_code: str = ErrorCode.STATE_WRITE_FAILED):
        super().__init__(message, error_code)
