"""Post-restart health verification"""

import logging
from typing import List, Optional, Sequence

from rich.console import Console

from ..constants import MSG_CHECKING, MSG_SERVICE_DOWN, MSG_SERVICE_RUNNING
from ..core.service_manager import SystemdManager
from ..models.result import OperationStatus, ServiceStepResult
from ..utils.output import console as default_console

logger = logging.getLogger(__name__)


class HealthVerifier:
    """Checks that restarted services stayed active"""

    def __init__(self, manager: SystemdManager, console: Optional[Console] = None):
        self.manager = manager
        self.console = console or default_console

    def verify_all(self, services: Sequence[str]) -> List[ServiceStepResult]:
        """
        Check each service in order, stopping at the first inactive one

        Returns:
            One result per checked service; only the last can be failed
        """
        self.console.print(MSG_CHECKING)
        results: List[ServiceStepResult] = []

        for service in services:
            if self.manager.is_active(service):
                self.console.print(f"   [green]{MSG_SERVICE_RUNNING.format(service=service)}[/green]")
                results.append(ServiceStepResult(service=service, status=OperationStatus.SUCCESS))
                continue

            self.console.print(f"   [red]{MSG_SERVICE_DOWN.format(service=service)}[/red]")
            logger.error(f"{service} is not active after restart")
            results.append(ServiceStepResult(
                service=service,
                status=OperationStatus.FAILED,
                status_detail=self.manager.status(service),
                error=f"{service} is not active"
            ))
            break

        return results
