"""Sequential service restarts with fail-fast semantics"""

import logging
import time
from typing import Callable, List, Optional, Sequence

from rich.console import Console

from ..api.exceptions import CommandError
from ..constants import (
    MSG_DAEMON_RELOAD,
    MSG_RESTART_FAILED,
    MSG_RESTART_ONE,
    MSG_RESTARTING,
    MSG_UNKNOWN_SERVICE,
)
from ..core.service_manager import SystemdManager
from ..models.result import OperationStatus, ServiceCheck, ServiceStepResult
from ..utils.output import console as default_console
from .selection import classify_service

logger = logging.getLogger(__name__)


class ServiceRestarter:
    """Restarts selected services in order, stopping at the first failure"""

    def __init__(self,
                 manager: SystemdManager,
                 canonical: Sequence[str],
                 pause: float = 1.0,
                 sleep: Callable[[float], None] = time.sleep,
                 console: Optional[Console] = None):
        """
        Initialize restarter

        Args:
            manager: Service manager adapter
            canonical: Canonical service list, used for name checks
            pause: Seconds to wait after each successful restart
            sleep: Sleep function
            console: Console for progress lines
        """
        self.manager = manager
        self.canonical = list(canonical)
        self.pause = pause
        self._sleep = sleep
        self.console = console or default_console

    def reload_units(self) -> None:
        """Reload unit definitions

        Raises:
            CommandError: If daemon-reload fails
        """
        self.console.print(MSG_DAEMON_RELOAD)
        self.manager.daemon_reload()

    def restart_all(self, services: Sequence[str]) -> List[ServiceStepResult]:
        """
        Restart each service in order

        On the first failure the unit's status is captured and no
        further service is touched. Services restarted earlier are left
        as they are.

        Returns:
            One result per attempted restart; only the last can be failed
        """
        self.console.print(MSG_RESTARTING.format(services=" ".join(services)))
        results: List[ServiceStepResult] = []

        for service in services:
            check = classify_service(service, self.canonical)
            if check == ServiceCheck.UNKNOWN_WARNED:
                self.console.print(f"   [yellow]{MSG_UNKNOWN_SERVICE.format(service=service)}[/yellow]")
                logger.warning(f"{service} is not in the canonical service list")

            self.console.print(f"   {MSG_RESTART_ONE.format(service=service)}")
            try:
                self.manager.restart(service)
            except CommandError as e:
                self.console.print(f"   [red]{MSG_RESTART_FAILED.format(service=service)}[/red]")
                results.append(ServiceStepResult(
                    service=service,
                    status=OperationStatus.FAILED,
                    check=check,
                    status_detail=self.manager.status(service),
                    error=str(e)
                ))
                return results

            results.append(ServiceStepResult(
                service=service,
                status=OperationStatus.SUCCESS,
                check=check
            ))
            self._sleep(self.pause)

        return results
