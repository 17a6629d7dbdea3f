"""Deployment orchestration"""

import logging
import time
from typing import Callable, Optional, Sequence

from rich.console import Console

from ..api.exceptions import (
    CommandError,
    DeployToolError,
    HealthCheckError,
    RestartError,
    ServiceError,
)
from ..constants import (
    ErrorCode,
    MSG_CHANGED_FILES,
    MSG_CURRENT_COMMIT,
    MSG_DEPS_CHANGED,
    MSG_DEPS_UNCHANGED,
    MSG_FINISHED,
    MSG_FRESH_DEPLOY,
    MSG_LOGGING,
    MSG_NO_NEW_COMMITS,
    MSG_PREVIOUS_COMMIT,
    MSG_PULLING,
    MSG_SELECTED_ALL,
    MSG_SELECTED_FROM_ARGS,
    MSG_START,
)
from ..core.deployment_recorder import DeploymentRecorder
from ..core.package_installer import PipInstaller
from ..core.service_manager import SystemdManager
from ..models.config import DeployConfig
from ..models.result import (
    ChangeSet,
    DeployPhase,
    DeployResult,
    OperationStatus,
    ServiceCheck,
    ServiceStepResult,
)
from ..utils.git_utils import GitClient
from ..utils.output import console as default_console
from .change_detector import ChangeDetector
from .dependency_updater import DependencyUpdater
from .health_verifier import HealthVerifier
from .selection import select_services
from .service_restarter import ServiceRestarter

logger = logging.getLogger(__name__)


class DeployService:
    """Runs one deployment: sync, install, restart, verify, record

    Every step reports its outcome back here; this class decides whether
    the run continues. Expected failures never raise out of ``run``: they
    end up as a FAILED ``DeployResult`` and the commit marker is left
    untouched so that a re-run recomputes the same changes.
    """

    def __init__(self,
                 config: DeployConfig,
                 git: Optional[GitClient] = None,
                 installer: Optional[PipInstaller] = None,
                 manager: Optional[SystemdManager] = None,
                 recorder: Optional[DeploymentRecorder] = None,
                 sleep: Callable[[float], None] = time.sleep,
                 console: Optional[Console] = None):
        self.config = config
        self.console = console or default_console

        self.git = git or GitClient(config.app_path)
        self.installer = installer or PipInstaller(config.pip_path, config.app_path)
        self.manager = manager or SystemdManager(use_sudo=config.use_sudo)
        self.recorder = recorder or DeploymentRecorder(config.state_path, config.log_path)

        self.detector = ChangeDetector(self.git, config.remote, config.branch)
        self.updater = DependencyUpdater(self.installer, config.manifest)
        self.restarter = ServiceRestarter(
            self.manager,
            config.services,
            pause=config.restart_pause,
            sleep=sleep,
            console=self.console
        )
        self.verifier = HealthVerifier(self.manager, console=self.console)

    def run(self, requested: Sequence[str] = ()) -> DeployResult:
        """
        Execute a deployment

        Args:
            requested: Service names from the command line; empty means all

        Returns:
            DeployResult describing the outcome
        """
        services = select_services(requested, self.config.services)
        result = DeployResult(status=OperationStatus.IN_PROGRESS, services=services)

        self.console.print(MSG_START)
        if requested:
            self.console.print(MSG_SELECTED_FROM_ARGS.format(services=" ".join(services)))
        else:
            self.console.print(MSG_SELECTED_ALL.format(services=" ".join(services)))
        self.console.print()

        try:
            previous = self.recorder.read_marker()
        except DeployToolError as e:
            result.fail(e.error_code, str(e))
            return result
        result.previous_commit = previous
        self.console.print(MSG_PREVIOUS_COMMIT.format(commit=previous or "<none>"))

        change_set = self._pull(result)
        if change_set is None:
            return result

        if change_set.unchanged:
            return self._short_circuit(result)

        self._show_changes(change_set)

        if not self._install_dependencies(result):
            return result
        if not self._restart(result):
            return result
        if not self._verify(result):
            return result

        return self._record(result)

    def _pull(self, result: DeployResult) -> Optional[ChangeSet]:
        result.phase = DeployPhase.PULL
        self.console.print(MSG_PULLING.format(ref=self.config.remote_ref))

        try:
            change_set = self.detector.detect(result.previous_commit)
        except DeployToolError as e:
            result.fail(e.error_code or ErrorCode.SYNC_FAILED, str(e))
            return None

        result.current_commit = change_set.current_commit
        result.head_before = change_set.head_before
        result.changed_files = list(change_set.changed_files)
        if change_set.diff_fallback:
            result.add_warning(
                f"Could not diff against {change_set.previous_commit}; "
                "treating all tracked files as changed"
            )
        self.console.print(MSG_CURRENT_COMMIT.format(commit=change_set.current_commit))
        return change_set

    def _short_circuit(self, result: DeployResult) -> DeployResult:
        self.console.print(f"[green]{MSG_NO_NEW_COMMITS.format(ref=self.config.remote_ref)}[/green]")
        try:
            self.recorder.write_marker(result.current_commit)
        except DeployToolError as e:
            result.fail(e.error_code, str(e))
            return result

        result.marker_written = True
        result.phase = DeployPhase.SHORT_CIRCUIT_DONE
        result.message = "No new commits"
        result.complete(OperationStatus.SUCCESS)
        return result

    def _show_changes(self, change_set: ChangeSet) -> None:
        if change_set.fresh_deploy:
            self.console.print(MSG_FRESH_DEPLOY)
        else:
            self.console.print(MSG_CHANGED_FILES)
        for path in change_set.changed_files:
            self.console.print(path, markup=False, highlight=False)
        self.console.print()

    def _install_dependencies(self, result: DeployResult) -> bool:
        result.phase = DeployPhase.DEPS
        manifest = self.config.manifest

        if not self.updater.needs_install(result.changed_files):
            self.console.print(MSG_DEPS_UNCHANGED.format(manifest=manifest))
            return True

        self.console.print(MSG_DEPS_CHANGED.format(manifest=manifest))
        try:
            result.dependencies_installed = self.updater.update(result.changed_files)
        except DeployToolError as e:
            result.fail(e.error_code, str(e), manifest=manifest)
            return False
        return True

    def _restart(self, result: DeployResult) -> bool:
        result.phase = DeployPhase.RESTART

        try:
            self.restarter.reload_units()
        except CommandError as e:
            result.fail(ErrorCode.COMMAND_FAILED, f"daemon-reload failed: {e}")
            return False

        result.restarts = self.restarter.restart_all(result.services)
        for step in result.restarts:
            result.service_checks[step.service] = step.check
            if step.check == ServiceCheck.UNKNOWN_WARNED:
                result.add_warning(f"{step.service} is not in the canonical service list")

        failed = self._first_failure(result.restarts)
        if failed:
            error = RestartError(failed.service, failed.status_detail, failed.error)
            self._fail_service(result, error)
            return False
        return True

    def _verify(self, result: DeployResult) -> bool:
        result.phase = DeployPhase.VERIFY

        result.health_checks = self.verifier.verify_all(result.services)
        failed = self._first_failure(result.health_checks)
        if failed:
            self._fail_service(result, HealthCheckError(failed.service, failed.status_detail))
            return False
        return True

    def _record(self, result: DeployResult) -> DeployResult:
        self.console.print(MSG_LOGGING)
        try:
            self.recorder.append_log(result.current_commit, result.services)
            result.log_written = True
            self.recorder.write_marker(result.current_commit)
            result.marker_written = True
        except DeployToolError as e:
            result.fail(e.error_code, str(e))
            return result

        self.console.print(MSG_FINISHED)
        result.phase = DeployPhase.DONE
        result.message = f"Deployed {result.current_commit}"
        result.complete(OperationStatus.SUCCESS)
        return result

    @staticmethod
    def _first_failure(steps) -> Optional[ServiceStepResult]:
        for step in steps:
            if not step.is_success:
                return step
        return None

    def _fail_service(self, result: DeployResult, error: ServiceError) -> None:
        logger.error(str(error))
        result.failed_service = error.service
        result.status_detail = error.status_detail
        if error.status_detail:
            self.console.print(error.status_detail, markup=False, highlight=False)
        result.fail(error.error_code, str(error), service=error.service)
