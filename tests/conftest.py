"""Shared fixtures for voicer-deploy tests."""

from __future__ import annotations

import io
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from voicer_deploy.api.exceptions import CommandError
from voicer_deploy.core.deployment_recorder import DeploymentRecorder
from voicer_deploy.core.package_installer import PipInstaller
from voicer_deploy.core.service_manager import SystemdManager
from voicer_deploy.models.config import DeployConfig
from voicer_deploy.services.deploy_service import DeployService
from voicer_deploy.utils.git_utils import GitClient

CANONICAL = ["voicer-main", "voicer-ar", "voicer-stats"]
FIXED_NOW = datetime(2026, 10, 17, 5, 50, 0, tzinfo=timezone.utc)


def command_error(*command: str, returncode: int = 1, stderr: str = "boom") -> CommandError:
    return CommandError(list(command), returncode, stderr=stderr)


@pytest.fixture
def console() -> Console:
    """Console writing into a buffer instead of the terminal."""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def config(tmp_path: Path) -> DeployConfig:
    return DeployConfig(
        app_dir=str(tmp_path / "app"),
        env_path=str(tmp_path / "env"),
        services=list(CANONICAL),
        state_file=str(tmp_path / "app" / ".last_deploy_commit"),
        log_file=str(tmp_path / "logs" / "deploy.log"),
        restart_pause=0,
        use_sudo=False,
    )


@pytest.fixture
def git() -> MagicMock:
    mock = MagicMock(spec=GitClient)
    mock.current_revision.return_value = "abc123"
    mock.force_sync_to_remote.return_value = "def456"
    mock.changed_files.return_value = ["app.py"]
    mock.tracked_files.return_value = ["app.py", "requirements.txt"]
    return mock


@pytest.fixture
def installer() -> MagicMock:
    return MagicMock(spec=PipInstaller)


@pytest.fixture
def manager() -> MagicMock:
    mock = MagicMock(spec=SystemdManager)
    mock.is_active.return_value = True
    mock.status.return_value = "● unit.service - status detail"
    return mock


@pytest.fixture
def recorder(config: DeployConfig) -> DeploymentRecorder:
    return DeploymentRecorder(config.state_path, config.log_path, clock=lambda: FIXED_NOW)


@pytest.fixture
def sleep() -> MagicMock:
    return MagicMock()


@pytest.fixture
def service(config, git, installer, manager, recorder, sleep, console) -> DeployService:
    return DeployService(
        config,
        git=git,
        installer=installer,
        manager=manager,
        recorder=recorder,
        sleep=sleep,
        console=console,
    )
