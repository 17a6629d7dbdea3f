"""Tests for the DeployService orchestration flow."""

from __future__ import annotations

from unittest.mock import call

from tests.conftest import CANONICAL, command_error
from voicer_deploy.constants import ErrorCode
from voicer_deploy.models.result import DeployPhase, OperationStatus, ServiceCheck


def _restart_failing_on(name: str):
    def _restart(unit: str) -> None:
        if unit == name:
            raise command_error("systemctl", "restart", unit)
    return _restart


# ---------------------------------------------------------------------------
# Short-circuit path
# ---------------------------------------------------------------------------


class TestNothingChanged:
    """Fetched commit equals the recorded commit."""

    def test_no_install_or_restart(self, service, git, installer, manager, recorder) -> None:
        recorder.write_marker("def456")
        git.force_sync_to_remote.return_value = "def456"

        result = service.run()

        assert result.is_success
        assert result.phase == DeployPhase.SHORT_CIRCUIT_DONE
        assert result.short_circuited is True
        installer.install_requirements.assert_not_called()
        manager.daemon_reload.assert_not_called()
        manager.restart.assert_not_called()
        manager.is_active.assert_not_called()
        git.changed_files.assert_not_called()

    def test_marker_rewritten_with_same_value(self, service, git, recorder) -> None:
        recorder.write_marker("def456")
        git.force_sync_to_remote.return_value = "def456"

        result = service.run(["voicer-main"])

        assert recorder.read_marker() == "def456"
        assert result.marker_written is True

    def test_no_log_line(self, service, git, recorder, config) -> None:
        recorder.write_marker("def456")
        git.force_sync_to_remote.return_value = "def456"

        service.run()

        assert not config.log_path.exists()


# ---------------------------------------------------------------------------
# Change detection and dependency install
# ---------------------------------------------------------------------------


class TestDependencyDecision:
    """Installer runs iff the manifest path is in the changed files."""

    def test_first_deploy_installs(self, service, git, installer) -> None:
        git.tracked_files.return_value = ["app.py", "requirements.txt"]

        result = service.run()

        assert result.is_success
        assert result.previous_commit is None
        installer.install_requirements.assert_called_once_with("requirements.txt", upgrade=True)
        git.changed_files.assert_not_called()
        assert result.dependencies_installed is True

    def test_nested_manifest_does_not_install(self, service, git, installer, recorder) -> None:
        recorder.write_marker("abc123")
        git.changed_files.return_value = ["src/requirements.txt"]

        result = service.run()

        assert result.is_success
        installer.install_requirements.assert_not_called()
        assert result.dependencies_installed is False

    def test_root_manifest_installs(self, service, git, installer, recorder) -> None:
        recorder.write_marker("abc123")
        git.changed_files.return_value = ["requirements.txt"]

        service.run()

        installer.install_requirements.assert_called_once()

    def test_diff_failure_falls_back_to_tracked_files(self, service, git, installer, recorder) -> None:
        recorder.write_marker("gone999")
        git.changed_files.side_effect = command_error("git", "diff")
        git.tracked_files.return_value = ["requirements.txt"]

        result = service.run()

        assert result.is_success
        installer.install_requirements.assert_called_once()
        assert any("gone999" in w for w in result.warnings)


# ---------------------------------------------------------------------------
# Service selection
# ---------------------------------------------------------------------------


class TestSelection:
    def test_explicit_services_in_given_order(self, service, manager, recorder) -> None:
        recorder.write_marker("abc123")

        result = service.run(["svcB", "svcA"])

        assert manager.restart.call_args_list == [call("svcB"), call("svcA")]
        assert manager.is_active.call_args_list == [call("svcB"), call("svcA")]
        assert result.verified_services == ["svcB", "svcA"]

    def test_unknown_names_are_warned_and_still_restarted(self, service, manager, recorder) -> None:
        recorder.write_marker("abc123")

        result = service.run(["voicer-main", "svcX"])

        assert result.is_success
        assert result.service_checks == {
            "voicer-main": ServiceCheck.KNOWN,
            "svcX": ServiceCheck.UNKNOWN_WARNED,
        }
        assert any("svcX" in w for w in result.warnings)
        manager.restart.assert_any_call("svcX")

    def test_default_is_canonical_list(self, service, manager, recorder) -> None:
        recorder.write_marker("abc123")

        result = service.run()

        assert [c.args[0] for c in manager.restart.call_args_list] == CANONICAL
        assert [c.args[0] for c in manager.is_active.call_args_list] == CANONICAL
        assert result.services == CANONICAL

    def test_daemon_reload_once_before_restarts(self, service, manager, recorder) -> None:
        recorder.write_marker("abc123")

        service.run()

        manager.daemon_reload.assert_called_once()
        names = [c[0] for c in manager.method_calls]
        assert names.index("daemon_reload") < names.index("restart")

    def test_pause_after_each_restart(self, service, sleep, recorder) -> None:
        recorder.write_marker("abc123")

        service.run(["voicer-main", "voicer-ar"])

        assert sleep.call_count == 2


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class TestRestartFailure:
    def test_second_of_three_fails(self, service, manager, recorder, config) -> None:
        recorder.write_marker("abc123")
        manager.restart.side_effect = _restart_failing_on("voicer-ar")

        result = service.run()

        assert result.is_failed
        assert result.failed_phase == DeployPhase.RESTART
        assert result.failed_service == "voicer-ar"
        assert manager.restart.call_args_list == [call("voicer-main"), call("voicer-ar")]
        manager.is_active.assert_not_called()
        manager.status.assert_called_once_with("voicer-ar")
        assert result.status_detail == "● unit.service - status detail"
        assert result.errors[0].code == ErrorCode.RESTART_FAILED
        assert recorder.read_marker() == "abc123"
        assert not config.log_path.exists()

    def test_daemon_reload_failure(self, service, manager, recorder) -> None:
        recorder.write_marker("abc123")
        manager.daemon_reload.side_effect = command_error("systemctl", "daemon-reload")

        result = service.run()

        assert result.is_failed
        manager.restart.assert_not_called()
        assert recorder.read_marker() == "abc123"


class TestHealthFailure:
    def test_second_of_three_inactive(self, service, manager, recorder, config) -> None:
        recorder.write_marker("abc123")
        manager.is_active.side_effect = lambda unit: unit != "voicer-ar"

        result = service.run()

        assert result.is_failed
        assert result.failed_phase == DeployPhase.VERIFY
        assert result.failed_service == "voicer-ar"
        assert manager.restart.call_count == 3
        assert manager.is_active.call_args_list == [call("voicer-main"), call("voicer-ar")]
        assert result.errors[0].code == ErrorCode.HEALTH_CHECK_FAILED
        assert recorder.read_marker() == "abc123"
        assert not config.log_path.exists()


class TestFatalSteps:
    def test_sync_failure_mutates_nothing(self, service, git, installer, manager, recorder) -> None:
        recorder.write_marker("abc123")
        git.force_sync_to_remote.side_effect = command_error("git", "fetch", "--all")

        result = service.run()

        assert result.is_failed
        assert result.failed_phase == DeployPhase.PULL
        assert result.errors[0].code == ErrorCode.SYNC_FAILED
        installer.install_requirements.assert_not_called()
        manager.restart.assert_not_called()
        assert recorder.read_marker() == "abc123"

    def test_install_failure_stops_before_restart(self, service, git, installer, manager, recorder) -> None:
        recorder.write_marker("abc123")
        git.changed_files.return_value = ["requirements.txt"]
        installer.install_requirements.side_effect = command_error("pip", "install")

        result = service.run()

        assert result.is_failed
        assert result.failed_phase == DeployPhase.DEPS
        assert result.errors[0].code == ErrorCode.DEPENDENCY_INSTALL_FAILED
        manager.restart.assert_not_called()
        assert recorder.read_marker() == "abc123"

    def test_unreadable_marker_fails_without_raising(self, service, git, manager, config) -> None:
        config.state_path.parent.mkdir(parents=True, exist_ok=True)
        config.state_path.write_bytes(b"\xff\xfe\x00abc")

        result = service.run()

        assert result.is_failed
        assert result.failed_phase == DeployPhase.START
        assert result.errors[0].code == ErrorCode.STATE_READ_FAILED
        git.force_sync_to_remote.assert_not_called()
        manager.restart.assert_not_called()
        assert config.state_path.read_bytes() == b"\xff\xfe\x00abc"

    def test_retry_sees_same_previous_commit(self, service, git, manager, recorder) -> None:
        recorder.write_marker("abc123")
        manager.restart.side_effect = _restart_failing_on("voicer-main")
        service.run()

        manager.restart.side_effect = None
        result = service.run()

        assert result.is_success
        assert git.changed_files.call_args_list == [call("abc123", "def456")] * 2


# ---------------------------------------------------------------------------
# End to end
# ---------------------------------------------------------------------------


class TestEndToEnd:
    def test_full_deploy(self, service, git, installer, manager, recorder, config) -> None:
        recorder.write_marker("abc123")
        git.force_sync_to_remote.return_value = "def456"
        git.changed_files.return_value = ["app.py", "requirements.txt"]

        result = service.run(["voicer-main"])

        assert result.is_success
        assert result.phase == DeployPhase.DONE
        assert result.status == OperationStatus.SUCCESS
        installer.install_requirements.assert_called_once()
        manager.restart.assert_called_once_with("voicer-main")
        manager.is_active.assert_called_once_with("voicer-main")

        lines = config.log_path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        assert "def456" in lines[0]
        assert "voicer-main" in lines[0]
        assert config.state_path.read_text(encoding="utf-8") == "def456\n"
        assert result.marker_written and result.log_written

    def test_log_is_appended_across_runs(self, service, git, recorder, config) -> None:
        recorder.write_marker("abc123")
        service.run(["voicer-main"])

        git.force_sync_to_remote.return_value = "fed789"
        service.run(["voicer-ar"])

        lines = config.log_path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        assert "fed789" in lines[1]
        assert recorder.read_marker() == "fed789"
