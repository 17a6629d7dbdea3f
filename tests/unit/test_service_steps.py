"""Tests for ServiceRestarter and HealthVerifier."""

from __future__ import annotations

from unittest.mock import MagicMock, call

from tests.conftest import CANONICAL, command_error
from voicer_deploy.models.result import OperationStatus, ServiceCheck
from voicer_deploy.services.health_verifier import HealthVerifier
from voicer_deploy.services.service_restarter import ServiceRestarter


class TestServiceRestarter:
    def test_restarts_in_order_with_pause(self, manager, console) -> None:
        sleep = MagicMock()
        restarter = ServiceRestarter(manager, CANONICAL, pause=1.0, sleep=sleep, console=console)

        results = restarter.restart_all(["voicer-ar", "voicer-main"])

        assert [r.service for r in results] == ["voicer-ar", "voicer-main"]
        assert all(r.status == OperationStatus.SUCCESS for r in results)
        assert manager.restart.call_args_list == [call("voicer-ar"), call("voicer-main")]
        assert sleep.call_args_list == [call(1.0), call(1.0)]

    def test_stops_at_first_failure(self, manager, console) -> None:
        manager.restart.side_effect = [None, command_error("systemctl", "restart", "voicer-ar"), None]
        sleep = MagicMock()
        restarter = ServiceRestarter(manager, CANONICAL, sleep=sleep, console=console)

        results = restarter.restart_all(CANONICAL)

        assert len(results) == 2
        assert results[-1].status == OperationStatus.FAILED
        assert results[-1].status_detail == "● unit.service - status detail"
        assert manager.restart.call_count == 2
        assert sleep.call_count == 1

    def test_unknown_service_is_warned(self, manager, console) -> None:
        restarter = ServiceRestarter(manager, CANONICAL, sleep=MagicMock(), console=console)

        results = restarter.restart_all(["mystery"])

        assert results[0].check == ServiceCheck.UNKNOWN_WARNED
        assert results[0].is_success
        assert "mystery is not in the canonical service list" in console.file.getvalue()

    def test_reload_units(self, manager, console) -> None:
        ServiceRestarter(manager, CANONICAL, console=console).reload_units()
        manager.daemon_reload.assert_called_once_with()


class TestHealthVerifier:
    def test_all_active(self, manager, console) -> None:
        results = HealthVerifier(manager, console=console).verify_all(CANONICAL)

        assert [r.service for r in results] == CANONICAL
        assert all(r.is_success for r in results)
        manager.status.assert_not_called()

    def test_stops_at_first_inactive(self, manager, console) -> None:
        manager.is_active.side_effect = [True, False, True]

        results = HealthVerifier(manager, console=console).verify_all(CANONICAL)

        assert len(results) == 2
        assert results[1].service == "voicer-ar"
        assert results[1].status == OperationStatus.FAILED
        manager.status.assert_called_once_with("voicer-ar")
        assert "voicer-ar FAILED to start!" in console.file.getvalue()
