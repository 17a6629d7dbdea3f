"""systemd service manager adapter"""

import logging
from typing import List

from ..api.exceptions import CommandError
from ..utils.process_utils import run_command

logger = logging.getLogger(__name__)


class SystemdManager:
    """Drives systemd units through systemctl"""

    def __init__(self, use_sudo: bool = True, systemctl: str = "systemctl"):
        """
        Initialize service manager

        Args:
            use_sudo: Prefix privileged calls with sudo
            systemctl: systemctl executable
        """
        self.use_sudo = use_sudo
        self.systemctl = systemctl

    def _command(self, *args: str, privileged: bool = True) -> List[str]:
        command = [self.systemctl, *args]
        if privileged and self.use_sudo:
            command.insert(0, "sudo")
        return command

    def daemon_reload(self) -> None:
        """Reload unit definitions

        Raises:
            CommandError: If systemctl fails
        """
        run_command(self._command('daemon-reload'))

    def restart(self, unit: str) -> None:
        """Restart a unit

        Raises:
            CommandError: If the restart fails
        """
        logger.debug(f"Restarting unit {unit}")
        run_command(self._command('restart', unit))

    def is_active(self, unit: str) -> bool:
        """Check whether a unit is active"""
        try:
            result = run_command(
                self._command('is-active', '--quiet', unit, privileged=False),
                check=False
            )
        except CommandError as e:
            logger.warning(f"Could not query {unit}: {e}")
            return False
        return result.returncode == 0

    def status(self, unit: str) -> str:
        """
        Get human-readable status detail for a unit

        systemctl status exits non-zero for failed or inactive units,
        so the output is returned regardless of exit code.
        """
        try:
            result = run_command(self._command('status', unit, '--no-pager'), check=False)
        except CommandError as e:
            return str(e)
        return (result.stdout + result.stderr).rstrip()
