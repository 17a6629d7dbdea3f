"""Persistence of the commit marker and the deploy log"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from ..api.exceptions import StateError
from ..constants import DEPLOY_LOG_DATE_FORMAT, DEPLOY_LOG_LINE, ErrorCode

logger = logging.getLogger(__name__)


class DeploymentRecorder:
    """Reads and writes the last deployed commit and appends deploy log entries"""

    def __init__(self,
                 state_file: Union[str, Path],
                 log_file: Union[str, Path],
                 clock: Optional[Callable[[], datetime]] = None):
        """
        Initialize recorder

        Args:
            state_file: File holding the last deployed commit
            log_file: Append-only deploy log
            clock: Returns the current time, used for log timestamps
        """
        self.state_file = Path(state_file)
        self.log_file = Path(log_file)
        self._clock = clock or (lambda: datetime.now().astimezone())

    def read_marker(self) -> Optional[str]:
        """
        Read the last deployed commit

        Returns:
            Commit hash, or None when no deploy has been recorded

        Raises:
            StateError: If the file exists but cannot be read or decoded
        """
        if not self.state_file.exists():
            return None
        try:
            content = self.state_file.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as e:
            raise StateError(
                f"Cannot read commit marker {self.state_file}: {e}",
                ErrorCode.STATE_READ_FAILED
            ) from e
        return content or None

    def write_marker(self, commit: str) -> None:
        """Overwrite the marker with commit

        Raises:
            StateError: If the file cannot be written
        """
        try:
            self.state_file.parent.mkdir(parents=True, exist_ok=True)
            self.state_file.write_text(f"{commit}\n", encoding="utf-8")
        except OSError as e:
            raise StateError(f"Cannot write commit marker {self.state_file}: {e}") from e
        logger.debug(f"Recorded commit {commit} in {self.state_file}")

    def format_log_line(self, commit: str, services: Sequence[str]) -> str:
        return DEPLOY_LOG_LINE.format(
            date=self._clock().strftime(DEPLOY_LOG_DATE_FORMAT),
            commit=commit,
            services=" ".join(services)
        )

    def append_log(self, commit: str, services: Sequence[str]) -> str:
        """
        Append one line for a completed deployment

        Returns:
            The line written, without trailing newline

        Raises:
            StateError: If the log cannot be written
        """
        line = self.format_log_line(commit, services)
        try:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.log_file, 'a', encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as e:
            raise StateError(f"Cannot append to deploy log {self.log_file}: {e}") from e
        return line
