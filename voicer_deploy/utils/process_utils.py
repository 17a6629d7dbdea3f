"""Subprocess helpers for external collaborators"""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..api.exceptions import CommandError

logger = logging.getLogger(__name__)


def run_command(args: Sequence[str],
                cwd: Optional[Union[str, Path]] = None,
                check: bool = True) -> subprocess.CompletedProcess:
    """
    Run an external command and capture its output

    No timeout is applied: a hung command blocks the caller.

    Args:
        args: Command and arguments
        cwd: Working directory
        check: Raise CommandError on non-zero exit

    Returns:
        Completed process with text stdout/stderr

    Raises:
        CommandError: If the command fails (check=True) or cannot be started
    """
    command = [str(a) for a in args]
    logger.debug(f"Running: {' '.join(command)}")

    try:
        result = subprocess.run(
            command,
            cwd=str(cwd) if cwd is not None else None,
            capture_output=True,
            text=True
        )
    except (FileNotFoundError, PermissionError) as e:
        raise CommandError(command, 127, stderr=str(e)) from e

    if result.stdout:
        logger.debug(result.stdout.rstrip())
    if result.stderr:
        logger.debug(result.stderr.rstrip())

    if check and result.returncode != 0:
        raise CommandError(command, result.returncode, result.stdout, result.stderr)

    return result


def output_lines(text: str) -> List[str]:
    """Split command output into non-empty, stripped lines"""
    return [line.strip() for line in (text or "").splitlines() if line.strip()]
