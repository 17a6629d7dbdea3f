"""Package installer adapter"""

import logging
from pathlib import Path
from typing import Union

from ..utils.process_utils import run_command

logger = logging.getLogger(__name__)


class PipInstaller:
    """Installs requirements with the platform environment's pip"""

    def __init__(self, pip_path: Union[str, Path], cwd: Union[str, Path]):
        """
        Initialize installer

        Args:
            pip_path: pip executable inside the target environment
            cwd: Directory the manifest path is relative to
        """
        self.pip_path = str(pip_path)
        self.cwd = Path(cwd)

    def install_requirements(self, manifest: str, upgrade: bool = True) -> None:
        """
        Install or upgrade packages from a requirements file

        Raises:
            CommandError: If pip exits non-zero
        """
        args = [self.pip_path, 'install', '-r', manifest]
        if upgrade:
            args.append('--upgrade')

        logger.info(f"Installing requirements from {manifest}")
        run_command(args, cwd=self.cwd)
