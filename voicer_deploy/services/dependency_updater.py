"""Conditional dependency installation"""

import logging
from typing import Iterable

from ..api.exceptions import CommandError, DependencyInstallError
from ..core.package_installer import PipInstaller

logger = logging.getLogger(__name__)


def manifest_changed(changed_files: Iterable[str], manifest: str) -> bool:
    """True if the manifest path appears exactly in changed_files"""
    return any(path == manifest for path in changed_files)


class DependencyUpdater:
    """Runs the installer when the dependency manifest changed"""

    def __init__(self, installer: PipInstaller, manifest: str):
        self.installer = installer
        self.manifest = manifest

    def needs_install(self, changed_files: Iterable[str]) -> bool:
        return manifest_changed(changed_files, self.manifest)

    def update(self, changed_files: Iterable[str]) -> bool:
        """
        Install dependencies if the manifest changed

        Returns:
            True if the installer ran

        Raises:
            DependencyInstallError: If the installer fails
        """
        if not self.needs_install(changed_files):
            logger.debug(f"{self.manifest} not in changed files, skipping install")
            return False

        try:
            self.installer.install_requirements(self.manifest, upgrade=True)
        except CommandError as e:
            raise DependencyInstallError(
                f"Failed to install dependencies from {self.manifest}: {e}",
                self.manifest
            ) from e
        return True
