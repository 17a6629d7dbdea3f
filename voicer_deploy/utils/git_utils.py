"""Git operation utilities"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..api.exceptions import CommandError
from .process_utils import output_lines, run_command

logger = logging.getLogger(__name__)


class GitClient:
    """Thin wrapper over the git CLI for a single working copy"""

    def __init__(self, repo_path: Union[str, Path], git_binary: str = "git"):
        """
        Initialize git client

        Args:
            repo_path: Path to the working copy
            git_binary: git executable
        """
        self.repo_path = Path(repo_path)
        self.git_binary = git_binary

    def _git(self, *args: str, check: bool = True):
        return run_command([self.git_binary, *args], cwd=self.repo_path, check=check)

    def current_revision(self) -> Optional[str]:
        """
        Resolve HEAD to a commit hash

        Returns:
            Commit hash or None if HEAD cannot be resolved
        """
        try:
            result = self._git('rev-parse', 'HEAD', check=False)
        except CommandError:
            return None
        if result.returncode != 0:
            return None
        return result.stdout.strip() or None

    def fetch_all(self) -> None:
        """Fetch all remote refs"""
        self._git('fetch', '--all')

    def reset_hard(self, ref: str) -> None:
        """Hard-reset the working tree to ref, discarding local changes"""
        self._git('reset', '--hard', ref)

    def force_sync_to_remote(self, remote: str, branch: str) -> str:
        """
        Force-synchronize the working copy to the remote branch tip

        Local commits and uncommitted changes are discarded.

        Args:
            remote: Remote name
            branch: Branch name

        Returns:
            Commit hash of the new HEAD

        Raises:
            CommandError: If fetch, reset or rev-parse fails
        """
        ref = f"{remote}/{branch}"
        logger.info(f"Force-synchronizing {self.repo_path} to {ref}")
        self.fetch_all()
        self.reset_hard(ref)

        commit = self._git('rev-parse', 'HEAD').stdout.strip()
        if not commit:
            raise CommandError([self.git_binary, 'rev-parse', 'HEAD'], 0,
                               stderr="empty revision after reset")
        return commit

    def changed_files(self, old: str, new: str) -> List[str]:
        """
        List files that differ between two revisions

        Raises:
            CommandError: If either revision is unknown
        """
        result = self._git('diff', '--name-only', old, new)
        return output_lines(result.stdout)

    def tracked_files(self) -> List[str]:
        """List all files tracked in the working copy"""
        result = self._git('ls-files')
        return output_lines(result.stdout)
