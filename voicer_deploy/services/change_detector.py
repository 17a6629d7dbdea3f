"""Detection of changes between the recorded and the fetched commit"""

import logging
from typing import Optional

from ..api.exceptions import CommandError, SyncError
from ..models.result import ChangeSet
from ..utils.git_utils import GitClient

logger = logging.getLogger(__name__)


class ChangeDetector:
    """Synchronizes the working copy and computes the changed-file set"""

    def __init__(self, git: GitClient, remote: str, branch: str):
        self.git = git
        self.remote = remote
        self.branch = branch

    def detect(self, previous_commit: Optional[str]) -> ChangeSet:
        """
        Force-sync to the remote tip and compare with the recorded commit

        With no recorded commit every tracked file counts as changed, so
        the first deploy always installs dependencies. If the diff against
        the recorded commit fails (e.g. history was rewritten) the tracked
        file list is used as well.

        Args:
            previous_commit: Last deployed commit, or None

        Returns:
            ChangeSet for this run

        Raises:
            SyncError: If fetch, reset or listing files fails
        """
        head_before = self.git.current_revision()

        try:
            current = self.git.force_sync_to_remote(self.remote, self.branch)
        except CommandError as e:
            raise SyncError(f"Failed to synchronize with {self.remote}/{self.branch}: {e}") from e

        change_set = ChangeSet(
            previous_commit=previous_commit,
            current_commit=current,
            head_before=head_before
        )

        if change_set.unchanged:
            return change_set

        if previous_commit is None:
            change_set.fresh_deploy = True
            change_set.changed_files = self._tracked_files()
            return change_set

        try:
            change_set.changed_files = self.git.changed_files(previous_commit, current)
        except CommandError as e:
            logger.warning(
                f"Cannot diff {previous_commit}..{current}, treating all tracked files as changed: {e}"
            )
            change_set.diff_fallback = True
            change_set.changed_files = self._tracked_files()

        return change_set

    def _tracked_files(self):
        try:
            return self.git.tracked_files()
        except CommandError as e:
            raise SyncError(f"Failed to list tracked files: {e}") from e
