"""Utility functions for voicer-deploy"""

from .git_utils import GitClient
from .process_utils import output_lines, run_command

__all__ = [
    "GitClient",
    "run_command",
    "output_lines",
]
