"""CLI utilities"""

from .output import format_deploy_result

__all__ = ["format_deploy_result"]
