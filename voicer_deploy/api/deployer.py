"""Deployer API for deployment runs"""

from pathlib import Path
from typing import Optional, Sequence, Union

from ..models import DeployConfig, DeployResult
from ..services.config_service import load_config
from ..services.deploy_service import DeployService


class Deployer:
    """Deployer class for platform deployments"""

    def __init__(self, config: Optional[DeployConfig] = None):
        """
        Initialize deployer

        Args:
            config: Deployment configuration (loaded from the standard
                locations when omitted)
        """
        self.config = config or load_config()
        self.service = DeployService(self.config)

    def deploy(self, services: Sequence[str] = ()) -> DeployResult:
        """
        Deploy the latest remote commit

        Args:
            services: Services to restart; empty means the canonical list

        Returns:
            DeployResult: Deployment result
        """
        return self.service.run(services)


def deploy(services: Sequence[str] = (),
           config_path: Optional[Union[str, Path]] = None) -> DeployResult:
    """
    Deploy the latest remote commit

    Args:
        services: Services to restart; empty means the canonical list
        config_path: Configuration file

    Returns:
        DeployResult: Deployment result

    Raises:
        ConfigError: If the configuration is invalid
    """
    return Deployer(load_config(config_path)).deploy(services)
