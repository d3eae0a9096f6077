"""
Configuration management for the GKE cluster stack
"""

import pulumi
import pulumi_gcp as gcp
from typing import Optional

DEFAULT_NODE_COUNT = 1
DEFAULT_NODE_MACHINE_TYPE = "n1-standard-1"


class Config:
    """Centralized configuration management for the GKE deployment"""

    def __init__(self):
        self.config = pulumi.Config()

        # Cluster Configuration
        self.cluster_name = self.config.require("clusterName")

        # Node Pool Configuration
        self.cluster_node_count = self.config.get_int("clusterNodeCount") or DEFAULT_NODE_COUNT
        self.cluster_node_machine_type = self.config.get("clusterNodeMachineType") or DEFAULT_NODE_MACHINE_TYPE

        # Credentials - kept as secret Outputs, never logged
        self.cluster_username = self.config.require_secret("clusterUsername")
        self.cluster_password = self.config.require_secret("clusterPassword")

        pulumi.log.info(
            f"Cluster {self.cluster_name}: {self.cluster_node_count} x {self.cluster_node_machine_type}"
        )

    @property
    def gcp_project(self) -> Optional[str]:
        """Project from the gcp provider configuration (gcp:project)"""
        return gcp.config.project

    @property
    def gcp_zone(self) -> Optional[str]:
        """Zone from the gcp provider configuration (gcp:zone)"""
        return gcp.config.zone


def get_config() -> Config:
    """Get the global configuration instance"""
    return Config()
