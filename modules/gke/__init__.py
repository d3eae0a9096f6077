"""
GKE Module
Creates the GKE control plane and its explicitly managed node pool
"""

from .functions import (
    get_engine_version,
    create_gke_cluster,
    create_node_pool,
    create_gke_resources,
)

__all__ = [
    "get_engine_version",
    "create_gke_cluster",
    "create_node_pool",
    "create_gke_resources",
]
