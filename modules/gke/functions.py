"""
GKE Module Functions
Creates the GKE cluster and a separately managed node pool
"""

import pulumi
import pulumi_gcp as gcp
from typing import Dict, List, Optional

NODE_POOL_NAME = "primary-node-pool"

NODE_OAUTH_SCOPES = [
    "https://www.googleapis.com/auth/compute",
    "https://www.googleapis.com/auth/devstorage.read_only",
    "https://www.googleapis.com/auth/logging.write",
    "https://www.googleapis.com/auth/monitoring",
]


def get_engine_version(location: Optional[str] = None) -> pulumi.Output[str]:
    """
    Look up the latest control-plane version offered by GKE

    Args:
        location: Zone or region to query; provider default when omitted

    Returns:
        Deferred latest master version
    """
    versions = gcp.container.get_engine_versions_output(location=location)
    return versions.latest_master_version


def create_gke_cluster(name: str, min_master_version: pulumi.Input[str]) -> Dict[str, any]:
    """
    Create GKE cluster

    GKE refuses a cluster without a node pool, so the smallest possible
    default pool is created and removed right away. Worker nodes live in
    the pool from create_node_pool.

    Args:
        name: Cluster name
        min_master_version: Minimum control-plane version

    Returns:
        Dict with cluster resource and outputs
    """
    cluster = gcp.container.Cluster(
        name,
        initial_node_count=1,
        remove_default_node_pool=True,
        min_master_version=min_master_version,
    )

    pulumi.log.info(f"Declared GKE cluster {name}")

    return {
        "cluster": cluster,
        "cluster_name": cluster.name,
        "cluster_location": cluster.location,
        "cluster_endpoint": cluster.endpoint,
        "cluster_master_auth": cluster.master_auth,
    }


def create_node_pool(cluster: gcp.container.Cluster, node_count: int, machine_type: str,
                     version: pulumi.Input[str],
                     oauth_scopes: Optional[List[str]] = None) -> Dict[str, any]:
    """
    Create the primary node pool

    Args:
        cluster: Cluster the pool attaches to
        node_count: Initial number of nodes
        machine_type: Compute Engine machine type for nodes
        version: Kubernetes version for the nodes
        oauth_scopes: OAuth scopes granted to the node service account

    Returns:
        Dict with node pool resource and outputs
    """
    oauth_scopes = oauth_scopes or NODE_OAUTH_SCOPES

    node_pool = gcp.container.NodePool(
        NODE_POOL_NAME,
        cluster=cluster.name,
        initial_node_count=node_count,
        location=cluster.location,
        node_config=gcp.container.NodePoolNodeConfigArgs(
            preemptible=True,
            machine_type=machine_type,
            oauth_scopes=oauth_scopes,
        ),
        version=version,
        management=gcp.container.NodePoolManagementArgs(
            auto_repair=True,
        ),
        opts=pulumi.ResourceOptions(depends_on=[cluster])
    )

    pulumi.log.info(f"Declared node pool {NODE_POOL_NAME} ({node_count} x {machine_type})")

    return {
        "node_pool": node_pool,
        "node_pool_name": node_pool.name,
    }


def create_gke_resources(cluster_name: str, node_count: int, machine_type: str,
                         location: Optional[str] = None) -> Dict[str, any]:
    """
    Create complete GKE infrastructure

    Args:
        cluster_name: GKE cluster name
        node_count: Initial number of nodes in the primary pool
        machine_type: Machine type for the primary pool
        location: Location used for the version lookup

    Returns:
        Dict with all GKE resources and outputs
    """
    engine_version = get_engine_version(location)

    cluster_result = create_gke_cluster(
        name=cluster_name,
        min_master_version=engine_version,
    )

    node_pool_result = create_node_pool(
        cluster=cluster_result["cluster"],
        node_count=node_count,
        machine_type=machine_type,
        version=engine_version,
    )

    return {
        "engine_version": engine_version,
        "cluster_name": cluster_result["cluster_name"],
        "cluster_location": cluster_result["cluster_location"],
        "cluster_endpoint": cluster_result["cluster_endpoint"],
        "cluster_master_auth": cluster_result["cluster_master_auth"],
        "node_pool_name": node_pool_result["node_pool_name"],
        # Keep references to resources for dependencies
        "_cluster": cluster_result["cluster"],
        "_node_pool": node_pool_result["node_pool"],
    }
