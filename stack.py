"""
GKE stack assembly
Config first, then cluster, node pool, kubeconfig and provider in dependency order
"""

from typing import Dict, Optional

from config import Config, get_config
from modules.gke.functions import create_gke_resources
from modules.kubeconfig.functions import create_kubeconfig
from modules.provider.functions import create_kubernetes_provider


def deploy(config: Optional[Config] = None) -> Dict[str, any]:
    """
    Declare the whole stack

    Configuration is loaded before anything is sent to the engine, so a
    missing required key aborts the run with no resources declared.

    Args:
        config: Preloaded configuration; read from the stack when omitted

    Returns:
        Dict with stack outputs and resource references
    """
    config = config or get_config()

    gke = create_gke_resources(
        cluster_name=config.cluster_name,
        node_count=config.cluster_node_count,
        machine_type=config.cluster_node_machine_type,
    )

    kubeconfig = create_kubeconfig(
        gke["_cluster"],
        project=config.gcp_project,
        zone=config.gcp_zone,
    )

    provider = create_kubernetes_provider(
        config.cluster_name,
        kubeconfig,
        node_pool=gke["_node_pool"],
    )

    return {
        "cluster_name": gke["cluster_name"],
        "cluster_endpoint": gke["cluster_endpoint"],
        "cluster_location": gke["cluster_location"],
        "node_pool_name": gke["node_pool_name"],
        "kubeconfig": kubeconfig,
        "_cluster": gke["_cluster"],
        "_node_pool": gke["_node_pool"],
        "_provider": provider,
    }
