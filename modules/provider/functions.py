"""
Provider Module Functions
Kubernetes provider for workloads deployed onto the GKE cluster
"""

import pulumi
import pulumi_kubernetes as k8s


def create_kubernetes_provider(name: str, kubeconfig: pulumi.Input[str],
                               node_pool: pulumi.Resource) -> k8s.Provider:
    """
    Create Kubernetes provider for the GKE cluster

    The provider waits for the node pool so nothing gets scheduled onto a
    cluster that has no worker nodes yet.

    Args:
        name: Cluster name, used as the provider name prefix
        kubeconfig: Kubeconfig text for the cluster
        node_pool: Node pool the provider depends on

    Returns:
        Kubernetes provider instance
    """
    provider = k8s.Provider(
        f"{name}-provider",
        kubeconfig=kubeconfig,
        opts=pulumi.ResourceOptions(depends_on=[node_pool])
    )

    pulumi.log.info(f"Declared Kubernetes provider {name}-provider")

    return provider
