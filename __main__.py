"""
GKE Cluster - KISS Architecture
Managed control plane + one explicitly managed node pool + kubeconfig/provider
"""
import pulumi
from stack import deploy

gke_stack = deploy()

# Exports
pulumi.export("cluster_name", gke_stack["cluster_name"])
pulumi.export("cluster_endpoint", gke_stack["cluster_endpoint"])
pulumi.export("cluster_location", gke_stack["cluster_location"])
pulumi.export("node_pool_name", gke_stack["node_pool_name"])
pulumi.export("kubeconfig", pulumi.Output.secret(gke_stack["kubeconfig"]))
pulumi.export("provider_id", gke_stack["_provider"].id)
