"""
Kubeconfig Module Functions
Builds a kubeconfig that authenticates through gke-gcloud-auth-plugin
"""

import pulumi
import pulumi_gcp as gcp
from typing import Optional


def kubeconfig_context_name(project: Optional[str], zone: Optional[str], cluster_name: str) -> str:
    """Context name in the form gcloud uses: <project>_<zone>_<cluster>"""
    return f"{project}_{zone}_{cluster_name}"


def render_kubeconfig(project: Optional[str], zone: Optional[str], cluster_name: str,
                      endpoint: str, ca_certificate: str) -> str:
    """
    Render kubeconfig text for a GKE cluster

    Args:
        project: GCP project id
        zone: GCP zone
        cluster_name: Resolved cluster name
        endpoint: Cluster API server address (no scheme)
        ca_certificate: Base64 encoded cluster CA certificate

    Returns:
        Kubeconfig YAML document
    """
    context = kubeconfig_context_name(project, zone, cluster_name)
    return f"""apiVersion: v1
clusters:
- cluster:
    certificate-authority-data: {ca_certificate}
    server: https://{endpoint}
  name: {context}
contexts:
- context:
    cluster: {context}
    user: {context}
  name: {context}
current-context: {context}
kind: Config
preferences: {{}}
users:
- name: {context}
  user:
    exec:
      apiVersion: client.authentication.k8s.io/v1beta1
      command: gke-gcloud-auth-plugin
      installHint: Install gke-gcloud-auth-plugin for use with kubectl by following
        https://cloud.google.com/blog/products/containers-kubernetes/kubectl-auth-changes-in-gke
      provideClusterInfo: true
"""


def create_kubeconfig(cluster: gcp.container.Cluster, project: Optional[str],
                      zone: Optional[str]) -> pulumi.Output[str]:
    """
    Kubeconfig for the cluster, resolved once name, endpoint and CA certificate are known

    Args:
        cluster: GKE cluster
        project: GCP project id
        zone: GCP zone

    Returns:
        Deferred kubeconfig text
    """
    ca_certificate = cluster.master_auth.cluster_ca_certificate
    return pulumi.Output.all(cluster.name, cluster.endpoint, ca_certificate).apply(
        lambda args: render_kubeconfig(
            project,
            zone,
            args[0],
            args[1],
            args[2],
        )
    )
