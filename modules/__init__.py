"""
Pulumi modules for GKE infrastructure
Simple function-based approach following Pulumi best practices
"""

from .gke import create_gke_resources
from .kubeconfig import create_kubeconfig, render_kubeconfig
from .provider import create_kubernetes_provider

__all__ = [
    "create_gke_resources",
    "create_kubeconfig",
    "render_kubeconfig",
    "create_kubernetes_provider",
]
