"""
Kubeconfig Module
Renders a gke-gcloud-auth-plugin kubeconfig from cluster outputs
"""

from .functions import render_kubeconfig, create_kubeconfig

__all__ = ["render_kubeconfig", "create_kubeconfig"]
