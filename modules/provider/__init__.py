"""
Provider Module
Kubernetes provider bound to the GKE cluster
"""

from .functions import create_kubernetes_provider

__all__ = ["create_kubernetes_provider"]
