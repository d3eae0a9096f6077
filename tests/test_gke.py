"""
Unit tests for GKE and provider module functions
Cloud SDKs are mocked; tests check what gets declared and in which order
"""

import unittest
from unittest.mock import Mock, patch
import sys
import os

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from modules.gke.functions import (
    NODE_OAUTH_SCOPES,
    create_gke_cluster,
    create_gke_resources,
    create_node_pool,
    get_engine_version,
)
from modules.provider.functions import create_kubernetes_provider


class TestGkeFunctions(unittest.TestCase):
    """Test the GKE resource functions"""

    def test_engine_version_lookup(self):
        """Latest master version comes from the engine versions invoke"""
        with patch('modules.gke.functions.gcp') as mock_gcp:
            versions = mock_gcp.container.get_engine_versions_output.return_value

            result = get_engine_version()

            mock_gcp.container.get_engine_versions_output.assert_called_once_with(location=None)
            self.assertIs(result, versions.latest_master_version)

    def test_cluster_arguments(self):
        """Cluster starts with a single default node that gets removed"""
        with patch('modules.gke.functions.gcp') as mock_gcp, \
                patch('modules.gke.functions.pulumi'):
            version = Mock()

            result = create_gke_cluster("demo", version)

            mock_gcp.container.Cluster.assert_called_once_with(
                "demo",
                initial_node_count=1,
                remove_default_node_pool=True,
                min_master_version=version,
            )
            cluster = mock_gcp.container.Cluster.return_value
            self.assertIs(result["cluster"], cluster)
            self.assertIs(result["cluster_endpoint"], cluster.endpoint)
            self.assertIs(result["cluster_location"], cluster.location)

    def test_node_pool_arguments(self):
        """Node pool reads cluster outputs and waits for the cluster"""
        with patch('modules.gke.functions.gcp') as mock_gcp, \
                patch('modules.gke.functions.pulumi') as mock_pulumi:
            cluster = Mock()
            version = Mock()

            create_node_pool(cluster, 3, "e2-standard-4", version)

            mock_gcp.container.NodePoolNodeConfigArgs.assert_called_once_with(
                preemptible=True,
                machine_type="e2-standard-4",
                oauth_scopes=NODE_OAUTH_SCOPES,
            )
            mock_gcp.container.NodePoolManagementArgs.assert_called_once_with(auto_repair=True)
            mock_pulumi.ResourceOptions.assert_called_once_with(depends_on=[cluster])

            args, kwargs = mock_gcp.container.NodePool.call_args
            self.assertEqual(args, ("primary-node-pool",))
            self.assertIs(kwargs["cluster"], cluster.name)
            self.assertIs(kwargs["location"], cluster.location)
            self.assertEqual(kwargs["initial_node_count"], 3)
            self.assertIs(kwargs["version"], version)
            self.assertIs(kwargs["node_config"], mock_gcp.container.NodePoolNodeConfigArgs.return_value)
            self.assertIs(kwargs["management"], mock_gcp.container.NodePoolManagementArgs.return_value)
            self.assertIs(kwargs["opts"], mock_pulumi.ResourceOptions.return_value)

    def test_oauth_scopes(self):
        """Nodes get the four standard GKE scopes"""
        self.assertEqual(NODE_OAUTH_SCOPES, [
            "https://www.googleapis.com/auth/compute",
            "https://www.googleapis.com/auth/devstorage.read_only",
            "https://www.googleapis.com/auth/logging.write",
            "https://www.googleapis.com/auth/monitoring",
        ])

    def test_resources_share_engine_version(self):
        """Cluster and node pool use the same looked-up version"""
        with patch('modules.gke.functions.gcp') as mock_gcp, \
                patch('modules.gke.functions.pulumi'):
            version = mock_gcp.container.get_engine_versions_output.return_value.latest_master_version

            result = create_gke_resources("demo", 2, "n1-standard-1")

            cluster_kwargs = mock_gcp.container.Cluster.call_args[1]
            pool_kwargs = mock_gcp.container.NodePool.call_args[1]
            self.assertIs(cluster_kwargs["min_master_version"], version)
            self.assertIs(pool_kwargs["version"], version)
            self.assertIs(result["engine_version"], version)

            # Verify structure
            for key in ("cluster_name", "cluster_location", "cluster_endpoint",
                        "cluster_master_auth", "node_pool_name", "_cluster", "_node_pool"):
                self.assertIn(key, result)

    def test_node_pool_declared_after_cluster(self):
        """Version lookup, then cluster, then node pool"""
        with patch('modules.gke.functions.gcp') as mock_gcp, \
                patch('modules.gke.functions.pulumi'):
            order = []
            mock_gcp.container.get_engine_versions_output.side_effect = \
                lambda **kwargs: order.append("version") or Mock()
            mock_gcp.container.Cluster.side_effect = \
                lambda *args, **kwargs: order.append("cluster") or Mock()
            mock_gcp.container.NodePool.side_effect = \
                lambda *args, **kwargs: order.append("node_pool") or Mock()

            create_gke_resources("demo", 1, "n1-standard-1")

            self.assertEqual(order, ["version", "cluster", "node_pool"])


class TestProviderFunctions(unittest.TestCase):
    """Test the Kubernetes provider function"""

    def test_provider_depends_on_node_pool(self):
        """Provider is named after the cluster and waits for the node pool"""
        with patch('modules.provider.functions.k8s') as mock_k8s, \
                patch('modules.provider.functions.pulumi') as mock_pulumi:
            node_pool = Mock()
            kubeconfig = Mock()

            provider = create_kubernetes_provider("demo", kubeconfig, node_pool)

            mock_pulumi.ResourceOptions.assert_called_once_with(depends_on=[node_pool])
            mock_k8s.Provider.assert_called_once_with(
                "demo-provider",
                kubeconfig=kubeconfig,
                opts=mock_pulumi.ResourceOptions.return_value,
            )
            self.assertIs(provider, mock_k8s.Provider.return_value)


if __name__ == "__main__":
    unittest.main(verbosity=2)
