from typing import List, Optional, Tuple

from ..context import RequestContext
from ..models.common import SuccessResponse
from ..models.kubernetes import ClusterControlPlane, ClusterPool, KubernetesCluster
from ..response import Response
from .base import Service, require_argument

KUBERNETES_BASE_PATH = "kubernetes-talos"


class KubernetesService(Service):
    """Handles the Kubernetes related methods of the Xelon API."""

    def list(self, ctx: Optional[RequestContext] = None) -> Tuple[List[KubernetesCluster], Response]:
        """List the Kubernetes clusters."""
        response = self._call(
            "GET", f"{KUBERNETES_BASE_PATH}/clusters", target=List[KubernetesCluster], ctx=ctx
        )
        return response.data or [], response

    def list_control_planes(
        self, kubernetes_cluster_id: str, ctx: Optional[RequestContext] = None
    ) -> Tuple[ClusterControlPlane, Response]:
        """Get the control plane of the Kubernetes cluster."""
        require_argument(kubernetes_cluster_id)

        path = f"{KUBERNETES_BASE_PATH}/{kubernetes_cluster_id}/cluster-control-planes"
        response = self._call("GET", path, target=ClusterControlPlane, ctx=ctx)
        return response.data, response

    def list_cluster_pools(
        self, kubernetes_cluster_id: str, ctx: Optional[RequestContext] = None
    ) -> Tuple[List[ClusterPool], Response]:
        """List the cluster pools of the Kubernetes cluster."""
        require_argument(kubernetes_cluster_id)

        path = f"{KUBERNETES_BASE_PATH}/{kubernetes_cluster_id}/cluster-pools"
        response = self._call("GET", path, target=List[ClusterPool], ctx=ctx)
        return response.data or [], response

    def add_cluster_node(
        self, kubernetes_cluster_id: str, cluster_pool_id: str, ctx: Optional[RequestContext] = None
    ) -> Tuple[SuccessResponse, Response]:
        """Create a new node in the given cluster pool."""
        require_argument(kubernetes_cluster_id)
        require_argument(cluster_pool_id)

        path = f"{KUBERNETES_BASE_PATH}/{kubernetes_cluster_id}/add-node/{cluster_pool_id}"
        response = self._call("POST", path, target=SuccessResponse, ctx=ctx)
        return response.data, response

    def delete_cluster_node(
        self, kubernetes_cluster_id: str, cluster_node_id: str, ctx: Optional[RequestContext] = None
    ) -> Tuple[SuccessResponse, Response]:
        require_argument(kubernetes_cluster_id)
        require_argument(cluster_node_id)

        path = f"{KUBERNETES_BASE_PATH}/{kubernetes_cluster_id}/delete-node/{cluster_node_id}"
        response = self._call("DELETE", path, target=SuccessResponse, ctx=ctx)
        return response.data, response
