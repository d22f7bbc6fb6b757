from typing import List, Optional, Tuple

from ..context import RequestContext
from ..models.common import APIResponse
from ..models.load_balancer_cluster import (
    LoadBalancerCluster,
    LoadBalancerClusterCreateRequest,
    LoadBalancerClusterCreateResponse,
    LoadBalancerClusterForwardingRule,
    LoadBalancerClusterForwardingRuleUpdateRequest,
    LoadBalancerClusterVirtualIP,
)
from ..response import Response
from .base import Service, require_argument, require_payload

LOAD_BALANCER_CLUSTER_BASE_PATH = "load-balancer-clusters"


class LoadBalancerClustersService(Service):
    """
    Handles the load balancer cluster related methods of the Xelon API.

    A load balancer cluster fronts a Kubernetes cluster. It exposes virtual
    IPs, and every virtual IP carries its own forwarding rules.
    """

    def list(
        self, ctx: Optional[RequestContext] = None
    ) -> Tuple[List[LoadBalancerCluster], Response]:
        response = self._call(
            "GET", LOAD_BALANCER_CLUSTER_BASE_PATH, target=List[LoadBalancerCluster], ctx=ctx
        )
        return response.data or [], response

    def get(
        self, load_balancer_cluster_id: str, ctx: Optional[RequestContext] = None
    ) -> Tuple[LoadBalancerCluster, Response]:
        require_argument(load_balancer_cluster_id)

        path = f"{LOAD_BALANCER_CLUSTER_BASE_PATH}/{load_balancer_cluster_id}"
        response = self._call("GET", path, target=LoadBalancerCluster, ctx=ctx)
        return response.data, response

    def create(
        self,
        create_request: LoadBalancerClusterCreateRequest,
        ctx: Optional[RequestContext] = None,
    ) -> Tuple[LoadBalancerClusterCreateResponse, Response]:
        """Start provisioning a load balancer cluster; the result carries its id and status."""
        require_payload(create_request)

        response = self._call(
            "POST",
            LOAD_BALANCER_CLUSTER_BASE_PATH,
            create_request,
            target=LoadBalancerClusterCreateResponse,
            ctx=ctx,
        )
        return response.data, response

    def delete(self, load_balancer_cluster_id: str, ctx: Optional[RequestContext] = None) -> Response:
        require_argument(load_balancer_cluster_id)

        path = f"{LOAD_BALANCER_CLUSTER_BASE_PATH}/{load_balancer_cluster_id}"
        return self._call("DELETE", path, ctx=ctx)

    def list_virtual_ips(
        self, load_balancer_cluster_id: str, ctx: Optional[RequestContext] = None
    ) -> Tuple[List[LoadBalancerClusterVirtualIP], Response]:
        require_argument(load_balancer_cluster_id)

        path = f"{LOAD_BALANCER_CLUSTER_BASE_PATH}/{load_balancer_cluster_id}/virtual-ips"
        response = self._call("GET", path, target=List[LoadBalancerClusterVirtualIP], ctx=ctx)
        return response.data or [], response

    def get_virtual_ip(
        self,
        load_balancer_cluster_id: str,
        virtual_ip_id: str,
        ctx: Optional[RequestContext] = None,
    ) -> Tuple[LoadBalancerClusterVirtualIP, Response]:
        require_argument(load_balancer_cluster_id)
        require_argument(virtual_ip_id)

        path = _virtual_ip_path(load_balancer_cluster_id, virtual_ip_id)
        response = self._call("GET", path, target=LoadBalancerClusterVirtualIP, ctx=ctx)
        return response.data, response

    def list_forwarding_rules(
        self,
        load_balancer_cluster_id: str,
        virtual_ip_id: str,
        ctx: Optional[RequestContext] = None,
    ) -> Tuple[List[LoadBalancerClusterForwardingRule], Response]:
        require_argument(load_balancer_cluster_id)
        require_argument(virtual_ip_id)

        path = f"{_virtual_ip_path(load_balancer_cluster_id, virtual_ip_id)}/forwarding-rules"
        response = self._call(
            "GET", path, target=List[LoadBalancerClusterForwardingRule], ctx=ctx
        )
        return response.data or [], response

    def create_forwarding_rules(
        self,
        load_balancer_cluster_id: str,
        virtual_ip_id: str,
        rules: List[LoadBalancerClusterForwardingRule],
        ctx: Optional[RequestContext] = None,
    ) -> Tuple[List[LoadBalancerClusterForwardingRule], Response]:
        """Create several frontend/backend forwarding rules on the virtual IP at once."""
        require_argument(load_balancer_cluster_id)
        require_argument(virtual_ip_id)
        require_payload(rules)

        path = f"{_virtual_ip_path(load_balancer_cluster_id, virtual_ip_id)}/forwarding-rules"
        response = self._call(
            "POST", path, rules, target=List[LoadBalancerClusterForwardingRule], ctx=ctx
        )
        return response.data or [], response

    def update_forwarding_rule(
        self,
        load_balancer_cluster_id: str,
        virtual_ip_id: str,
        forwarding_rule_id: str,
        update_request: LoadBalancerClusterForwardingRuleUpdateRequest,
        ctx: Optional[RequestContext] = None,
    ) -> Tuple[APIResponse, Response]:
        require_argument(load_balancer_cluster_id)
        require_argument(virtual_ip_id)
        require_argument(forwarding_rule_id)
        require_payload(update_request)

        path = (
            f"{_virtual_ip_path(load_balancer_cluster_id, virtual_ip_id)}"
            f"/forwarding-rules/{forwarding_rule_id}"
        )
        response = self._call("PATCH", path, update_request, target=APIResponse, ctx=ctx)
        return response.data, response

    def delete_forwarding_rule(
        self,
        load_balancer_cluster_id: str,
        virtual_ip_id: str,
        forwarding_rule_id: str,
        ctx: Optional[RequestContext] = None,
    ) -> Response:
        require_argument(load_balancer_cluster_id)
        require_argument(virtual_ip_id)
        require_argument(forwarding_rule_id)

        path = (
            f"{_virtual_ip_path(load_balancer_cluster_id, virtual_ip_id)}"
            f"/forwarding-rules/{forwarding_rule_id}"
        )
        return self._call("DELETE", path, ctx=ctx)


def _virtual_ip_path(load_balancer_cluster_id: str, virtual_ip_id: str) -> str:
    return f"{LOAD_BALANCER_CLUSTER_BASE_PATH}/{load_balancer_cluster_id}/virtual-ips/{virtual_ip_id}"
