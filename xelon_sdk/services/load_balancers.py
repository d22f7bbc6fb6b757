from typing import List, Optional, Tuple

from ..context import RequestContext
from ..models.load_balancer import (
    LoadBalancer,
    LoadBalancerAssignedDevice,
    LoadBalancerAssignedDevicesRoot,
    LoadBalancerCreateRequest,
    LoadBalancerForwardingRule,
    LoadBalancerForwardingRuleRoot,
    LoadBalancerListOptions,
    LoadBalancerRoot,
    LoadBalancersRoot,
    LoadBalancerUpdateAssignedDevicesRequest,
    LoadBalancerUpdateRequest,
)
from ..response import Response
from ..utils import add_options
from .base import Service, require_argument, require_payload

LOAD_BALANCER_BASE_PATH = "load-balancers"


class LoadBalancersService(Service):
    """Handles the load balancer related methods of the Xelon API."""

    def list(
        self, opts: Optional[LoadBalancerListOptions] = None, ctx: Optional[RequestContext] = None
    ) -> Tuple[List[LoadBalancer], Response]:
        path = add_options(LOAD_BALANCER_BASE_PATH, opts)
        response = self._call("GET", path, target=LoadBalancersRoot, ctx=ctx)
        root = response.data or LoadBalancersRoot()
        return root.load_balancers, response

    def get(
        self, load_balancer_id: str, ctx: Optional[RequestContext] = None
    ) -> Tuple[LoadBalancer, Response]:
        require_argument(load_balancer_id, "failed to get load balancer: id must be supplied")

        path = f"{LOAD_BALANCER_BASE_PATH}/{load_balancer_id}"
        response = self._call("GET", path, target=LoadBalancer, ctx=ctx)
        return response.data, response

    def create(
        self, create_request: LoadBalancerCreateRequest, ctx: Optional[RequestContext] = None
    ) -> Tuple[Optional[LoadBalancer], Response]:
        require_payload(create_request, "failed to create load balancer: payload must be supplied")

        response = self._call(
            "POST", LOAD_BALANCER_BASE_PATH, create_request, target=LoadBalancerRoot, ctx=ctx
        )
        return _load_balancer(response), response

    def update(
        self,
        load_balancer_id: str,
        update_request: LoadBalancerUpdateRequest,
        ctx: Optional[RequestContext] = None,
    ) -> Tuple[Optional[LoadBalancer], Response]:
        require_argument(load_balancer_id, "failed to update load balancer: id must be supplied")
        require_payload(update_request, "failed to update load balancer: payload must be supplied")

        path = f"{LOAD_BALANCER_BASE_PATH}/{load_balancer_id}"
        response = self._call("PUT", path, update_request, target=LoadBalancerRoot, ctx=ctx)
        return _load_balancer(response), response

    def delete(self, load_balancer_id: str, ctx: Optional[RequestContext] = None) -> Response:
        require_argument(load_balancer_id, "failed to delete load balancer: id must be supplied")

        return self._call("DELETE", f"{LOAD_BALANCER_BASE_PATH}/{load_balancer_id}", ctx=ctx)

    def list_assigned_devices(
        self, load_balancer_id: str, network_id: str, ctx: Optional[RequestContext] = None
    ) -> Tuple[List[LoadBalancerAssignedDevice], Response]:
        """List the devices in ``network_id`` that can be assigned to the load balancer."""
        require_argument(
            load_balancer_id, "failed to list assigned devices: load balancer id must be supplied"
        )
        require_argument(
            network_id, "failed to list assigned devices: network id must be supplied"
        )

        path = f"{LOAD_BALANCER_BASE_PATH}/{load_balancer_id}/assignable-devices/{network_id}"
        response = self._call("GET", path, target=LoadBalancerAssignedDevicesRoot, ctx=ctx)
        root = response.data or LoadBalancerAssignedDevicesRoot()
        return root.assigned_devices, response

    def update_assigned_devices(
        self,
        load_balancer_id: str,
        update_request: LoadBalancerUpdateAssignedDevicesRequest,
        ctx: Optional[RequestContext] = None,
    ) -> Response:
        """Replace the set of devices the load balancer forwards to."""
        require_argument(
            load_balancer_id, "failed to update assigned devices: load balancer id must be supplied"
        )
        require_payload(
            update_request, "failed to update assigned devices: payload must be supplied"
        )

        path = f"{LOAD_BALANCER_BASE_PATH}/{load_balancer_id}/assigned-devices"
        return self._call("PUT", path, update_request, target=LoadBalancerRoot, ctx=ctx)

    def create_forwarding_rule(
        self,
        load_balancer_id: str,
        rule: LoadBalancerForwardingRule,
        ctx: Optional[RequestContext] = None,
    ) -> Tuple[Optional[LoadBalancerForwardingRule], Response]:
        require_argument(
            load_balancer_id, "failed to create forwarding rule: load balancer id must be supplied"
        )
        require_payload(rule, "failed to create forwarding rule: payload must be supplied")

        path = f"{LOAD_BALANCER_BASE_PATH}/{load_balancer_id}/rules"
        response = self._call("POST", path, rule, target=LoadBalancerForwardingRuleRoot, ctx=ctx)
        return _forwarding_rule(response), response

    def update_forwarding_rule(
        self,
        load_balancer_id: str,
        forwarding_rule_id: int,
        rule: LoadBalancerForwardingRule,
        ctx: Optional[RequestContext] = None,
    ) -> Tuple[Optional[LoadBalancerForwardingRule], Response]:
        require_argument(
            load_balancer_id, "failed to update forwarding rule: load balancer id must be supplied"
        )
        require_argument(
            forwarding_rule_id,
            "failed to update forwarding rule: forwarding rule id must be supplied",
        )
        require_payload(rule, "failed to update forwarding rule: payload must be supplied")

        path = f"{LOAD_BALANCER_BASE_PATH}/{load_balancer_id}/rules/{forwarding_rule_id}"
        response = self._call("PUT", path, rule, target=LoadBalancerForwardingRuleRoot, ctx=ctx)
        return _forwarding_rule(response), response

    def delete_forwarding_rule(
        self, load_balancer_id: str, forwarding_rule_id: int, ctx: Optional[RequestContext] = None
    ) -> Response:
        require_argument(
            load_balancer_id, "failed to delete forwarding rule: load balancer id must be supplied"
        )
        require_argument(
            forwarding_rule_id,
            "failed to delete forwarding rule: forwarding rule id must be supplied",
        )

        path = f"{LOAD_BALANCER_BASE_PATH}/{load_balancer_id}/rules/{forwarding_rule_id}"
        return self._call("DELETE", path, ctx=ctx)


def _load_balancer(response: Response) -> Optional[LoadBalancer]:
    return response.data.load_balancer if response.data is not None else None


def _forwarding_rule(response: Response) -> Optional[LoadBalancerForwardingRule]:
    return response.data.forwarding_rule if response.data is not None else None
