from typing import List, Optional, Tuple

from ..context import RequestContext
from ..models.firewall import (
    Firewall,
    FirewallCreateRequest,
    FirewallForwardingRule,
    FirewallForwardingRuleRoot,
    FirewallListOptions,
    FirewallRoot,
    FirewallsRoot,
    FirewallUpdateRequest,
)
from ..response import Response
from ..utils import add_options
from .base import Service, require_argument, require_payload

FIREWALL_BASE_PATH = "firewalls"


class FirewallsService(Service):
    """Handles the firewall related methods of the Xelon API."""

    def list(
        self, opts: Optional[FirewallListOptions] = None, ctx: Optional[RequestContext] = None
    ) -> Tuple[List[Firewall], Response]:
        """List all firewalls. Pagination is available in ``response.meta``."""
        path = add_options(FIREWALL_BASE_PATH, opts)
        response = self._call("GET", path, target=FirewallsRoot, ctx=ctx)
        root = response.data or FirewallsRoot()
        return root.firewalls, response

    def get(self, firewall_id: str, ctx: Optional[RequestContext] = None) -> Tuple[Firewall, Response]:
        """Get detailed information for the firewall, including its forwarding rules."""
        require_argument(firewall_id, "failed to get firewall: id must be supplied")

        path = f"{FIREWALL_BASE_PATH}/{firewall_id}"
        response = self._call("GET", path, target=Firewall, ctx=ctx)
        return response.data, response

    def create(
        self, create_request: FirewallCreateRequest, ctx: Optional[RequestContext] = None
    ) -> Tuple[Optional[Firewall], Response]:
        require_payload(create_request, "failed to create firewall: payload must be supplied")

        response = self._call(
            "POST", FIREWALL_BASE_PATH, create_request, target=FirewallRoot, ctx=ctx
        )
        return _firewall(response), response

    def update(
        self,
        firewall_id: str,
        update_request: FirewallUpdateRequest,
        ctx: Optional[RequestContext] = None,
    ) -> Tuple[Optional[Firewall], Response]:
        require_argument(firewall_id, "failed to update firewall: id must be supplied")
        require_payload(update_request, "failed to update firewall: payload must be supplied")

        path = f"{FIREWALL_BASE_PATH}/{firewall_id}"
        response = self._call("PUT", path, update_request, target=FirewallRoot, ctx=ctx)
        return _firewall(response), response

    def delete(self, firewall_id: str, ctx: Optional[RequestContext] = None) -> Response:
        require_argument(firewall_id, "failed to delete firewall: id must be supplied")

        return self._call("DELETE", f"{FIREWALL_BASE_PATH}/{firewall_id}", ctx=ctx)

    def create_forwarding_rule(
        self,
        firewall_id: str,
        rule: FirewallForwardingRule,
        ctx: Optional[RequestContext] = None,
    ) -> Tuple[Optional[FirewallForwardingRule], Response]:
        """
        Add a forwarding rule to the firewall.

        For an ``inbound`` rule set ``source_ip_addresses`` and
        ``destination_ip_address``; for an ``outbound`` rule set
        ``source_ip_address`` and ``destination_ip_addresses``.
        """
        require_argument(
            firewall_id, "failed to create forwarding rule: firewall id must be supplied"
        )
        require_payload(rule, "failed to create forwarding rule: payload must be supplied")

        path = f"{FIREWALL_BASE_PATH}/{firewall_id}/rules"
        response = self._call("POST", path, rule, target=FirewallForwardingRuleRoot, ctx=ctx)
        return _forwarding_rule(response), response

    def update_forwarding_rule(
        self,
        firewall_id: str,
        forwarding_rule_id: str,
        rule: FirewallForwardingRule,
        ctx: Optional[RequestContext] = None,
    ) -> Tuple[Optional[FirewallForwardingRule], Response]:
        require_argument(
            firewall_id, "failed to update forwarding rule: firewall id must be supplied"
        )
        require_argument(
            forwarding_rule_id,
            "failed to update forwarding rule: forwarding rule id must be supplied",
        )
        require_payload(rule, "failed to update forwarding rule: payload must be supplied")

        path = f"{FIREWALL_BASE_PATH}/{firewall_id}/rules/{forwarding_rule_id}"
        response = self._call("PUT", path, rule, target=FirewallForwardingRuleRoot, ctx=ctx)
        return _forwarding_rule(response), response

    def delete_forwarding_rule(
        self, firewall_id: str, forwarding_rule_id: str, ctx: Optional[RequestContext] = None
    ) -> Response:
        require_argument(
            firewall_id, "failed to delete forwarding rule: firewall id must be supplied"
        )
        require_argument(
            forwarding_rule_id,
            "failed to delete forwarding rule: forwarding rule id must be supplied",
        )

        path = f"{FIREWALL_BASE_PATH}/{firewall_id}/rules/{forwarding_rule_id}"
        return self._call("DELETE", path, ctx=ctx)


def _firewall(response: Response) -> Optional[Firewall]:
    return response.data.firewall if response.data is not None else None


def _forwarding_rule(response: Response) -> Optional[FirewallForwardingRule]:
    return response.data.forwarding_rule if response.data is not None else None
