"""
Models for Xelon firewalls and their forwarding rules.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..utils import api_field, decode_model, encode_model
from .cloud import Cloud
from .common import SearchListOptions
from .meta import Meta
from .tenant import Tenant

SOURCE_IP_FIELD = "sourceIp"
DESTINATION_IP_FIELD = "destinationIp"


def _split_address(value: Any):
    """Return the (scalar, list) pair for an address that is a string or an array."""
    if isinstance(value, str):
        return value, []
    if isinstance(value, list):
        return "", [item if isinstance(item, str) else str(item) for item in value]
    if value is None:
        return "", []
    return str(value), []


def _join_address(address: str, addresses: List[str]) -> Any:
    if address:
        return address
    if addresses:
        return list(addresses)
    return None


@dataclass
class FirewallForwardingRule:
    """
    A firewall forwarding rule.

    The API sends ``sourceIp`` and ``destinationIp`` in a shape that depends on
    the rule type:

    * inbound: ``sourceIp`` is a list of CIDRs, ``destinationIp`` is a string
    * outbound: ``sourceIp`` is a string, ``destinationIp`` is a list of CIDRs

    After decoding, the scalar attribute holds the string form and the plural
    attribute holds the list form; the one that does not apply is empty. When
    encoding, a non-empty scalar wins over the list, and the field is left out
    when both are empty.
    """
    destination_ip_address: str = ""
    destination_ip_addresses: List[str] = field(default_factory=list)
    external_port: Optional[int] = api_field("externalPort", omitempty=True)
    id: Optional[str] = api_field("identifier", omitempty=True)
    internal_port: Optional[int] = api_field("port", omitempty=True)
    protocol: Optional[str] = api_field("protocol", omitempty=True)
    source_ip_address: str = ""
    source_ip_addresses: List[str] = field(default_factory=list)
    type: Optional[str] = api_field("type", omitempty=True)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "FirewallForwardingRule":
        rule = decode_model(cls, data)
        rule.source_ip_address, rule.source_ip_addresses = _split_address(
            data.get(SOURCE_IP_FIELD)
        )
        rule.destination_ip_address, rule.destination_ip_addresses = _split_address(
            data.get(DESTINATION_IP_FIELD)
        )
        return rule

    def to_api(self) -> Dict[str, Any]:
        payload = encode_model(self)
        destination = _join_address(self.destination_ip_address, self.destination_ip_addresses)
        if destination is not None:
            payload[DESTINATION_IP_FIELD] = destination
        source = _join_address(self.source_ip_address, self.source_ip_addresses)
        if source is not None:
            payload[SOURCE_IP_FIELD] = source
        return payload


@dataclass
class Firewall:
    """Represents a Xelon firewall."""
    cloud: Optional[Cloud] = api_field("cloud", omitempty=True)
    created_at: Optional[str] = api_field("createdAt", omitempty=True)
    external_ip_address: Optional[str] = api_field("externalIp", omitempty=True)
    forwarding_rules: List[FirewallForwardingRule] = api_field(
        "forwardingRules", omitempty=True, default_factory=list
    )
    health_status: Optional[str] = api_field("health", omitempty=True)
    id: Optional[str] = api_field("identifier", omitempty=True)
    internal_ip_address: Optional[str] = api_field("internalIp", omitempty=True)
    name: Optional[str] = api_field("name", omitempty=True)
    state: Optional[int] = api_field("state", omitempty=True)
    tenant: Optional[Tenant] = api_field("tenant", omitempty=True)

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class FirewallCreateRequest:
    cloud_id: str = api_field("cloudIdentifier")
    internal_network_id: str = api_field("internalNetworkIdentifier")
    name: str = api_field("name")
    tenant_id: str = api_field("tenantIdentifier")
    internal_ip_address: Optional[str] = api_field("internalIp", omitempty=True)


@dataclass
class FirewallUpdateRequest:
    name: str = api_field("name")


@dataclass
class FirewallListOptions(SearchListOptions):
    """Optional parameters of :meth:`FirewallsService.list`."""


@dataclass
class FirewallRoot:
    firewall: Optional[Firewall] = api_field("data", omitempty=True)
    message: Optional[str] = api_field("message", omitempty=True)


@dataclass
class FirewallForwardingRuleRoot:
    forwarding_rule: Optional[FirewallForwardingRule] = api_field("data", omitempty=True)
    message: Optional[str] = api_field("message", omitempty=True)


@dataclass
class FirewallsRoot:
    firewalls: List[Firewall] = api_field("data", default_factory=list)
    meta: Optional[Meta] = api_field("meta", omitempty=True)
