"""
Models for Xelon load balancers.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..utils import api_field
from .cloud import Cloud
from .common import SearchListOptions
from .meta import Meta
from .tenant import Tenant


@dataclass
class LoadBalancerAssignedDevice:
    id: Optional[str] = api_field("identifier", omitempty=True)
    name: Optional[str] = api_field("name", omitempty=True)


@dataclass
class LoadBalancerForwardingRule:
    id: Optional[int] = api_field("id", omitempty=True)
    ip_addresses: List[str] = api_field("ip", omitempty=True, default_factory=list)
    ports: List[int] = api_field("ports", omitempty=True, default_factory=list)


@dataclass
class LoadBalancer:
    """Represents a Xelon load balancer."""
    assigned_devices: List[LoadBalancerAssignedDevice] = api_field(
        "assignedDevices", omitempty=True, default_factory=list
    )
    cloud: Optional[Cloud] = api_field("cloud", omitempty=True)
    created_at: Optional[str] = api_field("createdAt", omitempty=True)
    external_ip_address: Optional[str] = api_field("externalIp", omitempty=True)
    forwarding_rules: List[LoadBalancerForwardingRule] = api_field(
        "forwardingRules", omitempty=True, default_factory=list
    )
    health_status: Optional[str] = api_field("health", omitempty=True)
    id: Optional[str] = api_field("identifier", omitempty=True)
    internal_ip_address: Optional[str] = api_field("internalIp", omitempty=True)
    name: Optional[str] = api_field("name", omitempty=True)
    state: Optional[int] = api_field("state", omitempty=True)
    tenant: Optional[Tenant] = api_field("tenant", omitempty=True)


@dataclass
class LoadBalancerCreateRequest:
    cloud_id: str = api_field("cloudIdentifier")
    internal_network_id: str = api_field("internalNetworkIdentifier")
    name: str = api_field("name")
    tenant_id: str = api_field("tenantIdentifier")
    type: str = api_field("loadBalancingType")  # layer4 or layer7
    assigned_device_ids: List[str] = api_field(
        "assignedDevicesIdentifiers", omitempty=True, default_factory=list
    )
    external_ip_address_id: Optional[str] = api_field("externalIpIdentifier", omitempty=True)
    external_network_id: Optional[str] = api_field("externalNetworkIdentifier", omitempty=True)
    internal_ip_address: Optional[str] = api_field("internalIp", omitempty=True)


@dataclass
class LoadBalancerUpdateRequest:
    name: str = api_field("name")


@dataclass
class LoadBalancerUpdateAssignedDevicesRequest:
    device_ids: List[str] = api_field("deviceIdentifiers", default_factory=list)


@dataclass
class LoadBalancerListOptions(SearchListOptions):
    """Optional parameters of :meth:`LoadBalancersService.list`."""


@dataclass
class LoadBalancerRoot:
    load_balancer: Optional[LoadBalancer] = api_field("data", omitempty=True)
    message: Optional[str] = api_field("message", omitempty=True)


@dataclass
class LoadBalancerAssignedDevicesRoot:
    assigned_devices: List[LoadBalancerAssignedDevice] = api_field(
        "data", omitempty=True, default_factory=list
    )


@dataclass
class LoadBalancerForwardingRuleRoot:
    forwarding_rule: Optional[LoadBalancerForwardingRule] = api_field("data", omitempty=True)
    message: Optional[str] = api_field("message", omitempty=True)


@dataclass
class LoadBalancersRoot:
    load_balancers: List[LoadBalancer] = api_field("data", default_factory=list)
    meta: Optional[Meta] = api_field("meta", omitempty=True)
