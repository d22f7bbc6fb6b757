"""
Models for Xelon LAN and WAN networks.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..utils import api_field
from .cloud import Cloud
from .common import SearchListOptions
from .meta import Meta


@dataclass
class Network:
    clouds: List[Cloud] = api_field("clouds", omitempty=True, default_factory=list)
    dns_primary: Optional[str] = api_field("dns1", omitempty=True)
    dns_secondary: Optional[str] = api_field("dns2", omitempty=True)
    free: Optional[bool] = api_field("isFree", omitempty=True)
    gateway: Optional[str] = api_field("gateway", omitempty=True)
    id: Optional[str] = api_field("identifier", omitempty=True)
    name: Optional[str] = api_field("name", omitempty=True)
    network: Optional[str] = api_field("network", omitempty=True)
    network_speed: Optional[int] = api_field("networkSpeedValue", omitempty=True)
    stretched: Optional[bool] = api_field("isStretched", omitempty=True)
    subnet_size: Optional[int] = api_field("networkSize", omitempty=True)
    type: Optional[str] = api_field("type", omitempty=True)


@dataclass
class NetworkLANCreateRequest:
    cloud_id: str = api_field("cloudIdentifier")
    dns_primary: str = api_field("dns1")
    gateway: str = api_field("gateway")
    name: str = api_field("name")
    network: str = api_field("network")
    network_speed: int = api_field("networkSpeedValue")
    subnet_size: int = api_field("networkSize")
    cloud_for_stretching: Optional[str] = api_field("cloudForStretching", omitempty=True)
    dns_secondary: Optional[str] = api_field("dns2", omitempty=True)
    stretched: Optional[bool] = api_field("isStretched", omitempty=True)
    tenant_id: Optional[str] = api_field("tenantIdentifier", omitempty=True)


@dataclass
class NetworkLANUpdateRequest:
    dns_primary: str = api_field("dns1")
    gateway: str = api_field("gateway")
    name: str = api_field("name")
    network: str = api_field("network")
    network_speed: int = api_field("networkSpeedValue")
    dns_secondary: Optional[str] = api_field("dns2", omitempty=True)


@dataclass
class NetworkWANCreateRequest:
    cloud_id: str = api_field("cloudIdentifier")
    name: str = api_field("name")
    network_speed: int = api_field("networkSpeedValue")
    subnet_size: int = api_field("networkSize")
    cloud_for_stretching: Optional[str] = api_field("cloudForStretching", omitempty=True)
    stretched: Optional[bool] = api_field("isStretched", omitempty=True)
    tenant_id: Optional[str] = api_field("tenantIdentifier", omitempty=True)


@dataclass
class NetworkListOptions(SearchListOptions):
    """Optional parameters of :meth:`NetworksService.list`."""


@dataclass
class NetworkRoot:
    network: Optional[Network] = api_field("data", omitempty=True)
    message: Optional[str] = api_field("message", omitempty=True)


@dataclass
class NetworksRoot:
    networks: List[Network] = api_field("data", default_factory=list)
    meta: Optional[Meta] = api_field("meta", omitempty=True)
