"""
Models for Xelon load balancer clusters, their virtual IPs and forwarding rules.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..utils import api_field
from .cloud import Cloud


@dataclass
class LoadBalancerCluster:
    """Represents a Xelon load balancer cluster."""
    cloud: Optional[Cloud] = api_field("hv_system", omitempty=True)
    id: Optional[str] = api_field("identifier", omitempty=True)
    kubernetes_cluster_id: Optional[str] = api_field("kubernetesClusterIdentifier", omitempty=True)
    name: Optional[str] = api_field("name", omitempty=True)
    nodes: List[str] = api_field("nodes", omitempty=True, default_factory=list)
    status: Optional[str] = api_field("status", omitempty=True)
    tenant_id: Optional[str] = api_field("tenantIdentifier", omitempty=True)


@dataclass
class LoadBalancerClusterNodesSpec:
    cpu_core_count: int = api_field("cpuCoreCount")
    disk: int = api_field("disk")
    memory: int = api_field("memory")


@dataclass
class LoadBalancerClusterCreateRequest:
    cloud_id: int = api_field("cloudId")
    kubernetes_cluster_id: str = api_field("kubernetesClusterIdentifier")
    name: str = api_field("name")
    nodes_spec: Optional[LoadBalancerClusterNodesSpec] = api_field("nodesSpec", None)


@dataclass
class LoadBalancerClusterCreateResponse:
    load_balancer_cluster_id: Optional[str] = api_field("identifier", None)
    status: Optional[str] = api_field("status", None)


@dataclass
class LoadBalancerClusterVirtualIP:
    id: Optional[str] = api_field("identifier", omitempty=True)
    ip_address: Optional[str] = api_field("ipAddress", omitempty=True)
    pool_identifier: Optional[str] = api_field("vipPoolIdentifier", omitempty=True)
    state: Optional[str] = api_field("state", omitempty=True)


@dataclass
class LoadBalancerClusterForwardingRuleBackend:
    id: Optional[str] = api_field("identifier", omitempty=True)
    port: Optional[int] = api_field("port", omitempty=True)
    proxy_protocol: int = api_field("proxy_protocol", 0)


@dataclass
class LoadBalancerClusterForwardingRuleFrontend:
    id: Optional[str] = api_field("identifier", omitempty=True)
    port: Optional[int] = api_field("port", omitempty=True)


@dataclass
class LoadBalancerClusterForwardingRule:
    backend: Optional[LoadBalancerClusterForwardingRuleBackend] = api_field("backend", omitempty=True)
    frontend: Optional[LoadBalancerClusterForwardingRuleFrontend] = api_field("frontend", omitempty=True)


@dataclass
class LoadBalancerClusterForwardingRuleUpdateRequest:
    port: Optional[int] = api_field("port", omitempty=True)
    proxy_protocol: Optional[int] = api_field("proxy_protocol", omitempty=True)
