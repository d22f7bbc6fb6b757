"""
Models for Xelon Kubernetes clusters.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..utils import api_field
from .cloud import Cloud


@dataclass
class KubernetesClusterHealth:
    health: Optional[str] = api_field("health", omitempty=True)
    last_checking_data: Optional[str] = api_field("lastCheckingData", omitempty=True)


@dataclass
class KubernetesCluster:
    """Represents a Xelon Kubernetes cluster."""
    cloud: Optional[Cloud] = api_field("hv_system", omitempty=True)
    created_at: Optional[str] = api_field("createdAt", omitempty=True)
    health: Optional[KubernetesClusterHealth] = api_field("health", omitempty=True)
    id: Optional[str] = api_field("clusterIdentifier", omitempty=True)
    name: Optional[str] = api_field("name", omitempty=True)
    status: Optional[str] = api_field("status", omitempty=True)


@dataclass
class ClusterControlPlaneNode:
    id: Optional[str] = api_field("identifier", omitempty=True)
    local_vm_id: Optional[str] = api_field("localvmid", omitempty=True)
    name: Optional[str] = api_field("name", omitempty=True)


@dataclass
class ClusterControlPlane:
    cpu_core_count: Optional[int] = api_field("control_plane_cpu", omitempty=True)
    disk_size: Optional[int] = api_field("control_plane_disk", omitempty=True)
    memory: Optional[int] = api_field("control_plane_ram", omitempty=True)
    nodes: List[ClusterControlPlaneNode] = api_field("nodes", omitempty=True, default_factory=list)


@dataclass
class ClusterPoolNode:
    id: Optional[str] = api_field("identifier", omitempty=True)
    local_vm_id: Optional[str] = api_field("localvmid", omitempty=True)
    name: Optional[str] = api_field("name", omitempty=True)
    status: Optional[str] = api_field("status", omitempty=True)


@dataclass
class ClusterPool:
    cpu_core_count: Optional[int] = api_field("cpu", omitempty=True)
    disk_size: Optional[int] = api_field("disk", omitempty=True)
    id: Optional[str] = api_field("identifier", omitempty=True)
    memory: Optional[int] = api_field("memory", omitempty=True)
    name: Optional[str] = api_field("name", omitempty=True)
    nodes: List[ClusterPoolNode] = api_field("nodes", omitempty=True, default_factory=list)
