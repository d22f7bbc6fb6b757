"""
Data models for Xelon API requests and responses.

Each model is a dataclass whose fields declare their JSON names through
:func:`xelon_sdk.utils.api_field`. Response models tolerate missing fields
(attributes default to ``None`` or an empty container); where a model has an
``_extra_fields`` attribute, undeclared fields returned by the API are kept
there.

The ``*Root`` types describe the envelopes list and detail endpoints wrap
their payloads in, e.g. ``{"data": [...], "meta": {...}}``.
"""

from .cloud import Cloud
from .common import APIResponse, ListOptions, SearchListOptions, SuccessResponse
from .device import (
    Device,
    DeviceAddDiskRequest,
    DeviceCreateNetwork,
    DeviceCreateRequest,
    DeviceDeleteDiskRequest,
    DeviceListOptions,
    DeviceStorage,
    DeviceTemplate,
    DeviceTenant,
    DeviceUpdateDiskRequest,
    DeviceUpdateHardwareRequest,
    DeviceUpdateRequest,
)
from .error import ErrorElement, ErrorWrapper, LegacyErrorElement
from .firewall import (
    Firewall,
    FirewallCreateRequest,
    FirewallForwardingRule,
    FirewallListOptions,
    FirewallUpdateRequest,
)
from .iso import ISO, ISOCreateRequest, ISOListOptions, ISOUpdateRequest
from .kubernetes import (
    ClusterControlPlane,
    ClusterControlPlaneNode,
    ClusterPool,
    ClusterPoolNode,
    KubernetesCluster,
    KubernetesClusterHealth,
)
from .load_balancer import (
    LoadBalancer,
    LoadBalancerAssignedDevice,
    LoadBalancerCreateRequest,
    LoadBalancerForwardingRule,
    LoadBalancerListOptions,
    LoadBalancerUpdateAssignedDevicesRequest,
    LoadBalancerUpdateRequest,
)
from .load_balancer_cluster import (
    LoadBalancerCluster,
    LoadBalancerClusterCreateRequest,
    LoadBalancerClusterCreateResponse,
    LoadBalancerClusterForwardingRule,
    LoadBalancerClusterForwardingRuleBackend,
    LoadBalancerClusterForwardingRuleFrontend,
    LoadBalancerClusterForwardingRuleUpdateRequest,
    LoadBalancerClusterNodesSpec,
    LoadBalancerClusterVirtualIP,
)
from .meta import Meta
from .network import (
    Network,
    NetworkLANCreateRequest,
    NetworkLANUpdateRequest,
    NetworkListOptions,
    NetworkWANCreateRequest,
)
from .persistent_storage import (
    PersistentStorage,
    PersistentStorageAttachedDevice,
    PersistentStorageCreateRequest,
    PersistentStorageListOptions,
)
from .ssh_key import SSHKey, SSHKeyCreateRequest
from .template import Template, TemplateCreateRequest, TemplateListOptions, TemplateUpdateRequest
from .tenant import Tenant, TenantListOptions

__all__ = [
    "APIResponse",
    "Cloud",
    "ClusterControlPlane",
    "ClusterControlPlaneNode",
    "ClusterPool",
    "ClusterPoolNode",
    "Device",
    "DeviceAddDiskRequest",
    "DeviceCreateNetwork",
    "DeviceCreateRequest",
    "DeviceDeleteDiskRequest",
    "DeviceListOptions",
    "DeviceStorage",
    "DeviceTemplate",
    "DeviceTenant",
    "DeviceUpdateDiskRequest",
    "DeviceUpdateHardwareRequest",
    "DeviceUpdateRequest",
    "ErrorElement",
    "ErrorWrapper",
    "Firewall",
    "FirewallCreateRequest",
    "FirewallForwardingRule",
    "FirewallListOptions",
    "FirewallUpdateRequest",
    "ISO",
    "ISOCreateRequest",
    "ISOListOptions",
    "ISOUpdateRequest",
    "KubernetesCluster",
    "KubernetesClusterHealth",
    "LegacyErrorElement",
    "ListOptions",
    "LoadBalancer",
    "LoadBalancerAssignedDevice",
    "LoadBalancerCluster",
    "LoadBalancerClusterCreateRequest",
    "LoadBalancerClusterCreateResponse",
    "LoadBalancerClusterForwardingRule",
    "LoadBalancerClusterForwardingRuleBackend",
    "LoadBalancerClusterForwardingRuleFrontend",
    "LoadBalancerClusterForwardingRuleUpdateRequest",
    "LoadBalancerClusterNodesSpec",
    "LoadBalancerClusterVirtualIP",
    "LoadBalancerCreateRequest",
    "LoadBalancerForwardingRule",
    "LoadBalancerListOptions",
    "LoadBalancerUpdateAssignedDevicesRequest",
    "LoadBalancerUpdateRequest",
    "Meta",
    "Network",
    "NetworkLANCreateRequest",
    "NetworkLANUpdateRequest",
    "NetworkListOptions",
    "NetworkWANCreateRequest",
    "PersistentStorage",
    "PersistentStorageAttachedDevice",
    "PersistentStorageCreateRequest",
    "PersistentStorageListOptions",
    "SearchListOptions",
    "SSHKey",
    "SSHKeyCreateRequest",
    "SuccessResponse",
    "Template",
    "TemplateCreateRequest",
    "TemplateListOptions",
    "TemplateUpdateRequest",
    "Tenant",
    "TenantListOptions",
]
