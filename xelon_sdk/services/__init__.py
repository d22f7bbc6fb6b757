"""
Resource services of the Xelon API.

Each service is reachable as an attribute of :class:`xelon_sdk.XelonClient`,
e.g. ``client.devices`` or ``client.firewalls``.
"""

from .base import Service
from .clouds import CloudsService
from .devices import DevicesService
from .firewalls import FirewallsService
from .isos import ISOsService
from .kubernetes import KubernetesService
from .load_balancer_clusters import LoadBalancerClustersService
from .load_balancers import LoadBalancersService
from .networks import NetworksService
from .persistent_storages import PersistentStoragesService
from .ssh_keys import SSHKeysService
from .templates import TemplatesService
from .tenants import TenantsService

__all__ = [
    "Service",
    "CloudsService",
    "DevicesService",
    "FirewallsService",
    "ISOsService",
    "KubernetesService",
    "LoadBalancerClustersService",
    "LoadBalancersService",
    "NetworksService",
    "PersistentStoragesService",
    "SSHKeysService",
    "TemplatesService",
    "TenantsService",
]
