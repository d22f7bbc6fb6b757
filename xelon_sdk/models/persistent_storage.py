"""
Models for persistent storages.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..utils import api_field
from .cloud import Cloud
from .common import SearchListOptions
from .meta import Meta
from .tenant import Tenant


@dataclass
class PersistentStorageAttachedDevice:
    id: Optional[str] = api_field("identifier", omitempty=True)
    name: Optional[str] = api_field("name", omitempty=True)


@dataclass
class PersistentStorage:
    attached_devices: List[PersistentStorageAttachedDevice] = api_field(
        "attachedDevices", omitempty=True, default_factory=list
    )
    capacity: Optional[int] = api_field("capacity", omitempty=True)
    cloud: Optional[Cloud] = api_field("cloud", omitempty=True)
    formatted: Optional[bool] = api_field("formatted", omitempty=True)
    id: Optional[str] = api_field("identifier", omitempty=True)
    name: Optional[str] = api_field("name", omitempty=True)
    tenant: Optional[Tenant] = api_field("tenant", omitempty=True)
    type: Optional[int] = api_field("type", omitempty=True)
    uuid: Optional[str] = api_field("uuid", omitempty=True)


@dataclass
class PersistentStorageCreateRequest:
    name: str = api_field("name")
    size: int = api_field("storageSize")
    type: int = api_field("type")
    cloud_id: Optional[str] = api_field("cloudIdentifier", omitempty=True)
    device_id: Optional[str] = api_field("deviceIdentifier", omitempty=True)
    tenant_id: Optional[str] = api_field("tenantIdentifier", omitempty=True)


@dataclass
class PersistentStorageDeviceRequest:
    device_id: str = api_field("deviceIdentifier")


@dataclass
class PersistentStorageExtendRequest:
    capacity: int = api_field("diskSize")


@dataclass
class PersistentStorageListOptions(SearchListOptions):
    """Optional parameters of :meth:`PersistentStoragesService.list`."""


@dataclass
class PersistentStorageRoot:
    persistent_storage: Optional[PersistentStorage] = api_field("data", omitempty=True)
    message: Optional[str] = api_field("message", omitempty=True)


@dataclass
class PersistentStoragesRoot:
    persistent_storages: List[PersistentStorage] = api_field("data", default_factory=list)
    meta: Optional[Meta] = api_field("meta", omitempty=True)
