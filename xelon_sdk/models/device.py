"""
Models for Xelon devices (virtual machines) and related objects.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..utils import api_field
from .common import SearchListOptions
from .meta import Meta


@dataclass
class DeviceStorage:
    """A disk attached to a device."""
    id: Optional[str] = api_field("id", omitempty=True)
    name: Optional[str] = api_field("name", omitempty=True)
    size: Optional[int] = api_field("size", omitempty=True)
    type: Optional[str] = api_field("type", omitempty=True)
    unit_number: Optional[int] = api_field("unitNumber", omitempty=True)


@dataclass
class DeviceTenant:
    id: Optional[str] = api_field("identifier", omitempty=True)
    name: Optional[str] = api_field("name", omitempty=True)


@dataclass
class DeviceTemplate:
    id: Optional[str] = api_field("identifier", omitempty=True)


@dataclass
class Device:
    """
    Represents a Xelon device (virtual machine).

    Fields the API returns but this model does not declare are kept in
    ``_extra_fields``.
    """
    # Identification
    id: Optional[str] = api_field("identifier", omitempty=True)
    display_name: Optional[str] = api_field("displayName", omitempty=True)
    host_name: Optional[str] = api_field("hostName", omitempty=True)

    # Hardware
    cpu_cores: Optional[int] = api_field("cpu", omitempty=True)
    ram: Optional[int] = api_field("ram", omitempty=True)
    disk_size: Optional[int] = api_field("diskSize", omitempty=True)
    swap_disk_size: Optional[int] = api_field("swapDiskSize", omitempty=True)
    storages: List[DeviceStorage] = api_field("storages", omitempty=True, default_factory=list)

    # Status
    monitoring_enabled: Optional[bool] = api_field("monitoring", omitempty=True)
    powered_on: Optional[bool] = api_field("isPoweredOn", omitempty=True)
    state: Optional[int] = api_field("state", omitempty=True)

    template: Optional[DeviceTemplate] = api_field("template", omitempty=True)
    tenant: Optional[DeviceTenant] = api_field("tenant", omitempty=True)

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class DeviceCreateNetwork:
    network_id: str = api_field("networkId")
    connect_on_power_on: bool = api_field("connectOnPowerOn", False)
    ip_address: Optional[str] = api_field("ip", omitempty=True)
    ip_address_id: Optional[str] = api_field("ipId", omitempty=True)


@dataclass
class DeviceCreateRequest:
    cpu_cores: int = api_field("cpu")
    disk_size: int = api_field("diskSize")
    display_name: str = api_field("displayName")
    host_name: str = api_field("hostName")
    password: str = api_field("password")
    password_confirmation: str = api_field("passwordConfirmation")
    ram: int = api_field("ram")
    swap_disk_size: int = api_field("swapDiskSize")
    template_id: str = api_field("templateId")
    tenant_id: str = api_field("tenantIdentifier")
    enable_monitoring: bool = api_field("isMonitoring", False)
    backup_job_id: Optional[int] = api_field("backJobId", omitempty=True)
    networks: List[DeviceCreateNetwork] = api_field("networks", omitempty=True, default_factory=list)
    script_id: Optional[str] = api_field("scriptId", omitempty=True)
    send_email: Optional[bool] = api_field("sendEmail", omitempty=True)
    ssh_key_id: Optional[str] = api_field("sshKeyId", omitempty=True)


@dataclass
class DeviceUpdateRequest:
    display_name: str = api_field("displayName")


@dataclass
class DeviceUpdateHardwareRequest:
    cpu_cores: int = api_field("cpu")
    ram: int = api_field("ram")


@dataclass
class DeviceAddDiskRequest:
    size: int = api_field("size")
    is_hdd: Optional[bool] = api_field("isHdd", omitempty=True)


@dataclass
class DeviceUpdateDiskRequest:
    disk_id: str = api_field("diskId")
    size: int = api_field("size")
    extend_partition: bool = api_field("extendPartition", False)
    create_snapshot: Optional[bool] = api_field("createSnapshot", omitempty=True)


@dataclass
class DeviceDeleteDiskRequest:
    disk_id: str = api_field("diskId")
    password: Optional[str] = api_field("password", omitempty=True)


@dataclass
class DeviceListOptions(SearchListOptions):
    """Optional parameters of :meth:`DevicesService.list`."""


@dataclass
class DeviceRoot:
    device: Optional[Device] = api_field("data", omitempty=True)
    message: Optional[str] = api_field("message", omitempty=True)


@dataclass
class DevicesRoot:
    devices: List[Device] = api_field("data", default_factory=list)
    meta: Optional[Meta] = api_field("meta", omitempty=True)
