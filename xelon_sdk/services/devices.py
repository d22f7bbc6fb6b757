from typing import List, Optional, Tuple

from ..context import RequestContext
from ..models.device import (
    Device,
    DeviceAddDiskRequest,
    DeviceCreateRequest,
    DeviceDeleteDiskRequest,
    DeviceListOptions,
    DeviceRoot,
    DevicesRoot,
    DeviceUpdateDiskRequest,
    DeviceUpdateHardwareRequest,
    DeviceUpdateRequest,
)
from ..response import Response
from ..utils import add_options
from .base import Service, require_argument, require_payload

DEVICE_BASE_PATH = "devices"


class DevicesService(Service):
    """
    Handles the device (virtual machine) related methods of the Xelon API.

    Example:
        >>> devices, response = client.devices.list(DeviceListOptions(search="web"))
        >>> device, _ = client.devices.get(devices[0].id)
        >>> client.devices.start(device.id)
    """

    def list(
        self, opts: Optional[DeviceListOptions] = None, ctx: Optional[RequestContext] = None
    ) -> Tuple[List[Device], Response]:
        """
        List all devices.

        Args:
            opts: Optional search, sort and pagination parameters.
            ctx: Optional request context.

        Returns:
            Tuple of the devices on the requested page and the response. The
            pagination details are available in ``response.meta``.
        """
        path = add_options(DEVICE_BASE_PATH, opts)
        response = self._call("GET", path, target=DevicesRoot, ctx=ctx)
        root = response.data or DevicesRoot()
        return root.devices, response

    def get(self, device_id: str, ctx: Optional[RequestContext] = None) -> Tuple[Device, Response]:
        """Get detailed information for the device identified by ``device_id``."""
        require_argument(device_id, "failed to get device: id must be supplied")

        response = self._call("GET", f"{DEVICE_BASE_PATH}/{device_id}", target=Device, ctx=ctx)
        return response.data, response

    def create(
        self, create_request: DeviceCreateRequest, ctx: Optional[RequestContext] = None
    ) -> Tuple[Optional[Device], Response]:
        """Create a new device."""
        require_payload(create_request, "failed to create device: payload must be supplied")

        response = self._call("POST", DEVICE_BASE_PATH, create_request, target=DeviceRoot, ctx=ctx)
        return _device(response), response

    def update(
        self,
        device_id: str,
        update_request: DeviceUpdateRequest,
        ctx: Optional[RequestContext] = None,
    ) -> Tuple[Optional[Device], Response]:
        """Change the display name of the device."""
        require_argument(device_id, "failed to update device: id must be supplied")
        require_payload(update_request, "failed to update device: payload must be supplied")

        path = f"{DEVICE_BASE_PATH}/{device_id}"
        response = self._call("PUT", path, update_request, target=DeviceRoot, ctx=ctx)
        return _device(response), response

    def update_hardware(
        self,
        device_id: str,
        update_request: DeviceUpdateHardwareRequest,
        ctx: Optional[RequestContext] = None,
    ) -> Tuple[Optional[Device], Response]:
        """Change the CPU core count and memory of the device."""
        require_argument(device_id, "failed to update device hardware: id must be supplied")
        require_payload(update_request, "failed to update device hardware: payload must be supplied")

        path = f"{DEVICE_BASE_PATH}/{device_id}/hardware"
        response = self._call("PUT", path, update_request, target=DeviceRoot, ctx=ctx)
        return _device(response), response

    def delete(self, device_id: str, ctx: Optional[RequestContext] = None) -> Response:
        require_argument(device_id, "failed to delete device: id must be supplied")

        return self._call("DELETE", f"{DEVICE_BASE_PATH}/{device_id}", ctx=ctx)

    def start(self, device_id: str, ctx: Optional[RequestContext] = None) -> Response:
        """Power on the device."""
        require_argument(device_id, "failed to start device: id must be supplied")

        return self._call("POST", f"{DEVICE_BASE_PATH}/{device_id}/start", ctx=ctx)

    def stop(self, device_id: str, ctx: Optional[RequestContext] = None) -> Response:
        """Power off the device."""
        require_argument(device_id, "failed to stop device: id must be supplied")

        return self._call("POST", f"{DEVICE_BASE_PATH}/{device_id}/stop", ctx=ctx)

    def add_disk(
        self,
        device_id: str,
        add_request: DeviceAddDiskRequest,
        ctx: Optional[RequestContext] = None,
    ) -> Response:
        require_argument(device_id, "failed to add disk: device id must be supplied")
        require_payload(add_request, "failed to add disk: request must be supplied")

        return self._call("POST", f"{DEVICE_BASE_PATH}/{device_id}/disk", add_request, ctx=ctx)

    def update_disk(
        self,
        device_id: str,
        update_request: DeviceUpdateDiskRequest,
        ctx: Optional[RequestContext] = None,
    ) -> Response:
        """Resize a disk of the device, optionally extending its partition."""
        require_argument(device_id, "failed to update disk: device id must be supplied")
        require_payload(update_request, "failed to update disk: request must be supplied")

        return self._call("PUT", f"{DEVICE_BASE_PATH}/{device_id}/disk", update_request, ctx=ctx)

    def delete_disk(
        self,
        device_id: str,
        delete_request: DeviceDeleteDiskRequest,
        ctx: Optional[RequestContext] = None,
    ) -> Response:
        require_argument(device_id, "failed to delete disk: device id must be supplied")
        require_payload(delete_request, "failed to delete disk: request must be supplied")

        return self._call(
            "DELETE", f"{DEVICE_BASE_PATH}/{device_id}/disk", delete_request, ctx=ctx
        )


def _device(response: Response) -> Optional[Device]:
    return response.data.device if response.data is not None else None
