from typing import List, Optional, Tuple

from ..context import RequestContext
from ..models.persistent_storage import (
    PersistentStorage,
    PersistentStorageCreateRequest,
    PersistentStorageDeviceRequest,
    PersistentStorageExtendRequest,
    PersistentStorageListOptions,
    PersistentStorageRoot,
    PersistentStoragesRoot,
)
from ..response import Response
from ..utils import add_options
from .base import Service, require_argument, require_payload

PERSISTENT_STORAGE_BASE_PATH = "persistent-storages"


class PersistentStoragesService(Service):
    """Handles the persistent storage related methods of the Xelon API."""

    def list(
        self,
        opts: Optional[PersistentStorageListOptions] = None,
        ctx: Optional[RequestContext] = None,
    ) -> Tuple[List[PersistentStorage], Response]:
        path = add_options(PERSISTENT_STORAGE_BASE_PATH, opts)
        response = self._call("GET", path, target=PersistentStoragesRoot, ctx=ctx)
        root = response.data or PersistentStoragesRoot()
        return root.persistent_storages, response

    def get(
        self, persistent_storage_id: str, ctx: Optional[RequestContext] = None
    ) -> Tuple[PersistentStorage, Response]:
        require_argument(
            persistent_storage_id, "failed to get persistent storage: id must be supplied"
        )

        path = f"{PERSISTENT_STORAGE_BASE_PATH}/{persistent_storage_id}"
        response = self._call("GET", path, target=PersistentStorage, ctx=ctx)
        return response.data, response

    def create(
        self, create_request: PersistentStorageCreateRequest, ctx: Optional[RequestContext] = None
    ) -> Tuple[Optional[PersistentStorage], Response]:
        require_payload(
            create_request, "failed to create persistent storage: payload must be supplied"
        )

        response = self._call(
            "POST",
            PERSISTENT_STORAGE_BASE_PATH,
            create_request,
            target=PersistentStorageRoot,
            ctx=ctx,
        )
        storage = response.data.persistent_storage if response.data is not None else None
        return storage, response

    def delete(self, persistent_storage_id: str, ctx: Optional[RequestContext] = None) -> Response:
        require_argument(
            persistent_storage_id, "failed to delete persistent storage: id must be supplied"
        )

        path = f"{PERSISTENT_STORAGE_BASE_PATH}/{persistent_storage_id}"
        return self._call("DELETE", path, ctx=ctx)

    def attach_to_device(
        self, persistent_storage_id: str, device_id: str, ctx: Optional[RequestContext] = None
    ) -> Response:
        """Attach the persistent storage to the device identified by ``device_id``."""
        require_argument(
            persistent_storage_id, "failed to attach persistent storage: id must be supplied"
        )
        require_argument(
            device_id, "failed to attach persistent storage: device id must be supplied"
        )

        path = f"{PERSISTENT_STORAGE_BASE_PATH}/{persistent_storage_id}/attach-device"
        return self._call(
            "POST", path, PersistentStorageDeviceRequest(device_id=device_id), ctx=ctx
        )

    def detach_from_device(
        self, persistent_storage_id: str, device_id: str, ctx: Optional[RequestContext] = None
    ) -> Response:
        require_argument(
            persistent_storage_id, "failed to detach persistent storage: id must be supplied"
        )
        require_argument(
            device_id, "failed to detach persistent storage: device id must be supplied"
        )

        path = f"{PERSISTENT_STORAGE_BASE_PATH}/{persistent_storage_id}/detach-device"
        return self._call(
            "POST", path, PersistentStorageDeviceRequest(device_id=device_id), ctx=ctx
        )

    def extend(
        self, persistent_storage_id: str, capacity: int, ctx: Optional[RequestContext] = None
    ) -> Response:
        """Grow the persistent storage to ``capacity`` GB."""
        require_argument(
            persistent_storage_id, "failed to extend persistent storage: id must be supplied"
        )

        path = f"{PERSISTENT_STORAGE_BASE_PATH}/{persistent_storage_id}/extend"
        return self._call(
            "POST", path, PersistentStorageExtendRequest(capacity=capacity), ctx=ctx
        )
