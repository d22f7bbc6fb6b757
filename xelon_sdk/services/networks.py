from typing import List, Optional, Tuple

from ..context import RequestContext
from ..models.network import (
    Network,
    NetworkLANCreateRequest,
    NetworkLANUpdateRequest,
    NetworkListOptions,
    NetworkRoot,
    NetworksRoot,
    NetworkWANCreateRequest,
)
from ..response import Response
from ..utils import add_options
from .base import Service, require_argument, require_payload

NETWORK_BASE_PATH = "networks"


class NetworksService(Service):
    """Handles the LAN and WAN network related methods of the Xelon API."""

    def list(
        self, opts: Optional[NetworkListOptions] = None, ctx: Optional[RequestContext] = None
    ) -> Tuple[List[Network], Response]:
        path = add_options(NETWORK_BASE_PATH, opts)
        response = self._call("GET", path, target=NetworksRoot, ctx=ctx)
        root = response.data or NetworksRoot()
        return root.networks, response

    def get(self, network_id: str, ctx: Optional[RequestContext] = None) -> Tuple[Network, Response]:
        require_argument(network_id, "failed to get network: id must be supplied")

        response = self._call("GET", f"{NETWORK_BASE_PATH}/{network_id}", target=Network, ctx=ctx)
        return response.data, response

    def create_lan(
        self, create_request: NetworkLANCreateRequest, ctx: Optional[RequestContext] = None
    ) -> Tuple[Optional[Network], Response]:
        require_payload(create_request, "failed to create LAN network: payload must be supplied")

        path = f"{NETWORK_BASE_PATH}/lan"
        response = self._call("POST", path, create_request, target=NetworkRoot, ctx=ctx)
        return _network(response), response

    def update_lan(
        self,
        network_id: str,
        update_request: NetworkLANUpdateRequest,
        ctx: Optional[RequestContext] = None,
    ) -> Tuple[Network, Response]:
        """Update a LAN network. The API answers with the bare network object."""
        require_argument(network_id, "failed to update LAN network: id must be supplied")
        require_payload(update_request, "failed to update LAN network: payload must be supplied")

        path = f"{NETWORK_BASE_PATH}/{network_id}/lan"
        response = self._call("PATCH", path, update_request, target=Network, ctx=ctx)
        return response.data, response

    def create_wan(
        self, create_request: NetworkWANCreateRequest, ctx: Optional[RequestContext] = None
    ) -> Tuple[Optional[Network], Response]:
        require_payload(create_request, "failed to create WAN network: payload must be supplied")

        path = f"{NETWORK_BASE_PATH}/wan"
        response = self._call("POST", path, create_request, target=NetworkRoot, ctx=ctx)
        return _network(response), response

    def delete(self, network_id: str, ctx: Optional[RequestContext] = None) -> Response:
        require_argument(network_id, "failed to delete network: id must be supplied")

        return self._call("DELETE", f"{NETWORK_BASE_PATH}/{network_id}", ctx=ctx)


def _network(response: Response) -> Optional[Network]:
    return response.data.network if response.data is not None else None
