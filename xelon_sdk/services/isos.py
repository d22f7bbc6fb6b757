from typing import List, Optional, Tuple

from ..context import RequestContext
from ..models.iso import ISO, ISOCreateRequest, ISOListOptions, ISORoot, ISOsRoot, ISOUpdateRequest
from ..response import Response
from ..utils import add_options
from .base import Service, require_argument, require_payload

ISO_BASE_PATH = "isos"


class ISOsService(Service):
    """Handles the ISO image related methods of the Xelon API."""

    def list(
        self, opts: Optional[ISOListOptions] = None, ctx: Optional[RequestContext] = None
    ) -> Tuple[List[ISO], Response]:
        path = add_options(ISO_BASE_PATH, opts)
        response = self._call("GET", path, target=ISOsRoot, ctx=ctx)
        root = response.data or ISOsRoot()
        return root.isos, response

    def get(self, iso_id: str, ctx: Optional[RequestContext] = None) -> Tuple[ISO, Response]:
        require_argument(iso_id, "failed to get iso: id must be supplied")

        response = self._call("GET", f"{ISO_BASE_PATH}/{iso_id}", target=ISO, ctx=ctx)
        return response.data, response

    def create(
        self, create_request: ISOCreateRequest, ctx: Optional[RequestContext] = None
    ) -> Tuple[Optional[ISO], Response]:
        """Upload a new ISO image from ``create_request.url``."""
        require_payload(create_request, "failed to create iso: payload must be supplied")

        response = self._call("POST", ISO_BASE_PATH, create_request, target=ISORoot, ctx=ctx)
        return _iso(response), response

    def update(
        self, iso_id: str, update_request: ISOUpdateRequest, ctx: Optional[RequestContext] = None
    ) -> Tuple[Optional[ISO], Response]:
        require_argument(iso_id, "failed to update iso: id must be supplied")
        require_payload(update_request, "failed to update iso: payload must be supplied")

        path = f"{ISO_BASE_PATH}/{iso_id}"
        response = self._call("PATCH", path, update_request, target=ISORoot, ctx=ctx)
        return _iso(response), response

    def delete(self, iso_id: str, ctx: Optional[RequestContext] = None) -> Response:
        require_argument(iso_id, "failed to delete iso: id must be supplied")

        return self._call("DELETE", f"{ISO_BASE_PATH}/{iso_id}", ctx=ctx)


def _iso(response: Response) -> Optional[ISO]:
    return response.data.iso if response.data is not None else None
