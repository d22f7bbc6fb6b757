from typing import List, Optional, Tuple

from ..context import RequestContext
from ..models.cloud import Cloud
from ..response import Response
from .base import Service, require_argument

CLOUDS_BASE_PATH = "hv"


class CloudsService(Service):
    """Handles the organization's cloud related methods of the Xelon API."""

    def list(
        self, tenant_id: str, ctx: Optional[RequestContext] = None
    ) -> Tuple[List[Cloud], Response]:
        """List the clouds available to the tenant identified by ``tenant_id``."""
        require_argument(tenant_id, "failed to list clouds: tenant id must be supplied")

        response = self._call("GET", f"{CLOUDS_BASE_PATH}/list/{tenant_id}", target=List[Cloud], ctx=ctx)
        return response.data or [], response
