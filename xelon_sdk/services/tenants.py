from typing import List, Optional, Tuple

from ..context import RequestContext
from ..models.tenant import Tenant, TenantListOptions, TenantsRoot
from ..response import Response
from ..utils import add_options
from .base import Service

TENANT_BASE_PATH = "tenants"


class TenantsService(Service):
    """Handles the tenant related methods of the Xelon API."""

    def get_current(self, ctx: Optional[RequestContext] = None) -> Tuple[Tenant, Response]:
        """Get detailed information for the tenant the token belongs to."""
        response = self._call("GET", f"{TENANT_BASE_PATH}/current", target=Tenant, ctx=ctx)
        return response.data, response

    def list(
        self, opts: Optional[TenantListOptions] = None, ctx: Optional[RequestContext] = None
    ) -> Tuple[List[Tenant], Response]:
        """List all tenants. Pagination is available in ``response.meta``."""
        path = add_options(TENANT_BASE_PATH, opts)
        response = self._call("GET", path, target=TenantsRoot, ctx=ctx)
        root = response.data or TenantsRoot()
        return root.tenants, response
