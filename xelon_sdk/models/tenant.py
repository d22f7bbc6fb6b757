"""
Models for Xelon tenants.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..utils import api_field
from .common import SearchListOptions
from .meta import Meta


@dataclass
class Tenant:
    """
    Represents a top-level entity in the Xelon cloud.

    Most other resources are scoped to a tenant.
    """
    id: Optional[str] = api_field("identifier", omitempty=True)
    name: Optional[str] = api_field("name", omitempty=True)
    parent: Optional[str] = api_field("parent", omitempty=True)
    status: Optional[str] = api_field("status", omitempty=True)
    type: Optional[str] = api_field("type", omitempty=True)


@dataclass
class TenantListOptions(SearchListOptions):
    """Optional parameters of :meth:`TenantsService.list`."""


@dataclass
class TenantsRoot:
    tenants: List[Tenant] = api_field("data", default_factory=list)
    meta: Optional[Meta] = api_field("meta", omitempty=True)
