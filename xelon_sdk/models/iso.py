"""
Models for custom ISO images.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..utils import api_field
from .cloud import Cloud
from .common import SearchListOptions
from .meta import Meta


@dataclass
class ISO:
    """Represents a Xelon custom ISO."""
    active: Optional[bool] = api_field("active", omitempty=True)
    category: Optional[str] = api_field("category", omitempty=True)
    cloud: Optional[Cloud] = api_field("cloud", omitempty=True)
    description: Optional[str] = api_field("description", omitempty=True)
    id: Optional[str] = api_field("identifier", omitempty=True)
    name: Optional[str] = api_field("name", omitempty=True)
    owner: Optional[str] = api_field("owner", omitempty=True)
    status: Optional[bool] = api_field("status", omitempty=True)


@dataclass
class ISOCreateRequest:
    category_id: int = api_field("categoryId")
    cloud_id: str = api_field("cloudIdentifier")
    name: str = api_field("name")
    url: str = api_field("url")
    description: Optional[str] = api_field("description", omitempty=True)
    tenant_id: Optional[str] = api_field("tenantIdentifier", omitempty=True)


@dataclass
class ISOUpdateRequest:
    category_id: int = api_field("categoryId")
    description: str = api_field("description")
    name: str = api_field("name")


@dataclass
class ISOListOptions(SearchListOptions):
    """Optional parameters of :meth:`ISOsService.list`."""


@dataclass
class ISORoot:
    iso: Optional[ISO] = api_field("data", omitempty=True)
    message: Optional[str] = api_field("message", omitempty=True)


@dataclass
class ISOsRoot:
    isos: List[ISO] = api_field("data", default_factory=list)
    meta: Optional[Meta] = api_field("meta", omitempty=True)
