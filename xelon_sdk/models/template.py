"""
Models for Xelon templates (base images).
"""

from dataclasses import dataclass
from typing import List, Optional

from ..utils import api_field, query_field
from .common import SearchListOptions
from .meta import Meta


@dataclass
class Template:
    """Represents a Xelon base image devices are created from."""
    description: Optional[str] = api_field("description", omitempty=True)
    category: Optional[str] = api_field("category", omitempty=True)
    cloud_id: Optional[str] = api_field("cloudIdentifier", omitempty=True)
    id: Optional[str] = api_field("identifier", omitempty=True)
    name: Optional[str] = api_field("name", omitempty=True)
    status: Optional[int] = api_field("status", omitempty=True)
    type: Optional[str] = api_field("type", omitempty=True)


@dataclass
class TemplateCreateRequest:
    device_id: str = api_field("deviceId")
    name: str = api_field("name")
    tenant_id: str = api_field("tenantId")
    send_email: bool = api_field("sendEmail", False)
    description: Optional[str] = api_field("description", omitempty=True)
    template_owner_id: Optional[str] = api_field("ownerTenantId", omitempty=True)


@dataclass
class TemplateUpdateRequest:
    name: str = api_field("name")
    description: Optional[str] = api_field("description", omitempty=True)


@dataclass
class TemplateListOptions(SearchListOptions):
    """Optional parameters of :meth:`TemplatesService.list`."""
    type: Optional[str] = query_field("type")


@dataclass
class TemplateRoot:
    template: Optional[Template] = api_field("data", omitempty=True)
    message: Optional[str] = api_field("message", omitempty=True)


@dataclass
class TemplatesRoot:
    templates: List[Template] = api_field("data", default_factory=list)
    meta: Optional[Meta] = api_field("meta", omitempty=True)
