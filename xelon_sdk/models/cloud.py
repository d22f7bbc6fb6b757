"""
Models for Xelon clouds (hypervisor systems).
"""

from dataclasses import dataclass
from typing import Optional

from ..utils import api_field


@dataclass
class Cloud:
    """Represents a cloud an organization can place resources in."""
    id: Optional[int] = api_field("id", omitempty=True)
    name: Optional[str] = api_field("display_name", omitempty=True)
    short_name: Optional[str] = api_field("display_short_name", omitempty=True)
    type: Optional[int] = api_field("type", omitempty=True)
