"""
Models for SSH keys.
"""

from dataclasses import dataclass
from typing import Optional

from ..utils import api_field


@dataclass
class SSHKey:
    created_at: Optional[str] = api_field("created_at", omitempty=True)
    fingerprint: Optional[str] = api_field("fingerprint", omitempty=True)
    id: Optional[int] = api_field("id", omitempty=True)
    name: Optional[str] = api_field("name", omitempty=True)
    public_key: Optional[str] = api_field("ssh_key", omitempty=True)


@dataclass
class SSHKeyCreateRequest:
    name: str = api_field("name")
    public_key: str = api_field("ssh_key")
