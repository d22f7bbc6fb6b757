"""
Types shared by several services.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..utils import api_field, query_field


@dataclass
class ListOptions:
    """
    Pagination parameters accepted by the List methods.

    Richer option types include it as their ``pagination`` field.
    """
    page: Optional[int] = query_field("page")
    per_page: Optional[int] = query_field("per_page")


@dataclass
class SearchListOptions:
    """Sorting, searching and pagination parameters of most List methods."""
    sort: Optional[str] = query_field("sort")
    search: Optional[str] = query_field("search")
    pagination: ListOptions = field(default_factory=ListOptions)


@dataclass
class APIResponse:
    """Generic message-only Xelon API response."""
    message: Optional[str] = api_field("message", omitempty=True)


@dataclass
class SuccessResponse:
    """Response of actions that report a plain success message."""
    success: Optional[str] = api_field("success", omitempty=True)
    message: Optional[str] = api_field("message", omitempty=True)
