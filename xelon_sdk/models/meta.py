"""
Pagination metadata attached to list responses.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..utils import api_field, decode_model

# Older API generations use snake_case pagination keys.
_SNAKE_CASE_KEYS = {
    "current_page": "currentPage",
    "page": "currentPage",
    "per_page": "perPage",
    "last_page": "lastPage",
}


@dataclass
class Meta:
    """Represents a pagination object."""

    from_: Optional[int] = api_field("from", omitempty=True)  # starting index on the current page
    last_page: Optional[int] = api_field("lastPage", omitempty=True)
    page: Optional[int] = api_field("currentPage", omitempty=True)
    per_page: Optional[int] = api_field("perPage", omitempty=True)
    to: Optional[int] = api_field("to", omitempty=True)  # ending index on the current page
    total: Optional[int] = api_field("total", omitempty=True)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Meta":
        if isinstance(data, dict):
            data = {_SNAKE_CASE_KEYS.get(key, key): value for key, value in data.items()}
        return decode_model(cls, data)
