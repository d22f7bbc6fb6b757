"""
Response wrapper returned by every API call.
"""

from typing import Any, Optional

import requests

from .models.meta import Meta

HEADER_STACKIFY_ID = "X-StackifyID"


class Response:
    """
    A Xelon API response. This wraps :class:`requests.Response`.

    Attributes:
        meta: Pagination information, set when the decoded body carried it.
        stackify_id: Stackify ID returned by the API, useful to contact support.
        data: The decoded body (or the byte sink it was copied into).
    """

    def __init__(self, http_response: requests.Response):
        self.http_response = http_response
        self.meta: Optional[Meta] = None
        self.data: Any = None
        self.stackify_id: Optional[str] = http_response.headers.get(HEADER_STACKIFY_ID) or None

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def headers(self):
        return self.http_response.headers

    @property
    def request(self) -> Optional[requests.PreparedRequest]:
        return self.http_response.request

    def __getattr__(self, name):
        # Dunders and http_response itself are looked up before __init__ runs
        # when copying or unpickling.
        if name == "http_response" or name.startswith("__"):
            raise AttributeError(name)
        return getattr(self.http_response, name)

    def __repr__(self):
        return f"<Response [{self.status_code}]>"
