from typing import TYPE_CHECKING, Any, Optional

from ..context import RequestContext
from ..exceptions import XelonEmptyArgumentError, XelonEmptyPayloadError
from ..response import Response

if TYPE_CHECKING:
    from ..client import XelonClient


class Service:
    """Base class of the resource services; holds the shared client."""

    def __init__(self, client: "XelonClient"):
        self._client = client

    def _call(
        self,
        method: str,
        path: str,
        body: Any = None,
        target: Any = None,
        ctx: Optional[RequestContext] = None,
    ) -> Response:
        request = self._client.new_request(method, path, body)
        return self._client.do(request, target, ctx=ctx)


def require_argument(value: Any, message: str = "argument cannot be empty") -> None:
    """Raise :class:`XelonEmptyArgumentError` when ``value`` is empty."""
    if value is None or value == "" or value == 0:
        raise XelonEmptyArgumentError(message)


def require_payload(payload: Any, message: str = "empty payload is not allowed") -> None:
    """Raise :class:`XelonEmptyPayloadError` when ``payload`` is None."""
    if payload is None:
        raise XelonEmptyPayloadError(message)
