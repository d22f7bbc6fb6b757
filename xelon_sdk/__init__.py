"""
Python client for the Xelon cloud REST API.

This package provides a Python interface to the Xelon HQ API: devices,
networks, firewalls, load balancers, Kubernetes clusters and the other
resources of a Xelon tenant.
"""

from .client import LIBRARY_VERSION, XelonClient
from .context import RequestContext, background
from .response import Response
from .utils import add_options
from .models import (
    ErrorElement,
    LegacyErrorElement,
    ListOptions,
    Meta,
    SearchListOptions,
)
from .exceptions import (
    DeadlineExceededError,
    RequestCancelledError,
    XelonAPIError,
    XelonConfigurationError,
    XelonContextError,
    XelonDataError,
    XelonEmptyArgumentError,
    XelonEmptyPayloadError,
    XelonEncodingError,
    XelonError,
    XelonTransportError,
)

__version__ = LIBRARY_VERSION

__all__ = [
    "XelonClient",
    "RequestContext",
    "background",
    "Response",
    "add_options",
    "ErrorElement",
    "LegacyErrorElement",
    "ListOptions",
    "Meta",
    "SearchListOptions",
    "XelonError",
    "XelonConfigurationError",
    "XelonEmptyArgumentError",
    "XelonEmptyPayloadError",
    "XelonEncodingError",
    "XelonTransportError",
    "XelonContextError",
    "RequestCancelledError",
    "DeadlineExceededError",
    "XelonDataError",
    "XelonAPIError",
]
