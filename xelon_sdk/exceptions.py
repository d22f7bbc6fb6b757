class XelonError(Exception):
    """Base exception for Xelon SDK errors."""

    pass


class XelonConfigurationError(XelonError, ValueError):
    """Raised when the client is configured with an unusable base URL."""

    pass


class XelonEmptyArgumentError(XelonError, ValueError):
    """Raised when a required identifier is empty."""

    pass


class XelonEmptyPayloadError(XelonError, ValueError):
    """Raised when a required request payload is missing."""

    pass


class XelonEncodingError(XelonError):
    """Raised when query options or a request body cannot be encoded."""

    pass


class XelonTransportError(XelonError):
    """
    Raised when the HTTP transport fails (DNS, connection, timeout).

    The message and ``url`` never contain a clear-text ``password`` query value.
    """

    def __init__(self, message, url=None):
        super().__init__(message)
        self.url = url


class XelonContextError(XelonError):
    """Raised when a request context is done before the call completes."""

    pass


class RequestCancelledError(XelonContextError):
    """Raised when a request context was cancelled."""

    pass


class DeadlineExceededError(XelonContextError):
    """Raised when a request context deadline has passed."""

    pass


class XelonDataError(XelonError):
    """Raised when there is an error parsing data from the Xelon API."""

    def __init__(self, message, response=None):
        super().__init__(message)
        self.response = response


class XelonAPIError(XelonError):
    """
    Raised when the Xelon API answers with a non-2xx status code.

    Attributes:
        response: The :class:`~xelon_sdk.response.Response` that caused the error.
        error_element: The decoded error body.
    """

    def __init__(self, response, error_element):
        self.response = response
        self.error_element = error_element
        super().__init__(str(self))

    def __str__(self):
        from .utils import sanitize_url

        request = self.response.request
        url = sanitize_url(request.url) if request is not None else None
        method = request.method if request is not None else None
        if self.response.stackify_id:
            return (
                f"{method} {url}: {self.response.status_code} "
                f"(stackify id {self.response.stackify_id}) {self.error_element}"
            )
        return f"{method} {url}: {self.response.status_code} {self.error_element}"
