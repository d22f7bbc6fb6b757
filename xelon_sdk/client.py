import json
from typing import Any, Dict, Optional, Type
from urllib.parse import urljoin, urlsplit

import requests
import urllib3
from requests.structures import CaseInsensitiveDict

from .context import RequestContext, background
from .logging import get_logger, log_api_request, log_api_response
from .models.error import ErrorElement
from .models.meta import Meta
from .response import Response
from .services import (
    CloudsService,
    DevicesService,
    FirewallsService,
    ISOsService,
    KubernetesService,
    LoadBalancerClustersService,
    LoadBalancersService,
    NetworksService,
    PersistentStoragesService,
    SSHKeysService,
    TemplatesService,
    TenantsService,
)
from .utils import decode_value, encode_value, sanitize_message, sanitize_url
from .exceptions import (
    XelonAPIError,
    XelonConfigurationError,
    XelonDataError,
    XelonEncodingError,
    XelonTransportError,
)

logger = get_logger(__name__)

LIBRARY_VERSION = "0.14.1"

DEFAULT_BASE_URL = "https://hq.xelon.ch/api/service/"
DEFAULT_MEDIA_TYPE = "application/json"
DEFAULT_USER_AGENT = f"xelon-sdk-python/{LIBRARY_VERSION}"
DEFAULT_TIMEOUT = 60

HEADER_CLIENT_ID = "X-User-Id"

SUPPORTED_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS", "HEAD"]

# Lower bound for timeouts derived from a context deadline; urllib3 rejects 0.
MIN_TIMEOUT = 0.001


class XelonClient:
    """
    Client for the Xelon REST API.

    Every resource service (``devices``, ``networks``, ...) builds its requests
    with :meth:`new_request` and sends them with :meth:`do`. The client holds no
    per-request state, so one instance can serve many threads as long as the
    underlying session can.

    Configuration is fixed at construction time and exposed read-only.

    Example:
        >>> client = XelonClient("my-token", client_id="my-client-id")
        >>> devices, response = client.devices.list()
        >>> response.meta.total
        42
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        client_id: Optional[str] = None,
        session: Optional[requests.Session] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        verify_ssl: Any = True,
        error_element_class: Type = ErrorElement,
    ):
        """
        Initialize the Xelon client.

        Args:
            token: Bearer token used for the ``Authorization`` header.
            base_url: API endpoint. Must end with a trailing slash; this is
                      checked whenever a request is built.
            client_id: Client identifier sent as the ``X-User-Id`` header with
                       every request.
            session: HTTP transport to use instead of a new ``requests.Session``.
                     Anything exposing ``send(prepared_request, **kwargs)`` works.
            user_agent: User agent sent with every request.
            timeout: Default request timeout in seconds. Must be greater than 0.
            verify_ssl: Whether to verify SSL certificates. Can be:
                       - True: Verify SSL certificates (default, recommended)
                       - False: Disable verification (insecure, not recommended)
                       - str: Path to a CA bundle file or directory with certificates of trusted CAs
            error_element_class: Model used to decode error bodies, either
                                 :class:`ErrorElement` (default) or
                                 :class:`LegacyErrorElement` for older API generations.
        """
        if timeout is None or timeout <= 0:
            raise ValueError("timeout must be greater than 0")

        logger.debug(f"Initializing XelonClient with URL: {sanitize_url(base_url)}")
        self._token = token
        self._base_url = base_url
        self._client_id = client_id
        self._session = session if session is not None else requests.Session()
        self._user_agent = user_agent
        self._timeout = timeout
        self._verify_ssl = verify_ssl
        self._error_element_class = error_element_class

        if not verify_ssl:
            logger.warning(
                "SSL certificate verification is disabled. This is not recommended for production use."
            )
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

        if not client_id:
            logger.warning(
                "ClientID is not set, please update your credentials. "
                "Using the HQ-API without the ClientID header is deprecated."
            )

        self.clouds = CloudsService(self)
        self.devices = DevicesService(self)
        self.firewalls = FirewallsService(self)
        self.isos = ISOsService(self)
        self.kubernetes = KubernetesService(self)
        self.load_balancer_clusters = LoadBalancerClustersService(self)
        self.load_balancers = LoadBalancersService(self)
        self.networks = NetworksService(self)
        self.persistent_storages = PersistentStoragesService(self)
        self.ssh_keys = SSHKeysService(self)
        self.templates = TemplatesService(self)
        self.tenants = TenantsService(self)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def client_id(self) -> Optional[str]:
        return self._client_id

    @property
    def session(self):
        return self._session

    @property
    def user_agent(self) -> str:
        return self._user_agent

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def verify_ssl(self) -> Any:
        return self._verify_ssl

    def new_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> requests.PreparedRequest:
        """
        Create an API request.

        ``path`` is resolved relative to the base URL and should be given
        without a leading slash. If ``body`` is not None it is JSON encoded
        (dataclass models through their API field names) and used as the
        request body. No I/O happens here.

        Args:
            method: HTTP method (e.g., 'GET', 'POST').
            path: Relative API path, optionally with a query string.
            body: Optional payload: a model, a list of models, a dict, ...
            headers: Optional additional headers. An ``Authorization`` header
                     given here is kept instead of the client's bearer token.

        Returns:
            requests.PreparedRequest: The request, ready for :meth:`do`.

        Raises:
            XelonConfigurationError: If the base URL is malformed or lacks a trailing slash.
            XelonEncodingError: If the body cannot be JSON encoded.
            ValueError: If an invalid HTTP method is provided.
        """
        if method.upper() not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        try:
            base_path = urlsplit(self._base_url).path
        except ValueError as e:
            raise XelonConfigurationError(f"Malformed base URL {self._base_url!r}: {e}") from e
        if not base_path.endswith("/"):
            raise XelonConfigurationError(
                f"base_url must have a trailing slash, but {self._base_url!r} does not"
            )

        url = urljoin(self._base_url, path)

        data = None
        if body is not None:
            try:
                data = json.dumps(encode_value(body)).encode("utf-8")
            except (TypeError, ValueError) as e:
                raise XelonEncodingError(f"Failed to encode request body: {e}") from e

        request_headers = CaseInsensitiveDict(headers or {})
        if not request_headers.get("Authorization"):
            request_headers["Authorization"] = f"Bearer {self._token}"
        request_headers["Accept"] = DEFAULT_MEDIA_TYPE
        request_headers["Content-Type"] = DEFAULT_MEDIA_TYPE
        request_headers["User-Agent"] = self._user_agent
        if self._client_id:
            request_headers[HEADER_CLIENT_ID] = self._client_id

        try:
            return requests.Request(
                method.upper(), url, data=data, headers=request_headers
            ).prepare()
        except (requests.exceptions.RequestException, ValueError) as e:
            raise XelonConfigurationError(
                f"Invalid request URL {sanitize_url(url)}: {sanitize_message(str(e))}"
            ) from None

    def do(
        self,
        request: requests.PreparedRequest,
        target: Any = None,
        ctx: Optional[RequestContext] = None,
    ) -> Response:
        """
        Send an API request and return the API response.

        On success the body is decoded into ``target`` and exposed as
        :attr:`Response.data`:

        - ``None``: the body is discarded.
        - an object with a ``write`` method: the raw body is copied into it.
        - a type (dataclass, ``List[...]``, ...): the JSON body is decoded
          into it. An empty body leaves ``data`` as None.

        When the decoded value carries a :class:`Meta` in its ``meta``
        attribute it is forwarded to :attr:`Response.meta`. The HTTP response
        is always closed before returning.

        Args:
            request: A request built by :meth:`new_request`.
            target: Where to decode the body, see above.
            ctx: Optional :class:`RequestContext` for cancellation and deadlines.

        Returns:
            Response: The wrapped response.

        Raises:
            XelonContextError: If ``ctx`` is done before or while sending.
            XelonTransportError: If the request could not be sent.
            XelonAPIError: If the API answered with a non-2xx status code.
            XelonDataError: If the body is not valid JSON for ``target``.
        """
        if ctx is None:
            ctx = background()

        url = sanitize_url(request.url)

        err = ctx.err()
        if err is not None:
            logger.debug(f"Not sending {request.method} {url}: {err}")
            raise err

        log_api_request(logger, request.method, url, request.body)

        try:
            http_response = self._session.send(
                request,
                timeout=self._request_timeout(ctx),
                verify=self._verify_ssl,
                stream=True,
            )
        except requests.exceptions.RequestException as e:
            raise self._transport_error(request.method, url, e, ctx) from None

        try:
            response = Response(http_response)
            self._check_response(response, ctx)

            if target is None:
                return response

            if hasattr(target, "write"):
                try:
                    for chunk in http_response.iter_content(chunk_size=64 * 1024):
                        target.write(chunk)
                except requests.exceptions.RequestException as e:
                    raise self._transport_error(request.method, url, e, ctx) from None
                response.data = target
                return response

            content = self._read_body(request.method, url, http_response, ctx)
            if not content.strip():
                return response

            try:
                payload = json.loads(content)
            except ValueError as e:
                raise XelonDataError(
                    f"Failed to decode response from {request.method} {url}: {e}",
                    response=response,
                ) from e

            log_api_response(logger, url, payload, response.status_code)

            try:
                response.data = decode_value(target, payload)
            except XelonDataError as e:
                e.response = response
                raise

            meta = getattr(response.data, "meta", None)
            if isinstance(meta, Meta):
                response.meta = meta

            return response
        finally:
            http_response.close()

    def _request_timeout(self, ctx: RequestContext) -> float:
        remaining = ctx.remaining()
        if remaining is None:
            return self._timeout
        return max(MIN_TIMEOUT, min(self._timeout, remaining))

    def _read_body(
        self, method: str, url: str, http_response: requests.Response, ctx: RequestContext
    ) -> bytes:
        try:
            return http_response.content or b""
        except requests.exceptions.RequestException as e:
            raise self._transport_error(method, url, e, ctx) from None

    def _transport_error(
        self, method: str, url: str, error: Exception, ctx: RequestContext
    ) -> Exception:
        """Build the error for a failed send or read; a done context takes precedence."""
        err = ctx.err()
        if err is not None:
            logger.debug(f"API {method} request to {url} interrupted: {err}")
            return err
        message = sanitize_message(str(error))
        error_msg = f"API {method} request to {url} failed: {type(error).__name__}: {message}"
        logger.error(error_msg)
        return XelonTransportError(error_msg, url=url)

    def _check_response(self, response: Response, ctx: RequestContext) -> None:
        """
        Raise :class:`XelonAPIError` for a status code outside the 200 range.

        The body is decoded with the configured error element class; an empty
        body yields an empty element.
        """
        if 200 <= response.status_code <= 299:
            return

        request = response.request
        method = request.method if request is not None else None
        url = sanitize_url(request.url) if request is not None else None

        content = self._read_body(method, url, response.http_response, ctx)
        payload = None
        if content.strip():
            try:
                payload = json.loads(content)
            except ValueError as e:
                raise XelonDataError(
                    f"Failed to decode error response from {method} {url} "
                    f"(Status: {response.status_code}): {e}",
                    response=response,
                ) from e

        if payload is None:
            error_element = self._error_element_class()
        else:
            error_element = self._error_element_class.from_api(payload)

        error = XelonAPIError(response, error_element)
        logger.error(f"API request failed: {error}")
        raise error
