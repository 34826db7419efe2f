import json
from typing import Any, Iterable, Mapping, Optional

import httpx

from ._config import ClientOptions, build_config, config_from_env
from ._transport import Transport
from ._utils import (
    RequestSpec,
    build_path,
    build_query_string,
    join_url,
    path_segment,
    setup_logging,
)
from ._utils.constants import (
    ARG_QUERY_PARAMS,
    ARG_REQUEST_BODY,
    ARG_REQUEST_HEADERS,
)
from .models import Response
from .models.exceptions import SerializationError


class Client:
    """A simple REST client built by chaining URL segments.

    Every attribute access that is not part of the client itself adds a
    segment to the URL, and one of the verb methods (`get`, `post`, `put`,
    `patch`, `delete`) sends the request:

    ```python
        client = Client(
            host="https://api.example.com",
            request_headers={"Authorization": "Bearer <token>"},
            version="v3",
        )
        response = client.mail.send.post(request_body={"personalizations": []})
        # POST https://api.example.com/v3/mail/send
    ```

    Segments that are not valid identifiers, that clash with a client method
    or that hold variable values go through `_`:
    `client.users._(user_id).get()`.

    Each step hands the accumulated path to a new client and empties its own,
    so an intermediate client is used up by the step taken from it. Keep the
    root client around to start new chains instead of branching from the
    middle of one. Every new client gets its own copy of the headers.

    A client is not safe to share between threads.

    Args:
        host (str): Base URL of the API, e.g. ``https://api.example.com``.
        request_headers (Optional[Mapping[str, str]]): Headers sent with every call.
        version (Optional[str]): API version, prepended to the path as ``/<version>``.
        url_path (Optional[list]): Initial path segments.
        verify_ssl (Optional[bool]): Verify TLS certificates, on by default.
        timeout (Optional[float]): Transport timeout in seconds.
        encode_urls (Optional[bool]): Percent-encode segments and query parameters.
            Off by default, values are concatenated as they are.
        follow_redirects (Optional[bool]): Let the transport follow redirects.
        options (Optional[ClientOptions]): Transport settings, overridden by the
            individual arguments above.
        transport (Optional[httpx.BaseTransport]): Custom httpx transport.
        debug (Optional[bool]): Configure the package logger, at DEBUG level when true.
    """

    def __init__(
        self,
        host: str,
        request_headers: Optional[Mapping[str, Any]] = None,
        version: Optional[str] = None,
        url_path: Optional[list[Any]] = None,
        *,
        verify_ssl: Optional[bool] = None,
        timeout: Optional[float] = None,
        encode_urls: Optional[bool] = None,
        follow_redirects: Optional[bool] = None,
        options: Optional[ClientOptions] = None,
        transport: Optional[httpx.BaseTransport] = None,
        debug: Optional[bool] = None,
    ) -> None:
        option_values = options.model_dump() if options is not None else {}
        option_values.update(
            {
                key: value
                for key, value in {
                    "verify_ssl": verify_ssl,
                    "timeout": timeout,
                    "encode_urls": encode_urls,
                    "follow_redirects": follow_redirects,
                }.items()
                if value is not None
            }
        )

        self._config = build_config(host=host, options=option_values, debug=debug)
        self._options = self._config.options
        self._transport = transport

        self._request_headers: dict[str, Any] = dict(request_headers or {})
        self._version = version
        self._url_path: list[str] = [str(segment) for segment in url_path or []]
        self._query_params: Optional[Mapping[str, Any]] = None
        self._request_body: Any = None

        if debug is not None:
            setup_logging(debug)

    @classmethod
    def from_env(cls, **overrides: Any) -> "Client":
        """Create a root client from ``PYTHON_HTTP_CLIENT_*`` environment variables.

        A ``.env`` file in the working directory is loaded first. Keyword
        arguments take precedence over the environment.
        """
        request_headers = overrides.pop("request_headers", None)
        transport = overrides.pop("transport", None)
        options = {
            key: overrides.pop(key)
            for key in ClientOptions.model_fields
            if overrides.get(key) is not None
        }
        config = config_from_env(options=options, **overrides)

        return cls(
            config.host,
            request_headers=request_headers,
            version=config.version,
            options=config.options,
            transport=transport,
            debug=config.debug,
        )

    @property
    def host(self) -> str:
        return self._config.host

    @property
    def request_headers(self) -> dict[str, Any]:
        return self._request_headers

    @property
    def url_path(self) -> list[str]:
        return self._url_path

    @property
    def api_version(self) -> Optional[str]:
        return self._version

    @property
    def options(self) -> ClientOptions:
        return self._options

    def update_headers(self, request_headers: Mapping[str, Any]) -> "Client":
        """Merge headers into the ones sent with every call of this client."""
        self._request_headers.update(request_headers)
        return self

    def version(self, value: Optional[str]) -> "Client":
        """Set the API version. It is not added to the path as a segment."""
        self._version = value
        return self._()

    def _(self, name: Any = None) -> "Client":
        """Add a segment to the URL and return the client for the next step.

        Use it for segments held in variables, e.g. ``/your/api/{id}/call``,
        or named like a client method.
        """
        url_path = self._url_path
        if name is not None:
            url_path.append(str(name))
        self._url_path = []

        return type(self)(
            self.host,
            request_headers=dict(self._request_headers),
            version=self._version,
            url_path=url_path,
            options=self._options,
            transport=self._transport,
        )

    def __getattr__(self, name: str) -> "Client":
        if name.startswith("_"):
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            )
        return self._(name)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(host={self.host!r}, "
            f"version={self._version!r}, url_path={self._url_path!r})"
        )

    def delete(self, *args: Mapping[str, Any], **kwargs: Any) -> Response:
        """Send a DELETE request to the URL built so far."""
        return self._build_request("delete", args, kwargs)

    def get(self, *args: Mapping[str, Any], **kwargs: Any) -> Response:
        """Send a GET request to the URL built so far.

        Args:
            *args: Mappings with any of the keys ``query_params``,
                ``request_headers`` and ``request_body``. Applied in order.
            **kwargs: The same three options, applied after ``args``.

        Returns:
            Response: Status code, body text and header dump.

        Examples:
            ```python
            client.users.get(query_params={"limit": 10, "offset": 0})
            # GET https://api.example.com/users?limit=10&offset=0
            ```
        """
        return self._build_request("get", args, kwargs)

    def patch(self, *args: Mapping[str, Any], **kwargs: Any) -> Response:
        """Send a PATCH request to the URL built so far."""
        return self._build_request("patch", args, kwargs)

    def post(self, *args: Mapping[str, Any], **kwargs: Any) -> Response:
        """Send a POST request to the URL built so far."""
        return self._build_request("post", args, kwargs)

    def put(self, *args: Mapping[str, Any], **kwargs: Any) -> Response:
        """Send a PUT request to the URL built so far."""
        return self._build_request("put", args, kwargs)

    def _build_args(self, args: Iterable[Mapping[str, Any]]) -> None:
        """Set the query params, request headers and request body.

        Later values replace earlier ones, headers are merged.
        """
        for arg in args:
            for key, value in arg.items():
                key = str(key)
                if key == ARG_QUERY_PARAMS:
                    self._query_params = value
                elif key == ARG_REQUEST_HEADERS:
                    if value is not None:
                        self.update_headers(value)
                elif key == ARG_REQUEST_BODY:
                    self._request_body = value

    def _add_version(self, url: str) -> str:
        """Add the API version to the url. Override for custom behavior."""
        return url + path_segment(self._version, self._options.encode_urls)

    def _build_url(self, query_params: Optional[Mapping[str, Any]] = None) -> str:
        encode = self._options.encode_urls

        url = ""
        if self._version is not None:
            url = self._add_version(url)
        url += build_path(self._url_path, encode)

        query = None
        if query_params is not None:
            query = build_query_string(query_params, encode)

        return join_url(self.host, url, query)

    def _build_request_headers(self) -> dict[str, str]:
        return {str(key): str(value) for key, value in self._request_headers.items()}

    def _serialize_body(self) -> Optional[str]:
        if self._request_body is None:
            return None

        try:
            return json.dumps(self._request_body, separators=(",", ":"))
        except (TypeError, ValueError) as e:
            raise SerializationError(self._request_body, str(e)) from e

    def _build_request(
        self, name: str, args: Iterable[Mapping[str, Any]], kwargs: dict[str, Any]
    ) -> Response:
        unexpected = set(kwargs) - {
            ARG_QUERY_PARAMS,
            ARG_REQUEST_HEADERS,
            ARG_REQUEST_BODY,
        }
        if unexpected:
            raise TypeError(
                f"{name}() got unexpected keyword arguments: {sorted(unexpected)}"
            )

        self._build_args([*args, kwargs])

        spec = RequestSpec(
            method=name.upper(),
            url=self._build_url(query_params=self._query_params),
            headers=self._build_request_headers(),
            content=self._serialize_body(),
        )
        return self._make_request(spec)

    def _make_request(self, spec: RequestSpec) -> Response:
        """Send the request and wrap the result.

        Kept apart from `_build_request` so tests can replace the network call.
        """
        response = Transport(self._options, self._transport).execute(spec)
        return Response.from_httpx(response)
