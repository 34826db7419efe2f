from typing import Optional

import httpx

from ._config import ClientOptions
from ._utils import RequestSpec, get_httpx_client_kwargs, header_user_agent, logger
from .models.exceptions import TransportError


class Transport:
    """Sends a single `RequestSpec` over httpx.

    A fresh `httpx.Client` is opened for every request and closed once the
    response body has been read; connections are never pooled across calls.
    Timeouts are configured here, the builder has none of its own.
    """

    def __init__(
        self,
        options: Optional[ClientOptions] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._options = options or ClientOptions()
        self._transport = transport

    def client_kwargs(self, spec: RequestSpec) -> dict:
        client_kwargs = get_httpx_client_kwargs(
            timeout=self._options.timeout,
            follow_redirects=self._options.follow_redirects,
            verify_ssl=self._options.verify_ssl,
            use_ssl=spec.is_https,
        )
        client_kwargs["headers"] = header_user_agent()
        if self._transport is not None:
            client_kwargs["transport"] = self._transport
        return client_kwargs

    def execute(self, spec: RequestSpec) -> httpx.Response:
        logger.debug(f"Request: {spec.method} {spec.url}")
        logger.debug(f"HEADERS: {spec.headers}")

        try:
            with httpx.Client(**self.client_kwargs(spec)) as client:
                response = client.request(
                    spec.method,
                    spec.url,
                    headers=spec.headers,
                    content=spec.content,
                )
        except httpx.RequestError as e:
            raise TransportError(spec.method, spec.url, e) from e

        logger.debug(f"Response: {response.status_code}")
        return response
