"""Quickly and easily access any REST or REST-like API.

The main entry point is the Client class. URL segments are added by
attribute access and a verb method sends the request.

Example:
```python
    from python_http_client import Client

    client = Client(
        host="https://api.example.com",
        request_headers={"Authorization": "Bearer <token>"},
    )
    response = client.version("v3").mail.send.post(
        request_body={"personalizations": []}
    )
    print(response.status_code, response.body)
```
"""

from ._client import Client
from ._config import ClientOptions
from ._utils import RequestSpec, setup_logging
from .models import (
    HostMissingError,
    HTTPClientError,
    InvalidURL,
    Response,
    SerializationError,
    TransportError,
)

__all__ = [
    "Client",
    "ClientOptions",
    "RequestSpec",
    "Response",
    "setup_logging",
    "HTTPClientError",
    "HostMissingError",
    "InvalidURL",
    "SerializationError",
    "TransportError",
]
