from .errors import HostMissingError
from .exceptions import HTTPClientError, InvalidURL, SerializationError, TransportError
from .response import Response

__all__ = [
    "HTTPClientError",
    "HostMissingError",
    "InvalidURL",
    "SerializationError",
    "TransportError",
    "Response",
]
