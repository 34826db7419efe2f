from typing import Optional


class HTTPClientError(Exception):
    """Base class for every error raised by python_http_client."""


class InvalidURL(HTTPClientError, ValueError):
    """The URL assembled from host, version, path and query is not well formed."""

    def __init__(self, url: str, reason: Optional[str] = None) -> None:
        self.url = url
        self.message = f"Invalid URL {url!r}"
        if reason:
            self.message = f"{self.message}: {reason}"
        super().__init__(self.message)


class SerializationError(HTTPClientError, TypeError):
    """The request body could not be encoded as JSON."""

    def __init__(self, value: object, reason: Optional[str] = None) -> None:
        self.value = value
        self.message = (
            f"Request body of type {type(value).__name__} is not JSON serializable"
        )
        if reason:
            self.message = f"{self.message}: {reason}"
        super().__init__(self.message)


class TransportError(HTTPClientError):
    def __init__(self, method: str, url: str, error: Exception) -> None:
        self.method = method
        self.url = url

        enriched_message = (
            f"\nRequest: {method} {url}"
            f"\nError: {type(error).__name__}: {error}"
        )

        super().__init__(enriched_message)
