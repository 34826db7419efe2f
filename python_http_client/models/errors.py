from .exceptions import HTTPClientError


class HostMissingError(HTTPClientError, ValueError):
    def __init__(
        self,
        message="A host is required, pass host=... or set PYTHON_HTTP_CLIENT_HOST.",
    ):
        self.message = message
        super().__init__(self.message)
