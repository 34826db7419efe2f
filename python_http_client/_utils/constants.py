# Environment variables
ENV_HOST = "PYTHON_HTTP_CLIENT_HOST"
ENV_API_VERSION = "PYTHON_HTTP_CLIENT_API_VERSION"
ENV_TIMEOUT = "PYTHON_HTTP_CLIENT_TIMEOUT"
ENV_DISABLE_SSL_VERIFY = "PYTHON_HTTP_CLIENT_DISABLE_SSL_VERIFY"
ENV_DEBUG = "PYTHON_HTTP_CLIENT_DEBUG"

# Headers
HEADER_USER_AGENT = "User-Agent"

ARG_QUERY_PARAMS = "query_params"
ARG_REQUEST_HEADERS = "request_headers"
ARG_REQUEST_BODY = "request_body"

TRUTHY_ENV_VALUES = ("1", "true", "yes", "on")
