from ._logs import logger, setup_logging
from ._request_spec import RequestSpec
from ._ssl_context import get_httpx_client_kwargs
from ._url import build_path, build_query_string, join_url, path_segment
from ._user_agent import header_user_agent

__all__ = [
    "logger",
    "setup_logging",
    "RequestSpec",
    "get_httpx_client_kwargs",
    "build_path",
    "build_query_string",
    "join_url",
    "path_segment",
    "header_user_agent",
]
