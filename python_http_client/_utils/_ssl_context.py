import os
import ssl
from typing import Any, Dict, Optional, Union

from ._logs import logger
from .constants import ENV_DISABLE_SSL_VERIFY, TRUTHY_ENV_VALUES


def expand_path(path: Optional[str]) -> Optional[str]:
    """Expand environment variables and user home directory in path."""
    if not path:
        return path
    path = os.path.expandvars(path)
    path = os.path.expanduser(path)
    return path


def create_ssl_context() -> ssl.SSLContext:
    # Try truststore first (system certificates)
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        import certifi

        ssl_cert_file = expand_path(os.environ.get("SSL_CERT_FILE"))
        requests_ca_bundle = expand_path(os.environ.get("REQUESTS_CA_BUNDLE"))
        ssl_cert_dir = expand_path(os.environ.get("SSL_CERT_DIR"))

        return ssl.create_default_context(
            cafile=ssl_cert_file or requests_ca_bundle or certifi.where(),
            capath=ssl_cert_dir,
        )


def ssl_verify_disabled_from_env() -> bool:
    return os.environ.get(ENV_DISABLE_SSL_VERIFY, "").lower() in TRUTHY_ENV_VALUES


def resolve_verify(verify_ssl: bool = True) -> Union[bool, ssl.SSLContext]:
    """Resolve the ``verify`` argument handed to httpx.

    Verification is on unless it is switched off explicitly, either with
    ``verify_ssl=False`` or through the environment.
    """
    if not verify_ssl or ssl_verify_disabled_from_env():
        logger.warning("TLS certificate verification is disabled")
        return False

    return create_ssl_context()


def get_httpx_client_kwargs(
    *,
    timeout: float = 30.0,
    follow_redirects: bool = False,
    verify_ssl: bool = True,
    use_ssl: bool = True,
) -> Dict[str, Any]:
    """Get standardized httpx client configuration."""
    client_kwargs: Dict[str, Any] = {
        "follow_redirects": follow_redirects,
        "timeout": timeout,
    }

    # plain http never negotiates TLS, skip building a context for it
    if use_ssl:
        client_kwargs["verify"] = resolve_verify(verify_ssl)

    return client_kwargs
