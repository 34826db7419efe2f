from os import environ as env
from typing import Any, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ._utils.constants import (
    ENV_API_VERSION,
    ENV_DEBUG,
    ENV_HOST,
    ENV_TIMEOUT,
    TRUTHY_ENV_VALUES,
)
from .models.errors import HostMissingError


class ClientOptions(BaseModel):
    """Transport settings shared, read-only, by every builder of a chain."""

    model_config = ConfigDict(frozen=True)

    verify_ssl: bool = True
    timeout: float = Field(default=30.0, gt=0)
    encode_urls: bool = False
    follow_redirects: bool = False


class Config(BaseModel):
    host: str = Field(min_length=1)
    version: Optional[str] = None
    options: ClientOptions = Field(default_factory=ClientOptions)
    debug: Optional[bool] = None


def build_config(**values: Any) -> Config:
    """Validate client settings, mapping a missing host onto `HostMissingError`."""
    try:
        return Config(**values)
    except ValidationError as e:
        for error in e.errors():
            if error["loc"] and error["loc"][0] == "host":
                raise HostMissingError() from e
        raise


def config_from_env(**overrides: Any) -> Config:
    load_dotenv(find_dotenv(usecwd=True), override=False)

    values: dict[str, Any] = {
        "host": env.get(ENV_HOST),
        "version": env.get(ENV_API_VERSION) or None,
    }

    options: dict[str, Any] = {}
    if env.get(ENV_TIMEOUT):
        options["timeout"] = env[ENV_TIMEOUT]
    if env.get(ENV_DEBUG):
        values["debug"] = env[ENV_DEBUG].lower() in TRUTHY_ENV_VALUES

    options.update(overrides.pop("options", {}))
    values.update({key: value for key, value in overrides.items() if value is not None})
    values["options"] = options

    return build_config(**values)
