import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError

from huebridge.api.http_client import DEFAULT_TIMEOUT
from huebridge.errors import ConfigError

_TRUE = {"1", "true", "yes", "on"}


class BridgeSettings(BaseModel):
    bridge_ip: str
    app_key: str
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    retries: int = Field(default=0, ge=0)
    debug: bool = False
    exclude_group_zero: bool = True


def _flag(value: Optional[str], default: bool) -> bool:
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in _TRUE


def load_settings(dotenv_path: Optional[str] = None) -> BridgeSettings:
    """Read bridge settings from the environment, after loading a .env file.

    Variables: HUE_BRIDGE_IP, HUE_APP_KEY (or APP_KEY), HUE_TIMEOUT,
    HUE_RETRIES, HUE_DEBUG, HUE_EXCLUDE_GROUP_ZERO.
    """
    load_dotenv(dotenv_path or find_dotenv(usecwd=True))

    bridge_ip = os.getenv("HUE_BRIDGE_IP")
    app_key = os.getenv("HUE_APP_KEY") or os.getenv("APP_KEY")
    if not bridge_ip or not app_key:
        raise ConfigError("HUE_BRIDGE_IP or HUE_APP_KEY is missing.")

    try:
        timeout = float(os.getenv("HUE_TIMEOUT") or DEFAULT_TIMEOUT)
        retries = int(os.getenv("HUE_RETRIES") or 0)
    except ValueError as e:
        raise ConfigError(f"Invalid HUE_TIMEOUT/HUE_RETRIES: {e}") from e

    try:
        return BridgeSettings(
            bridge_ip=bridge_ip,
            app_key=app_key,
            timeout=timeout,
            retries=retries,
            debug=_flag(os.getenv("HUE_DEBUG"), False),
            exclude_group_zero=_flag(os.getenv("HUE_EXCLUDE_GROUP_ZERO"), True),
        )
    except ValidationError as e:
        raise ConfigError(f"Invalid bridge settings: {e}") from e
