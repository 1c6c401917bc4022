from huebridge.bridge import Bridge
from huebridge.commands.state import SetGroupState, SetLightState
from huebridge.config import BridgeSettings, load_settings
from huebridge.errors import (
    BridgeError,
    ConfigError,
    GroupNotFoundError,
    HueError,
    LightNotFoundError,
    ResponseDecodeError,
)
from huebridge.models.light import LightAttributes, LightState
from huebridge.models.group import GroupAttributes, GroupState
from huebridge.models.result import Result, ResultError, errors_in
from huebridge.resources.group import Group
from huebridge.resources.light import Light

__all__ = [
    "Bridge",
    "BridgeError",
    "BridgeSettings",
    "ConfigError",
    "Group",
    "GroupAttributes",
    "GroupNotFoundError",
    "GroupState",
    "HueError",
    "Light",
    "LightAttributes",
    "LightNotFoundError",
    "LightState",
    "ResponseDecodeError",
    "Result",
    "ResultError",
    "SetGroupState",
    "SetLightState",
    "errors_in",
    "load_settings",
]
