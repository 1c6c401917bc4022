from typing import Optional


class HueError(Exception):
    """Base class for errors raised by huebridge itself."""


class ConfigError(HueError):
    pass


class ResponseDecodeError(HueError, ValueError):
    """The bridge answered with something that is not the expected JSON."""


class BridgeError(ResponseDecodeError):
    """A read endpoint answered with error envelopes instead of its payload.

    Typical case: an unknown or revoked app key, which the bridge reports as
    ``[{"error": {"type": 1, ...}}]`` with HTTP 200.
    """

    def __init__(self, errors: list, path: Optional[str] = None):
        self.errors = errors
        self.path = path
        descriptions = ", ".join(f"{e.type}: {e.description}" for e in errors)
        where = f" for {path}" if path else ""
        super().__init__(f"Bridge returned errors{where}: {descriptions}")


class LightNotFoundError(HueError, LookupError):
    def __init__(self, field: str, key: str):
        self.field = field
        self.key = key
        super().__init__(f"unable to find light with {field}, {key}")


class GroupNotFoundError(HueError, LookupError):
    def __init__(self, field: str, key: str):
        self.field = field
        self.key = key
        super().__init__(f"unable to find group with {field}, {key}")
