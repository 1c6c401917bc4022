from typing import Any, Optional

import requests
from pydantic import TypeAdapter, ValidationError

from huebridge.api.http_client import DEFAULT_TIMEOUT, HttpClient
from huebridge.commands.state import SetGroupState
from huebridge.config import BridgeSettings, load_settings
from huebridge.errors import BridgeError, LightNotFoundError, ResponseDecodeError
from huebridge.logging_mixin import LoggingMixin
from huebridge.models.group import GroupAttributes
from huebridge.models.light import LightSummary
from huebridge.models.result import Result, error_envelopes, parse_results
from huebridge.resources.group import Group
from huebridge.resources.light import Light

LAST_SCAN_KEY = "lastscan"
ALL_LIGHTS_GROUP = "0"

_lights_adapter = TypeAdapter(dict[str, LightSummary])
_groups_adapter = TypeAdapter(dict[str, GroupAttributes])


class Bridge(LoggingMixin):
    """A Hue bridge reachable at ``address`` with the app key ``username``.

        >>> bridge = Bridge("192.168.1.10", "my-app-key")
        >>> for light in bridge.get_all_lights():
        ...     light.on()

    Lights and groups returned by the bridge keep a reference to it and send
    all their requests through it.
    """

    def __init__(
        self,
        address: str,
        username: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        retries: int = 0,
        exclude_group_zero: bool = True,
        session: Optional[requests.Session] = None,
    ):
        self.address = address
        self.username = username
        self.exclude_group_zero = exclude_group_zero
        self.http = HttpClient(
            f"http://{address}/api/{username}",
            timeout=timeout,
            retries=retries,
            session=session,
        )

    @classmethod
    def from_settings(cls, settings: BridgeSettings, session: Optional[requests.Session] = None) -> "Bridge":
        bridge = cls(
            settings.bridge_ip,
            settings.app_key,
            timeout=settings.timeout,
            retries=settings.retries,
            exclude_group_zero=settings.exclude_group_zero,
            session=session,
        )
        if settings.debug:
            bridge.enable_debug()
        return bridge

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "Bridge":
        return cls.from_settings(load_settings(dotenv_path))

    def __repr__(self):
        return f"Bridge(address={self.address!r})"

    def __enter__(self) -> "Bridge":
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        """Release the HTTP session, unless it was passed in by the caller."""
        self.logger.debug("Closing session for %s", self.address)
        self.http.close()

    # ---- debug
    @property
    def debug(self) -> bool:
        return self.http.debug

    def enable_debug(self) -> "Bridge":
        """Log every outgoing request as ``METHOD URI`` at INFO level.

        Records go to the ``huebridge`` logger; without a handler (e.g.
        ``logging.basicConfig(level=logging.INFO)``) nothing is shown.
        """
        self.http.debug = True
        return self

    def disable_debug(self) -> "Bridge":
        self.http.debug = False
        return self

    # ---- raw verbs
    def to_uri(self, path: str) -> str:
        return self.http.url(path)

    def get(self, path: str) -> requests.Response:
        return self.http.get(path)

    def post(self, path: str, payload: Optional[dict] = None) -> requests.Response:
        return self.http.post(path, payload)

    def put(self, path: str, payload: dict) -> requests.Response:
        return self.http.put(path, payload)

    # ---- decoded helpers used by the resources
    def read(self, path: str) -> Any:
        """GET ``path`` and return the decoded body.

        Raises BridgeError when the bridge answers with error envelopes only.
        """
        data = self.http.decode(self.get(path))
        errors = error_envelopes(data)
        if errors:
            raise BridgeError(errors, path)
        return data

    def write(self, path: str, payload: dict) -> list[Result]:
        return parse_results(self.http.decode(self.put(path, payload)))

    # ---- lights
    def get_all_lights(self) -> list[Light]:
        data = self.read("/lights")
        try:
            results = _lights_adapter.validate_python(data)
        except ValidationError as e:
            raise ResponseDecodeError(f"Unexpected /lights payload: {e}") from e

        return [Light(self, light_id, summary.name) for light_id, summary in results.items()]

    def get_new_lights(self) -> tuple[list[Light], str]:
        """Lights found by the last search, and when that search ran.

        ``lastscan`` is a timestamp, or "active" while a search is running,
        or "none" if there was no search since power-up.
        """
        data = self.read("/lights/new")
        if not isinstance(data, dict) or not isinstance(data.get(LAST_SCAN_KEY), str):
            raise ResponseDecodeError(f"Unexpected /lights/new payload: {data!r}")

        entries = {k: v for k, v in data.items() if k != LAST_SCAN_KEY}
        try:
            results = _lights_adapter.validate_python(entries)
        except ValidationError as e:
            raise ResponseDecodeError(f"Unexpected /lights/new payload: {e}") from e

        lights = [Light(self, light_id, summary.name) for light_id, summary in results.items()]
        return lights, data[LAST_SCAN_KEY]

    def search(self) -> list[Result]:
        """Start a search for new lights on the bridge.

        The bridge scans in the background; the results only acknowledge the
        request. Call ``get_new_lights`` afterwards.
        """
        return parse_results(self.http.decode(self.post("/lights")))

    def find_light_by_id(self, light_id: str) -> Light:
        for light in self.get_all_lights():
            if light.id == light_id:
                return light
        raise LightNotFoundError("id", light_id)

    def find_light_by_name(self, name: str) -> Light:
        for light in self.get_all_lights():
            if light.name == name:
                return light
        raise LightNotFoundError("name", name)

    # ---- groups
    def get_all_groups(self) -> list[Group]:
        data = self.read("/groups")
        try:
            results = _groups_adapter.validate_python(data)
        except ValidationError as e:
            raise ResponseDecodeError(f"Unexpected /groups payload: {e}") from e

        groups = []
        for group_id, attrs in results.items():
            if self.exclude_group_zero and group_id == ALL_LIGHTS_GROUP:
                self.logger.debug("Skipping group %s (all lights)", group_id)
                continue
            groups.append(
                Group(self, group_id, attrs.name, attrs.type, attrs.group_class, attrs.lights)
            )
        return groups

    def set_group_state(self, group_id: str, state: SetGroupState) -> list[Result]:
        return self.write(f"/groups/{group_id}/action", state.to_payload())
