from typing import TYPE_CHECKING

from pydantic import ValidationError

from huebridge.commands.state import SetLightState
from huebridge.errors import ResponseDecodeError
from huebridge.models.light import LightAttributes
from huebridge.models.result import Result

if TYPE_CHECKING:
    from huebridge.bridge import Bridge


class Light:
    """One light on the bridge. All calls go through ``bridge``."""

    def __init__(self, bridge: "Bridge", light_id: str, name: str):
        self.bridge = bridge
        self.id = light_id
        self.name = name
        self.path = f"/lights/{light_id}"

    def __repr__(self):
        return f"Light(id={self.id!r}, name={self.name!r})"

    def get_attributes(self) -> LightAttributes:
        data = self.bridge.read(self.path)
        try:
            return LightAttributes.model_validate(data)
        except ValidationError as e:
            raise ResponseDecodeError(f"Unexpected light payload for {self.path}: {e}") from e

    def set_name(self, new_name: str) -> list[Result]:
        return self.bridge.write(self.path, {"name": new_name})

    def set_state(self, state: SetLightState) -> list[Result]:
        return self.bridge.write(f"{self.path}/state", state.to_payload())

    def on(self) -> list[Result]:
        # effect none stops a running colorloop
        return self.set_state(SetLightState(on=True, effect="none"))

    def off(self) -> list[Result]:
        return self.set_state(SetLightState(on=False))

    def color_loop(self) -> list[Result]:
        return self.set_state(SetLightState(on=True, effect="colorloop"))
