from typing import TYPE_CHECKING, Optional

from huebridge.commands.state import SetGroupState
from huebridge.models.result import Result

if TYPE_CHECKING:
    from huebridge.bridge import Bridge


class Group:
    """A set of lights switched in unison via ``/groups/<id>/action``."""

    def __init__(
        self,
        bridge: "Bridge",
        group_id: str,
        name: str,
        type: str = "",
        group_class: Optional[str] = None,
        lights: Optional[list[str]] = None,
    ):
        self.bridge = bridge
        self.id = group_id
        self.name = name
        self.type = type
        self.group_class = group_class
        self.lights = list(lights or [])

    def __repr__(self):
        return f"Group(id={self.id!r}, name={self.name!r}, lights={self.lights!r})"

    def set_state(self, state: SetGroupState) -> list[Result]:
        return self.bridge.set_group_state(self.id, state)

    def on(self) -> list[Result]:
        return self.set_state(SetGroupState(on=True, effect="none"))

    def off(self) -> list[Result]:
        return self.set_state(SetGroupState(on=False))

    def color_loop(self) -> list[Result]:
        return self.set_state(SetGroupState(on=True, effect="colorloop"))
