from huebridge.bridge import Bridge
from huebridge.color import kelvin_to_mired, srgb_to_xy
from huebridge.commands.state import SetGroupState
from huebridge.models.result import Result

MAX_TRANSITIONTIME = 65535


def ms_to_transitiontime(duration_ms: int) -> int:
    if duration_ms < 0:
        raise ValueError(f"'duration_ms' is smaller than 0!\n{duration_ms=}")
    # half up, capped at the largest transitiontime the bridge accepts
    return min(int(duration_ms / 100 + 0.5), MAX_TRANSITIONTIME)


class GroupService:
    """Shortcuts for common group commands, keyed by group id."""

    def __init__(self, bridge: Bridge):
        self.bridge = bridge

    def turn_on(self, group_id: str) -> list[Result]:
        return self.bridge.set_group_state(group_id, SetGroupState(on=True))

    def turn_off(self, group_id: str) -> list[Result]:
        return self.bridge.set_group_state(group_id, SetGroupState(on=False))

    def set_brightness(self, group_id: str, level: int, duration_ms: int = 500) -> list[Result]:
        level = max(0, min(level, 255))
        state = SetGroupState(bri=level, transitiontime=ms_to_transitiontime(duration_ms))
        return self.bridge.set_group_state(group_id, state)

    def set_color(self, group_id: str, xy: tuple[float, float], duration_ms: int = 0) -> list[Result]:
        x, y = (max(0.0, min(c, 1.0)) for c in xy)
        state = SetGroupState(xy=(x, y))
        if duration_ms:
            state.transitiontime = ms_to_transitiontime(duration_ms)
        return self.bridge.set_group_state(group_id, state)

    def set_rgb(self, group_id: str, r: int, g: int, b: int, duration_ms: int = 0) -> list[Result]:
        return self.set_color(group_id, srgb_to_xy(r, g, b), duration_ms)

    def set_color_temp(self, group_id: str, mired: int) -> list[Result]:
        mired = max(153, min(mired, 500))
        return self.bridge.set_group_state(group_id, SetGroupState(ct=mired))

    def set_kelvin(self, group_id: str, kelvin: int) -> list[Result]:
        return self.set_color_temp(group_id, kelvin_to_mired(kelvin))

    def recall_scene(self, group_id: str, scene_id: str) -> list[Result]:
        return self.bridge.set_group_state(group_id, SetGroupState(scene=scene_id))
