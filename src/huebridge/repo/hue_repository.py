from huebridge.bridge import Bridge
from huebridge.errors import GroupNotFoundError
from huebridge.resources.group import Group
from huebridge.resources.light import Light


class HueRepository:
    """Lookups that combine several listings of the bridge."""

    def __init__(self, bridge: Bridge):
        self.bridge = bridge

    def get_group(self, group_id: str) -> Group:
        for group in self.bridge.get_all_groups():
            if group.id == group_id:
                return group
        raise GroupNotFoundError("id", group_id)

    def find_group_by_name(self, name: str) -> Group:
        for group in self.bridge.get_all_groups():
            if group.name == name:
                return group
        raise GroupNotFoundError("name", name)

    def get_group_lights(self, group_id: str) -> dict[str, Light]:
        group = self.get_group(group_id)
        all_lights_by_id = {light.id: light for light in self.bridge.get_all_lights()}

        # members the bridge no longer lists are left out
        return {
            lid: all_lights_by_id[lid]
            for lid in group.lights
            if lid in all_lights_by_id
        }
