import logging

from huebridge.bridge import Bridge


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    with Bridge.from_env() as bridge:
        print(" All Entities ----------")
        for light in sorted(bridge.get_all_lights(), key=lambda l: l.id.zfill(4)):
            print(f"/lights/{light.id}: {light.name}")
        for group in bridge.get_all_groups():
            print(f"/groups/{group.id}: {group.name} ({group.type}) lights={group.lights}")


if __name__ == "__main__":
    main()
