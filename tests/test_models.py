"""Tests for the read models and the result envelope."""

import pytest

from huebridge.errors import ResponseDecodeError
from huebridge.models.group import GroupAttributes
from huebridge.models.light import LightAttributes, LightState
from huebridge.models.result import error_envelopes, errors_in, parse_results

ATTRIBUTES = {
    "state": {
        "hue": 50000,
        "on": True,
        "effect": "none",
        "alert": "none",
        "bri": 200,
        "sat": 200,
        "ct": 500,
        "xy": [0.5, 0.5],
        "reachable": True,
        "colormode": "hs",
    },
    "type": "Extended color light",
    "name": "Hue Lamp 1",
    "modelid": "LCT001",
    "swversion": "66009461",
    "pointsymbol": {"1": "none", "2": "none"},
}


class TestLightAttributes:
    def test_decode(self):
        attrs = LightAttributes.model_validate(ATTRIBUTES)
        assert attrs.name == "Hue Lamp 1"
        assert attrs.modelid == "LCT001"
        assert attrs.state.on is True
        assert attrs.state.xy == (0.5, 0.5)
        assert attrs.pointsymbol["1"] == "none"

    def test_state_round_trip(self):
        state = LightState.model_validate(ATTRIBUTES["state"])
        again = LightState.model_validate(state.model_dump(exclude_none=True))
        assert again == state

    def test_unreachable_light_omits_fields(self):
        state = LightState.model_validate({"on": False, "reachable": False})
        assert state.bri is None
        assert state.model_dump(exclude_none=True) == {"on": False, "reachable": False}


class TestGroupAttributes:
    def test_class_alias(self):
        attrs = GroupAttributes.model_validate(
            {"name": "Kitchen", "type": "Room", "class": "Kitchen", "lights": ["1", "2"]}
        )
        assert attrs.group_class == "Kitchen"
        assert attrs.lights == ["1", "2"]
        assert attrs.action is None


class TestResults:
    def test_success_and_error(self):
        results = parse_results(
            [
                {"success": {"/lights/1/state/on": True}},
                {
                    "error": {
                        "type": 7,
                        "address": "/lights/1/state/effect",
                        "description": "invalid value, foo, for parameter, effect",
                    }
                },
            ]
        )
        assert results[0].is_success
        assert results[0].success == {"/lights/1/state/on": True}
        assert results[1].is_error
        assert results[1].error.type == 7
        assert [e.address for e in errors_in(results)] == ["/lights/1/state/effect"]

    def test_order_preserved(self):
        results = parse_results(
            [{"success": {"/lights/1/state/bri": 0}}, {"success": {"/lights/1/state/on": True}}]
        )
        assert [list(r.success) for r in results] == [
            ["/lights/1/state/bri"],
            ["/lights/1/state/on"],
        ]

    @pytest.mark.parametrize("payload", [{"success": {"a": 1}, "error": {"type": 1}}, [{}], [{"foo": 1}], "nope"])
    def test_bad_shape(self, payload):
        with pytest.raises(ResponseDecodeError):
            parse_results(payload if isinstance(payload, list) else [payload])

    def test_error_envelopes(self):
        data = [{"error": {"type": 1, "address": "/", "description": "unauthorized user"}}]
        assert error_envelopes(data)[0].description == "unauthorized user"
        assert error_envelopes({"1": {"name": "Lamp"}}) is None
        assert error_envelopes([]) is None
