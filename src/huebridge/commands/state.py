from typing import Annotated, Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

UnitFloat = Annotated[float, Field(ge=0.0, le=1.0)]

Alert = Literal["none", "select", "lselect"]
Effect = Literal["none", "colorloop"]


class StateCommand(BaseModel):
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    def to_payload(self) -> dict[str, Any]:
        """Body for the PUT: only fields the caller set, never ``None``."""
        return self.model_dump(mode="json", exclude_unset=True, exclude_none=True)


class SetLightState(StateCommand):
    """Partial update for ``PUT /lights/<id>/state``.

    Fields left unset are not transmitted and keep their current value on
    the light. ``bri=0`` is the dimmest level, not off.
    """

    on: Optional[bool] = None
    bri: Optional[int] = Field(default=None, ge=0, le=255)
    # wraps around, 0 and 65535 are both red
    hue: Optional[int] = Field(default=None, ge=0, le=65535)
    sat: Optional[int] = Field(default=None, ge=0, le=255)
    xy: Optional[tuple[UnitFloat, UnitFloat]] = None
    # mired, 153 (6500K) to 500 (2000K)
    ct: Optional[int] = Field(default=None, ge=153, le=500)
    alert: Optional[Alert] = None
    effect: Optional[Effect] = None
    # multiples of 100ms, bridge default is 4
    transitiontime: Optional[int] = Field(default=None, ge=0, le=65535)


class SetGroupState(StateCommand):
    """Partial update for ``PUT /groups/<id>/action``."""

    on: Optional[bool] = None
    bri: Optional[int] = Field(default=None, ge=0, le=255)
    hue: Optional[int] = Field(default=None, ge=0, le=65535)
    sat: Optional[int] = Field(default=None, ge=0, le=255)
    xy: Optional[tuple[UnitFloat, UnitFloat]] = None
    ct: Optional[int] = Field(default=None, ge=153, le=500)
    alert: Optional[Alert] = None
    effect: Optional[Effect] = None
    transitiontime: Optional[int] = Field(default=None, ge=0, le=65535)
    # scene id to recall on the group
    scene: Optional[str] = None
