from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GroupState(BaseModel):
    """Last action sent to the group, as the bridge reports it."""

    on: Optional[bool] = None
    bri: Optional[int] = None
    hue: Optional[int] = None
    sat: Optional[int] = None
    ct: Optional[int] = None
    xy: Optional[tuple[float, float]] = None
    effect: Optional[str] = None
    alert: Optional[str] = None
    colormode: Optional[str] = None


class GroupOnState(BaseModel):
    all_on: bool
    any_on: bool


class GroupAttributes(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    type: str = ""
    group_class: Optional[str] = Field(default=None, alias="class")
    lights: list[str] = []
    action: Optional[GroupState] = None
    state: Optional[GroupOnState] = None
