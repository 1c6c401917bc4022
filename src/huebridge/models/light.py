from typing import Optional

from pydantic import BaseModel


class LightState(BaseModel):
    # an unreachable light leaves out most of these
    on: Optional[bool] = None
    bri: Optional[int] = None
    hue: Optional[int] = None
    sat: Optional[int] = None
    ct: Optional[int] = None
    xy: Optional[tuple[float, float]] = None
    effect: Optional[str] = None
    alert: Optional[str] = None
    reachable: Optional[bool] = None
    colormode: Optional[str] = None


class LightAttributes(BaseModel):
    state: LightState
    type: str
    name: str
    modelid: str
    swversion: str
    pointsymbol: Optional[dict[str, str]] = None
    uniqueid: Optional[str] = None
    manufacturername: Optional[str] = None
    productname: Optional[str] = None


class LightSummary(BaseModel):
    """Entry of the ``/lights`` and ``/lights/new`` maps, keyed by light id."""

    name: str
