from typing import Any, Optional

from pydantic import BaseModel, TypeAdapter, ValidationError, model_validator

from huebridge.errors import ResponseDecodeError


class ResultError(BaseModel):
    type: int
    address: str = ""
    description: str = ""


class Result(BaseModel):
    """One entry of the array the bridge answers every mutating call with.

    Exactly one of ``success`` or ``error`` is set:

        {"success": {"/lights/1/state/on": true}}
        {"error": {"type": 7, "address": "/lights/1/state/effect",
                   "description": "invalid value, foo, for parameter, effect"}}
    """

    success: Optional[dict[str, Any]] = None
    error: Optional[ResultError] = None

    @model_validator(mode="after")
    def _one_of(self):
        if (self.success is None) == (self.error is None):
            raise ValueError("result must carry exactly one of 'success' or 'error'")
        return self

    @property
    def is_success(self) -> bool:
        return self.success is not None

    @property
    def is_error(self) -> bool:
        return self.error is not None


_results_adapter = TypeAdapter(list[Result])


def parse_results(data: Any) -> list[Result]:
    try:
        return _results_adapter.validate_python(data)
    except ValidationError as e:
        raise ResponseDecodeError(f"Unexpected result payload: {e}") from e


def errors_in(results: list[Result]) -> list[ResultError]:
    return [r.error for r in results if r.error is not None]


def error_envelopes(data: Any) -> Optional[list[ResultError]]:
    """Errors if ``data`` is a bridge error array, else None."""
    if not isinstance(data, list) or not data:
        return None
    if not all(isinstance(item, dict) and "error" in item for item in data):
        return None
    return errors_in(parse_results(data))
