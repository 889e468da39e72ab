from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from worth_finishing.core.decision_types import GameInputs
from worth_finishing.core.errors import InvalidInput


class GameInputsModel(BaseModel):
    """Strict boundary model: no string coercion, bools are not numbers."""

    model_config = ConfigDict(strict=True, populate_by_name=True, frozen=True)

    hours_played: float = Field(..., alias="hoursPlayed", ge=0, allow_inf_nan=False)
    hours_remaining: float = Field(..., alias="hoursRemaining", ge=0, allow_inf_nan=False)
    enjoyment: int = Field(..., ge=1, le=10)
    backlog_pressure: int = Field(..., alias="backlogPressure", ge=1, le=10)
    completionist: bool

    def to_inputs(self) -> GameInputs:
        return GameInputs(
            hours_played=float(self.hours_played),
            hours_remaining=float(self.hours_remaining),
            enjoyment=int(self.enjoyment),
            backlog_pressure=int(self.backlog_pressure),
            completionist=bool(self.completionist),
        )


_FIELD_ALIASES: Dict[str, str] = {
    name: (info.alias or name) for name, info in GameInputsModel.model_fields.items()
}


def _translate(exc: ValidationError) -> List[Dict[str, str]]:
    errors: List[Dict[str, str]] = []
    for err in exc.errors(include_url=False):
        loc = err.get("loc") or ()
        field = str(loc[0]) if loc else "__root__"
        errors.append(
            {
                "field": _FIELD_ALIASES.get(field, field),
                "message": str(err.get("msg", "invalid value")),
            }
        )
    return errors


def validate_inputs(raw: Union[GameInputs, Mapping[str, Any]]) -> GameInputs:
    if isinstance(raw, GameInputs):
        data: Any = asdict(raw)
    elif isinstance(raw, Mapping):
        data = dict(raw)
    else:
        raise InvalidInput(
            [{"field": "__root__", "message": f"Expected a mapping of inputs, got {type(raw).__name__}"}]
        )

    try:
        model = GameInputsModel.model_validate(data)
    except ValidationError as e:
        raise InvalidInput(_translate(e)) from e

    return model.to_inputs()
