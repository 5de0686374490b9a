from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from lpmodel.model.types import OPERATOR_ALIASES, Direction, Operator, SolveStatus

__all__ = [
    "ConstraintSpec",
    "Direction",
    "ObjectiveSpec",
    "Operator",
    "SolveOptions",
    "SolveRequest",
    "SolveResult",
    "SolveStatus",
    "TightConstraint",
    "VariableSpec",
]


class StrictBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class VariableSpec(StrictBaseModel):
    name: str = Field(min_length=1)
    lower_bound: Optional[float] = 0.0  # None = -inf
    upper_bound: Optional[float] = None  # None = +inf

    @model_validator(mode="after")
    def _check_bounds_order(self) -> "VariableSpec":
        if (
            self.lower_bound is not None
            and self.upper_bound is not None
            and self.lower_bound > self.upper_bound
        ):
            raise ValueError(
                f"Variable '{self.name}' has lower_bound > upper_bound."
            )
        return self


class ObjectiveSpec(StrictBaseModel):
    direction: Direction = Direction.MAXIMIZE
    coefficients: Dict[str, float] = Field(default_factory=dict)
    constant: float = 0.0


class ConstraintSpec(StrictBaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    coefficients: Dict[str, float]
    op: Operator
    rhs: float

    @field_validator("op", mode="before")
    @classmethod
    def _accept_operator_aliases(cls, v):
        if isinstance(v, str) and v.strip() in OPERATOR_ALIASES:
            return OPERATOR_ALIASES[v.strip()]
        return v


class SolveOptions(StrictBaseModel):
    backend: Optional[Literal["glop", "highs"]] = None
    time_limit: Optional[float] = Field(default=None, gt=0)


class SolveRequest(StrictBaseModel):
    variables: List[VariableSpec]
    objective: Optional[ObjectiveSpec] = None
    constraints: List[ConstraintSpec] = Field(default_factory=list)
    options: SolveOptions = Field(default_factory=SolveOptions)


class TightConstraint(StrictBaseModel):
    name: str
    slack: float


class SolveResult(StrictBaseModel):
    status: SolveStatus
    objective_value: Optional[float] = None

    values: Dict[str, float] = Field(default_factory=dict)
    tight_constraints: List[TightConstraint] = Field(default_factory=list)

    message: Optional[str] = None
    backend: Optional[str] = None
