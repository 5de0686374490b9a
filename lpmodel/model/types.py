from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from lpmodel.core.errors import DomainError


class SolveStatus(str, Enum):
    OPTIMAL = "optimal"
    INFEASIBLE = "infeasible"
    UNBOUNDED = "unbounded"
    ERROR = "error"


class Direction(str, Enum):
    MAXIMIZE = "maximize"
    MINIMIZE = "minimize"

    @classmethod
    def parse(cls, value: "Direction | str") -> "Direction":
        try:
            return cls(value)
        except ValueError:
            raise DomainError(
                f"Unknown objective direction {value!r}; expected 'maximize' or 'minimize'."
            ) from None


class Operator(str, Enum):
    LE = "<="
    GE = ">="
    EQ = "=="

    @classmethod
    def parse(cls, value: "Operator | str") -> "Operator":
        if isinstance(value, Operator):
            return value
        op = OPERATOR_ALIASES.get(str(value).strip())
        if op is None:
            raise DomainError(
                f"Unknown constraint operator {value!r}; expected one of '<=', '>=', '=='."
            )
        return op


OPERATOR_ALIASES: Dict[str, Operator] = {
    "<=": Operator.LE,
    "≤": Operator.LE,
    ">=": Operator.GE,
    "≥": Operator.GE,
    "==": Operator.EQ,
    "=": Operator.EQ,
}


@dataclass(frozen=True)
class BindingConstraint:
    name: str
    slack: float
