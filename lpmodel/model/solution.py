from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional, Union

from lpmodel.model.types import BindingConstraint, SolveStatus

if TYPE_CHECKING:
    from lpmodel.model.problem import Variable


@dataclass
class Solution:
    status: SolveStatus
    objective_value: Optional[float] = None
    values: Dict["Variable", float] = field(default_factory=dict)

    # Helpers for reporting
    slacks: Dict[str, float] = field(default_factory=dict)  # constraint name -> slack
    tight_constraints: List[BindingConstraint] = field(default_factory=list)

    message: Optional[str] = None
    backend: Optional[str] = None

    @property
    def is_optimal(self) -> bool:
        return self.status == SolveStatus.OPTIMAL

    def value(self, var: Union["Variable", str]) -> float:
        if not self.is_optimal:
            raise KeyError(f"No variable values: solution status is '{self.status.value}'.")
        if isinstance(var, str):
            for candidate, val in self.values.items():
                if candidate.name == var:
                    return val
            raise KeyError(var)
        return self.values[var]

    def values_by_name(self) -> Dict[str, float]:
        return {var.name: val for var, val in self.values.items()}
