from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from lpmodel.model.types import SolveStatus
from lpmodel.solvers.lp.build import StandardForm


@dataclass
class BackendResult:
    status: SolveStatus
    objective_value: Optional[float] = None  # excludes StandardForm.objective_offset
    values: List[float] = field(default_factory=list)  # indexed like the variables
    message: Optional[str] = None


class LPBackend(Protocol):
    """The LP-solving capability: standard form in, status and numbers out.

    Implementations report infeasible / unbounded through BackendResult.status
    and raise SolverError only when the underlying solver cannot run.
    """

    name: str

    def solve(self, form: StandardForm) -> BackendResult: ...
