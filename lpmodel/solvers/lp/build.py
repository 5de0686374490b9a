from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, List

from lpmodel.model.types import Direction, Operator

if TYPE_CHECKING:
    from lpmodel.model.problem import LPProblem

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class StandardForm:
    direction: Direction
    variable_names: List[str]
    objective: List[float]  # one coefficient per variable
    objective_offset: float

    rows: List[List[float]]  # dense, one row per constraint
    operators: List[Operator]
    rhs: List[float]  # expression constants already moved here
    constraint_names: List[str]

    lower_bounds: List[float]  # -inf when free
    upper_bounds: List[float]  # +inf when unbounded

    has_objective: bool = field(default=True)

    @property
    def num_variables(self) -> int:
        return len(self.variable_names)

    @property
    def num_constraints(self) -> int:
        return len(self.rows)

    def without_objective(self) -> "StandardForm":
        """Same feasible region, zero objective."""
        return replace(
            self,
            direction=Direction.MINIMIZE,
            objective=[0.0] * self.num_variables,
            objective_offset=0.0,
            has_objective=False,
        )


def build_standard_form(problem: "LPProblem") -> StandardForm:
    variables = problem.variables
    n = len(variables)

    # Objective (absent objective = feasibility problem)
    objective = [0.0] * n
    offset = 0.0
    direction = Direction.MINIMIZE
    has_objective = False
    if problem.objective is not None:
        direction = problem.objective.direction
        offset = problem.objective.expression.constant
        for var, coef in problem.objective.expression.terms.items():
            objective[var.index] += coef
        has_objective = any(objective)

    rows: List[List[float]] = []
    operators: List[Operator] = []
    rhs: List[float] = []
    names: List[str] = []
    for c in problem.constraints:
        row = [0.0] * n
        for var, coef in c.expression.terms.items():
            row[var.index] += coef
        rows.append(row)
        operators.append(c.operator)
        rhs.append(c.rhs - c.expression.constant)
        names.append(c.name)

    LOGGER.debug(
        "Built standard form for '%s': %d variables, %d constraints, %s",
        problem.name,
        n,
        len(rows),
        direction.value,
    )

    return StandardForm(
        direction=direction,
        variable_names=[v.name for v in variables],
        objective=objective,
        objective_offset=offset,
        rows=rows,
        operators=operators,
        rhs=rhs,
        constraint_names=names,
        lower_bounds=[v.lower_bound for v in variables],
        upper_bounds=[v.upper_bound for v in variables],
        has_objective=has_objective,
    )
