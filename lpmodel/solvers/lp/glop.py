from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ortools.linear_solver import pywraplp

from lpmodel.core.errors import SolverError
from lpmodel.model.types import Direction, Operator, SolveStatus
from lpmodel.solvers.lp.backend import BackendResult
from lpmodel.solvers.lp.build import StandardForm

LOGGER = logging.getLogger(__name__)

# OR-Tools returns an int status code; this alias makes typing intent explicit.
_LpStatus = int


@dataclass
class GlopModel:
    solver: pywraplp.Solver
    variables: List[pywraplp.Variable]
    constraints: List[pywraplp.Constraint]


class GlopBackend:
    """OR-Tools GLOP (primal/dual simplex) behind the LPBackend protocol."""

    name = "glop"

    def __init__(self, time_limit: Optional[float] = None) -> None:
        self.time_limit = time_limit

    def solve(self, form: StandardForm) -> BackendResult:
        model = self.build(form)
        return self.run(model)

    def build(self, form: StandardForm) -> GlopModel:
        s = pywraplp.Solver.CreateSolver("GLOP")  # Continuous LP
        if s is None:
            raise SolverError("Failed to create OR-Tools GLOP solver.")
        if self.time_limit is not None:
            s.SetTimeLimit(int(self.time_limit * 1000))

        inf = s.infinity()
        xs = [
            s.NumVar(max(lb, -inf), min(ub, inf), name)
            for name, lb, ub in zip(form.variable_names, form.lower_bounds, form.upper_bounds)
        ]

        cts: List[pywraplp.Constraint] = []
        for row, op, rhs, cname in zip(form.rows, form.operators, form.rhs, form.constraint_names):
            lo, hi = _row_bounds(op, rhs, inf)
            ct = s.Constraint(lo, hi, cname)
            for x, coef in zip(xs, row):
                if coef:
                    ct.SetCoefficient(x, coef)
            cts.append(ct)

        objective = s.Objective()
        for x, coef in zip(xs, form.objective):
            if coef:
                objective.SetCoefficient(x, coef)
        if form.direction == Direction.MAXIMIZE:
            objective.SetMaximization()
        else:
            objective.SetMinimization()

        return GlopModel(solver=s, variables=xs, constraints=cts)

    def run(self, model: GlopModel) -> BackendResult:
        s = model.solver
        status_code = s.Solve()
        LOGGER.debug("GLOP finished with status code %s", status_code)

        # Status mapping (treat FEASIBLE as "optimal", but add a message)
        status_map: Dict[_LpStatus, SolveStatus] = {
            pywraplp.Solver.OPTIMAL: SolveStatus.OPTIMAL,
            pywraplp.Solver.FEASIBLE: SolveStatus.OPTIMAL,
            pywraplp.Solver.INFEASIBLE: SolveStatus.INFEASIBLE,
            pywraplp.Solver.UNBOUNDED: SolveStatus.UNBOUNDED,
        }
        result_status = status_map.get(status_code, SolveStatus.ERROR)

        if result_status == SolveStatus.ERROR:
            return BackendResult(status=result_status, message=_status_message(status_code))
        if result_status != SolveStatus.OPTIMAL:
            return BackendResult(status=result_status)

        message: Optional[str] = None
        if status_code == pywraplp.Solver.FEASIBLE:
            message = "Solver returned FEASIBLE (treated as optimal)."

        return BackendResult(
            status=SolveStatus.OPTIMAL,
            objective_value=s.Objective().Value(),
            values=[x.solution_value() for x in model.variables],
            message=message,
        )


def _row_bounds(op: Operator, rhs: float, inf: float) -> Tuple[float, float]:
    if op == Operator.LE:
        return -inf, rhs
    if op == Operator.GE:
        return rhs, inf
    return rhs, rhs


def _status_message(status_code: int) -> str:
    if status_code == pywraplp.Solver.MODEL_INVALID:
        return "Model is invalid (NaN/Inf coefficients or malformed constraints)."
    if status_code == pywraplp.Solver.NOT_SOLVED:
        return "Model not solved (solver did not run or stopped early)."
    if status_code == pywraplp.Solver.ABNORMAL:
        return "Solver ended abnormally."
    return f"Unknown solver status: {status_code}"
