from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional

from lpmodel.model.types import BindingConstraint, Operator, SolveStatus
from lpmodel.model.solution import Solution
from lpmodel.solvers.lp.backend import BackendResult
from lpmodel.solvers.lp.build import StandardForm

if TYPE_CHECKING:
    from lpmodel.model.problem import LPProblem

_DEFAULT_MESSAGES: Dict[SolveStatus, str] = {
    SolveStatus.INFEASIBLE: "Model is infeasible.",
    SolveStatus.UNBOUNDED: "Model is unbounded.",
    SolveStatus.ERROR: "Solver failed without a status message.",
}


def extract_solution(
    problem: "LPProblem",
    form: StandardForm,
    raw: BackendResult,
    backend_name: Optional[str] = None,
    eps: float = 1e-7,
) -> Solution:
    if raw.status != SolveStatus.OPTIMAL:
        return _empty_result(
            raw.status, raw.message or _DEFAULT_MESSAGES[raw.status], backend_name
        )

    if len(raw.values) != form.num_variables:
        return _empty_result(
            SolveStatus.ERROR,
            f"Backend returned {len(raw.values)} values for {form.num_variables} variables.",
            backend_name,
        )

    values = {var: float(raw.values[var.index]) for var in problem.variables}
    objective_value = float(raw.objective_value or 0.0) + form.objective_offset

    slacks = _compute_slacks(form, raw.values)
    tight = _compute_tight_constraints(slacks, eps=eps)

    return Solution(
        status=SolveStatus.OPTIMAL,
        objective_value=objective_value,
        values=values,
        slacks=slacks,
        tight_constraints=tight,
        message=raw.message,
        backend=backend_name,
    )


def _empty_result(
    status: SolveStatus, message: Optional[str] = None, backend_name: Optional[str] = None
) -> Solution:
    return Solution(
        status=status,
        objective_value=None,
        values={},
        slacks={},
        tight_constraints=[],
        message=message,
        backend=backend_name,
    )


def _compute_slacks(form: StandardForm, x: List[float]) -> Dict[str, float]:
    slacks: Dict[str, float] = {}
    for name, row, op, rhs in zip(form.constraint_names, form.rows, form.operators, form.rhs):
        lhs = sum(coef * xi for coef, xi in zip(row, x))
        if op == Operator.LE:
            slacks[name] = rhs - lhs
        elif op == Operator.GE:
            slacks[name] = lhs - rhs
        else:
            # equality rows are always tight; report the residual as non-positive
            slacks[name] = -abs(lhs - rhs)
    return slacks


def _compute_tight_constraints(
    slacks: Dict[str, float], eps: float = 1e-6
) -> List[BindingConstraint]:
    tight = [
        BindingConstraint(name=name, slack=slack)
        for name, slack in slacks.items()
        if slack <= eps
    ]
    tight.sort(key=lambda x: x.slack)
    return tight
