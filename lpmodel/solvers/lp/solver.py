from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from lpmodel.core.errors import SolverError
from lpmodel.model.types import SolveStatus
from lpmodel.model.solution import Solution
from lpmodel.solvers.lp.backend import BackendResult, LPBackend
from lpmodel.solvers.lp.build import StandardForm, build_standard_form
from lpmodel.solvers.lp.extract import extract_solution
from lpmodel.solvers.lp.registry import get_backend

if TYPE_CHECKING:
    from lpmodel.model.problem import LPProblem

LOGGER = logging.getLogger(__name__)


def solve_problem(problem: "LPProblem", backend: Optional[LPBackend] = None) -> Solution:
    backend = backend if backend is not None else get_backend()
    form = build_standard_form(problem)

    raw = _invoke(backend, form)
    if raw.status == SolveStatus.INFEASIBLE and form.has_objective:
        raw = _recheck_infeasible(backend, form, raw)

    solution = extract_solution(problem, form, raw, backend_name=backend.name)
    LOGGER.info(
        "Solved '%s' with %s: status=%s objective=%s",
        problem.name,
        backend.name,
        solution.status.value,
        solution.objective_value,
    )
    return solution


def _invoke(backend: LPBackend, form: StandardForm) -> BackendResult:
    try:
        return backend.solve(form)
    except SolverError:
        raise
    except Exception as exc:
        LOGGER.exception("LP backend '%s' crashed", backend.name)
        raise SolverError(f"LP backend '{backend.name}' failed: {exc}") from exc


def _recheck_infeasible(
    backend: LPBackend, form: StandardForm, raw: BackendResult
) -> BackendResult:
    # Presolve may report "infeasible" for "infeasible or unbounded"; a feasible
    # region with no objective settles which one it is.
    check = _invoke(backend, form.without_objective())
    if check.status == SolveStatus.OPTIMAL:
        LOGGER.debug("Zero-objective re-solve is feasible; reporting unbounded")
        return BackendResult(status=SolveStatus.UNBOUNDED)
    return raw
