"""SciPy ``linprog`` (HiGHS) backend."""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
from scipy.optimize import linprog

from lpmodel.model.types import Direction, Operator, SolveStatus
from lpmodel.solvers.lp.backend import BackendResult
from lpmodel.solvers.lp.build import StandardForm

LOGGER = logging.getLogger(__name__)

# scipy.optimize.linprog status codes
_STATUS_MAP: Dict[int, SolveStatus] = {
    0: SolveStatus.OPTIMAL,
    1: SolveStatus.ERROR,  # iteration / time limit
    2: SolveStatus.INFEASIBLE,
    3: SolveStatus.UNBOUNDED,
    4: SolveStatus.ERROR,  # numerical difficulties
}


class HighsBackend:
    name = "highs"

    def __init__(self, time_limit: Optional[float] = None) -> None:
        self.time_limit = time_limit

    def solve(self, form: StandardForm) -> BackendResult:
        sign = -1.0 if form.direction == Direction.MAXIMIZE else 1.0
        c = sign * np.asarray(form.objective, dtype=float)

        A_ub, b_ub, A_eq, b_eq = _split_rows(form)
        bounds = [
            (None if lb == -math.inf else lb, None if ub == math.inf else ub)
            for lb, ub in zip(form.lower_bounds, form.upper_bounds)
        ]

        options: Dict[str, Any] = {}
        if self.time_limit is not None:
            options["time_limit"] = float(self.time_limit)

        res = linprog(
            c,
            A_ub=A_ub,
            b_ub=b_ub,
            A_eq=A_eq,
            b_eq=b_eq,
            bounds=bounds,
            method="highs",
            options=options or None,
        )
        LOGGER.debug("linprog finished with status %s: %s", res.status, res.message)

        status = _STATUS_MAP.get(res.status, SolveStatus.ERROR)
        if status != SolveStatus.OPTIMAL:
            message = res.message if status == SolveStatus.ERROR else None
            return BackendResult(status=status, message=message)

        return BackendResult(
            status=SolveStatus.OPTIMAL,
            objective_value=sign * float(res.fun),
            values=[float(v) for v in res.x],
        )


def _split_rows(
    form: StandardForm,
) -> Tuple[Optional[np.ndarray], Optional[np.ndarray], Optional[np.ndarray], Optional[np.ndarray]]:
    """linprog wants A_ub @ x <= b_ub and A_eq @ x == b_eq; >= rows are negated."""
    ub_rows: List[List[float]] = []
    ub_rhs: List[float] = []
    eq_rows: List[List[float]] = []
    eq_rhs: List[float] = []

    for row, op, rhs in zip(form.rows, form.operators, form.rhs):
        if op == Operator.LE:
            ub_rows.append(row)
            ub_rhs.append(rhs)
        elif op == Operator.GE:
            ub_rows.append([-coef for coef in row])
            ub_rhs.append(-rhs)
        else:
            eq_rows.append(row)
            eq_rhs.append(rhs)

    A_ub = np.asarray(ub_rows, dtype=float) if ub_rows else None
    b_ub = np.asarray(ub_rhs, dtype=float) if ub_rows else None
    A_eq = np.asarray(eq_rows, dtype=float) if eq_rows else None
    b_eq = np.asarray(eq_rhs, dtype=float) if eq_rows else None
    return A_ub, b_ub, A_eq, b_eq
