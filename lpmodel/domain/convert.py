from __future__ import annotations

from lpmodel.domain.schema import SolveRequest, SolveResult, TightConstraint
from lpmodel.model.problem import LinearExpression, LPProblem
from lpmodel.model.solution import Solution


def build_problem(req: SolveRequest, name: str = "request") -> LPProblem:
    """
    Turn a validated request into an LPProblem.
    - variable names are resolved through the problem, so unknown or repeated
      names raise UnknownVariableError / DuplicateNameError
    - None bounds mean unbounded on that side
    """
    problem = LPProblem(name=name)

    for v in req.variables:
        problem.add_variable(v.name, lower_bound=v.lower_bound, upper_bound=v.upper_bound)

    if req.objective is not None:
        obj = req.objective
        expr = sum(
            (coef * problem.variable(var_name) for var_name, coef in obj.coefficients.items()),
            LinearExpression(constant=obj.constant),
        )
        problem.set_objective(expr, obj.direction)

    for c in req.constraints:
        problem.add_constraint(c.coefficients, c.op, c.rhs, name=c.name)

    return problem


def to_result(solution: Solution) -> SolveResult:
    return SolveResult(
        status=solution.status,
        objective_value=solution.objective_value,
        values=solution.values_by_name(),
        tight_constraints=[
            TightConstraint(name=tc.name, slack=tc.slack) for tc in solution.tight_constraints
        ],
        message=solution.message,
        backend=solution.backend,
    )
