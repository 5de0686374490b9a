from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import TYPE_CHECKING, Dict, List, Mapping, Optional, Tuple, Union

from lpmodel.core.errors import (
    DomainError,
    DuplicateNameError,
    InvalidBoundsError,
    UnknownVariableError,
)
from lpmodel.model.types import Direction, Operator

if TYPE_CHECKING:
    from lpmodel.model.solution import Solution
    from lpmodel.solvers.lp.backend import LPBackend


class _ExpressionOps:
    """Arithmetic shared by variables and expressions; results are LinearExpression."""

    def _as_expression(self) -> "LinearExpression":
        raise NotImplementedError

    def __add__(self, other):
        rhs = LinearExpression.coerce(other, strict=False)
        if rhs is None:
            return NotImplemented
        return self._as_expression()._combine(rhs, 1.0)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        rhs = LinearExpression.coerce(other, strict=False)
        if rhs is None:
            return NotImplemented
        return self._as_expression()._combine(rhs, -1.0)

    def __rsub__(self, other):
        lhs = LinearExpression.coerce(other, strict=False)
        if lhs is None:
            return NotImplemented
        return lhs._combine(self._as_expression(), -1.0)

    def __mul__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return self._as_expression()._scaled(float(other))

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return self._as_expression()._scaled(1.0 / float(other))

    def __neg__(self):
        return self._as_expression()._scaled(-1.0)

    def __pos__(self):
        return self._as_expression()


@dataclass(frozen=True, eq=False)
class Variable(_ExpressionOps):
    name: str
    lower_bound: float = 0.0
    upper_bound: float = math.inf
    index: int = field(default=-1, repr=False)

    def _as_expression(self) -> "LinearExpression":
        return LinearExpression({self: 1.0})


class LinearExpression(_ExpressionOps):
    """Weighted sum of variables plus a constant."""

    def __init__(
        self,
        terms: Optional[Mapping[Variable, float]] = None,
        constant: float = 0.0,
    ) -> None:
        self.terms: Dict[Variable, float] = dict(terms or {})
        self.constant = float(constant)

    @classmethod
    def coerce(cls, value, strict: bool = True) -> Optional["LinearExpression"]:
        if isinstance(value, LinearExpression):
            return value
        if isinstance(value, Variable):
            return value._as_expression()
        if isinstance(value, Real):
            return cls(constant=float(value))
        if strict:
            raise TypeError(
                f"Cannot build a linear expression from {type(value).__name__}."
            )
        return None

    def _as_expression(self) -> "LinearExpression":
        return self

    def _combine(self, other: "LinearExpression", sign: float) -> "LinearExpression":
        terms = dict(self.terms)
        for var, coef in other.terms.items():
            terms[var] = terms.get(var, 0.0) + sign * coef
        return LinearExpression(terms, self.constant + sign * other.constant)

    def _scaled(self, factor: float) -> "LinearExpression":
        return LinearExpression(
            {var: factor * coef for var, coef in self.terms.items()},
            factor * self.constant,
        )

    def coefficient(self, var: Variable) -> float:
        return self.terms.get(var, 0.0)

    def variables(self) -> List[Variable]:
        return list(self.terms)

    def value(self, assignment: Mapping[Variable, float]) -> float:
        return self.constant + sum(
            coef * assignment.get(var, 0.0) for var, coef in self.terms.items()
        )

    def __repr__(self) -> str:
        parts = [f"{coef:g}*{var.name}" for var, coef in self.terms.items()]
        if self.constant or not parts:
            parts.append(f"{self.constant:g}")
        return " + ".join(parts)


ExpressionLike = Union[
    LinearExpression, Variable, Real, Mapping[Union[Variable, str], float]
]


@dataclass(frozen=True)
class Constraint:
    name: str
    expression: LinearExpression
    operator: Operator
    rhs: float


@dataclass(frozen=True)
class Objective:
    expression: LinearExpression
    direction: Direction


class LPProblem:
    """A bounded linear program built incrementally and solved once.

    Variables and constraints are typed handles owned by the problem; an
    expression that mentions a variable from another problem is rejected with
    UnknownVariableError. Callers must not mutate the problem after solving.
    """

    def __init__(self, name: str = "lp") -> None:
        self.name = name
        self._variables: List[Variable] = []
        self._by_name: Dict[str, Variable] = {}
        self._constraints: List[Constraint] = []
        self._constraint_names: Dict[str, Constraint] = {}
        self._objective: Optional[Objective] = None

    @property
    def variables(self) -> Tuple[Variable, ...]:
        return tuple(self._variables)

    @property
    def constraints(self) -> Tuple[Constraint, ...]:
        return tuple(self._constraints)

    @property
    def objective(self) -> Optional[Objective]:
        return self._objective

    def add_variable(
        self,
        name: str,
        lower_bound: Optional[float] = 0.0,
        upper_bound: Optional[float] = math.inf,
    ) -> Variable:
        if not isinstance(name, str) or not name:
            raise DomainError("Variable name must be a non-empty string.")
        if name in self._by_name:
            raise DuplicateNameError(
                f"Variable '{name}' already exists in problem '{self.name}'."
            )

        lb = -math.inf if lower_bound is None else float(lower_bound)
        ub = math.inf if upper_bound is None else float(upper_bound)
        if math.isnan(lb) or math.isnan(ub):
            raise InvalidBoundsError(f"Variable '{name}' has a NaN bound.")
        if lb == math.inf or ub == -math.inf:
            raise InvalidBoundsError(
                f"Variable '{name}' has an empty domain: lower_bound {lb:g}, upper_bound {ub:g}."
            )
        if lb > ub:
            raise InvalidBoundsError(
                f"Variable '{name}' has lower_bound {lb:g} > upper_bound {ub:g}."
            )

        var = Variable(name=name, lower_bound=lb, upper_bound=ub, index=len(self._variables))
        self._variables.append(var)
        self._by_name[name] = var
        return var

    def variable(self, name: str) -> Variable:
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownVariableError(
                f"Problem '{self.name}' has no variable named '{name}'."
            ) from None

    def set_objective(
        self,
        expression: ExpressionLike,
        direction: Union[Direction, str] = Direction.MAXIMIZE,
    ) -> Objective:
        self._objective = Objective(
            expression=self._resolve(expression),
            direction=Direction.parse(direction),
        )
        return self._objective

    def add_constraint(
        self,
        expression: ExpressionLike,
        operator: Union[Operator, str],
        rhs: float,
        name: Optional[str] = None,
    ) -> Constraint:
        op = Operator.parse(operator)
        expr = self._resolve(expression)

        rhs_value = float(rhs)
        if not math.isfinite(rhs_value):
            raise DomainError(f"Constraint right-hand side must be finite, got {rhs!r}.")

        cname = name if name is not None else f"c{len(self._constraints)}"
        if cname in self._constraint_names:
            raise DuplicateNameError(
                f"Constraint '{cname}' already exists in problem '{self.name}'."
            )

        constraint = Constraint(name=cname, expression=expr, operator=op, rhs=rhs_value)
        self._constraints.append(constraint)
        self._constraint_names[cname] = constraint
        return constraint

    def solve(self, backend: Optional["LPBackend"] = None) -> "Solution":
        from lpmodel.solvers.lp.solver import solve_problem

        return solve_problem(self, backend)

    def _resolve(self, expression: ExpressionLike) -> LinearExpression:
        if isinstance(expression, Mapping):
            terms: Dict[Variable, float] = {}
            for key, coef in expression.items():
                var = self.variable(key) if isinstance(key, str) else key
                terms[var] = terms.get(var, 0.0) + float(coef)
            expr = LinearExpression(terms)
        else:
            expr = LinearExpression.coerce(expression)

        for var, coef in expr.terms.items():
            if not isinstance(var, Variable) or not self._owns(var):
                label = getattr(var, "name", repr(var))
                raise UnknownVariableError(
                    f"Variable '{label}' does not belong to problem '{self.name}'."
                )
            if not math.isfinite(coef):
                raise DomainError(f"Coefficient of '{var.name}' must be finite, got {coef!r}.")
        return LinearExpression(expr.terms, expr.constant)

    def _owns(self, var: Variable) -> bool:
        return 0 <= var.index < len(self._variables) and self._variables[var.index] is var

    def __repr__(self) -> str:
        return (
            f"LPProblem(name={self.name!r}, variables={len(self._variables)}, "
            f"constraints={len(self._constraints)})"
        )
