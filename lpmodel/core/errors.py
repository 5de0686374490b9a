class DomainError(ValueError):
    """Invalid problem in a modelling sense (bad names, foreign variables, etc.)."""


class DuplicateNameError(DomainError):
    """A variable or constraint name is already used in the problem."""


class UnknownVariableError(DomainError):
    """An expression references a variable that does not belong to the problem."""


class InvalidBoundsError(DomainError):
    """Variable bounds are inverted or not numbers."""


class SolverError(RuntimeError):
    """The LP backend could not be invoked or crashed."""
