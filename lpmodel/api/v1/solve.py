from fastapi import APIRouter

from lpmodel.domain.convert import build_problem, to_result
from lpmodel.domain.schema import SolveRequest, SolveResult
from lpmodel.solvers.lp.registry import get_backend

router = APIRouter(tags=["solve"])


@router.post("/solve", response_model=SolveResult)
def solve(req: SolveRequest) -> SolveResult:
    problem = build_problem(req)
    backend = get_backend(req.options.backend, time_limit=req.options.time_limit)
    return to_result(problem.solve(backend))
