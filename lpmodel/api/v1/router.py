from fastapi import APIRouter

from lpmodel.api.v1.solve import router as solve_router
from lpmodel.solvers.lp.registry import available_backends, default_backend

router = APIRouter()


@router.get("/health")
def health() -> dict:
    """Liveness plus the backend a request without options would use."""
    return {"status": "ok", "default_backend": default_backend()}


@router.get("/backends", tags=["solve"])
def backends() -> dict:
    return {"default": default_backend(), "available": available_backends()}


router.include_router(solve_router)
