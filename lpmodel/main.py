import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lpmodel.api.v1.router import router as v1_router
from lpmodel.core.config import load_settings
from lpmodel.core.errors import DomainError, SolverError

LOGGER = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="LP Model API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(DomainError)
    def domain_error_handler(_, exc: DomainError):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(SolverError)
    def solver_error_handler(_, exc: SolverError):
        LOGGER.warning("Solver unavailable: %s", exc)
        return JSONResponse(status_code=503, content={"detail": str(exc)})

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    app.include_router(v1_router, prefix="/v1")
    return app


def run() -> None:
    import uvicorn

    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    uvicorn.run("lpmodel.main:app", host="0.0.0.0", port=settings.port, reload=settings.reload)


app = create_app()

if __name__ == "__main__":  # pragma: no cover
    run()
