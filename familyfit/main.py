from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

import familyfit.core.logging_config  # noqa: F401 - registers logging lifespan
from familyfit.config import get_settings
from familyfit.core.exceptions import InvalidPenalty, InvalidScoringInput
from familyfit.core.lifespan import manager
from familyfit.core.logging_config import configure_logging
from familyfit.core.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    get_request_id,
)
from familyfit.penalties.router import router as penalties_router
from familyfit.scoring.router import router as scoring_router

# Configure logging FIRST (before app creation)
configure_logging()

settings = get_settings()

app_configs = {
    "title": settings.APP_NAME,
    "version": "1.0.0",
    "lifespan": manager,
}

if not settings.expose_docs:
    app_configs["openapi_url"] = None

app = FastAPI(**app_configs)

# Last added runs first: request id must exist before logging
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware)

if settings.CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(scoring_router)
app.include_router(penalties_router)


@app.exception_handler(InvalidScoringInput)
async def invalid_scoring_input_handler(request: Request, exc: InvalidScoringInput):
    logger.warning("Rejected scoring input", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(InvalidPenalty)
async def invalid_penalty_handler(request: Request, exc: InvalidPenalty):
    logger.warning("Rejected penalty", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions with structured logging.

    Parameters
    ----------
    request : Request
        The HTTP request that caused the exception
    exc : Exception
        The unhandled exception

    Returns
    -------
    JSONResponse
        Error response with request_id for tracking
    """
    request_id = get_request_id()
    logger.opt(exception=exc).error(
        "Unhandled exception",
        request_id=request_id,
        path=request.url.path,
        method=request.method,
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "request_id": request_id},
    )


@app.get("/health")
async def health():
    return {"status": "healthy"}
