"""FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from travel_planner.api.responses import PlanJSONResponse, error_response
from travel_planner.api.routes import router
from travel_planner.config import get_settings
from travel_planner.errors import InternalError, MethodNotAllowedError, PlanError
from travel_planner.llm.gemini import close_gemini_adapter
from travel_planner.schemas import ErrorResult


settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# httpx logs request URLs at INFO, and the Gemini key is a query parameter.
logging.getLogger("httpx").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version} ({settings.gemini_model})")

    yield

    # Shutdown
    logger.info("Shutting down...")
    await close_gemini_adapter()


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Travel Planner API - Gemini-generated itineraries",
    lifespan=lifespan,
    default_response_class=PlanJSONResponse,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Error Handlers
# =============================================================================

@app.exception_handler(PlanError)
async def plan_error_handler(request: Request, exc: PlanError) -> PlanJSONResponse:
    return error_response(exc)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> PlanJSONResponse:
    """Render routing errors (404, 405) in the same shape as plan errors."""
    if exc.status_code == 405:
        return error_response(MethodNotAllowedError(), headers=exc.headers)
    return PlanJSONResponse(
        content=ErrorResult(error=str(exc.detail)).model_dump(),
        status_code=exc.status_code,
        headers=exc.headers,
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> PlanJSONResponse:
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {type(exc).__name__}",
        exc_info=exc,
    )
    return error_response(InternalError())


# Include routes
app.include_router(router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "travel_planner.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
