"""JSON response class used by every endpoint."""

from __future__ import annotations

from fastapi.responses import JSONResponse

from travel_planner.errors import PlanError
from travel_planner.schemas import ErrorResult


class PlanJSONResponse(JSONResponse):
    """JSONResponse that declares its charset.

    Starlette only appends a charset to ``text/*`` media types.
    """
    media_type = "application/json; charset=utf-8"


def error_response(error: PlanError, headers: dict[str, str] | None = None) -> PlanJSONResponse:
    """Render an error as ``{"error": message}``."""
    return PlanJSONResponse(
        content=ErrorResult(error=error.message).model_dump(),
        status_code=error.status_code,
        headers=headers,
    )
