"""FastAPI routes for the travel planner API.

Endpoints:
- GET  /health  - Health check
- POST /plan    - Generate a travel plan
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from travel_planner.agent.planner import generate_plan
from travel_planner.api.responses import PlanJSONResponse
from travel_planner.config import get_settings
from travel_planner.errors import (
    InternalError,
    InvalidRequestError,
    MissingParameterError,
    PlanError,
)
from travel_planner.llm.base import LLMAdapter
from travel_planner.llm.gemini import get_gemini_adapter
from travel_planner.schemas import PlanRequest


logger = logging.getLogger(__name__)
router = APIRouter()

settings = get_settings()

# Wire names; a falsy value (empty string, 0) counts as missing.
REQUIRED_FIELDS = ("geminiKey", "city", "days")


# =============================================================================
# Health Check
# =============================================================================

@router.get("/health")
async def health() -> dict:
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": settings.app_version,
        "environment": settings.environment,
    }


# =============================================================================
# Plan Endpoint
# =============================================================================

def parse_plan_request(payload: Any) -> PlanRequest:
    """Validate a decoded request body."""
    if not isinstance(payload, dict):
        raise InvalidRequestError()

    if not all(payload.get(field) for field in REQUIRED_FIELDS):
        raise MissingParameterError()

    try:
        return PlanRequest.model_validate(payload)
    except ValidationError as e:
        logger.info(f"Rejected plan request: {e.error_count()} invalid field(s)")
        raise InvalidRequestError("请求参数无效：city 必须是文本，days 必须是正整数。") from e


@router.post("/plan")
async def create_plan(
    request: Request,
    adapter: LLMAdapter = Depends(get_gemini_adapter),
) -> PlanJSONResponse:
    """Generate a travel plan.

    The body is read by hand rather than declared as a model so that a bad
    body is reported as ``{"error": ...}`` with 400 instead of FastAPI's 422.
    """
    try:
        payload = await request.json()
    except ValueError as e:
        raise InvalidRequestError() from e

    plan_request = parse_plan_request(payload)

    try:
        plan = await generate_plan(plan_request, adapter)
        return PlanJSONResponse(content=plan)
    except PlanError:
        raise
    except Exception as e:
        logger.exception(f"Plan request for {plan_request.city} failed: {type(e).__name__}")
        raise InternalError() from e
