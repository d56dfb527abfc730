"""Plan generation: prompt -> Gemini -> cleaned JSON.

Provides the single `generate_plan()` entrypoint used by the API + CLI.
"""

from __future__ import annotations

import logging
from typing import Any

from travel_planner.agent.extraction import ExtractionError, extract_json_object
from travel_planner.agent.prompts import format_plan_prompt
from travel_planner.errors import (
    EmptyUpstreamContentError,
    MalformedStructureError,
    ParseFailureError,
    PlanError,
    UpstreamFailureError,
)
from travel_planner.llm.base import LLMAdapter
from travel_planner.schemas import PlanRequest


logger = logging.getLogger(__name__)

_EXTRACTION_ERRORS: dict[ExtractionError, type[PlanError]] = {
    ExtractionError.EMPTY_CONTENT: EmptyUpstreamContentError,
    ExtractionError.MALFORMED_STRUCTURE: MalformedStructureError,
    ExtractionError.PARSE_FAILURE: ParseFailureError,
}


async def generate_plan(request: PlanRequest, adapter: LLMAdapter) -> dict[str, Any]:
    """Generate a travel plan for one request.

    Makes exactly one upstream call; nothing is retried or cached.

    Args:
        request: Validated planning request
        adapter: Provider adapter used for the call

    Returns:
        The object the model produced, unchanged

    Raises:
        UpstreamFailureError: provider rejected the call
        EmptyUpstreamContentError: provider answered without text
        MalformedStructureError: no JSON object span in the text
        ParseFailureError: the span is not valid JSON
    """
    logger.info(f"Planning {request.days}-day trip to {request.city} via {adapter.provider_name}")

    prompt = format_plan_prompt(request.city, request.days, request.required_spots)
    response = await adapter.generate_content(prompt, api_key=request.gemini_key)

    if not response.ok:
        logger.error(
            f"Gemini API error: {response.status_code} {response.status_text}"
            f" ({response.error_message or 'no detail'})"
        )
        raise UpstreamFailureError(response.status_text, response.error_message)

    result = extract_json_object(response.content)
    if not result.ok:
        logger.error(f"Could not extract plan from model reply: {result.error_code.value}: {result.error_message}")
        raise _EXTRACTION_ERRORS[result.error_code]()

    logger.info(f"Generated plan for {request.city} (finish_reason={response.finish_reason})")
    return result.data
