"""Pydantic schemas for the planner I/O contracts.

These schemas define the contracts between:
- the front end and the /api/plan endpoint
- the planner and the Gemini adapter
- the CLI and the plan it renders
"""

from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)


# =============================================================================
# API Request/Response Schemas
# =============================================================================

class PlanRequest(BaseModel):
    """Planning request sent by the front end."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "geminiKey": "AIza...",
                "city": "京都",
                "days": 3,
                "requiredSpots": "清水寺, 伏见稻荷大社",
            }
        },
    )

    gemini_key: str = Field(
        ..., alias="geminiKey", min_length=1, repr=False, description="Caller's Gemini API key"
    )
    city: str = Field(..., min_length=1, description="Destination city")
    days: int = Field(..., gt=0, description="Trip length in days")
    required_spots: str | None = Field(
        default=None, alias="requiredSpots", description="Free-text list of must-visit spots"
    )


class ErrorResult(BaseModel):
    """The only non-success response shape."""
    error: str


# =============================================================================
# Plan Schemas
# =============================================================================

class RouteDay(BaseModel):
    """One day of the itinerary."""
    day: int
    route: str = ""


class CityCard(BaseModel):
    """The card the front end renders.

    Text fields are coerced to strings. A route list that does not validate
    becomes None on its own, so the rest of the card still renders.
    """
    title: str = ""
    travel_route: list[RouteDay] | None = None
    city_data: str = ""
    local_delicacies: list[str] | str = Field(default_factory=list)

    @field_validator("title", "city_data", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("local_delicacies", mode="before")
    @classmethod
    def _as_text_list(cls, value: Any) -> list[str] | str:
        if isinstance(value, list):
            return [str(item) for item in value]
        return "" if value is None else str(value)

    @field_validator("travel_route", mode="wrap")
    @classmethod
    def _drop_invalid_route(
        cls, value: Any, handler: ValidatorFunctionWrapHandler
    ) -> list[RouteDay] | None:
        try:
            return handler(value)
        except ValidationError:
            return None

    def delicacies_text(self) -> str:
        """Food list joined the way the page shows it."""
        if isinstance(self.local_delicacies, str):
            return self.local_delicacies
        return "、 ".join(self.local_delicacies)


class PlanResult(BaseModel):
    """Envelope the model is asked to return."""
    city_card_data: CityCard


# =============================================================================
# LLM Schemas
# =============================================================================

class LLMResponse(BaseModel):
    """Response from the generation provider."""
    content: str | None = None
    model: str
    status_code: int = 200
    status_text: str = ""
    error_message: str | None = None
    finish_reason: str | None = None
    raw_response: dict[str, Any] | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300
