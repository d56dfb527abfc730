"""Pull the JSON object out of a model's free-text reply.

Cleanup is a heuristic: drop a leading/trailing Markdown fence, then keep
everything from the first ``{`` to the last ``}``. Stray braces outside the
object, or several objects in one reply, defeat it.
"""

from __future__ import annotations

import json
import math
import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


# Language tag is optional: ```json, ```JSON, ```javascript or bare ```.
_OPENING_FENCE = re.compile(r"^```[\w+-]*\s*")
_CLOSING_FENCE = re.compile(r"\s*```\s*$")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def _finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {literal}")
    return value


class ExtractionError(str, Enum):
    """Why a reply could not be turned into an object."""
    EMPTY_CONTENT = "EMPTY_CONTENT"
    MALFORMED_STRUCTURE = "MALFORMED_STRUCTURE"
    PARSE_FAILURE = "PARSE_FAILURE"


class ExtractionResult(BaseModel):
    """Outcome of extracting a JSON object from model text."""
    ok: bool = Field(..., description="Whether an object was extracted")
    data: dict[str, Any] | None = Field(default=None, description="The parsed object")
    error_code: ExtractionError | None = Field(default=None)
    error_message: str | None = Field(default=None, description="Parser detail, for logs")


def strip_code_fence(text: str) -> str:
    """Remove one opening and one closing Markdown fence marker."""
    cleaned = _OPENING_FENCE.sub("", text.strip(), count=1)
    cleaned = _CLOSING_FENCE.sub("", cleaned, count=1)
    return cleaned.strip()


def clean_json_text(text: str | None) -> str | None:
    """Return the ``{...}`` span of ``text``, or None if there is none.

    The span runs from the first ``{`` to the last ``}`` inclusive.
    """
    if not text:
        return None

    cleaned = strip_code_fence(text)

    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start == -1 or end == -1 or end < start:
        return None

    return cleaned[start:end + 1].strip()


def extract_json_object(text: str | None) -> ExtractionResult:
    """Clean ``text`` and parse it, reporting failure as a value."""
    if not text:
        return ExtractionResult(
            ok=False,
            error_code=ExtractionError.EMPTY_CONTENT,
            error_message="no text in model reply",
        )

    cleaned = clean_json_text(text)
    if cleaned is None:
        return ExtractionResult(
            ok=False,
            error_code=ExtractionError.MALFORMED_STRUCTURE,
            error_message="no '{...}' span in model reply",
        )

    try:
        # NaN, Infinity and overflowing floats are rejected.
        data = json.loads(cleaned, parse_constant=_reject_constant, parse_float=_finite_float)
    except ValueError as e:
        return ExtractionResult(
            ok=False,
            error_code=ExtractionError.PARSE_FAILURE,
            error_message=str(e),
        )

    return ExtractionResult(ok=True, data=data)
