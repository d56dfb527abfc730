"""Tests for prompt construction."""

from travel_planner.agent.prompts import (
    NO_REQUIRED_SPOTS_TEXT,
    format_plan_prompt,
    format_required_text,
)


def test_prompt_embeds_city_and_days():
    prompt = format_plan_prompt("京都", 3)
    assert "目的地：京都" in prompt
    assert "旅行天数：3日游" in prompt


def test_prompt_without_required_spots():
    prompt = format_plan_prompt("Kyoto", 2)
    assert NO_REQUIRED_SPOTS_TEXT in prompt
    assert "必去景点：" not in prompt


def test_prompt_with_required_spots():
    prompt = format_plan_prompt("京都", 3, "清水寺, 金阁寺")
    assert "必去景点：清水寺, 金阁寺。请确保所有这些景点都包含在路线中。" in prompt
    assert NO_REQUIRED_SPOTS_TEXT not in prompt


def test_blank_required_spots_count_as_absent():
    assert format_required_text("   ") == NO_REQUIRED_SPOTS_TEXT
    assert format_required_text(None) == NO_REQUIRED_SPOTS_TEXT


def test_prompt_describes_json_shape():
    prompt = format_plan_prompt("京都", 3)
    for key in ("city_card_data", "title", "travel_route", "city_data", "local_delicacies"):
        assert f'"{key}"' in prompt
    # Template braces are rendered literally, not consumed by str.format.
    assert '{"day": 1, "route": "景点名称A -> 景点名称B"}' in prompt
