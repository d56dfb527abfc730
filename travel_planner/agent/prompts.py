"""Prompt templates for the travel planner.

The model is asked for bare JSON, but in practice it often wraps the object
in a Markdown fence; see ``travel_planner.agent.extraction``.
"""

from __future__ import annotations

# =============================================================================
# Plan Prompt
# =============================================================================

PLAN_PROMPT = """
你是一个专业的旅游规划师。请严格按照以下要求和格式返回结果：

规划要求：
1. 目的地：{city}
2. 旅行天数：{days}日游。
3. 景点安排：{required_text} 在满足必去景点的前提下，合理安排其他推荐景点，使路线流畅且优化交通。
4. 语言要求：所有输出必须是流畅、专业的中文。

**返回格式**：请严格以一个 JSON 对象的形式返回，不要包含任何文字、说明或 Markdown 标记 (如 ```json)。JSON 结构必须是：

{{
  "city_card_data": {{
    "title": "城市名 - X日深度游",
    "travel_route": [
      {{"day": 1, "route": "景点名称A -> 景点名称B"}},
      // ... 更多天数
    ],
    "city_data": "关于城市历史、特色、经济等数据的简短介绍（100字以内）。",
    "local_delicacies": ["美食A", "美食B", "美食C", "美食D"]
  }}
}}
"""

REQUIRED_SPOTS_TEXT = "必去景点：{required_spots}。请确保所有这些景点都包含在路线中。"

NO_REQUIRED_SPOTS_TEXT = "用户没有指定必去景点。"


# =============================================================================
# Helper Functions
# =============================================================================

def format_required_text(required_spots: str | None) -> str:
    """Sentence describing the must-visit spots, or their absence."""
    if required_spots and required_spots.strip():
        return REQUIRED_SPOTS_TEXT.format(required_spots=required_spots.strip())
    return NO_REQUIRED_SPOTS_TEXT


def format_plan_prompt(city: str, days: int, required_spots: str | None = None) -> str:
    """Format the plan prompt with the trip parameters."""
    return PLAN_PROMPT.format(
        city=city,
        days=days,
        required_text=format_required_text(required_spots),
    )
