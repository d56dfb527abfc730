"""Error taxonomy for the plan endpoint.

Every error is terminal for its request and is rendered to the caller as
``{"error": message}`` with ``status_code``.
"""

from __future__ import annotations


class PlanError(Exception):
    """Base class for all errors surfaced by the plan endpoint."""

    status_code: int = 500
    default_message: str = "规划失败：发生未知错误。"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MethodNotAllowedError(PlanError):
    status_code = 405
    default_message = "请求方法不被允许：仅支持 POST。"


class InvalidRequestError(PlanError):
    status_code = 400
    default_message = "请求格式错误：请求体必须是 JSON 对象。"


class MissingParameterError(InvalidRequestError):
    default_message = "缺少必要参数：请提供 geminiKey、city 和 days。"


class UpstreamFailureError(PlanError):
    """The generation API answered with a non-success status."""

    def __init__(self, status_text: str, detail: str | None = None):
        message = f"规划失败：Gemini API 调用失败: {status_text}."
        if detail:
            message += f" 详情: {detail}"
        self.status_text = status_text
        self.detail = detail
        super().__init__(message)


class EmptyUpstreamContentError(PlanError):
    default_message = "规划失败：Gemini 未能返回任何内容。"


class MalformedStructureError(PlanError):
    default_message = "规划失败：Gemini 返回的文本中找不到有效的 JSON 结构。"


class ParseFailureError(PlanError):
    default_message = "规划失败：无法解析 Gemini 返回的 JSON 数据。"


class InternalError(PlanError):
    default_message = "规划失败：发生内部错误（网络或运行时）。"
