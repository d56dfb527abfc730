"""CLI entrypoint (Typer + Rich).

- `travel-planner plan <city> <days>` renders a plan card in the terminal,
  either in-process or against a running server (`--server`)
- `travel-planner serve` runs the API with uvicorn
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from travel_planner.agent.planner import generate_plan
from travel_planner.config import get_settings
from travel_planner.errors import InternalError, PlanError
from travel_planner.llm.gemini import GeminiAdapter
from travel_planner.schemas import PlanRequest, PlanResult

app = typer.Typer(help="Travel Planner CLI.")
console = Console()


class PlanFailed(Exception):
    """A plan could not be produced; the message is shown to the user."""


async def _plan_in_process(request: PlanRequest) -> dict[str, Any]:
    adapter = GeminiAdapter()
    try:
        return await generate_plan(request, adapter)
    except PlanError as e:
        raise PlanFailed(e.message) from e
    except httpx.HTTPError as e:
        raise PlanFailed(InternalError().message) from e
    finally:
        await adapter.close()


def _plan_via_server(server: str, request: PlanRequest) -> dict[str, Any]:
    settings = get_settings()
    try:
        response = httpx.post(
            f"{server.rstrip('/')}/api/plan",
            json=request.model_dump(by_alias=True, exclude_none=True),
            timeout=settings.gemini_timeout_seconds + 10,
        )
        body = response.json()
    except (httpx.HTTPError, ValueError) as e:
        raise PlanFailed(f"网络请求或服务器错误：{e}") from e

    if not isinstance(body, dict):
        raise PlanFailed("服务器返回了无法识别的数据。")
    if not response.is_success or "error" in body:
        raise PlanFailed(body.get("error") or "服务器错误，请检查您的 Gemini Key 或输入格式。")
    return body


def render_plan(data: dict[str, Any]) -> None:
    """Print the city card."""
    try:
        card = PlanResult.model_validate(data).city_card_data
    except ValidationError:
        console.print("[red]路线数据生成失败。[/red]")
        return

    console.rule(f"[bold]{escape(card.title)}")
    if card.travel_route is None:
        console.print("[red]路线数据生成失败。[/red]")
    else:
        for day in card.travel_route:
            console.print(f"[bold]第 {day.day} 天:[/bold] {escape(day.route)}")
    console.print()
    console.print(escape(card.city_data))
    console.print()
    console.print(f"[bold]当地美食:[/bold] {escape(card.delicacies_text())}")


@app.command()
def plan(
    city: str = typer.Argument(..., help="Destination city"),
    days: int = typer.Argument(..., min=1, help="Trip length in days"),
    gemini_key: str = typer.Option(..., "--key", envvar="GEMINI_API_KEY", help="Gemini API key"),
    required_spots: Optional[str] = typer.Option(None, "--spots", help="Must-visit spots, comma separated"),
    server: Optional[str] = typer.Option(None, "--server", help="Base URL of a running Travel Planner API"),
):
    """Plan a trip and render the result."""
    request = PlanRequest(
        gemini_key=gemini_key,
        city=city,
        days=days,
        required_spots=required_spots or None,
    )

    try:
        with console.status(f"正在规划 {city} {days} 日游..."):
            if server:
                data = _plan_via_server(server, request)
            else:
                data = asyncio.run(_plan_in_process(request))
    except PlanFailed as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    render_plan(data)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address"),
    port: Optional[int] = typer.Option(None, help="Bind port"),
):
    """Run the API server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "travel_planner.api.main:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    app()
