"""Command line entrypoint for the demos.

httpx and python-dateutil are imported inside the commands that need them,
after ``require_library`` has checked they are installed.
"""

import asyncio
import importlib.util
from datetime import datetime
from pathlib import Path

import typer

from playground.config import get_settings
from playground.countdown.new_year import run_live_countdown, summary_lines
from playground.errors import UpstreamError
from playground.files.file_info import get_file_info, info_lines, path_components
from playground.logging_config import logger
from playground.models.comparison import RequestLifecycle, RequestStatus
from playground.models.coordinates import CITY_PRESETS, preset

app = typer.Typer(help="Async, HTTP, date and filesystem demos")


def require_library(module: str, package: str | None = None) -> None:
    """Exit with an install hint when ``module`` cannot be imported."""
    if importlib.util.find_spec(module) is None:
        logger.error("MISSING_DEPENDENCY", module=module)
        typer.secho(
            f"{module} library not found. Please run: pip install {package or module}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)


def _echo_lines(lines) -> None:
    for line in lines:
        typer.echo(line)


def _fail(message: str) -> None:
    typer.secho(message, fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _resolve_point(
    preset_key: str, latitude: str | None, longitude: str | None
) -> tuple[str, str]:
    if latitude is not None or longitude is not None:
        return latitude or "", longitude or ""
    try:
        city = preset(preset_key)
    except KeyError:
        raise typer.BadParameter(
            f"Unknown preset {preset_key!r}; choose from {', '.join(CITY_PRESETS)}"
        )
    return str(city.coordinates.latitude), str(city.coordinates.longitude)


@app.command()
def sunrise(
    first: str = typer.Option("paris", help="Preset for the first city"),
    second: str = typer.Option("newyork", help="Preset for the second city"),
    lat1: str | None = typer.Option(None, help="First latitude (overrides preset)"),
    lng1: str | None = typer.Option(None, help="First longitude (overrides preset)"),
    lat2: str | None = typer.Option(None, help="Second latitude (overrides preset)"),
    lng2: str | None = typer.Option(None, help="Second longitude (overrides preset)"),
) -> None:
    """Fetch sunrise times for two places concurrently."""
    require_library("httpx")
    import httpx

    from playground.sunrise_service.sunrise import (
        render_comparison,
        submit_comparison,
        view_lines,
    )

    first_lat, first_lng = _resolve_point(first, lat1, lng1)
    second_lat, second_lng = _resolve_point(second, lat2, lng2)

    async def compare() -> RequestLifecycle:
        async with httpx.AsyncClient(timeout=get_settings().http_timeout_s) as client:
            return await submit_comparison(
                first_lat, first_lng, second_lat, second_lng, client=client
            )

    typer.echo("Comparing sunrise times...")
    lifecycle = asyncio.run(compare())
    lines = view_lines(render_comparison(lifecycle))
    if lifecycle.status is RequestStatus.failed:
        _fail("\n".join(lines))
    _echo_lines(lines)


@app.command()
def placeholder(
    limit: int = typer.Option(8, min=1, help="Number of posts to show"),
) -> None:
    """Fetch posts and users from JSONPlaceholder and summarise them."""
    require_library("httpx")
    import httpx

    from playground.placeholder_service.placeholder import run_demo

    try:
        _echo_lines(run_demo(limit))
    except UpstreamError as exc:
        message = f"Application error: {exc}"
        if isinstance(exc.__cause__, httpx.ConnectError):
            message += "\nNetwork error: Please check your internet connection"
        _fail(message)


@app.command()
def dates() -> None:
    """Walk through the date utilities using the current time."""
    require_library("dateutil", "python-dateutil")
    from playground.dates.operations import demo_lines

    _echo_lines(demo_lines(datetime.now()))


@app.command("file-info")
def file_info(
    path: Path | None = typer.Argument(None, help="Path to inspect"),
) -> None:
    """Show filesystem metadata for a path."""
    target = path or get_settings().default_file
    info = get_file_info(target)
    _echo_lines(info_lines(info, datetime.now()))
    typer.echo("")
    typer.echo("Parsed path components:")
    for key, value in path_components(target).items():
        typer.echo(f"   {key.capitalize()}: {value}")


@app.command()
def countdown(
    ticks: int | None = typer.Option(None, min=0, help="Live updates to print"),
    interval: float | None = typer.Option(None, min=0, help="Seconds between updates"),
) -> None:
    """Show the time remaining until the next January 1st."""
    settings = get_settings()
    ticks = settings.countdown_ticks if ticks is None else ticks
    interval = settings.countdown_interval_s if interval is None else interval

    _echo_lines(summary_lines(datetime.now()))
    typer.echo("")
    typer.echo(f"Live Countdown Preview ({ticks} updates):")
    try:
        asyncio.run(run_live_countdown(typer.echo, ticks, interval))
    except KeyboardInterrupt:
        typer.echo("Goodbye!")
        return
    typer.echo("Countdown preview completed!")
