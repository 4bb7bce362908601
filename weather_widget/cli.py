# ABOUTME: Terminal entry point for the weather widget.
# ABOUTME: Feeds stdin lines into the input buffer and re-renders a rich panel on every state change.

import argparse
import asyncio
import logging
import sys
import threading

import httpx
from rich.console import Console
from rich.panel import Panel

from weather_widget.deps import WidgetSettings
from weather_widget.presentation import WidgetView, render_view
from weather_widget.widget import WeatherWidget

logger = logging.getLogger(__name__)

PLACEHOLDER = "Enter location..."

console = Console()


def build_panel(view: WidgetView, query: str) -> Panel:
    """Lay out one render of the widget."""
    body = (
        f"[bold]{view.icon.glyph}[/]  {view.icon_alt}\n"
        f"{view.day_night_icon.glyph}  {view.temperature}\n"
        f"{view.place}"
    )
    title = f"📍 {query}" if query else f"📍 [dim]{PLACEHOLDER}[/]"
    return Panel(body, title=title, border_style="bright_blue", expand=False)


def render(widget: WeatherWidget) -> None:
    console.print(build_panel(render_view(widget.current, widget.location), widget.query))


def _read_lines(loop: asyncio.AbstractEventLoop, queue: asyncio.Queue) -> None:
    # None marks EOF
    for line in sys.stdin:
        loop.call_soon_threadsafe(queue.put_nowait, line.rstrip("\n"))
    loop.call_soon_threadsafe(queue.put_nowait, None)


async def run(settings: WidgetSettings, http_client: httpx.AsyncClient | None = None) -> WeatherWidget:
    """Run the widget until stdin is exhausted and return it, closed."""
    widget = WeatherWidget(settings, http_client=http_client)
    widget.subscribe(render)

    queue: asyncio.Queue[str | None] = asyncio.Queue()
    reader = threading.Thread(target=_read_lines, args=(asyncio.get_running_loop(), queue), daemon=True)
    reader.start()

    render(widget)
    widget.start()
    try:
        while (line := await queue.get()) is not None:
            widget.set_query(line)
    finally:
        await widget.aclose()
    return widget


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="weather-widget", description="Search-as-you-type current weather.")
    parser.add_argument("--query", help="initial location query")
    parser.add_argument("--delay", type=float, help="debounce window in seconds")
    parser.add_argument("--log-level", help="logging level, e.g. INFO")
    return parser.parse_args(argv)


def apply_overrides(settings: WidgetSettings, args: argparse.Namespace) -> WidgetSettings:
    """Layer command-line flags over environment settings, validating the result."""
    overrides = {
        "default_query": args.query,
        "debounce_seconds": args.delay,
        "log_level": args.log_level,
    }
    merged = settings.model_dump() | {k: v for k, v in overrides.items() if v is not None}
    return WidgetSettings.model_validate(merged)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    settings = apply_overrides(WidgetSettings.from_env(), args)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    try:
        asyncio.run(run(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted, widget closed")


if __name__ == "__main__":
    main()
