from __future__ import annotations

import logging
import time
from typing import Optional, Type

import typer
from pydantic import ValidationError

from yatl import clock
from yatl.config import LogSettings, RunSettings, get_settings
from yatl.errors import TimerError
from yatl.log import LOG_LEVELS, setup_logging
from yatl.timing import Timer, duration_to_human_string

log = logging.getLogger("yatl.cli")

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _settings(kind: Type[RunSettings] | Type[LogSettings]):
    try:
        return get_settings(kind)
    except ValidationError as exc:
        for err in exc.errors():
            field = ".".join(str(p) for p in err["loc"])
            typer.echo(f"[yatl] invalid setting {field}: {err['msg']}", err=True)
        raise typer.Exit(code=2)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help=f"One of {', '.join(LOG_LEVELS)}; overrides YATL_LOG_LEVEL"
    ),
) -> None:
    """Stopwatch with human readable laps."""

    level = log_level if log_level is not None else _settings(LogSettings).level
    try:
        setup_logging(level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level")


@app.command()
def run(
    laps: Optional[int] = typer.Option(None, "--laps", "-n", min=1, help="Number of laps to record"),
    interval: Optional[float] = typer.Option(
        None, "--interval", "-i", min=0.0, help="Seconds to wait before each lap"
    ),
) -> None:
    """Start a timer and print LAPS laps taken INTERVAL seconds apart."""

    if laps is None or interval is None:
        cfg = _settings(RunSettings)
        laps = cfg.laps if laps is None else laps
        interval = cfg.lap_interval if interval is None else interval

    # looked up per call so the clock can be swapped out
    timer = Timer(clock=clock.now_utc_ns)
    timer.start()
    log.debug("timer started at %dns", timer.start_time())
    for i in range(1, laps + 1):
        time.sleep(interval)
        try:
            d = timer.lap()
        except TimerError as exc:
            typer.echo(f"[yatl] lap {i} failed: {exc}", err=True)
            raise typer.Exit(code=1)
        log.debug("lap %d: %dns", i, d)

    for i, text in enumerate(timer.laps_formatted(), start=1):
        typer.echo(f"lap {i}: {text}")


@app.command("format")
def format_(nanos: int = typer.Argument(..., help="Duration in nanoseconds")) -> None:
    """Print NANOS as a human readable duration."""

    try:
        text = duration_to_human_string(nanos)
    except ValueError as exc:
        typer.echo(f"[yatl] {exc}", err=True)
        raise typer.Exit(code=2)
    typer.echo(text)


if __name__ == "__main__":
    app()
