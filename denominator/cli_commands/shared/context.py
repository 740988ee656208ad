from __future__ import annotations

import typer
from pydantic import ValidationError
from rich import print

from denominator.config import Settings, load_settings
from denominator.liquidity.models import AnchorTableError
from denominator.liquidity.series import LiquiditySeries, load_series
from denominator.utils.logging import configure_logging, log_event

# Global flags set by the app callback.
state = {"verbose": False}


def load_context() -> tuple[Settings, LiquiditySeries]:
    """Settings plus the process-wide series; configuration errors exit with code 1."""
    try:
        settings = load_settings()
    except ValidationError as e:
        print(f"[red]Invalid configuration:[/red] {e.errors()[0].get('msg', e)}")
        raise typer.Exit(code=1)

    configure_logging("DEBUG" if state["verbose"] else settings.log_level)

    try:
        series = load_series()
    except AnchorTableError as e:
        print(f"[red]Anchor table error:[/red] {e}")
        raise typer.Exit(code=1)

    if state["verbose"]:
        log_event(
            "SERIES",
            {
                "rows": len(series),
                "granularity": series.granularity,
                "first": series.first.date,
                "latest": series.latest.date,
                "seed": series.seed,
            },
        )
    return settings, series
