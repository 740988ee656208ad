from __future__ import annotations

import typer
from rich.console import Console

from denominator.cli_commands.shared.context import load_context
from denominator.cli_commands.shared.display import render_series_table
from denominator.liquidity.models import LiquidityDataPoint
from denominator.liquidity.series import TimeRange
from denominator.utils.logging import to_json

DEFAULT_FIELDS = "m2_global,cb_total,net_liquidity,denominator_index"


def _parse_fields(raw: str) -> list[str]:
    fields = [f.strip() for f in raw.split(",") if f.strip()]
    if not fields:
        raise typer.BadParameter("No fields given.")
    known = set(LiquidityDataPoint.model_fields) - {"date", "year", "month"}
    unknown = [f for f in fields if f not in known]
    if unknown:
        raise typer.BadParameter(f"Unknown field(s): {', '.join(unknown)}")
    return fields


def _parse_range(raw: str | None, default: str) -> TimeRange:
    try:
        return TimeRange((raw or default).strip().upper())
    except ValueError:
        raise typer.BadParameter(f"Range must be one of {', '.join(r.value for r in TimeRange)}")


def register(app: typer.Typer) -> None:
    @app.command("series")
    def series_cmd(
        time_range: str = typer.Option(None, "--range", "-r", help="10Y, 25Y, 50Y or ALL (default from DENOM_DEFAULT_RANGE)"),
        fields: str = typer.Option(DEFAULT_FIELDS, "--fields", "-f", help="Comma-separated columns"),
        log_scale: bool = typer.Option(False, "--log", help="Show log10 of each value"),
        json_out: bool = typer.Option(False, "--json", help="Print rows as JSON"),
    ):
        """Synthesized series, sliced to a time range."""
        cols = _parse_fields(fields)
        settings, series = load_context()
        tr = _parse_range(time_range, settings.default_range)
        view = series.select(tr)

        if json_out:
            rows = [{"date": p.date, **{c: getattr(p, c) for c in cols}} for p in view]
            typer.echo(to_json(rows))
            return

        console = Console()
        console.print(
            render_series_table(
                view.points,
                cols,
                log_scale=log_scale,
                title=f"Global liquidity — {tr.value} ({len(view)} periods)",
            )
        )
