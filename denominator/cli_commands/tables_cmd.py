from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from denominator.liquidity.anchors import HISTORICAL_ANCHORS
from denominator.liquidity.phases import MONTHLY_PHASES
from denominator.utils.formatting import fmt_float, fmt_signed_pct, fmt_trillions


def register(app: typer.Typer) -> None:
    @app.command("anchors")
    def anchors_cmd():
        """Hand-authored annual anchors the series interpolates between."""
        t = Table(show_header=True, header_style="bold cyan", title="Anchors")
        t.add_column("Year", style="cyan")
        for col in ("M2 US", "M2 EU", "M2 JP", "M2 CN", "Fed", "ECB", "BoJ", "PBoC", "TGA", "RRP", "Gold $/oz"):
            t.add_column(col, justify="right")
        for a in HISTORICAL_ANCHORS:
            t.add_row(
                str(a.year),
                *(fmt_trillions(getattr(a, f), 3) for f in (
                    "m2_us", "m2_eu", "m2_japan", "m2_china",
                    "fed_bs", "ecb_bs", "boj_bs", "pboc_bs", "tga", "rrp",
                )),
                fmt_float(a.gold_usd, 2),
            )
        Console().print(t)

    @app.command("phases")
    def phases_cmd():
        """Monthly growth phases for the simulated era."""
        t = Table(show_header=True, header_style="bold cyan", title="Monthly phases")
        t.add_column("Year", style="cyan")
        t.add_column("Phase")
        t.add_column("M2 US /mo", justify="right")
        t.add_column("Fed /mo", justify="right")
        t.add_column("Gold /mo", justify="right")
        t.add_column("TGA target", justify="right")
        t.add_column("RRP target", justify="right")
        for p in MONTHLY_PHASES:
            t.add_row(
                str(p.year),
                p.name,
                fmt_signed_pct(p.rate("m2_us"), 2, multiply=True),
                fmt_signed_pct(p.rate("fed_bs"), 2, multiply=True),
                fmt_signed_pct(p.rate("gold_usd"), 2, multiply=True),
                fmt_trillions(p.tga_target, 2),
                fmt_trillions(p.rrp_target, 2),
            )
        Console().print(t)
