"""
Uniform rich output for `denominator` commands: scorecard panel and series table.
"""
from __future__ import annotations

from typing import Mapping, Sequence

from rich.panel import Panel
from rich.table import Table

from denominator.liquidity.models import LiquidityDataPoint
from denominator.metrics.models import ChangePolicy, MetricData
from denominator.utils.formatting import (
    change_color,
    fmt_change,
    fmt_float,
    fmt_log10,
    fmt_metric_value,
    fmt_trillions,
)

# Fields printed as trillions; everything else is shown as a plain number.
_TRILLION_COLUMNS = {
    "m2_us", "m2_eu", "m2_japan", "m2_china", "m2_global",
    "fed_bs", "ecb_bs", "boj_bs", "pboc_bs", "cb_total",
    "tga", "rrp", "net_liquidity",
    "realestate_mcap", "bonds_mcap", "equities_mcap", "gold_mcap", "bitcoin_mcap",
}


def render_scorecard_panel(
    *,
    asof: str,
    policy: ChangePolicy,
    metrics: Mapping[str, MetricData],
) -> Panel:
    """Scorecards for the latest row: value, change, and the policy the change follows."""
    from rich.console import Group
    from rich.text import Text

    horizon = "CAGR since first period" if policy is ChangePolicy.CAGR else "YoY"
    t = Table(show_header=True, header_style="bold cyan", box=None, padding=(0, 2))
    t.add_column("Metric", style="cyan")
    t.add_column("Value", justify="right")
    t.add_column("Change", justify="right")
    for m in metrics.values():
        color = change_color(m.change)
        t.add_row(
            m.label,
            fmt_metric_value(m.value, m.unit),
            f"[{color}]{fmt_change(m.change, m.unit)}[/{color}]",
        )

    parts = [Text.from_markup(f"As of: {asof}   [dim]{horizon}[/dim]\n"), t]
    return Panel.fit(Group(*parts), title="Global Liquidity", border_style="cyan")


def render_series_table(
    points: Sequence[LiquidityDataPoint],
    fields: Sequence[str],
    *,
    log_scale: bool = False,
    title: str = "",
) -> Table:
    t = Table(show_header=True, header_style="bold cyan", title=title or None, expand=False)
    t.add_column("Date", style="cyan")
    for f in fields:
        t.add_column(f"log10 {f}" if log_scale else f, justify="right")

    for p in points:
        row = [p.date]
        for f in fields:
            v = getattr(p, f)
            if log_scale:
                row.append(fmt_log10(v))
            elif f in _TRILLION_COLUMNS:
                row.append(fmt_trillions(v, 3 if p.month is None else 2))
            else:
                row.append(fmt_float(v, 2))
        t.add_row(*row)
    return t
