from __future__ import annotations

import typer
from rich import print

from denominator.cli_commands.shared.context import load_context
from denominator.cli_commands.shared.display import render_scorecard_panel
from denominator.metrics.models import ChangePolicy
from denominator.metrics.scorecards import latest_metrics
from denominator.utils.logging import to_json


def register(app: typer.Typer) -> None:
    @app.command("metrics")
    def metrics_cmd(
        policy: str = typer.Option(None, "--policy", "-p", help="cagr or yoy (default from DENOM_CHANGE_POLICY)"),
        years: float = typer.Option(None, "--years", help="Override the CAGR horizon in years"),
        json_out: bool = typer.Option(False, "--json", help="Print scorecards as JSON"),
    ):
        """Headline scorecards for the latest period."""
        settings, series = load_context()
        try:
            pol = ChangePolicy((policy or settings.change_policy).strip().lower())
        except ValueError:
            raise typer.BadParameter("Policy must be 'cagr' or 'yoy'.")

        metrics = latest_metrics(series, pol, years)

        if json_out:
            typer.echo(to_json({"asof": series.latest.date, "metrics": metrics}))
            return

        print(render_scorecard_panel(asof=series.latest.date, policy=pol, metrics=metrics))
