"""
Denominator CLI

Primary commands:
- denominator series     Synthesized series (range, log view, JSON)
- denominator metrics    Headline scorecards
- denominator anchors    Annual anchor table
- denominator phases     Monthly simulation phases
"""
from __future__ import annotations

import typer

from denominator.cli_commands.shared.context import state

app = typer.Typer(
    add_completion=False,
    help="""Denominator CLI — global liquidity and the denominator index

\b
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
SERIES
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
  denominator series -r 25Y      Last 25 years
  denominator series --log       log10 view
  denominator metrics            Scorecards (CAGR / YoY)

\b
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
INPUTS
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
  denominator anchors            Annual anchors 1913-2019
  denominator phases             Monthly phases 2020+

\b
Run 'denominator <command> --help' for details.
""",
)


@app.callback()
def _main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging and series summary")):
    state["verbose"] = verbose


# ---------------------------------------------------------------------------
# COMMAND REGISTRATION
# ---------------------------------------------------------------------------

_COMMANDS_REGISTERED = False


def _register_commands() -> None:
    global _COMMANDS_REGISTERED
    if _COMMANDS_REGISTERED:
        return

    from denominator.cli_commands.metrics_cmd import register as register_metrics
    from denominator.cli_commands.series_cmd import register as register_series
    from denominator.cli_commands.tables_cmd import register as register_tables

    register_series(app)
    register_metrics(app)
    register_tables(app)

    _COMMANDS_REGISTERED = True


def main():
    _register_commands()
    app()


# Register on import
_register_commands()


if __name__ == "__main__":
    main()
