"""
Display formatting for CLI output.

Monetary figures in this package are already in trillions USD.
"""
from __future__ import annotations

import math
from typing import Optional


def fmt_float(x: Optional[float], decimals: int = 2) -> str:
    """Format float with specified decimals, or 'n/a'."""
    if x is None or not isinstance(x, (int, float)):
        return "n/a"
    return f"{float(x):,.{decimals}f}"


def fmt_trillions(x: Optional[float], decimals: int = 2) -> str:
    """22.3 -> '$22.30T'. Negative values keep their sign ahead of the $."""
    if x is None or not isinstance(x, (int, float)):
        return "n/a"
    v = float(x)
    sign = "-" if v < 0 else ""
    return f"{sign}${abs(v):,.{decimals}f}T"


def fmt_signed_pct(x: Optional[float], decimals: int = 1, multiply: bool = False) -> str:
    """Signed percentage; inputs here are already in percent unless multiply=True."""
    if x is None or not isinstance(x, (int, float)):
        return "n/a"
    value = float(x) * 100.0 if multiply else float(x)
    return f"{value:+.{decimals}f}%"


def fmt_change(change: Optional[float], unit: str) -> str:
    """Scorecard change: arrow plus magnitude; index changes read in points."""
    if change is None or not isinstance(change, (int, float)):
        return "n/a"
    arrow = "↑" if change >= 0 else "↓"
    suffix = " pts" if unit == "" else "%"
    return f"{arrow} {abs(float(change)):.1f}{suffix}"


def fmt_metric_value(value: Optional[float], unit: str) -> str:
    if unit == "T":
        return fmt_trillions(value, 2)
    return fmt_float(value, 1)


def fmt_log10(x: Optional[float], decimals: int = 3) -> str:
    """log10 view used by the log-scale toggle; non-positive values have no log."""
    if x is None or not isinstance(x, (int, float)) or float(x) <= 0:
        return "—"
    return f"{math.log10(float(x)):.{decimals}f}"


def change_color(change: float) -> str:
    return "green" if change >= 0 else "red"
