"""
Headline scorecards derived from the synthesized series.

The change figure follows one policy per deployment (CAGR since the first row,
or YoY against the row one year earlier); the two are never mixed in one set.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Optional

from denominator.liquidity.models import LiquidityDataPoint
from denominator.liquidity.series import LiquiditySeries
from denominator.metrics.models import ChangePolicy, MetricData


@dataclass(frozen=True)
class MetricDef:
    key: str
    label: str
    unit: str
    # Floor for the initial value under CAGR (net liquidity starts at ~0 in 1913).
    initial_floor: Optional[float] = None


METRIC_DEFS: tuple[MetricDef, ...] = (
    MetricDef("m2_global", "Global M2", "T"),
    MetricDef("cb_total", "Central Bank Balance Sheets", "T"),
    MetricDef("net_liquidity", "Fed Net Liquidity", "T", initial_floor=0.0001),
    MetricDef("denominator_index", "Denominator Index", ""),
)


def cagr(initial: float, final: float, years: float) -> float:
    """
    Compound annual growth rate in percent, rounded to 1 decimal.

    ((final / initial) ** (1 / years) - 1) * 100. Returns 0 when either endpoint
    is non-positive or years <= 0 (a negative base has no real fractional power).
    """
    if initial <= 0 or final <= 0 or years <= 0:
        return 0.0
    try:
        out = ((final / initial) ** (1.0 / years) - 1.0) * 100.0
    except OverflowError:
        return 0.0
    if not math.isfinite(out):
        return 0.0
    return round(out, 1)


def yoy(previous: float, current: float) -> float:
    """Year-over-year change in percent, rounded to 1 decimal. 0 when previous is 0."""
    if previous == 0:
        return 0.0
    return round((current - previous) / previous * 100.0, 1)


def _year_ago(points: tuple[LiquidityDataPoint, ...]) -> Optional[LiquidityDataPoint]:
    last = points[-1]
    for p in reversed(points):
        if p.year == last.year - 1 and p.month == last.month:
            return p
    return None


@lru_cache(maxsize=32)
def _compute(
    points: tuple[LiquidityDataPoint, ...],
    policy: ChangePolicy,
    years: Optional[float],
) -> tuple[tuple[str, MetricData], ...]:
    first, last = points[0], points[-1]
    horizon = float(years) if years is not None else last.period - first.period
    prev = _year_ago(points) if policy is ChangePolicy.YOY else None

    out: list[tuple[str, MetricData]] = []
    for d in METRIC_DEFS:
        current = float(getattr(last, d.key))
        if policy is ChangePolicy.CAGR:
            initial = float(getattr(first, d.key))
            if d.initial_floor is not None:
                initial = max(initial, d.initial_floor)
            change = cagr(initial, current, horizon)
        else:
            change = yoy(float(getattr(prev, d.key)), current) if prev is not None else 0.0
        out.append((d.key, MetricData(value=current, change=change, label=d.label, unit=d.unit, policy=policy)))
    return tuple(out)


def latest_metrics(
    series: LiquiditySeries | Iterable[LiquidityDataPoint],
    policy: ChangePolicy | str = ChangePolicy.CAGR,
    years: Optional[float] = None,
) -> dict[str, MetricData]:
    """
    Scorecards keyed by metric name: m2_global, cb_total, net_liquidity, denominator_index.

    `years` overrides the CAGR horizon (default: elapsed time from the first to
    the last row). Memoized per distinct (rows, policy, years).
    """
    points = series.points if isinstance(series, LiquiditySeries) else tuple(series)
    if not points:
        raise ValueError("Cannot compute metrics on an empty series")
    return dict(_compute(points, ChangePolicy(policy), years))
