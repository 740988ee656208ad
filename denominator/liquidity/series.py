from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Iterator, Optional, Sequence

import pandas as pd

from denominator.config import DEFAULT_SEED, Settings, load_settings
from denominator.liquidity.anchors import HISTORICAL_ANCHORS, validate_anchors, validate_phases
from denominator.liquidity.derived import IndexBase, make_point
from denominator.liquidity.interpolate import snapshot_at
from denominator.liquidity.models import AnnualSnapshot, LiquidityDataPoint, MonthlyPhase
from denominator.liquidity.phases import MONTHLY_PHASES
from denominator.liquidity.simulate import simulate_months

logger = logging.getLogger(__name__)


class TimeRange(str, Enum):
    Y10 = "10Y"
    Y25 = "25Y"
    Y50 = "50Y"
    ALL = "ALL"

    @property
    def years(self) -> Optional[int]:
        return None if self is TimeRange.ALL else int(self.value[:-1])


def generate(
    anchors: Sequence[AnnualSnapshot] = HISTORICAL_ANCHORS,
    phases: Sequence[MonthlyPhase] = MONTHLY_PHASES,
    *,
    seed: int = DEFAULT_SEED,
) -> tuple[LiquidityDataPoint, ...]:
    """
    Synthesize the full series: one row per year across the anchor table, then
    twelve simulated rows per phase year.

    Deterministic for a given (anchors, phases, seed). Raises AnchorTableError
    on malformed tables.
    """
    validate_anchors(anchors)
    validate_phases(anchors, phases)

    base = IndexBase.from_anchor(anchors[0])
    rows: list[LiquidityDataPoint] = []

    for year in range(anchors[0].year, anchors[-1].year + 1):
        snap = snapshot_at(anchors, year)
        rows.append(make_point(snap.levels(), base, year=year))
    logger.debug("Annual era %s-%s: %d rows", anchors[0].year, anchors[-1].year, len(rows))

    if phases:
        n_annual = len(rows)
        for m in simulate_months(anchors[-1].levels(), phases, seed=seed):
            rows.append(make_point(m.levels, base, year=m.year, month=m.month))
        logger.debug("Monthly era %s-%s: %d rows", phases[0].year, phases[-1].year, len(rows) - n_annual)

    return tuple(rows)


def select_range(points: Sequence[LiquidityDataPoint], time_range: TimeRange | str) -> tuple[LiquidityDataPoint, ...]:
    """
    Keep the rows inside the last N calendar years of the sequence.

    On a pure annual series this is exactly the last N rows; on the hybrid
    series monthly years contribute all twelve of their months.
    """
    tr = TimeRange(time_range)
    pts = tuple(points)
    if tr.years is None or not pts:
        return pts
    cutoff = pts[-1].year - tr.years + 1
    return tuple(p for p in pts if p.year >= cutoff)


@dataclass(frozen=True)
class LiquiditySeries:
    """Immutable synthesized series. Build once, pass it to whatever reads it."""

    points: tuple[LiquidityDataPoint, ...]
    seed: int = DEFAULT_SEED
    time_range: TimeRange = TimeRange.ALL
    _by_date: dict = field(default_factory=dict, init=False, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        self._by_date.update({(p.year, p.month): p for p in self.points})

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[LiquidityDataPoint]:
        return iter(self.points)

    def __getitem__(self, i: int) -> LiquidityDataPoint:
        return self.points[i]

    @property
    def first(self) -> LiquidityDataPoint:
        return self.points[0]

    @property
    def latest(self) -> LiquidityDataPoint:
        return self.points[-1]

    @property
    def granularity(self) -> str:
        monthly = [p.is_monthly for p in self.points]
        if all(monthly):
            return "monthly"
        if any(monthly):
            return "hybrid"
        return "annual"

    def find(self, year: int, month: Optional[int] = None) -> Optional[LiquidityDataPoint]:
        return self._by_date.get((year, month))

    def select(self, time_range: TimeRange | str) -> "LiquiditySeries":
        tr = TimeRange(time_range)
        return LiquiditySeries(points=select_range(self.points, tr), seed=self.seed, time_range=tr)

    def to_frame(self) -> pd.DataFrame:
        """One row per period; `date` is the display label, `period` the fractional year."""
        df = pd.DataFrame([p.model_dump() for p in self.points])
        if df.empty:
            return df
        df.insert(1, "period", [p.period for p in self.points])
        return df


def build_liquidity_series(settings: Settings | None = None) -> LiquiditySeries:
    s = settings or load_settings()
    phases = MONTHLY_PHASES if s.monthly else ()
    points = generate(HISTORICAL_ANCHORS, phases, seed=s.seed)
    return LiquiditySeries(points=points, seed=s.seed)


@lru_cache(maxsize=1)
def load_series() -> LiquiditySeries:
    """Canonical series for this process: built on first use, then reused."""
    return build_liquidity_series()
