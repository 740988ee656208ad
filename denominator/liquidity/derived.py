from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from denominator.liquidity.models import (
    CB_FIELDS,
    M2_FIELDS,
    AnnualSnapshot,
    LiquidityDataPoint,
    period_label,
)


M2_WEIGHT = 0.6
CB_WEIGHT = 0.4
OZ_PER_TONNE = 32_150.7466

ANNUAL_DECIMALS = 3
MONTHLY_DECIMALS = 2

# Trillions-denominated magnitudes, rounded at the row's precision.
TRILLION_FIELDS = (
    *M2_FIELDS,
    "m2_global",
    *CB_FIELDS,
    "cb_total",
    "tga",
    "rrp",
    "net_liquidity",
    "realestate_mcap",
    "bonds_mcap",
    "equities_mcap",
    "gold_mcap",
    "bitcoin_mcap",
)
PRICE_FIELDS = ("gold_usd", "gold_real", "sp500")
INDEX_FIELDS = (
    "denominator_index",
    "gold_index",
    "sp500_index",
    "gold_capture_pct",
    "realestate_wealth_pct",
    "bonds_wealth_pct",
    "equities_wealth_pct",
    "gold_wealth_pct",
    "bitcoin_wealth_pct",
)


@dataclass(frozen=True)
class IndexBase:
    """Normalization base taken from the first anchor; index = 100 there."""

    m2: float
    cb: float
    gold_usd: float
    sp500: float

    @classmethod
    def from_anchor(cls, a: AnnualSnapshot) -> "IndexBase":
        return cls(
            m2=sum(float(getattr(a, f)) for f in M2_FIELDS),
            cb=sum(float(getattr(a, f)) for f in CB_FIELDS),
            gold_usd=float(a.gold_usd),
            sp500=float(a.sp500),
        )


def denominator_index(m2_global: float, cb_total: float, base: IndexBase) -> float:
    return ((m2_global / base.m2) * M2_WEIGHT + (cb_total / base.cb) * CB_WEIGHT) * 100.0


def _pct(part: float, total: float) -> float:
    if total <= 0:
        return 0.0
    return part / total * 100.0


def derive_fields(levels: Mapping[str, float], base: IndexBase) -> dict[str, float]:
    """All output fields for one row, unrounded. Depends only on this row and the base."""
    out = {k: float(v) for k, v in levels.items()}

    m2_global = sum(out[f] for f in M2_FIELDS)
    cb_total = sum(out[f] for f in CB_FIELDS)
    idx = denominator_index(m2_global, cb_total, base)

    out["m2_global"] = m2_global
    out["cb_total"] = cb_total
    out["net_liquidity"] = out["fed_bs"] - out["tga"] - out["rrp"]
    out["denominator_index"] = idx

    out["gold_real"] = out["gold_usd"] / (idx / 100.0)
    out["gold_index"] = out["gold_usd"] / base.gold_usd * 100.0
    out["sp500_index"] = out["sp500"] / base.sp500 * 100.0
    out["gold_capture_pct"] = _pct(out["gold_index"], idx)

    out["gold_mcap"] = out["gold_stock_t"] * OZ_PER_TONNE * out["gold_usd"] / 1e12
    wealth = {
        "realestate": out["realestate_mcap"],
        "bonds": out["bonds_mcap"],
        "equities": out["equities_mcap"],
        "gold": out["gold_mcap"],
        "bitcoin": out["bitcoin_mcap"],
    }
    total = sum(wealth.values())
    for k, v in wealth.items():
        out[f"{k}_wealth_pct"] = _pct(v, total)
    return out


def round_fields(values: Mapping[str, float], decimals: int) -> dict[str, float]:
    """Presentation rounding at emission; derived values were computed unrounded."""
    out = dict(values)
    for f in TRILLION_FIELDS:
        out[f] = round(out[f], decimals)
    for f in PRICE_FIELDS:
        out[f] = round(out[f], 2)
    for f in INDEX_FIELDS:
        out[f] = round(out[f], 1)
    out["m2v"] = round(out["m2v"], 3)
    out["gold_stock_t"] = round(out["gold_stock_t"], 0)
    return out


def make_point(
    levels: Mapping[str, float],
    base: IndexBase,
    *,
    year: int,
    month: Optional[int] = None,
) -> LiquidityDataPoint:
    decimals = ANNUAL_DECIMALS if month is None else MONTHLY_DECIMALS
    values = round_fields(derive_fields(levels, base), decimals)
    return LiquidityDataPoint(date=period_label(year, month), year=year, month=month, **values)
