from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


M2_FIELDS = ("m2_us", "m2_eu", "m2_japan", "m2_china")
CB_FIELDS = ("fed_bs", "ecb_bs", "boj_bs", "pboc_bs")
MCAP_FIELDS = ("realestate_mcap", "bonds_mcap", "equities_mcap", "bitcoin_mcap")

# Every scalar carried by an anchor, in table order.
BASE_FIELDS = (
    *M2_FIELDS,
    *CB_FIELDS,
    "tga",
    "rrp",
    "gold_usd",
    "sp500",
    "m2v",
    *MCAP_FIELDS,
    "gold_stock_t",
)

# Fields that can legitimately be zero; floored to EPSILON before exponential interpolation.
EPSILON_FIELDS = ("tga", "rrp", "bitcoin_mcap")

# Fields driven by phase growth rates in the monthly era (TGA/RRP follow targets instead).
SIMULATED_FIELDS = tuple(f for f in BASE_FIELDS if f not in {"tga", "rrp"})

MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class AnchorTableError(ValueError):
    """Malformed anchor or phase table (empty, non-monotonic, bad magnitudes)."""


class AnnualSnapshot(BaseModel):
    """Hand-authored year-end anchor. Monetary values in trillions USD."""

    model_config = ConfigDict(frozen=True)

    year: int
    m2_us: float = Field(ge=0)
    m2_eu: float = Field(ge=0)
    m2_japan: float = Field(ge=0)
    m2_china: float = Field(ge=0)
    fed_bs: float = Field(ge=0)
    ecb_bs: float = Field(ge=0)  # pre-ECB: aggregate European central banks
    boj_bs: float = Field(ge=0)
    pboc_bs: float = Field(ge=0)  # pre-PBoC: People's Bank estimates
    tga: float = Field(ge=0)
    rrp: float = Field(ge=0)
    gold_usd: float = Field(ge=0)  # USD per troy ounce
    sp500: float = Field(ge=0)  # S&P 500 composite level (Cowles-linked pre-1957)
    m2v: float = Field(ge=0)  # US M2 velocity (GDP / M2)
    realestate_mcap: float = Field(ge=0)
    bonds_mcap: float = Field(ge=0)
    equities_mcap: float = Field(ge=0)
    bitcoin_mcap: float = Field(ge=0)
    gold_stock_t: float = Field(ge=0)  # above-ground gold stock, metric tonnes

    def levels(self) -> Dict[str, float]:
        return {f: float(getattr(self, f)) for f in BASE_FIELDS}


class MonthlyPhase(BaseModel):
    """
    One calendar year of the simulated monthly era.

    `growth` holds monthly growth rates as fractions (0.0185 = +1.85%/month).
    Fields not listed do not grow (rate 0) apart from noise.
    """

    model_config = ConfigDict(frozen=True)

    year: int
    name: str
    growth: Dict[str, float] = Field(default_factory=dict)
    tga_target: float = Field(ge=0)
    rrp_target: float = Field(ge=0)
    noise: float = Field(default=0.0015, ge=0)
    jitter: float = Field(default=0.10, ge=0, le=1)

    @model_validator(mode="after")
    def _known_fields(self) -> "MonthlyPhase":
        unknown = sorted(set(self.growth) - set(SIMULATED_FIELDS))
        if unknown:
            raise ValueError(f"Phase {self.year} ({self.name}) has growth for unknown fields: {unknown}")
        return self

    def rate(self, field: str) -> float:
        return float(self.growth.get(field, 0.0))


class LiquidityDataPoint(BaseModel):
    """One row of the synthesized series (trillions USD unless noted)."""

    model_config = ConfigDict(frozen=True)

    date: str
    year: int
    month: Optional[int] = None  # None on annual rows

    m2_us: float
    m2_eu: float
    m2_japan: float
    m2_china: float
    m2_global: float
    fed_bs: float
    ecb_bs: float
    boj_bs: float
    pboc_bs: float
    cb_total: float
    tga: float
    rrp: float
    net_liquidity: float
    denominator_index: float

    gold_usd: float
    gold_real: float  # gold / (denominator_index / 100): purchasing power vs the denominator
    gold_index: float
    gold_capture_pct: float
    sp500: float
    sp500_index: float
    m2v: float

    realestate_mcap: float
    bonds_mcap: float
    equities_mcap: float
    gold_mcap: float
    bitcoin_mcap: float
    gold_stock_t: float
    realestate_wealth_pct: float
    bonds_wealth_pct: float
    equities_wealth_pct: float
    gold_wealth_pct: float
    bitcoin_wealth_pct: float

    @property
    def is_monthly(self) -> bool:
        return self.month is not None

    @property
    def period(self) -> float:
        """Fractional year, e.g. 2020.0 for Jan 2020 and 2020.9167 for Dec 2020."""
        if self.month is None:
            return float(self.year)
        return self.year + (self.month - 1) / 12.0


def period_label(year: int, month: Optional[int] = None) -> str:
    if month is None:
        return f"{year}"
    return f"{MONTH_ABBR[month - 1]} {year}"
