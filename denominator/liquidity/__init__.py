from .anchors import HISTORICAL_ANCHORS, validate_anchors, validate_phases
from .interpolate import EPSILON, bracket, exp_interp, interpolate, snapshot_at
from .models import AnchorTableError, AnnualSnapshot, LiquidityDataPoint, MonthlyPhase
from .phases import MONTHLY_PHASES
from .series import (
    DEFAULT_SEED,
    LiquiditySeries,
    TimeRange,
    build_liquidity_series,
    generate,
    load_series,
    select_range,
)
from .simulate import Lcg, simulate_months

__all__ = [
    "AnchorTableError",
    "AnnualSnapshot",
    "DEFAULT_SEED",
    "EPSILON",
    "HISTORICAL_ANCHORS",
    "Lcg",
    "LiquidityDataPoint",
    "LiquiditySeries",
    "MONTHLY_PHASES",
    "MonthlyPhase",
    "TimeRange",
    "bracket",
    "build_liquidity_series",
    "exp_interp",
    "generate",
    "interpolate",
    "load_series",
    "select_range",
    "simulate_months",
    "snapshot_at",
    "validate_anchors",
    "validate_phases",
]
