from __future__ import annotations

from typing import Sequence

from denominator.liquidity.models import BASE_FIELDS, EPSILON_FIELDS, AnnualSnapshot


EPSILON = 0.0001

# Instruments that did not exist before these years are exactly zero there.
INCEPTION_YEARS = {
    "rrp": 1980,
    "bitcoin_mcap": 2009,
}


def exp_interp(v1: float, v2: float, t: float) -> float:
    """
    Compound-growth interpolation: v1 * (v2 / v1) ** t for t in [0, 1].

    Monetary aggregates span several orders of magnitude over the horizon, so a
    constant compounded rate between anchors is a far better fit than a line.
    """
    return v1 * (v2 / v1) ** t


def floored_exp_interp(v1: float, v2: float, t: float, eps: float = EPSILON) -> float:
    """Exponential interpolation for series that can be zero (TGA, RRP, bitcoin)."""
    if v1 <= 0 and v2 <= 0:
        return 0.0
    return exp_interp(max(v1, eps), max(v2, eps), t)


def interpolate(a: AnnualSnapshot, b: AnnualSnapshot, year: int) -> AnnualSnapshot:
    """Snapshot for `year` between anchors `a` and `b` (a.year <= year <= b.year)."""
    if not a.year <= year <= b.year or a.year == b.year:
        raise ValueError(f"Year {year} is not bracketed by anchors {a.year}..{b.year}")

    t = (year - a.year) / (b.year - a.year)
    out: dict[str, float] = {}
    for f in BASE_FIELDS:
        v1 = float(getattr(a, f))
        v2 = float(getattr(b, f))
        if f in EPSILON_FIELDS:
            out[f] = floored_exp_interp(v1, v2, t)
        else:
            out[f] = exp_interp(v1, v2, t)

    for f, first_year in INCEPTION_YEARS.items():
        if year < first_year:
            out[f] = 0.0

    return AnnualSnapshot(year=year, **out)


def bracket(anchors: Sequence[AnnualSnapshot], year: int) -> tuple[AnnualSnapshot, AnnualSnapshot]:
    """Return the first anchor pair (a, b) with a.year <= year <= b.year."""
    if len(anchors) < 2:
        raise ValueError("Need at least two anchors to bracket a year")
    for i in range(len(anchors) - 1):
        a, b = anchors[i], anchors[i + 1]
        if a.year <= year <= b.year:
            return a, b
    raise ValueError(f"Year {year} is outside the anchor range {anchors[0].year}..{anchors[-1].year}")


def snapshot_at(anchors: Sequence[AnnualSnapshot], year: int) -> AnnualSnapshot:
    """
    Realized snapshot for `year`.

    Exact anchor years return the anchor itself so known points never drift.
    """
    for a in anchors:
        if a.year == year:
            return a
    a, b = bracket(anchors, year)
    return interpolate(a, b, year)
