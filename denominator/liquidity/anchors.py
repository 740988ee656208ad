"""
Historical anchor snapshots, 1913-2019 (trillions USD unless noted).

Approximate year-end figures. Pre-euro European M2 aggregates the major
economies; pre-modern central-bank balance sheets are estimated from historical
records. Sources: FRED, ECB, BoJ, PBoC, BIS, World Gold Council, Savills,
SIFMA, Siblis Research, CoinMarketCap.

Annual values between anchors are interpolated; months after the last anchor
come from the phase table in `denominator.liquidity.phases`.
"""
from __future__ import annotations

from typing import Sequence

from denominator.liquidity.models import (
    BASE_FIELDS,
    EPSILON_FIELDS,
    AnchorTableError,
    AnnualSnapshot,
    MonthlyPhase,
)


def _anchor(
    year: int,
    m2: tuple[float, float, float, float],
    cb: tuple[float, float, float, float],
    tga: float,
    rrp: float,
    gold_usd: float,
    sp500: float,
    m2v: float,
    mcap: tuple[float, float, float, float],
    gold_stock_t: float,
) -> AnnualSnapshot:
    # m2 / cb: (US, Eurozone, Japan, China); mcap: (real estate, bonds, equities, bitcoin)
    return AnnualSnapshot(
        year=year,
        m2_us=m2[0], m2_eu=m2[1], m2_japan=m2[2], m2_china=m2[3],
        fed_bs=cb[0], ecb_bs=cb[1], boj_bs=cb[2], pboc_bs=cb[3],
        tga=tga,
        rrp=rrp,
        gold_usd=gold_usd,
        sp500=sp500,
        m2v=m2v,
        realestate_mcap=mcap[0], bonds_mcap=mcap[1], equities_mcap=mcap[2], bitcoin_mcap=mcap[3],
        gold_stock_t=gold_stock_t,
    )


HISTORICAL_ANCHORS: tuple[AnnualSnapshot, ...] = (
    # 1913: Fed created, gold standard at $20.67/oz
    _anchor(1913, (0.020, 0.025, 0.003, 0.002), (0.001, 0.002, 0.001, 0.001), 0.001, 0, 20.67, 7.8, 2.05, (0.09, 0.04, 0.03, 0), 30_000),
    # 1918: WWI expansion
    _anchor(1918, (0.035, 0.045, 0.006, 0.003), (0.005, 0.008, 0.002, 0.001), 0.002, 0, 20.67, 7.5, 1.95, (0.12, 0.09, 0.035, 0), 33_000),
    # 1920: post-war deflation
    _anchor(1920, (0.034, 0.050, 0.007, 0.003), (0.006, 0.010, 0.002, 0.001), 0.001, 0, 20.67, 6.8, 2.10, (0.14, 0.09, 0.035, 0), 34_000),
    # 1929: Roaring 20s peak
    _anchor(1929, (0.046, 0.055, 0.010, 0.004), (0.005, 0.008, 0.003, 0.001), 0.001, 0, 20.63, 21.5, 2.00, (0.20, 0.12, 0.12, 0), 38_000),
    # 1933: Depression trough, gold revalued
    _anchor(1933, (0.032, 0.040, 0.009, 0.003), (0.008, 0.006, 0.003, 0.001), 0.002, 0, 26.33, 10.1, 1.60, (0.13, 0.12, 0.05, 0), 40_000),
    # 1940: pre-WWII buildup, gold at $35
    _anchor(1940, (0.055, 0.048, 0.012, 0.004), (0.020, 0.012, 0.005, 0.002), 0.002, 0, 33.85, 10.6, 1.40, (0.16, 0.15, 0.06, 0), 47_000),
    # 1945: WWII peak, Bretton Woods
    _anchor(1945, (0.127, 0.060, 0.020, 0.005), (0.045, 0.018, 0.008, 0.002), 0.025, 0, 34.71, 17.4, 1.15, (0.22, 0.35, 0.10, 0), 51_000),
    # 1950: post-war normalization
    _anchor(1950, (0.150, 0.080, 0.015, 0.006), (0.040, 0.020, 0.006, 0.003), 0.005, 0, 34.72, 20.4, 1.55, (0.35, 0.38, 0.12, 0), 55_000),
    # 1960: post-war boom
    _anchor(1960, (0.312, 0.180, 0.040, 0.012), (0.050, 0.035, 0.012, 0.008), 0.005, 0, 35.27, 58.1, 1.75, (0.80, 0.60, 0.45, 0), 65_000),
    # 1971: Nixon shock, gold leaves the $35 peg
    _anchor(1971, (0.710, 0.400, 0.120, 0.020), (0.075, 0.060, 0.025, 0.012), 0.010, 0, 41.25, 102.1, 1.72, (2.20, 1.40, 1.10, 0), 82_000),
    # 1975: stagflation, free gold market
    _anchor(1975, (1.020, 0.620, 0.210, 0.028), (0.095, 0.080, 0.038, 0.015), 0.012, 0, 161, 90.2, 1.65, (3.80, 2.20, 1.10, 0), 88_000),
    # 1980: Volcker shock
    _anchor(1980, (1.600, 0.950, 0.350, 0.040), (0.150, 0.120, 0.055, 0.020), 0.015, 0, 615, 135.8, 1.85, (8.50, 4.00, 2.80, 0), 94_000),
    # 1985: Reagan expansion, Plaza Accord
    _anchor(1985, (2.500, 1.300, 0.550, 0.065), (0.200, 0.170, 0.085, 0.030), 0.020, 0, 317, 211.3, 1.70, (12.0, 8.00, 4.60, 0), 101_000),
    # 1990: Japan bubble peak, German reunification
    _anchor(1990, (3.280, 2.100, 1.100, 0.150), (0.280, 0.280, 0.180, 0.060), 0.030, 0, 383, 330.2, 1.80, (30.0, 15.0, 9.40, 0), 111_000),
    # 1995: Japan's lost decade, Mexico crisis
    _anchor(1995, (3.640, 2.800, 1.350, 0.700), (0.400, 0.350, 0.350, 0.150), 0.030, 0, 387, 615.9, 2.05, (38.0, 24.0, 17.7, 0), 122_000),
    # 2000: dot-com peak, gold at a 20-year low
    _anchor(2000, (4.920, 4.500, 2.100, 1.600), (0.620, 0.750, 0.650, 0.450), 0.035, 0, 273, 1320.3, 2.10, (50.0, 33.0, 32.2, 0), 135_000),
    # 2003: post dot-com, Iraq war
    _anchor(2003, (6.070, 5.800, 2.500, 2.800), (0.720, 0.900, 1.000, 0.700), 0.035, 0, 416, 1111.9, 1.90, (70.0, 45.0, 31.3, 0), 142_000),
    # 2007: pre-GFC peak
    _anchor(2007, (7.500, 8.200, 2.800, 5.400), (0.870, 1.500, 1.050, 1.800), 0.040, 0, 836, 1468.4, 1.95, (140.0, 70.0, 65.0, 0), 155_000),
    # 2009: GFC response, QE1; bitcoin genesis block
    _anchor(2009, (8.500, 8.800, 3.000, 8.500), (2.100, 2.000, 1.200, 2.800), 0.100, 0, 1096, 1115.1, 1.72, (150.0, 80.0, 47.0, 0), 162_000),
    # 2012: QE3 "infinity", ECB "whatever it takes"
    _anchor(2012, (10.400, 9.600, 3.400, 15.500), (2.900, 3.000, 1.600, 4.200), 0.080, 0.10, 1675, 1426.2, 1.65, (180.0, 95.0, 54.0, 0.00015), 171_000),
    # 2014: end of QE3, Abenomics
    _anchor(2014, (11.650, 10.500, 7.800, 20.000), (4.500, 2.000, 2.900, 5.000), 0.200, 0.15, 1199, 2058.9, 1.56, (210.0, 100.0, 68.0, 0.0045), 177_000),
    # 2015: ECB QE launch, Fed normalization
    _anchor(2015, (12.300, 10.800, 8.200, 21.500), (4.480, 2.700, 3.400, 5.300), 0.300, 0.20, 1060, 2043.9, 1.52, (217.0, 99.0, 67.0, 0.0065), 181_000),
    # 2016: Brexit, BoJ negative rates
    _anchor(2016, (13.200, 11.400, 8.700, 23.000), (4.450, 3.400, 4.000, 5.500), 0.350, 0.15, 1151, 2238.8, 1.46, (225.0, 102.0, 70.0, 0.0155), 184_000),
    # 2017: synchronized global growth, Fed starts QT
    _anchor(2017, (13.800, 12.400, 9.100, 24.500), (4.400, 4.400, 4.800, 5.800), 0.200, 0.10, 1296, 2673.6, 1.45, (250.0, 110.0, 85.0, 0.237), 187_000),
    # 2018: Fed hiking + QT, trade war
    _anchor(2018, (14.350, 12.800, 9.400, 25.800), (4.100, 4.700, 5.200, 5.600), 0.350, 0.05, 1282, 2506.9, 1.46, (270.0, 110.0, 75.0, 0.065), 190_000),
    # 2019: Fed pivot, repo crisis, rate cuts
    _anchor(2019, (15.300, 13.100, 9.700, 27.500), (4.200, 4.700, 5.500, 5.800), 0.400, 0.00, 1517, 3230.8, 1.43, (300.0, 115.0, 89.0, 0.13), 193_000),
)


def validate_anchors(anchors: Sequence[AnnualSnapshot]) -> None:
    """Fail fast on tables that would produce a silently wrong series."""
    if not anchors:
        raise AnchorTableError("Anchor table is empty")

    prev_year: int | None = None
    for a in anchors:
        if prev_year is not None and a.year <= prev_year:
            raise AnchorTableError(f"Anchor years must be strictly increasing: {prev_year} -> {a.year}")
        prev_year = a.year
        for f in BASE_FIELDS:
            if f in EPSILON_FIELDS:
                continue
            if getattr(a, f) <= 0:
                raise AnchorTableError(f"Anchor {a.year}: {f} must be > 0 for exponential interpolation")


def validate_phases(anchors: Sequence[AnnualSnapshot], phases: Sequence[MonthlyPhase]) -> None:
    """Phases must cover consecutive calendar years starting right after the last anchor."""
    if not phases:
        return
    expected = anchors[-1].year + 1
    for p in phases:
        if p.year != expected:
            raise AnchorTableError(f"Phase years must continue from {expected - 1} without gaps, got {p.year} ({p.name})")
        expected += 1
