"""
Monthly growth phases for the simulated era (2020 onward).

Each calendar year maps to one named phase. Rates are per month and roughly
calibrated so that twelve compounded months land near the year-end figures
published for that year; TGA and RRP follow a target level with jitter.
"""
from __future__ import annotations

from denominator.liquidity.models import MonthlyPhase


MONTHLY_PHASES: tuple[MonthlyPhase, ...] = (
    MonthlyPhase(
        year=2020,
        name="covid_qe",
        growth={
            "m2_us": 0.0185, "m2_eu": 0.0102, "m2_japan": 0.0066, "m2_china": 0.0126,
            "fed_bs": 0.0472, "ecb_bs": 0.0332, "boj_bs": 0.0165, "pboc_bs": 0.0056,
            "gold_usd": 0.0187, "sp500": 0.0126, "m2v": -0.0196,
            "realestate_mcap": 0.0072, "bonds_mcap": 0.0089, "equities_mcap": 0.0146,
            "bitcoin_mcap": 0.1187, "gold_stock_t": 0.0013,
        },
        tga_target=1.600,
        rrp_target=0.000,
    ),
    MonthlyPhase(
        year=2021,
        name="peak_stimulus",
        growth={
            "m2_us": 0.0103, "m2_eu": 0.0065, "m2_japan": 0.0039, "m2_china": 0.0098,
            "fed_bs": 0.0144, "ecb_bs": 0.0172, "boj_bs": 0.0060, "pboc_bs": 0.0039,
            "gold_usd": -0.0031, "sp500": 0.0199, "m2v": -0.0007,
            "realestate_mcap": 0.0080, "bonds_mcap": 0.0013, "equities_mcap": 0.0131,
            "bitcoin_mcap": 0.0407, "gold_stock_t": 0.0013,
        },
        tga_target=0.450,
        rrp_target=1.900,
    ),
    MonthlyPhase(
        year=2022,
        name="tightening",
        growth={
            "m2_us": -0.0016, "m2_eu": -0.0043, "m2_japan": -0.0047, "m2_china": 0.0045,
            "fed_bs": -0.0029, "ecb_bs": -0.0060, "boj_bs": 0.0023, "pboc_bs": -0.0026,
            "gold_usd": -0.0002, "sp500": -0.0180, "m2v": 0.0064,
            "realestate_mcap": 0.0045, "bonds_mcap": -0.0013, "equities_mcap": -0.0171,
            "bitcoin_mcap": -0.0843, "gold_stock_t": 0.0013,
        },
        tga_target=0.500,
        rrp_target=2.200,
    ),
    MonthlyPhase(
        year=2023,
        name="qt_rrp_drain",
        growth={
            "m2_us": -0.0016, "m2_eu": -0.0039, "m2_japan": -0.0016, "m2_china": 0.0053,
            "fed_bs": -0.0082, "ecb_bs": -0.0111, "boj_bs": 0.0011, "pboc_bs": 0.0026,
            "gold_usd": 0.0103, "sp500": 0.0181, "m2v": 0.0060,
            "realestate_mcap": -0.0002, "bonds_mcap": 0.0032, "equities_mcap": 0.0079,
            "bitcoin_mcap": 0.0794, "gold_stock_t": 0.0013,
        },
        tga_target=0.750,
        rrp_target=0.700,
    ),
    MonthlyPhase(
        year=2024,
        name="pivot_whispers",
        growth={
            "m2_us": 0.0028, "m2_eu": 0.0017, "m2_japan": -0.0017, "m2_china": 0.0050,
            "fed_bs": -0.0068, "ecb_bs": -0.0062, "boj_bs": 0.0011, "pboc_bs": 0.0062,
            "gold_usd": 0.0201, "sp500": 0.0175, "m2v": 0.0044,
            "realestate_mcap": 0.0013, "bonds_mcap": 0.0049, "equities_mcap": 0.0092,
            "bitcoin_mcap": 0.0668, "gold_stock_t": 0.0013,
        },
        tga_target=0.800,
        rrp_target=0.400,
    ),
    MonthlyPhase(
        year=2025,
        name="re_expansion",
        growth={
            "m2_us": 0.0030, "m2_eu": 0.0022, "m2_japan": 0.0017, "m2_china": 0.0047,
            "fed_bs": -0.0012, "ecb_bs": -0.0026, "boj_bs": 0.0022, "pboc_bs": 0.0058,
            "gold_usd": 0.0069, "sp500": 0.0080, "m2v": 0.0012,
            "realestate_mcap": 0.0017, "bonds_mcap": 0.0052, "equities_mcap": 0.0101,
            "bitcoin_mcap": -0.0046, "gold_stock_t": 0.0013,
        },
        tga_target=0.700,
        rrp_target=0.300,
    ),
)
