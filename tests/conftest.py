"""
Pytest configuration and shared fixtures for denominator tests.

Usage:
    @pytest.fixture functions are automatically available to all tests.
    Import helpers from conftest when needed.
"""
import sys
from pathlib import Path

import pytest


def pytest_configure():
    """
    Ensure the repo root is on sys.path for the flat-layout package (`denominator`).
    This keeps tests runnable without requiring an editable install.
    """
    root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(root))


# =============================================================================
# Anchor / Phase Fixtures
# =============================================================================

@pytest.fixture
def anchors_1913_1920():
    """The 1913 and 1920 anchors with nothing in between."""
    from denominator.liquidity.anchors import HISTORICAL_ANCHORS

    by_year = {a.year: a for a in HISTORICAL_ANCHORS}
    return (by_year[1913], by_year[1920])


@pytest.fixture
def flat_phases():
    """Two phases following a 1920 anchor: constant growth, no noise, no jitter."""
    from denominator.liquidity.models import MonthlyPhase

    return (
        MonthlyPhase(year=1921, name="steady", growth={"m2_us": 0.01, "fed_bs": -0.005}, tga_target=0.002, rrp_target=0.0, noise=0.0, jitter=0.0),
        MonthlyPhase(year=1922, name="flat", growth={}, tga_target=0.001, rrp_target=0.0, noise=0.0, jitter=0.0),
    )


# =============================================================================
# Series Fixtures
# =============================================================================

@pytest.fixture(scope="session")
def canonical_points():
    """The full hybrid series (annual 1913-2019, monthly 2020-2025) with the default seed."""
    from denominator.liquidity.series import generate

    return generate()


@pytest.fixture(scope="session")
def canonical_series(canonical_points):
    from denominator.liquidity.series import LiquiditySeries

    return LiquiditySeries(points=canonical_points)


@pytest.fixture(scope="session")
def annual_series():
    from denominator.liquidity.series import LiquiditySeries, generate

    return LiquiditySeries(points=generate(phases=()))


# =============================================================================
# Test Data Helpers
# =============================================================================

def rounding_tolerance(point, terms: int) -> float:
    """
    Worst-case drift between a sum of `terms` rounded components and the rounded sum.

    Components and totals are rounded independently at emission (3 decimals on
    annual rows, 2 on monthly rows), so each contributes up to half a unit.
    """
    decimals = 3 if point.month is None else 2
    return (terms + 1) * 0.5 * 10 ** -decimals + 1e-9
