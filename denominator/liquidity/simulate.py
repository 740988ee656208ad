"""
Month-level simulation for the era after the last anchor.

State carries forward multiplicatively: each simulated field is the prior
month's value times (1 + phase growth + noise). TGA and RRP are drawn around
the phase's target level instead of compounding.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Sequence

from denominator.liquidity.models import SIMULATED_FIELDS, MonthlyPhase

logger = logging.getLogger(__name__)


@dataclass
class Lcg:
    """
    32-bit linear-congruential generator (Numerical Recipes constants).

    Kept explicit rather than using a process-wide random source so that the
    simulation is reproducible and can be driven directly from tests.
    """

    state: int

    A = 1664525
    C = 1013904223
    M = 2**32

    def __post_init__(self) -> None:
        self.state = int(self.state) % self.M

    def next_uint(self) -> int:
        self.state = (self.A * self.state + self.C) % self.M
        return self.state

    def random(self) -> float:
        """Uniform float in [0, 1)."""
        return self.next_uint() / self.M

    def uniform(self, low: float, high: float) -> float:
        return low + (high - low) * self.random()


def phase_seed(seed: int, year: int) -> int:
    """Seed for one phase: depends only on the run seed and the phase year."""
    return (int(seed) * 31 + int(year)) % Lcg.M


@dataclass(frozen=True)
class SimulatedMonth:
    year: int
    month: int
    phase: str
    levels: dict[str, float]


def simulate_months(
    start: dict[str, float],
    phases: Sequence[MonthlyPhase],
    *,
    seed: int,
) -> Iterator[SimulatedMonth]:
    """
    Yield twelve months per phase, starting from `start` (the last anchor's levels).

    Every phase gets a fresh generator from `phase_seed(seed, phase.year)`, so the
    draws inside one phase never depend on how many numbers earlier phases used.
    """
    state = {f: float(start[f]) for f in SIMULATED_FIELDS}

    for phase in phases:
        rng = Lcg(phase_seed(seed, phase.year))
        logger.debug("Simulating %s (%s) seed=%s", phase.year, phase.name, rng.state)
        for month in range(1, 13):
            for f in SIMULATED_FIELDS:
                noise = rng.uniform(-phase.noise, phase.noise)
                state[f] = max(state[f] * (1.0 + phase.rate(f) + noise), 0.0)
            tga = phase.tga_target * (1.0 + rng.uniform(-phase.jitter, phase.jitter))
            rrp = phase.rrp_target * (1.0 + rng.uniform(-phase.jitter, phase.jitter))
            levels = dict(state)
            levels["tga"] = tga
            levels["rrp"] = rrp
            yield SimulatedMonth(year=phase.year, month=month, phase=phase.name, levels=levels)
