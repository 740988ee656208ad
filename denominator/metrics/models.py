from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ChangePolicy(str, Enum):
    # Compound annual growth from the first row to the last row.
    CAGR = "cagr"
    # Simple change vs the row exactly one year earlier.
    YOY = "yoy"


class MetricData(BaseModel):
    """One scorecard: latest value plus its change under the active policy."""

    model_config = ConfigDict(frozen=True)

    value: float
    change: float
    label: str
    unit: str = ""
    policy: ChangePolicy = ChangePolicy.CAGR
