from .models import ChangePolicy, MetricData
from .scorecards import METRIC_DEFS, cagr, latest_metrics, yoy

__all__ = [
    "ChangePolicy",
    "METRIC_DEFS",
    "MetricData",
    "cagr",
    "latest_metrics",
    "yoy",
]
