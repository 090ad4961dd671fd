"""Coarse growth trend from recent vs. prior posting volume.

recent = last 7 days, prior = days 8-30. The growing and declining ratios
leave a wide "stable" band between them.
"""

import operator
from collections.abc import Callable

from src.core.config import TrendConfig
from src.core.schemas import TimelineStats, Trend

# (label, comparison, ratio attribute) evaluated in order; first hit wins.
_TREND_RULES: list[tuple[Trend, Callable[[float, float], bool], str]] = [
    ("growing", operator.gt, "growing_ratio"),
    ("declining", operator.lt, "declining_ratio"),
]


def estimate_trend(timeline: TimelineStats, config: TrendConfig | None = None) -> Trend:
    config = config or TrendConfig()
    recent = timeline.last_7_days
    prior = timeline.last_30_days - timeline.last_7_days
    for label, compare, ratio_attr in _TREND_RULES:
        if compare(recent, prior * getattr(config, ratio_attr)):
            return label
    return "stable"
