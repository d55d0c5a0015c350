"""
Reporting module for LoopFlow

Flattened per-loop tables, per-sample anchor support and descriptive
loop metrics.
"""

from .statistics import LoopStatistics, loop_statistics
from .summary import REGION_PADDING, num_anchors, summarize

__all__ = [
    "summarize",
    "num_anchors",
    "REGION_PADDING",
    "LoopStatistics",
    "loop_statistics",
]
