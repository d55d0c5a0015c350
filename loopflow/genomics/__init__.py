"""
Genomic interval module for LoopFlow

Interval coercion, overlap queries and gap merging used by every
anchor-changing loops operation.
"""

from .intervals import (as_intervals, empty_intervals, merge_by_gap,
                        overlap_pairs, overlaps_any, parse_region)

__all__ = [
    "as_intervals",
    "empty_intervals",
    "merge_by_gap",
    "overlap_pairs",
    "overlaps_any",
    "parse_region",
]
