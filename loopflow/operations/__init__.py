"""
Loops operations for LoopFlow

Each operation takes a Loops object and returns a new one:
- Anchor merging within a gap
- Region subsetting and removal
- Chromosome, width and count filters
- Union of two loops objects
"""

from .combine import union_loops
from .filtering import filter_loops, interchromosomal, intrachromosomal, loop_widths
from .merge import merge_anchors
from .regions import remove_region, subset_region

__all__ = [
    "merge_anchors",
    "subset_region",
    "remove_region",
    "intrachromosomal",
    "interchromosomal",
    "filter_loops",
    "loop_widths",
    "union_loops",
]
