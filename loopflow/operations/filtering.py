"""
Loop filters: chromosome partition, loop width and count support
"""

from typing import Optional

import numpy as np
import pandas as pd

from ..core.cleanup import subset_loops
from ..core.exceptions import InvalidArgument
from ..core.loops import Loops
from ..utils import get_logger

logger = get_logger(__name__)


def _same_chromosome(loops: Loops) -> np.ndarray:
    chroms = loops.anchors["chrom"].to_numpy()
    return chroms[loops.interactions[:, 0]] == chroms[loops.interactions[:, 1]]


def intrachromosomal(loops: Loops) -> Loops:
    """Keep loops whose two anchors lie on the same chromosome"""
    mask = _same_chromosome(loops)
    logger.info(f"Intrachromosomal filter: {len(loops)} -> {int(mask.sum())} loops")
    return subset_loops(loops, mask)


def interchromosomal(loops: Loops) -> Loops:
    """Keep loops whose two anchors lie on different chromosomes"""
    mask = ~_same_chromosome(loops)
    logger.info(f"Interchromosomal filter: {len(loops)} -> {int(mask.sum())} loops")
    return subset_loops(loops, mask)


def loop_widths(loops: Loops) -> pd.Series:
    """
    Midpoint-to-midpoint distance of every loop

    Interchromosomal loops have no width and get NaN.
    """
    starts = loops.anchors["start"].to_numpy()
    ends = loops.anchors["end"].to_numpy()
    midpoints = (starts + ends) / 2

    left = loops.interactions[:, 0]
    right = loops.interactions[:, 1]
    widths = np.abs(midpoints[right] - midpoints[left])
    widths[~_same_chromosome(loops)] = np.nan

    return pd.Series(widths, name="width", dtype=float)


def filter_loops(
    loops: Loops,
    min_width: Optional[float] = None,
    max_width: Optional[float] = None,
    min_count: Optional[float] = None,
    min_samples: int = 1,
) -> Loops:
    """
    Filter loops by width and count support

    Width limits apply to intrachromosomal loops only; interchromosomal
    loops always pass them. With min_count set, a loop must have at least
    min_count reads in at least min_samples samples.

    Args:
        loops: Loops to filter
        min_width: Minimum loop width in bp
        max_width: Maximum loop width in bp
        min_count: Minimum count per supporting sample
        min_samples: Number of samples that must reach min_count

    Returns:
        Filtered Loops
    """
    if min_width is not None and max_width is not None and min_width > max_width:
        raise InvalidArgument(f"min_width {min_width} exceeds max_width {max_width}")
    if min_samples < 1:
        raise InvalidArgument(f"min_samples must be at least 1, got {min_samples}")

    keep = np.ones(len(loops), dtype=bool)

    if min_width is not None or max_width is not None:
        widths = loop_widths(loops).to_numpy()
        intra = ~np.isnan(widths)
        if min_width is not None:
            keep &= ~intra | (widths >= min_width)
        if max_width is not None:
            keep &= ~intra | (widths <= max_width)

    if min_count is not None:
        supported = (loops.counts.to_numpy() >= min_count).sum(axis=1)
        keep &= supported >= min_samples

    logger.info(f"Loop filter: {len(loops)} -> {int(keep.sum())} loops")
    return subset_loops(loops, keep)
