"""
Region-based subsetting and removal of loops
"""

from typing import Any

import numpy as np

from ..core.cleanup import subset_loops
from ..core.exceptions import InvalidArgument
from ..core.loops import Loops
from ..core.reindex import identity_translation, reindex_loops, translate_interactions
from ..genomics.intervals import as_intervals, overlaps_any
from ..utils import get_logger

logger = get_logger(__name__)


def subset_region(loops: Loops, region: Any, anchors_required: int = 2) -> Loops:
    """
    Extract loops whose anchors fall in a region

    With ``anchors_required=2`` (default) both anchors must overlap the
    region, and the anchor index is cut down to the anchors overlapping it.
    With ``anchors_required=1`` exactly one anchor must overlap the region
    (exclusive or); both anchors of each surviving loop are kept. The union
    of the two results gives loops with one or both anchors in the region.

    Args:
        loops: Loops to subset
        region: Region string, (chrom, start, end) tuple, list of those, or
            a chrom/start/end DataFrame
        anchors_required: 1 or 2

    Returns:
        New Loops restricted to the region
    """
    if isinstance(anchors_required, bool) or anchors_required not in (1, 2):
        raise InvalidArgument("Please specify either 1 or 2 anchors in region")

    region = as_intervals(region)
    in_region = np.flatnonzero(overlaps_any(loops.anchors, region))
    translation = identity_translation(loops.n_anchors, in_region)

    if anchors_required == 2:
        subset = reindex_loops(loops, loops.anchors.iloc[in_region], translation)
    else:
        result = translate_interactions(loops.interactions, translation, anchors_required=1)
        subset = subset_loops(loops, result.keep)

    logger.info(
        f"Region subset ({anchors_required} anchor(s) required): "
        f"{len(loops)} -> {len(subset)} loops"
    )
    return subset


def remove_region(loops: Loops, region: Any) -> Loops:
    """
    Drop every loop with an anchor touching a region

    The anchor index keeps only anchors that do not overlap the region.

    Args:
        loops: Loops to filter
        region: Region string, (chrom, start, end) tuple, list of those, or
            a chrom/start/end DataFrame

    Returns:
        New Loops with no anchor in the region
    """
    region = as_intervals(region)
    outside = np.flatnonzero(~overlaps_any(loops.anchors, region))
    translation = identity_translation(loops.n_anchors, outside)

    remaining = reindex_loops(loops, loops.anchors.iloc[outside], translation)

    logger.info(f"Region removal: {len(loops)} -> {len(remaining)} loops")
    return remaining
