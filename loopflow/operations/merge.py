"""
Merging nearby anchors into wider anchors
"""

import numpy as np
import pandas as pd

from ..core.cleanup import cleanup, subset_loops
from ..core.exceptions import InvalidArgument
from ..core.loops import Loops
from ..core.reindex import overlap_translation, translate_interactions
from ..genomics.intervals import merge_by_gap
from ..utils import get_logger, log_execution_time

logger = get_logger(__name__)


@log_execution_time
def merge_anchors(loops: Loops, merge_gap: int, retain_self_loops: bool = False) -> Loops:
    """
    Combine anchors within merge_gap bp of each other

    Loops that land on the same (left, right) pair of merged anchors are
    collapsed into one row whose counts are the per-sample sums. Left/right
    order is kept as translated, so (a, b) and (b, a) stay separate rows.
    Row metadata is replaced by a single ``loopWidth`` column: the right
    merged-anchor midpoint minus the left one, truncated to an integer.
    This is a signed difference, not an absolute distance, so loops written
    right to left get a width of 0 instead of a positive value.

    Args:
        loops: Loops whose anchors will be merged
        merge_gap: Largest gap in bp between two anchors that still merge
        retain_self_loops: Keep loops whose merged anchors are identical

    Returns:
        Loops over the merged anchors, sorted by (left, right)
    """
    if isinstance(merge_gap, bool) or not isinstance(merge_gap, (int, np.integer)):
        raise InvalidArgument(f"merge_gap must be an integer, got {merge_gap!r}")
    if merge_gap < 0:
        raise InvalidArgument(f"merge_gap must be non-negative, got {merge_gap}")

    if len(loops) == 0:
        return cleanup(loops)

    merged_anchors = merge_by_gap(loops.anchors, int(merge_gap))
    translation = overlap_translation(loops.anchors, merged_anchors)
    result = translate_interactions(loops.interactions, translation)

    counts = loops.counts[result.keep].reset_index(drop=True)
    left = result.interactions[:, 0]
    right = result.interactions[:, 1]

    summed = counts.groupby([left, right], sort=True).sum()
    pairs = summed.index.to_frame(index=False).to_numpy(dtype=np.int64)
    summed = summed.reset_index(drop=True)

    midpoints = (
        merged_anchors["start"].to_numpy() + merged_anchors["end"].to_numpy()
    ) / 2
    widths = midpoints[pairs[:, 1]] - midpoints[pairs[:, 0]]
    widths[widths < 0] = 0
    row_data = pd.DataFrame({"loopWidth": widths.astype(np.int64)})

    merged = Loops(
        anchors=merged_anchors,
        interactions=pairs,
        counts=summed,
        col_data=loops.col_data,
        row_data=row_data,
    )

    logger.info(
        f"Merged {loops.n_anchors} anchors into {len(merged_anchors)} "
        f"(gap <= {merge_gap} bp); {len(loops)} loops collapsed into {len(merged)}"
    )

    if retain_self_loops:
        return cleanup(merged)

    not_self = merged.interactions[:, 0] != merged.interactions[:, 1]
    n_self = int((~not_self).sum())
    if n_self:
        logger.info(f"Removing {n_self} self loops created by merging")

    return subset_loops(merged, not_self)
