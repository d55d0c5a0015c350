"""
Anchor index maintenance: dropping unused anchors and subsetting loops
"""

import numpy as np

from ..utils import ANCHOR_COLUMNS, get_logger
from .loops import Loops, Selector
from .reindex import UNMAPPED, reindex_loops

logger = get_logger(__name__)


def cleanup(loops: Loops) -> Loops:
    """
    Remove anchors no loop refers to and compact the anchor index

    Kept anchors stay in their original relative order. Anchors with
    identical coordinates collapse onto the first of them. A Loops with no
    interactions becomes the canonical empty instance.
    """
    if len(loops) == 0:
        logger.info("Creating empty loops object")
        return Loops.empty(loops.col_data)

    used = np.unique(loops.interactions.ravel())
    kept = loops.anchors.iloc[used].reset_index(drop=True)

    group_ids = kept.groupby(ANCHOR_COLUMNS, sort=False).ngroup().to_numpy()
    new_anchors = kept[~kept.duplicated(subset=ANCHOR_COLUMNS)].reset_index(drop=True)

    translation = np.full(loops.n_anchors, UNMAPPED, dtype=np.int64)
    translation[used] = group_ids

    n_removed = loops.n_anchors - len(new_anchors)
    if n_removed:
        logger.debug(f"Cleanup removed {n_removed} unused or duplicate anchors")

    return reindex_loops(loops, new_anchors, translation)


def subset_loops(loops: Loops, selector: Selector) -> Loops:
    """
    Keep the selected loops and drop the anchors they no longer use

    Args:
        loops: Loops to subset
        selector: Boolean mask over loops or integer loop positions

    Returns:
        Cleaned-up Loops holding only the selected loops
    """
    return cleanup(loops.take(selector))
