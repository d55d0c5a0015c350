"""
Flat per-loop views of a Loops object
"""

import numpy as np
import pandas as pd

from ..core.loops import Loops
from ..utils import get_logger

logger = get_logger(__name__)

# Padding on either side of a loop for genome browser coordinates
REGION_PADDING = 25000


def _suffixed_anchors(loops: Loops, side: str, suffix: str) -> pd.DataFrame:
    anchors = loops.anchor_frame(side).rename(columns={"chrom": "chr"})
    anchors.columns = [f"{col}_{suffix}" for col in anchors.columns]
    return anchors


def summarize(loops: Loops) -> pd.DataFrame:
    """
    Link anchors and interactions back together into one table

    Each row holds the left anchor (columns suffixed ``_1``), the right
    anchor (suffixed ``_2``), the per-sample counts, the row metadata and a
    ``region`` string padding the loop by 25 kb on either side, ready for a
    genome browser.

    Args:
        loops: Loops to summarize

    Returns:
        DataFrame with one row per loop
    """
    frame = pd.concat(
        [
            _suffixed_anchors(loops, "left", "1"),
            _suffixed_anchors(loops, "right", "2"),
            loops.counts.reset_index(drop=True),
            loops.row_data.reset_index(drop=True),
        ],
        axis=1,
    )

    chroms = frame["chr_1"].astype(str)
    region = (
        chroms
        + ":"
        + (frame["start_1"] - REGION_PADDING).astype(str)
        + "-"
        + (frame["end_2"] + REGION_PADDING).astype(str)
    )
    frame["region"] = np.where(chroms.str.startswith("chr"), region, "chr" + region)

    return frame


def num_anchors(loops: Loops) -> pd.DataFrame:
    """
    Number of distinct anchors supporting each sample

    An anchor supports a sample when it is an endpoint of at least one loop
    with a nonzero count in that sample.

    Returns:
        One-row DataFrame with one column per sample
    """
    values = {}

    for sample in loops.samples:
        supported = loops.counts[sample].to_numpy() != 0
        values[sample] = len(np.unique(loops.interactions[supported].ravel()))

    logger.debug(f"Anchors per sample: {values}")
    return pd.DataFrame([values], columns=loops.samples)
