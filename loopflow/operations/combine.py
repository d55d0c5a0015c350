"""
Combining two loops objects over the same samples
"""

import numpy as np
import pandas as pd

from ..core.cleanup import cleanup
from ..core.exceptions import InvalidArgument
from ..core.loops import Loops
from ..utils import ANCHOR_COLUMNS, get_logger

logger = get_logger(__name__)


def union_loops(first: Loops, second: Loops) -> Loops:
    """
    Union of two Loops with identical samples

    Anchors with identical coordinates are shared. A loop present in both
    inputs, after anchors are shared, is kept once with the counts and
    annotations of ``first``.
    """
    if first.samples != second.samples:
        raise InvalidArgument(
            f"Cannot combine loops over different samples: "
            f"{first.samples} vs {second.samples}"
        )

    anchors = pd.concat([first.anchors, second.anchors], ignore_index=True)
    group_ids = anchors.groupby(ANCHOR_COLUMNS, sort=False).ngroup().to_numpy()
    shared_anchors = anchors[~anchors.duplicated(subset=ANCHOR_COLUMNS)].reset_index(
        drop=True
    )

    interactions = np.vstack(
        [first.interactions, second.interactions + first.n_anchors]
    ).astype(np.int64)
    interactions = group_ids[interactions].reshape(-1, 2)

    keep = ~pd.DataFrame(interactions).duplicated().to_numpy()

    counts = pd.concat([first.counts, second.counts], ignore_index=True)
    row_data = pd.concat([first.row_data, second.row_data], ignore_index=True, sort=False)

    combined = Loops(
        anchors=shared_anchors,
        interactions=interactions[keep],
        counts=counts[keep],
        col_data=first.col_data,
        row_data=row_data[keep],
    )

    logger.info(
        f"Union of {len(first)} and {len(second)} loops: {len(combined)} distinct loops"
    )
    return cleanup(combined)
