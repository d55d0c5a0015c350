"""
Anchor reindexing for loops

Every operation that changes the anchor index goes through the same three
steps: build a translation array from old anchor positions to new ones,
translate both endpoints of every interaction, then slice counts and row
metadata by the resulting keep-mask.
"""

from dataclasses import dataclass

import numpy as np
import pandas as pd

from ..genomics.intervals import overlap_pairs
from ..utils import get_logger
from .exceptions import InvalidArgument, InvariantViolation
from .loops import Loops

logger = get_logger(__name__)

UNMAPPED = -1


@dataclass
class ReindexResult:
    """Translated interactions for the kept loops plus the keep-mask over old loops"""

    interactions: np.ndarray
    keep: np.ndarray

    @property
    def n_kept(self) -> int:
        return int(self.keep.sum())

    @property
    def n_dropped(self) -> int:
        return int(len(self.keep) - self.keep.sum())


def identity_translation(n_old: int, positions) -> np.ndarray:
    """
    Translation for a new index made of old anchors picked by position

    Args:
        n_old: Number of anchors in the old index
        positions: Old positions, in the order they appear in the new index

    Returns:
        Array of length n_old holding the new position or UNMAPPED
    """
    positions = np.asarray(positions, dtype=np.int64).ravel()

    if len(positions) > 0 and (positions.min() < 0 or positions.max() >= n_old):
        raise InvalidArgument(f"Anchor positions must lie in [0, {n_old})")
    if len(np.unique(positions)) != len(positions):
        raise InvalidArgument("Anchor positions must not repeat")

    translation = np.full(n_old, UNMAPPED, dtype=np.int64)
    translation[positions] = np.arange(len(positions), dtype=np.int64)
    return translation


def overlap_translation(old_anchors: pd.DataFrame, new_anchors: pd.DataFrame) -> np.ndarray:
    """
    Translation by interval overlap

    An old anchor overlapping several new anchors maps to the first of them
    in new-index order; one overlapping none stays UNMAPPED.
    """
    translation = np.full(len(old_anchors), UNMAPPED, dtype=np.int64)
    pairs = overlap_pairs(old_anchors, new_anchors)

    if len(pairs) == 0:
        return translation

    first = np.ones(len(pairs), dtype=bool)
    first[1:] = pairs[1:, 0] != pairs[:-1, 0]
    translation[pairs[first, 0]] = pairs[first, 1]

    n_ties = int((~first).sum())
    if n_ties:
        logger.debug(f"{n_ties} extra overlaps resolved to the first new anchor")

    return translation


def translate_interactions(
    interactions: np.ndarray, translation: np.ndarray, anchors_required: int = 2
) -> ReindexResult:
    """
    Rewrite interaction endpoints through a translation array

    Args:
        interactions: (M, 2) array of old anchor positions
        translation: Old position -> new position or UNMAPPED
        anchors_required: 2 keeps loops whose endpoints both map;
            1 keeps loops where exactly one endpoint maps, leaving
            UNMAPPED in place of the other

    Returns:
        ReindexResult with translated interactions of the kept loops
    """
    if isinstance(anchors_required, bool) or anchors_required not in (1, 2):
        raise InvalidArgument(
            f"anchors_required must be 1 or 2, got {anchors_required!r}"
        )

    interactions = np.asarray(interactions, dtype=np.int64).reshape(-1, 2)
    translated = translation[interactions]
    mapped = translated != UNMAPPED

    if anchors_required == 2:
        keep = mapped[:, 0] & mapped[:, 1]
    else:
        keep = mapped[:, 0] ^ mapped[:, 1]

    return ReindexResult(interactions=translated[keep], keep=keep)


def reindex_loops(loops: Loops, new_anchors: pd.DataFrame, translation: np.ndarray) -> Loops:
    """
    Move loops onto a new anchor index

    Loops with an endpoint missing from the new index are dropped, and
    counts and row metadata follow the surviving loops in order.
    """
    if len(translation) != loops.n_anchors:
        raise InvariantViolation(
            f"translation covers {len(translation)} anchors, loops have {loops.n_anchors}"
        )

    result = translate_interactions(loops.interactions, translation, anchors_required=2)

    if result.n_dropped:
        logger.debug(
            f"Reindexing dropped {result.n_dropped} of {len(loops)} loops "
            f"({loops.n_anchors} -> {len(new_anchors)} anchors)"
        )

    return Loops(
        anchors=new_anchors,
        interactions=result.interactions,
        counts=loops.counts[result.keep],
        col_data=loops.col_data,
        row_data=loops.row_data[result.keep],
    )
