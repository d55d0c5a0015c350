"""Shared fixtures for LoopFlow tests."""

import numpy as np
import pandas as pd
import pytest

from loopflow import Loops


@pytest.fixture
def scenario_loops():
    """Three anchors, two loops: A:100-200, A:210-300, B:50-100."""
    anchors = pd.DataFrame(
        {"chrom": ["A", "A", "B"], "start": [100, 210, 50], "end": [200, 300, 100]}
    )
    counts = pd.DataFrame({"s1": [5, 3], "s2": [2, 7]})
    col_data = pd.DataFrame({"group": ["naive", "primed"]}, index=["s1", "s2"])
    return Loops(
        anchors=anchors,
        interactions=np.array([[0, 1], [0, 2]]),
        counts=counts,
        col_data=col_data,
    )


@pytest.fixture
def sample_loops():
    """
    Seven loops over three samples.

    Anchor 6 is referenced by no loop; L2 is the only interchromosomal
    loop; L6 runs right to left.
    """
    anchors = pd.DataFrame(
        {
            "chrom": ["chr1", "chr1", "chr1", "chr1", "chr2", "chr2", "chr1"],
            "start": [1000, 2100, 10000, 50000, 5000, 20000, 90000],
            "end": [2000, 3000, 11000, 51000, 6000, 21000, 91000],
        }
    )
    interactions = np.array(
        [[0, 2], [1, 3], [0, 4], [2, 3], [4, 5], [0, 3], [3, 1]]
    )
    counts = pd.DataFrame(
        {
            "a": [4, 2, 1, 0, 6, 1, 1],
            "b": [0, 3, 1, 5, 0, 2, 1],
            "c": [1, 0, 1, 2, 0, 3, 1],
        }
    )
    col_data = pd.DataFrame({"group": ["x", "x", "y"]}, index=["a", "b", "c"])
    row_data = pd.DataFrame(
        {
            "loop_id": [f"L{i}" for i in range(7)],
            "score": [0.9, 0.8, 0.7, 0.6, 0.5, 0.4, 0.3],
        }
    )
    return Loops(
        anchors=anchors,
        interactions=interactions,
        counts=counts,
        col_data=col_data,
        row_data=row_data,
    )


def assert_valid(loops):
    """Check the alignment and index invariants of a Loops object."""
    assert len(loops.interactions) == len(loops.counts) == len(loops.row_data)
    assert loops.counts.shape[1] == len(loops.col_data)
    assert list(loops.counts.columns) == list(loops.col_data.index)
    if len(loops) > 0:
        assert loops.interactions.min() >= 0
        assert loops.interactions.max() < loops.n_anchors


def anchor_tuples(loops):
    """Anchor coordinates as a list of (chrom, start, end) tuples."""
    return list(
        loops.anchors[["chrom", "start", "end"]].itertuples(index=False, name=None)
    )


def loop_coordinates(loops):
    """Set of ((chrom, start, end), (chrom, start, end)) per loop."""
    anchors = anchor_tuples(loops)
    return {(anchors[left], anchors[right]) for left, right in loops.interactions}
