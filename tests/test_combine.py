"""Tests for combining loops objects."""

import numpy as np
import pandas as pd
import pandas.testing as pdt
import pytest

from loopflow import InvalidArgument, Loops, union_loops

from .conftest import assert_valid, loop_coordinates


class TestUnionLoops:
    def test_union_with_self(self, sample_loops):
        combined = union_loops(sample_loops, sample_loops)
        assert len(combined) == len(sample_loops)
        assert combined.n_anchors == 6
        assert loop_coordinates(combined) == loop_coordinates(sample_loops)
        assert_valid(combined)

    def test_disjoint_parts(self, sample_loops):
        combined = union_loops(sample_loops.take([0, 1]), sample_loops.take([4]))
        assert combined.row_data["loop_id"].tolist() == ["L0", "L1", "L4"]
        assert combined.n_anchors == 6
        assert_valid(combined)

    def test_first_operand_wins(self, sample_loops):
        first = sample_loops.take([0])
        second = Loops(
            anchors=first.anchors,
            interactions=first.interactions,
            counts=pd.DataFrame({"a": [100], "b": [100], "c": [100]}),
            col_data=first.col_data,
            row_data=pd.DataFrame({"loop_id": ["other"], "score": [0.0]}),
        )
        combined = union_loops(first, second)
        assert len(combined) == 1
        assert combined.counts.iloc[0].tolist() == [4, 0, 1]
        assert combined.row_data.loc[0, "loop_id"] == "L0"

    def test_different_samples(self, sample_loops):
        with pytest.raises(InvalidArgument):
            union_loops(sample_loops, sample_loops.select_samples(["a", "b"]))

    def test_row_data_aligned_by_name(self, sample_loops):
        first = sample_loops.take([0])
        second = sample_loops.take([4]).with_row_data({"extra": [1.5]})
        combined = union_loops(first, second)

        expected = pd.DataFrame(
            {"loop_id": ["L0", "L4"], "score": [0.9, 0.5], "extra": [np.nan, 1.5]}
        )
        pdt.assert_frame_equal(combined.row_data, expected)
