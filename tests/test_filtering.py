"""Tests for chromosome, width and count filters."""

import numpy as np
import pytest

from loopflow import (InvalidArgument, filter_loops, interchromosomal,
                      intrachromosomal, loop_widths)

from .conftest import anchor_tuples, assert_valid


def _loop_ids(loops):
    return loops.row_data["loop_id"].tolist()


class TestChromosomeFilters:
    def test_intrachromosomal(self, sample_loops):
        intra = intrachromosomal(sample_loops)
        assert _loop_ids(intra) == ["L0", "L1", "L3", "L4", "L5", "L6"]
        assert intra.n_anchors == 6
        assert_valid(intra)

    def test_interchromosomal(self, sample_loops):
        inter = interchromosomal(sample_loops)
        assert _loop_ids(inter) == ["L2"]
        assert anchor_tuples(inter) == [("chr1", 1000, 2000), ("chr2", 5000, 6000)]
        assert_valid(inter)

    def test_partition(self, sample_loops):
        assert len(intrachromosomal(sample_loops)) + len(
            interchromosomal(sample_loops)
        ) == len(sample_loops)

    def test_no_interchromosomal_loops(self, scenario_loops):
        only_intra = intrachromosomal(scenario_loops.take([0]))
        assert len(interchromosomal(only_intra)) == 0


class TestWidths:
    def test_loop_widths(self, sample_loops):
        widths = loop_widths(sample_loops)
        assert widths[0] == 9000
        assert widths[6] == 47950
        assert np.isnan(widths[2])

    def test_min_width(self, sample_loops):
        assert _loop_ids(filter_loops(sample_loops, min_width=10000)) == [
            "L1",
            "L2",
            "L3",
            "L4",
            "L5",
            "L6",
        ]

    def test_max_width(self, sample_loops):
        assert _loop_ids(filter_loops(sample_loops, max_width=20000)) == ["L0", "L2", "L4"]

    def test_bad_range(self, sample_loops):
        with pytest.raises(InvalidArgument):
            filter_loops(sample_loops, min_width=10, max_width=5)


class TestCountFilter:
    def test_min_count_in_samples(self, sample_loops):
        filtered = filter_loops(sample_loops, min_count=2, min_samples=2)
        assert _loop_ids(filtered) == ["L1", "L3", "L5"]
        assert_valid(filtered)

    def test_no_options_keeps_all_loops(self, sample_loops):
        assert len(filter_loops(sample_loops)) == len(sample_loops)

    def test_bad_min_samples(self, sample_loops):
        with pytest.raises(InvalidArgument):
            filter_loops(sample_loops, min_count=1, min_samples=0)
