"""Tests for genomic interval helpers."""

import numpy as np
import pandas as pd
import pytest

from loopflow import InvalidArgument
from loopflow.genomics import (as_intervals, merge_by_gap, overlap_pairs,
                               overlaps_any, parse_region)


def _frame(records):
    return pd.DataFrame(records, columns=["chrom", "start", "end"])


class TestParsing:
    def test_parse_region(self):
        assert parse_region("chr1:36,000,000-36,100,000") == ("chr1", 36000000, 36100000)

    @pytest.mark.parametrize("region", ["chr1", "chr1:200-100", "chr1:a-b"])
    def test_parse_bad_region(self, region):
        with pytest.raises(InvalidArgument):
            parse_region(region)

    def test_as_intervals_forms(self):
        expected = _frame([("chr1", 100, 200), ("chr2", 5, 10)])
        for region in [
            ["chr1:100-200", "chr2:5-10"],
            [("chr1", 100, 200), ("chr2", 5, 10)],
            [["chr1", 100, 200], "chr2:5-10"],
            expected,
        ]:
            result = as_intervals(region)
            assert result[["chrom", "start", "end"]].values.tolist() == expected.values.tolist()

    def test_as_intervals_single(self):
        assert len(as_intervals(("chr1", 1, 2))) == 1
        assert len(as_intervals("chr1:1-2")) == 1

    def test_as_intervals_renames_columns(self):
        frame = pd.DataFrame({"seqnames": ["1"], "start": [1], "end": [5]})
        assert as_intervals(frame).columns.tolist() == ["chrom", "start", "end"]

    def test_as_intervals_empty(self):
        assert len(as_intervals([])) == 0

    def test_as_intervals_rejects_garbage(self):
        with pytest.raises(InvalidArgument):
            as_intervals(42)
        with pytest.raises(InvalidArgument):
            as_intervals([("chr1", 1)])


class TestOverlap:
    def test_pairs_sorted_and_per_chromosome(self):
        query = _frame([("chr1", 100, 500), ("chr2", 100, 200), ("chr1", 600, 700)])
        subject = _frame([("chr1", 300, 400), ("chr1", 100, 200), ("chr2", 150, 160)])
        pairs = overlap_pairs(query, subject)
        assert pairs.tolist() == [[0, 0], [0, 1], [1, 2]]

    def test_identical_disjoint_intervals_pair_with_themselves(self):
        intervals = _frame([("A", 100, 200), ("A", 210, 300)])
        assert overlap_pairs(intervals, intervals).tolist() == [[0, 0], [1, 1]]

    def test_many_query_rows_one_subject_row(self):
        query = _frame([("chr1", 0, 50), ("chr1", 100, 200), ("chr1", 150, 400)])
        subject = _frame([("chr1", 180, 220)])
        assert overlap_pairs(query, subject).tolist() == [[1, 0], [2, 0]]
        assert overlap_pairs(subject, query).tolist() == [[0, 1], [0, 2]]
        assert overlaps_any(query, subject).tolist() == [False, True, True]

    def test_touching_intervals_overlap(self):
        query = _frame([("chr1", 100, 200)])
        subject = _frame([("chr1", 200, 300)])
        assert overlap_pairs(query, subject).tolist() == [[0, 0]]

    def test_no_overlap(self):
        query = _frame([("chr1", 100, 200)])
        subject = _frame([("chr1", 201, 300), ("chr2", 100, 200)])
        assert overlap_pairs(query, subject).shape == (0, 2)
        assert overlaps_any(query, subject).tolist() == [False]


class TestMerge:
    def test_merge_within_gap(self):
        intervals = _frame([("A", 210, 300), ("B", 50, 100), ("A", 100, 200)])
        merged = merge_by_gap(intervals, 20)
        assert merged.values.tolist() == [["A", 100, 300], ["B", 50, 100]]

    def test_gap_boundary(self):
        intervals = _frame([("chr1", 1000, 2000), ("chr1", 2100, 3000)])
        assert len(merge_by_gap(intervals, 100)) == 1
        assert len(merge_by_gap(intervals, 99)) == 2

    def test_contained_interval(self):
        intervals = _frame([("chr1", 100, 1000), ("chr1", 200, 300), ("chr1", 1010, 1100)])
        merged = merge_by_gap(intervals, 5)
        assert merged[["start", "end"]].values.tolist() == [[100, 1000], [1010, 1100]]

    def test_negative_gap(self):
        with pytest.raises(InvalidArgument):
            merge_by_gap(_frame([("chr1", 1, 2)]), -1)

    def test_empty(self):
        merged = merge_by_gap(_frame([]).astype({"start": np.int64, "end": np.int64}), 10)
        assert len(merged) == 0
