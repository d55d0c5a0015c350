"""
Genomic interval helpers: coercion, overlap queries and merging by gap

Intervals are treated as closed, so two intervals that share an end
coordinate overlap. Overlap and merge kernels come from bioframe and are
applied one chromosome at a time.
"""

import re
from typing import Any, Iterable, Tuple

import numpy as np
import pandas as pd
from bioframe.core import arrops

from ..core.exceptions import InvalidArgument
from ..utils import ANCHOR_COLUMNS, get_logger, validate_interval_frame

logger = get_logger(__name__)

_REGION_PATTERN = re.compile(r"^\s*([^:\s]+):([\d,]+)-([\d,]+)\s*$")

_COLUMN_ALIASES = {
    "chr": "chrom",
    "chromosome": "chrom",
    "seqnames": "chrom",
}


def empty_intervals() -> pd.DataFrame:
    """An interval frame with no rows and the standard columns"""
    return pd.DataFrame(
        {
            "chrom": pd.Series([], dtype=object),
            "start": pd.Series([], dtype=np.int64),
            "end": pd.Series([], dtype=np.int64),
        }
    )


def parse_region(region: str) -> Tuple[str, int, int]:
    """
    Parse a region string such as chr1:36000000-36100000

    Args:
        region: Region string, thousands separators allowed

    Returns:
        Tuple of (chrom, start, end)
    """
    match = _REGION_PATTERN.match(region)
    if match is None:
        raise InvalidArgument(f"Cannot parse region '{region}'")

    chrom, start, end = match.groups()
    start = int(start.replace(",", ""))
    end = int(end.replace(",", ""))

    if start > end:
        raise InvalidArgument(f"Region '{region}' has start > end")

    return chrom, start, end


def as_intervals(region: Any) -> pd.DataFrame:
    """
    Coerce one or more genomic intervals into a chrom/start/end frame

    Accepts a DataFrame, a region string, a (chrom, start, end) tuple,
    or an iterable mixing the last two.
    """
    if isinstance(region, pd.DataFrame):
        frame = region.rename(columns=_COLUMN_ALIASES)
        issues = validate_interval_frame(frame, label="region")
        if issues:
            raise InvalidArgument("; ".join(issues))
        frame = frame[ANCHOR_COLUMNS].reset_index(drop=True)
        return frame.astype({"chrom": str, "start": np.int64, "end": np.int64})

    if isinstance(region, str):
        records = [parse_region(region)]
    elif _is_interval_tuple(region):
        records = [tuple(region)]
    elif isinstance(region, Iterable):
        records = []
        for item in region:
            if isinstance(item, str):
                records.append(parse_region(item))
            elif _is_interval_tuple(item):
                records.append(tuple(item))
            else:
                raise InvalidArgument(f"Cannot interpret {item!r} as a genomic interval")
    else:
        raise InvalidArgument(f"Cannot interpret {region!r} as genomic intervals")

    if not records:
        return empty_intervals()

    frame = pd.DataFrame(records, columns=ANCHOR_COLUMNS)
    frame["chrom"] = frame["chrom"].astype(str)
    issues = validate_interval_frame(frame, label="region")
    if issues:
        raise InvalidArgument("; ".join(issues))

    return frame.astype({"start": np.int64, "end": np.int64})


def _is_interval_tuple(item: Any) -> bool:
    return (
        isinstance(item, (tuple, list))
        and len(item) == 3
        and isinstance(item[0], str)
        and all(isinstance(v, (int, np.integer)) for v in item[1:])
    )


def overlap_pairs(query: pd.DataFrame, subject: pd.DataFrame) -> np.ndarray:
    """
    Find every overlapping (query row, subject row) pair

    Args:
        query: Interval frame
        subject: Interval frame

    Returns:
        int64 array of shape (K, 2) sorted by query row, then subject row
    """
    subject_groups = subject.groupby("chrom", sort=False).indices
    pairs = []

    for chrom, query_idx in query.groupby("chrom", sort=False).indices.items():
        subject_idx = subject_groups.get(chrom)
        if subject_idx is None:
            continue

        query_ids, subject_ids = arrops.overlap_intervals(
            query["start"].to_numpy()[query_idx],
            query["end"].to_numpy()[query_idx],
            subject["start"].to_numpy()[subject_idx],
            subject["end"].to_numpy()[subject_idx],
            closed=True,
        )
        if len(query_ids) > 0:
            pairs.append(
                np.column_stack(
                    [
                        query_idx[np.asarray(query_ids, dtype=np.int64)],
                        subject_idx[np.asarray(subject_ids, dtype=np.int64)],
                    ]
                )
            )

    if not pairs:
        return np.empty((0, 2), dtype=np.int64)

    pairs = np.concatenate(pairs).astype(np.int64)
    order = np.lexsort((pairs[:, 1], pairs[:, 0]))
    return pairs[order]


def overlaps_any(query: pd.DataFrame, subject: pd.DataFrame) -> np.ndarray:
    """Boolean mask over query rows that overlap at least one subject row"""
    mask = np.zeros(len(query), dtype=bool)
    pairs = overlap_pairs(query, subject)
    mask[pairs[:, 0]] = True
    return mask


def merge_by_gap(intervals: pd.DataFrame, max_gap: int = 0) -> pd.DataFrame:
    """
    Merge intervals on the same chromosome whose gap is at most max_gap

    The gap between two intervals is the start of the later one minus the
    end of the earlier one. Output is sorted by chromosome name, then start.
    """
    if max_gap < 0:
        raise InvalidArgument(f"Merge gap must be non-negative, got {max_gap}")

    merged = []
    chroms = intervals["chrom"].to_numpy()

    for chrom in sorted(pd.unique(chroms)):
        idx = np.flatnonzero(chroms == chrom)
        _, starts, ends = arrops.merge_intervals(
            intervals["start"].to_numpy()[idx],
            intervals["end"].to_numpy()[idx],
            min_dist=max_gap,
        )
        merged.append(pd.DataFrame({"chrom": chrom, "start": starts, "end": ends}))

    if not merged:
        return empty_intervals()

    result = pd.concat(merged, ignore_index=True)
    logger.debug(
        f"Merged {len(intervals)} intervals into {len(result)} (gap <= {max_gap} bp)"
    )
    return result.astype({"chrom": object, "start": np.int64, "end": np.int64})
