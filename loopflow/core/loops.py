"""
The Loops container: anchors, interactions, counts and metadata

Anchors are kept in one frame and referenced by position; each loop is a
(left, right) pair of anchor positions. Counts and row metadata are aligned
row-for-row with the interactions, and counts columns are aligned with the
sample rows of the column metadata.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from ..utils import ANCHOR_COLUMNS, get_logger, validate_interval_frame
from .exceptions import InvalidArgument, InvariantViolation

logger = get_logger(__name__)

Selector = Union[np.ndarray, pd.Series, Sequence[bool], Sequence[int]]


class Loops:
    """
    Paired-anchor chromatin loops across one or more samples

    Instances are never modified in place; every transformation returns a
    new ``Loops``. Treat the frames and arrays exposed by the properties as
    read-only.

    Args:
        anchors: DataFrame with ``chrom``, ``start``, ``end`` columns and
            optional anchor annotation columns
        interactions: (M, 2) integer array of anchor positions
        counts: (M, S) DataFrame or array of per-sample counts
        col_data: DataFrame indexed by sample name, one row per sample.
            Derived from the counts columns when omitted.
        row_data: Optional DataFrame with M rows of per-loop annotations
    """

    def __init__(
        self,
        anchors: pd.DataFrame,
        interactions: Any,
        counts: Union[pd.DataFrame, np.ndarray],
        col_data: Optional[pd.DataFrame] = None,
        row_data: Optional[pd.DataFrame] = None,
    ):
        self._anchors = self._prepare_anchors(anchors)
        self._interactions = self._prepare_interactions(interactions)
        self._col_data = self._prepare_col_data(col_data, counts)
        self._counts = self._prepare_counts(counts)
        self._row_data = self._prepare_row_data(row_data)

        self._check_alignment()

    # ------------------------------------------------------------------
    # Construction and validation
    # ------------------------------------------------------------------

    @staticmethod
    def _prepare_anchors(anchors: pd.DataFrame) -> pd.DataFrame:
        if not isinstance(anchors, pd.DataFrame):
            raise InvariantViolation("anchors must be a pandas DataFrame")

        issues = validate_interval_frame(anchors, label="anchors")
        if issues:
            raise InvariantViolation("; ".join(issues))

        anchors = anchors.reset_index(drop=True)
        anchors = anchors.astype({"chrom": object, "start": np.int64, "end": np.int64})
        other_columns = [c for c in anchors.columns if c not in ANCHOR_COLUMNS]
        return anchors[ANCHOR_COLUMNS + other_columns]

    @staticmethod
    def _prepare_interactions(interactions: Any) -> np.ndarray:
        interactions = np.asarray(interactions)

        if interactions.size == 0:
            interactions = interactions.reshape(0, 2)

        if interactions.ndim != 2 or interactions.shape[1] != 2:
            raise InvariantViolation(
                f"interactions must have shape (M, 2), got {interactions.shape}"
            )

        if interactions.size > 0 and not np.issubdtype(interactions.dtype, np.integer):
            raise InvariantViolation("interactions must hold integer anchor positions")

        interactions = interactions.astype(np.int64, copy=True)
        interactions.setflags(write=False)
        return interactions

    @staticmethod
    def _prepare_col_data(
        col_data: Optional[pd.DataFrame], counts: Union[pd.DataFrame, np.ndarray]
    ) -> pd.DataFrame:
        if col_data is None:
            if not isinstance(counts, pd.DataFrame):
                raise InvariantViolation(
                    "col_data is required when counts has no sample column names"
                )
            col_data = pd.DataFrame(index=pd.Index(counts.columns, name="sample"))

        if not isinstance(col_data, pd.DataFrame):
            raise InvariantViolation("col_data must be a pandas DataFrame")

        if not col_data.index.is_unique:
            raise InvariantViolation("sample names in col_data must be unique")

        return col_data.copy()

    def _prepare_counts(self, counts: Union[pd.DataFrame, np.ndarray]) -> pd.DataFrame:
        samples = self._col_data.index

        if isinstance(counts, pd.DataFrame):
            if len(counts.columns) != len(samples):
                raise InvariantViolation(
                    f"counts has {len(counts.columns)} columns but col_data has "
                    f"{len(samples)} samples"
                )
            if list(counts.columns) != list(samples):
                raise InvariantViolation(
                    "counts columns must match col_data sample names in order"
                )
            counts = counts.reset_index(drop=True).copy()
        else:
            values = np.asarray(counts)
            if values.size == 0:
                values = values.reshape(len(self._interactions), len(samples))
            if values.ndim != 2:
                raise InvariantViolation(f"counts must be 2-dimensional, got {values.shape}")
            if values.shape[1] != len(samples):
                raise InvariantViolation(
                    f"counts has {values.shape[1]} columns but col_data has "
                    f"{len(samples)} samples"
                )
            counts = pd.DataFrame(values, columns=list(samples))

        non_numeric = [
            col for col in counts.columns if not pd.api.types.is_numeric_dtype(counts[col])
        ]
        if non_numeric:
            raise InvariantViolation(f"counts columns must be numeric: {non_numeric}")

        return counts

    @staticmethod
    def _prepare_row_data(row_data: Optional[pd.DataFrame]) -> Optional[pd.DataFrame]:
        if row_data is None:
            return None
        if not isinstance(row_data, pd.DataFrame):
            raise InvariantViolation("row_data must be a pandas DataFrame")
        return row_data.reset_index(drop=True).copy()

    def _check_alignment(self) -> None:
        n_loops = len(self._interactions)

        if len(self._counts) != n_loops:
            raise InvariantViolation(
                f"counts has {len(self._counts)} rows for {n_loops} interactions"
            )

        if self._row_data is None:
            self._row_data = pd.DataFrame(index=pd.RangeIndex(n_loops))
        elif len(self._row_data) != n_loops:
            raise InvariantViolation(
                f"row_data has {len(self._row_data)} rows for {n_loops} interactions"
            )

        if n_loops > 0:
            n_anchors = len(self._anchors)
            low = self._interactions.min()
            high = self._interactions.max()
            if low < 0 or high >= n_anchors:
                raise InvariantViolation(
                    f"interaction indices must lie in [0, {n_anchors}), "
                    f"found range [{low}, {high}]"
                )

    @classmethod
    def empty(cls, col_data: pd.DataFrame) -> "Loops":
        """The canonical empty instance for the given samples"""
        anchors = pd.DataFrame(
            {
                "chrom": pd.Series([], dtype=object),
                "start": pd.Series([], dtype=np.int64),
                "end": pd.Series([], dtype=np.int64),
            }
        )
        counts = pd.DataFrame(
            {sample: pd.Series([], dtype=np.int64) for sample in col_data.index},
            columns=list(col_data.index),
        )
        return cls(
            anchors=anchors,
            interactions=np.empty((0, 2), dtype=np.int64),
            counts=counts,
            col_data=col_data,
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def anchors(self) -> pd.DataFrame:
        return self._anchors

    @property
    def interactions(self) -> np.ndarray:
        return self._interactions

    @property
    def counts(self) -> pd.DataFrame:
        return self._counts

    @property
    def row_data(self) -> pd.DataFrame:
        return self._row_data

    @property
    def col_data(self) -> pd.DataFrame:
        return self._col_data

    @property
    def samples(self) -> List[Any]:
        return list(self._col_data.index)

    @property
    def n_anchors(self) -> int:
        return len(self._anchors)

    @property
    def n_samples(self) -> int:
        return len(self._col_data)

    @property
    def shape(self) -> Tuple[int, int, int]:
        """(anchors, interactions, samples)"""
        return self.n_anchors, len(self), self.n_samples

    def __len__(self) -> int:
        return len(self._interactions)

    def __repr__(self) -> str:
        return (
            f"Loops(anchors={self.n_anchors}, interactions={len(self)}, "
            f"samples={self.n_samples})"
        )

    def equals(self, other: "Loops") -> bool:
        """True when every component matches, dtypes included"""
        if not isinstance(other, Loops):
            return False
        return (
            self._anchors.equals(other._anchors)
            and np.array_equal(self._interactions, other._interactions)
            and self._counts.equals(other._counts)
            and self._row_data.equals(other._row_data)
            and self._col_data.equals(other._col_data)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Loops):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def anchor_frame(self, side: str) -> pd.DataFrame:
        """
        Anchor rows of every loop for one side

        Args:
            side: "left" or "right"

        Returns:
            DataFrame with one row per loop, in loop order
        """
        if side not in ("left", "right"):
            raise InvalidArgument(f"side must be 'left' or 'right', got {side!r}")

        column = 0 if side == "left" else 1
        return self._anchors.iloc[self._interactions[:, column]].reset_index(drop=True)

    # ------------------------------------------------------------------
    # Row / column selection
    # ------------------------------------------------------------------

    def take(self, selector: Selector) -> "Loops":
        """
        Keep a subset of loops without touching the anchor index

        Args:
            selector: Boolean mask over loops or integer loop positions

        Returns:
            New Loops with counts and row metadata sliced in the same order
        """
        positions = _row_positions(selector, len(self))

        return Loops(
            anchors=self._anchors,
            interactions=self._interactions[positions],
            counts=self._counts.iloc[positions],
            col_data=self._col_data,
            row_data=self._row_data.iloc[positions],
        )

    def select_samples(self, samples: Sequence[Any]) -> "Loops":
        """
        Keep a subset of samples, by name or by position

        Loops are kept even when all of their remaining counts are zero.
        """
        samples = list(samples)
        names = self.samples

        if all(isinstance(s, (int, np.integer)) and not isinstance(s, bool) for s in samples):
            if any(s < 0 or s >= len(names) for s in samples):
                raise InvalidArgument(f"Sample positions out of range: {samples}")
            selected = [names[s] for s in samples]
        else:
            unknown = [s for s in samples if s not in names]
            if unknown:
                raise InvalidArgument(f"Unknown samples: {unknown}")
            selected = samples

        return Loops(
            anchors=self._anchors,
            interactions=self._interactions,
            counts=self._counts[selected],
            col_data=self._col_data.loc[selected],
            row_data=self._row_data,
        )

    def with_row_data(
        self, data: Union[pd.DataFrame, Dict[str, Any]], replace: bool = False
    ) -> "Loops":
        """
        Attach per-loop annotations, such as statistics from a model fit

        Args:
            data: DataFrame or mapping of column name to M values
            replace: Drop the existing row metadata instead of extending it

        Returns:
            New Loops with the updated row metadata
        """
        new_columns = pd.DataFrame(data)
        if len(new_columns) != len(self):
            raise InvariantViolation(
                f"row data has {len(new_columns)} rows for {len(self)} interactions"
            )
        new_columns = new_columns.reset_index(drop=True)

        if replace:
            row_data = new_columns
        else:
            row_data = self._row_data.copy()
            for column in new_columns.columns:
                row_data[column] = new_columns[column].to_numpy()

        return Loops(
            anchors=self._anchors,
            interactions=self._interactions,
            counts=self._counts,
            col_data=self._col_data,
            row_data=row_data,
        )


def _row_positions(selector: Selector, n_rows: int) -> np.ndarray:
    """Turn a boolean mask or position list into integer row positions"""
    selector = np.asarray(selector)

    if selector.dtype == bool:
        if selector.shape != (n_rows,):
            raise InvalidArgument(
                f"Boolean selector has length {len(selector)}, expected {n_rows}"
            )
        return np.flatnonzero(selector)

    if selector.size == 0:
        return np.empty(0, dtype=np.int64)

    if not np.issubdtype(selector.dtype, np.integer):
        raise InvalidArgument("Selector must be a boolean mask or integer positions")

    positions = selector.astype(np.int64).ravel()
    if positions.min() < 0 or positions.max() >= n_rows:
        raise InvalidArgument(f"Loop positions must lie in [0, {n_rows})")

    return positions
