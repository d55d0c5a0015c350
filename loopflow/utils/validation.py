"""
Validation utilities for LoopFlow
"""

import importlib
import logging
from typing import Dict, List

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

ANCHOR_COLUMNS = ["chrom", "start", "end"]


def validate_python_packages(packages: List[str]) -> Dict[str, bool]:
    """
    Check if Python packages are available

    Args:
        packages: List of package names

    Returns:
        Dictionary mapping package names to availability status
    """
    results = {}

    for package in packages:
        try:
            importlib.import_module(package)
            results[package] = True
            logger.debug(f"Package {package}: available")
        except ImportError:
            results[package] = False
            logger.debug(f"Package {package}: not available")

    return results


def validate_interval_frame(intervals: pd.DataFrame, label: str = "anchors") -> List[str]:
    """
    Check a chrom/start/end frame for missing columns and bad coordinates

    Args:
        intervals: DataFrame of genomic intervals
        label: Name used in issue messages

    Returns:
        List of issues found (empty when the frame is usable)
    """
    missing = [col for col in ANCHOR_COLUMNS if col not in intervals.columns]
    if missing:
        return [f"{label} missing required columns: {missing}"]

    issues = []

    if intervals["chrom"].isna().any():
        issues.append(f"{label} contain missing chromosome names")

    for col in ["start", "end"]:
        if not pd.api.types.is_integer_dtype(intervals[col]):
            issues.append(f"{label} column '{col}' must hold integer coordinates")

    if issues:
        return issues

    starts = intervals["start"].to_numpy()
    ends = intervals["end"].to_numpy()

    if (starts < 0).any():
        issues.append(f"{label} contain negative start coordinates")

    bad = np.flatnonzero(starts > ends)
    if len(bad) > 0:
        issues.append(f"{label} have start > end at rows {bad[:5].tolist()}")

    return issues
