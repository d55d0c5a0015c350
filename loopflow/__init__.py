"""
LoopFlow: manipulation of chromatin loop datasets

LoopFlow bundles paired genomic anchors, per-sample contact counts and
per-loop/per-sample metadata into a single Loops object and offers
set-style operations on it while keeping anchor indices, counts and
annotations aligned.

Main Components:
- Loops container with invariant checks on construction
- Anchor reindexing and cleanup
- Anchor merging, region subsetting/removal, chromosome and count filters
- Per-loop summary tables and per-sample anchor support

Example:
    >>> from loopflow import Loops, merge_anchors, summarize
    >>> merged = merge_anchors(loops, merge_gap=1000)
    >>> table = summarize(merged)
"""

import sys
from importlib import metadata
from typing import Any, Dict

try:
    __version__ = metadata.version("loopflow")
except metadata.PackageNotFoundError:
    __version__ = "0.1.0-dev"

# core must load before genomics and config, which import its exceptions
from .core import (ConfigurationError, InvalidArgument, InvariantViolation,
                   LoopFlowError, LoopProcessor, Loops, cleanup, subset_loops)
from . import config, core, genomics, operations, reporting, utils
from .config import Config, load_config
from .operations import (filter_loops, interchromosomal, intrachromosomal,
                         loop_widths, merge_anchors, remove_region,
                         subset_region, union_loops)
from .reporting import loop_statistics, num_anchors, summarize
from .utils import get_logger, setup_logging, validate_python_packages

__all__ = [
    "__version__",
    "Loops",
    "LoopProcessor",
    "Config",
    "load_config",
    "setup_logging",
    "cleanup",
    "subset_loops",
    "merge_anchors",
    "subset_region",
    "remove_region",
    "intrachromosomal",
    "interchromosomal",
    "filter_loops",
    "loop_widths",
    "union_loops",
    "summarize",
    "num_anchors",
    "loop_statistics",
    "LoopFlowError",
    "InvariantViolation",
    "InvalidArgument",
    "ConfigurationError",
]

MODULES = ["core", "genomics", "operations", "reporting", "config", "utils"]

logger = get_logger(__name__)


def get_info() -> Dict[str, Any]:
    """Get package information."""
    return {
        "name": "LoopFlow",
        "version": __version__,
        "description": "Chromatin loop dataset manipulation",
        "python_version": f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
        "modules": MODULES,
    }


def check_dependencies() -> Dict[str, bool]:
    """Check if key dependencies are available."""
    return validate_python_packages(
        ["numpy", "pandas", "bioframe", "yaml", "click", "colorlog"]
    )
