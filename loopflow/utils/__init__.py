"""
Utility functions for LoopFlow
"""

from .logging import get_logger, log_execution_time, setup_logging
from .validation import (ANCHOR_COLUMNS, validate_interval_frame,
                         validate_python_packages)

__all__ = [
    "setup_logging",
    "get_logger",
    "log_execution_time",
    "ANCHOR_COLUMNS",
    "validate_interval_frame",
    "validate_python_packages",
]
