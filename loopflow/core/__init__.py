"""
Core loops data model for LoopFlow

The Loops container, the anchor reindexing engine every transformation is
built on, anchor cleanup, and the configured processor.
"""

from .exceptions import (ConfigurationError, InvalidArgument,
                         InvariantViolation, LoopFlowError)
from .loops import Loops
from .reindex import (UNMAPPED, ReindexResult, identity_translation,
                      overlap_translation, reindex_loops,
                      translate_interactions)
from .cleanup import cleanup, subset_loops
from .pipeline import DEFAULT_STEPS, LoopProcessor, StepRecord

__all__ = [
    "Loops",
    "LoopFlowError",
    "InvariantViolation",
    "InvalidArgument",
    "ConfigurationError",
    "UNMAPPED",
    "ReindexResult",
    "identity_translation",
    "overlap_translation",
    "translate_interactions",
    "reindex_loops",
    "cleanup",
    "subset_loops",
    "LoopProcessor",
    "StepRecord",
    "DEFAULT_STEPS",
]
