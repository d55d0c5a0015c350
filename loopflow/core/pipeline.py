"""
Configured multi-step loops processing
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import pandas as pd

from ..config import Config, load_config, validate_config
from ..operations import (filter_loops, interchromosomal, intrachromosomal,
                          merge_anchors, remove_region, subset_region)
from ..utils import get_logger, setup_logging
from .exceptions import ConfigurationError, InvalidArgument
from .loops import Loops

logger = get_logger(__name__)

DEFAULT_STEPS = [
    "remove_regions",
    "subset_regions",
    "chromosomes",
    "merge_anchors",
    "filter",
]


@dataclass
class StepRecord:
    """What one processing step did"""

    step: str
    applied: bool
    loops_before: int
    loops_after: int
    anchors_after: int
    execution_time: float


class LoopProcessor:
    """
    Apply the processing steps described by a configuration to loops

    Steps run in a fixed order: region removal, region subsetting,
    chromosome filtering, anchor merging, then width/count filtering.
    Steps whose options are unset are skipped.
    """

    def __init__(
        self,
        config: Union[str, Path, Config, Dict[str, Any], None] = None,
        configure_logging: bool = False,
    ):
        """
        Initialize the processor

        Args:
            config: Configuration file path, Config object, config dict,
                or None for defaults
            configure_logging: Set up logging from the configuration
        """
        if config is None:
            self.config = Config()
        elif isinstance(config, (str, Path)):
            self.config = load_config(config)
        elif isinstance(config, dict):
            self.config = Config(**config)
        elif isinstance(config, Config):
            self.config = config
        else:
            raise ConfigurationError(
                "Invalid config type. Expected str, Path, dict, or Config object"
            )

        if configure_logging:
            setup_logging(
                level=self.config.log_level,
                log_file=self.config.log_file,
                use_colors=self.config.use_colors,
            )

        issues = validate_config(self.config)
        if issues:
            raise ConfigurationError("; ".join(issues))

        self.params = self.config.processing
        self.records: List[StepRecord] = []

    def process(self, loops: Loops, steps: Optional[List[str]] = None) -> Loops:
        """
        Run the configured steps on a Loops object

        Args:
            loops: Input loops
            steps: Subset of DEFAULT_STEPS to consider, in any order;
                they always run in the default order

        Returns:
            Processed Loops
        """
        if steps is None:
            steps = DEFAULT_STEPS

        unknown = [step for step in steps if step not in DEFAULT_STEPS]
        if unknown:
            raise InvalidArgument(f"Unknown processing steps: {unknown}")

        logger.info(f"Processing {loops!r} for project {self.config.project_name}")
        self.records = []

        for step in DEFAULT_STEPS:
            if step not in steps:
                continue

            step_start = time.time()
            loops_before = len(loops)
            result = getattr(self, f"_run_{step}")(loops)
            applied = result is not None
            if applied:
                loops = result
            else:
                logger.debug(f"Skipping {step}: not configured")

            self.records.append(
                StepRecord(
                    step=step,
                    applied=applied,
                    loops_before=loops_before,
                    loops_after=len(loops),
                    anchors_after=loops.n_anchors,
                    execution_time=time.time() - step_start,
                )
            )

        logger.info(f"Processing finished: {loops!r}")
        return loops

    def _run_remove_regions(self, loops: Loops) -> Optional[Loops]:
        regions = self.params.get("remove_regions")
        if not regions:
            return None
        return remove_region(loops, regions)

    def _run_subset_regions(self, loops: Loops) -> Optional[Loops]:
        regions = self.params.get("subset_regions")
        if not regions:
            return None
        return subset_region(loops, regions, self.params.get("anchors_required", 2))

    def _run_chromosomes(self, loops: Loops) -> Optional[Loops]:
        mode = self.params.get("chromosomes", "all")
        if mode == "intra":
            return intrachromosomal(loops)
        if mode == "inter":
            return interchromosomal(loops)
        return None

    def _run_merge_anchors(self, loops: Loops) -> Optional[Loops]:
        merge_gap = self.params.get("merge_gap")
        if merge_gap is None:
            return None
        return merge_anchors(
            loops, merge_gap, retain_self_loops=self.params.get("retain_self_loops", False)
        )

    def _run_filter(self, loops: Loops) -> Optional[Loops]:
        options = {
            key: self.params.get(key)
            for key in ["min_width", "max_width", "min_count"]
        }
        if all(value is None for value in options.values()):
            return None
        return filter_loops(loops, min_samples=self.params.get("min_samples", 1), **options)

    def summary_table(self) -> pd.DataFrame:
        """Per-step record of the last run as a DataFrame"""
        columns = [
            "step",
            "applied",
            "loops_before",
            "loops_after",
            "anchors_after",
            "execution_time",
        ]
        return pd.DataFrame([vars(record) for record in self.records], columns=columns)
