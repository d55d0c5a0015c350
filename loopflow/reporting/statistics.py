"""
Quality metrics for loops objects
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

import numpy as np

from ..core.loops import Loops
from ..operations.filtering import loop_widths
from ..utils import get_logger

logger = get_logger(__name__)


@dataclass
class LoopStatistics:
    """Descriptive metrics for one Loops object"""

    num_loops: int
    num_anchors: int
    num_samples: int

    # Chromosome distribution
    intra_chromosomal: int = 0
    inter_chromosomal: int = 0
    self_loops: int = 0

    # Width statistics (intrachromosomal loops only)
    mean_width: Optional[float] = None
    median_width: Optional[float] = None
    min_width: Optional[float] = None
    max_width: Optional[float] = None

    total_counts: Dict[str, float] = field(default_factory=dict)

    def __post_init__(self):
        if self.num_loops > 0:
            self.intra_chromosomal_fraction = self.intra_chromosomal / self.num_loops
            self.inter_chromosomal_fraction = self.inter_chromosomal / self.num_loops
        else:
            self.intra_chromosomal_fraction = 0.0
            self.inter_chromosomal_fraction = 0.0


def loop_statistics(loops: Loops) -> LoopStatistics:
    """Compute LoopStatistics for a Loops object"""
    widths = loop_widths(loops).to_numpy()
    intra_widths = widths[~np.isnan(widths)]
    n_intra = len(intra_widths)

    width_stats = {}
    if n_intra > 0:
        width_stats = {
            "mean_width": float(np.mean(intra_widths)),
            "median_width": float(np.median(intra_widths)),
            "min_width": float(np.min(intra_widths)),
            "max_width": float(np.max(intra_widths)),
        }

    stats = LoopStatistics(
        num_loops=len(loops),
        num_anchors=loops.n_anchors,
        num_samples=loops.n_samples,
        intra_chromosomal=n_intra,
        inter_chromosomal=len(loops) - n_intra,
        self_loops=int((loops.interactions[:, 0] == loops.interactions[:, 1]).sum()),
        total_counts={
            str(sample): float(total) for sample, total in loops.counts.sum().items()
        },
        **width_stats,
    )

    logger.debug(
        f"{stats.num_loops} loops: {stats.intra_chromosomal} intra, "
        f"{stats.inter_chromosomal} inter"
    )
    return stats
