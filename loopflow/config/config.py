"""
Core configuration management for LoopFlow
"""

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from ..core.exceptions import ConfigurationError, InvalidArgument
from ..genomics.intervals import as_intervals

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
CHROMOSOME_MODES = ["all", "intra", "inter"]


@dataclass
class Config:
    """Main configuration class for LoopFlow processing"""

    # General settings
    project_name: str = "LoopFlow_Analysis"

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    use_colors: bool = True

    # Processing steps
    processing: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Fill in processing defaults for keys not given"""
        defaults = self._get_default_processing()
        defaults.update(self.processing or {})
        self.processing = defaults

    def _get_default_processing(self) -> Dict[str, Any]:
        """Default processing configuration"""
        return {
            "remove_regions": [],
            "subset_regions": [],
            "anchors_required": 2,
            "chromosomes": "all",
            "merge_gap": None,
            "retain_self_loops": False,
            "min_width": None,
            "max_width": None,
            "min_count": None,
            "min_samples": 1,
        }


def load_config(config_file: Union[str, Path]) -> Config:
    """Load configuration from YAML or JSON file"""
    config_path = Path(config_file)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    logger.info(f"Loading configuration from {config_path}")

    with open(config_path, "r") as f:
        try:
            if config_path.suffix.lower() in [".yaml", ".yml"]:
                config_dict = yaml.safe_load(f)
            elif config_path.suffix.lower() == ".json":
                config_dict = json.load(f)
            else:
                raise ConfigurationError(
                    f"Unsupported config file format: {config_path.suffix}"
                )
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot parse {config_path}: {e}") from e

    if config_dict is None:
        config_dict = {}
    if not isinstance(config_dict, dict):
        raise ConfigurationError(f"Configuration in {config_path} must be a mapping")

    try:
        return Config(**config_dict)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration keys in {config_path}: {e}") from e


def config_to_dict(config: Config) -> Dict[str, Any]:
    """Plain-dict form of a Config, suitable for YAML or JSON"""
    return asdict(config)


def save_config(config: Config, output_file: Union[str, Path]) -> None:
    """Save configuration to a YAML or JSON file, chosen by suffix"""
    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    config_dict = config_to_dict(config)

    with open(output_path, "w") as f:
        if output_path.suffix.lower() == ".json":
            json.dump(config_dict, f, indent=2)
        else:
            yaml.dump(config_dict, f, default_flow_style=False, indent=2)

    logger.info(f"Configuration saved to {output_path}")


def validate_config(config: Config) -> List[str]:
    """Validate configuration and return list of issues"""
    issues = []

    if str(config.log_level).upper() not in LOG_LEVELS:
        issues.append(f"Unknown log level: {config.log_level}")

    processing = config.processing
    known_keys = set(config._get_default_processing())
    unknown_keys = sorted(set(processing) - known_keys)
    if unknown_keys:
        issues.append(f"Unknown processing options: {unknown_keys}")

    if processing.get("anchors_required") not in (1, 2) or isinstance(
        processing.get("anchors_required"), bool
    ):
        issues.append("anchors_required must be 1 or 2")

    if processing.get("chromosomes") not in CHROMOSOME_MODES:
        issues.append(f"chromosomes must be one of {CHROMOSOME_MODES}")

    merge_gap = processing.get("merge_gap")
    if merge_gap is not None and (
        isinstance(merge_gap, bool) or not isinstance(merge_gap, int) or merge_gap < 0
    ):
        issues.append("merge_gap must be a non-negative integer or null")

    min_width = processing.get("min_width")
    max_width = processing.get("max_width")
    if min_width is not None and max_width is not None and min_width > max_width:
        issues.append("min_width must not exceed max_width")

    min_samples = processing.get("min_samples")
    if not isinstance(min_samples, int) or min_samples < 1:
        issues.append("min_samples must be a positive integer")

    for key in ["remove_regions", "subset_regions"]:
        regions = processing.get(key) or []
        try:
            as_intervals(regions)
        except InvalidArgument as e:
            issues.append(f"{key}: {e}")

    return issues


def get_default_config() -> Config:
    """Get default configuration object"""
    return Config()
