"""Tests for configuration loading, saving and validation."""

import json

import pytest
import yaml

from loopflow import ConfigurationError
from loopflow.config import (Config, get_default_config, load_config,
                             save_config, validate_config)


class TestConfig:
    def test_defaults(self):
        config = get_default_config()
        assert config.project_name == "LoopFlow_Analysis"
        assert config.processing["anchors_required"] == 2
        assert config.processing["chromosomes"] == "all"
        assert config.processing["merge_gap"] is None
        assert validate_config(config) == []

    def test_partial_processing_is_merged(self):
        config = Config(processing={"merge_gap": 500})
        assert config.processing["merge_gap"] == 500
        assert config.processing["min_samples"] == 1

    @pytest.mark.parametrize("suffix", [".yaml", ".json"])
    def test_save_and_load(self, tmp_path, suffix):
        config = Config(
            project_name="naive_vs_primed",
            processing={"remove_regions": ["chr1:0-1000"], "chromosomes": "intra"},
        )
        path = tmp_path / f"config{suffix}"
        save_config(config, path)
        loaded = load_config(path)
        assert loaded.project_name == "naive_vs_primed"
        assert loaded.processing == config.processing

    def test_yaml_regions_as_lists(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            yaml.dump({"processing": {"subset_regions": [["chr1", 0, 5000]]}})
        )
        assert validate_config(load_config(path)) == []


class TestLoadErrors:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "config.txt"
        path.write_text("project_name: x\n")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"not_an_option": 1}))
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_bad_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("processing: [unclosed\n")
        with pytest.raises(ConfigurationError):
            load_config(path)


class TestValidateConfig:
    @pytest.mark.parametrize(
        "processing",
        [
            {"anchors_required": 3},
            {"chromosomes": "both"},
            {"merge_gap": -1},
            {"merge_gap": 1.5},
            {"min_width": 10, "max_width": 5},
            {"min_samples": 0},
            {"remove_regions": ["chr1:500-100"]},
            {"unknown_step": True},
        ],
    )
    def test_issues(self, processing):
        assert len(validate_config(Config(processing=processing))) == 1

    def test_bad_log_level(self):
        assert validate_config(Config(log_level="LOUD"))
