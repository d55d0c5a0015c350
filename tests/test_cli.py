"""Tests for the command line interface."""

from click.testing import CliRunner

from loopflow.cli import main


class TestCli:
    def test_info(self):
        result = CliRunner().invoke(main, ["info"])
        assert result.exit_code == 0
        assert "LoopFlow v" in result.output

    def test_init_and_validate(self, tmp_path):
        runner = CliRunner()
        path = tmp_path / "config.yaml"

        result = runner.invoke(main, ["init-config", str(path)])
        assert result.exit_code == 0
        assert path.exists()

        result = runner.invoke(main, ["validate-config", str(path)])
        assert result.exit_code == 0
        assert "valid" in result.output

    def test_init_refuses_overwrite(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{}")
        result = CliRunner().invoke(main, ["init-config", str(path), "--format", "json"])
        assert result.exit_code != 0

    def test_validate_bad_config(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("processing:\n  chromosomes: sideways\n")
        result = CliRunner().invoke(main, ["validate-config", str(path)])
        assert result.exit_code == 1
