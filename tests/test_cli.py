# tests/test_cli.py
"""
CLI smoke tests using typer's CliRunner.
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from todo_aggregator.cli import app
from todo_aggregator.config import load_settings
from todo_aggregator.core.paths import AggregatorPaths

runner = CliRunner()


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    (tmp_path / "Inbox.md").write_text("- [ ] Buy milk\n", encoding="utf-8")
    (tmp_path / "templates").mkdir()
    (tmp_path / "templates" / "daily.md").write_text("- [ ] Template task\n", encoding="utf-8")
    return tmp_path


class TestAggregateCommands:
    """`run` and `aggregate` share one code path."""

    @pytest.mark.parametrize("command", ["run", "aggregate"])
    def test_creates_dashboard(self, vault: Path, command: str):
        result = runner.invoke(app, [command, str(vault)])

        assert result.exit_code == 0, result.output
        assert "Todo Dashboard Updated" in result.output
        body = (vault / "Todo Dashboard.md").read_text(encoding="utf-8")
        assert "- [ ] Buy milk" in body

    def test_second_invocation_reports_no_changes(self, vault: Path):
        runner.invoke(app, ["run", str(vault)])

        result = runner.invoke(app, ["aggregate", str(vault)])

        assert result.exit_code == 0, result.output
        assert "No Changes Detected" in result.output

    def test_watch_mode_reuses_cache(self, vault: Path):
        result = runner.invoke(
            app,
            ["run", str(vault), "--watch", "--interval", "0", "--max-runs", "2"],
        )

        assert result.exit_code == 0, result.output
        assert "cached 2" in result.output

    def test_missing_vault_fails(self, tmp_path: Path):
        result = runner.invoke(app, ["run", str(tmp_path / "nope")])

        assert result.exit_code == 1

    def test_malformed_settings_fail(self, vault: Path):
        config_path = AggregatorPaths.config(vault)
        config_path.parent.mkdir(parents=True)
        config_path.write_text("- not a mapping\n", encoding="utf-8")

        result = runner.invoke(app, ["run", str(vault)])

        assert result.exit_code == 1


class TestConfigCommands:
    """Tests for `config show` and `config set`."""

    def test_show_defaults(self, vault: Path):
        result = runner.invoke(app, ["config", "show", str(vault)])

        assert result.exit_code == 0, result.output
        assert "Todo Dashboard.md" in result.output

    def test_set_then_aggregate_respects_exclusions(self, vault: Path):
        result = runner.invoke(
            app,
            ["config", "set", str(vault), "--target", "Dash.md", "--exclude", "templates"],
        )
        assert result.exit_code == 0, result.output

        settings = load_settings(AggregatorPaths.config(vault))
        assert settings.target_path == "Dash.md"
        assert settings.excluded_prefixes == ["templates"]

        result = runner.invoke(app, ["run", str(vault)])
        assert result.exit_code == 0, result.output

        body = (vault / "Dash.md").read_text(encoding="utf-8")
        assert "Buy milk" in body
        assert "Template task" not in body

    def test_set_without_values_fails(self, vault: Path):
        result = runner.invoke(app, ["config", "set", str(vault)])

        assert result.exit_code == 1

    def test_set_target_outside_vault_fails(self, vault: Path):
        result = runner.invoke(app, ["config", "set", str(vault), "--target", "../Dashboard.md"])

        assert result.exit_code == 1
        assert not AggregatorPaths.config(vault).exists()
