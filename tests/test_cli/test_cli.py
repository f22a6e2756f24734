"""Tests for the nestlint CLI commands."""
from __future__ import annotations

import json
import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from nestlint import __version__
from nestlint.cli.main import cli

FIXTURES = Path(__file__).parent.parent / "fixtures"


def _fixture(name: str) -> str:
    return str(FIXTURES / name)


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "overridden by nested style rules" in result.output
        assert "lint" in result.output
        assert "inspect" in result.output

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# lint command
# ---------------------------------------------------------------------------


class TestLintCommand:
    def test_reports_overrides(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["lint", _fixture("responsive.scss")])
        assert result.exit_code == 1
        assert 'Property "margin-right" from ".readMoreButton"' in result.output
        assert '"padding" in nested selector ".readMoreButton&Desktop"' in result.output
        assert "2 error(s)" in result.output

    def test_location_in_output(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["lint", _fixture("responsive.scss")])
        assert "responsive.scss:12:5: ERROR:" in result.output

    def test_clean_file(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["lint", _fixture("clean.scss")])
        assert result.exit_code == 0
        assert "0 error(s)" in result.output

    def test_multiple_files(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["lint", _fixture("buttons.scss"), _fixture("clean.scss")])
        assert result.exit_code == 1
        assert "Summary: 2 file(s), 1 error(s)" in result.output

    def test_json_format(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["lint", "--format", "json", _fixture("buttons.scss")])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert len(data) == 1
        assert data[0]["overridden"] == "padding"
        assert data[0]["child_selector"] == ".button&--large"

    def test_parse_error(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["lint", _fixture("broken.scss")])
        assert result.exit_code == 1
        assert "Parse error" in result.output
        assert "broken.scss" in result.output

    def test_undecodable_file_reported_and_run_continues(self, runner: CliRunner, tmp_path: Path) -> None:
        bad = tmp_path / "latin1.scss"
        bad.write_bytes(b".a { content: '\xff'; }")
        result = runner.invoke(cli, ["lint", str(bad), _fixture("buttons.scss")])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert f"Parse error: {bad}:" in result.output
        assert 'nested selector ".button&--large"' in result.output
        assert "Summary: 2 file(s), 1 error(s)" in result.output

    def test_json_marks_shorthand_overrides(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["lint", "--format", "json", _fixture("responsive.scss")])
        data = json.loads(result.output)
        assert {(d["overridden"], d["shorthand"]) for d in data} == {
            ("margin-right", True),
            ("padding", False),
        }

    def test_requires_files(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["lint"])
        assert result.exit_code != 0

    def test_config_disables_rule(self, runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "lint.json"
        config.write_text(json.dumps({"rules": {"no-overriding-properties": False}}))
        result = runner.invoke(cli, ["lint", "--config", str(config), _fixture("responsive.scss")])
        assert result.exit_code == 0
        assert "0 error(s)" in result.output

    def test_config_warning_severity(self, runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "lint.json"
        config.write_text(
            json.dumps({"rules": {"no-overriding-properties": [True, {"severity": "warning"}]}})
        )
        result = runner.invoke(cli, ["lint", "--config", str(config), _fixture("responsive.scss")])
        assert result.exit_code == 0
        assert "WARNING:" in result.output
        assert "2 warning(s)" in result.output

    def test_invalid_config(self, runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "lint.json"
        config.write_text(json.dumps({"rules": {"no-overriding-properties": "yes"}}))
        result = runner.invoke(cli, ["lint", "--config", str(config), _fixture("clean.scss")])
        assert result.exit_code == 2
        assert "Config error" in result.output

    def test_config_discovered_in_working_directory(self, runner: CliRunner, tmp_path: Path) -> None:
        stylesheet = os.path.abspath(_fixture("buttons.scss"))
        with runner.isolated_filesystem(temp_dir=tmp_path):
            Path(".nestlintrc.json").write_text(json.dumps({"rules": {"no-overriding-properties": None}}))
            result = runner.invoke(cli, ["lint", stylesheet])
        assert result.exit_code == 0


# ---------------------------------------------------------------------------
# inspect command
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_tree_output(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["inspect", _fixture("buttons.scss")])
        assert result.exit_code == 0
        assert "Stylesheet: buttons.scss" in result.output
        assert "Blocks: 5 (5 rule(s))" in result.output
        assert 'path=".button &--large"' in result.output

    def test_exempt_marker(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["inspect", _fixture("buttons.scss")])
        hover_line = next(line for line in result.output.splitlines() if "&:hover" in line)
        assert "exempt" in hover_line

    def test_at_rules_listed(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["inspect", _fixture("responsive.scss")])
        assert "@media (min-width: 48em)" in result.output

    def test_declarations_listed(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["inspect", _fixture("clean.scss")])
        assert "<root>  $gutter: 16px" in result.output

    def test_parse_error(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["inspect", _fixture("broken.scss")])
        assert result.exit_code == 1

    def test_undecodable_file(self, runner: CliRunner, tmp_path: Path) -> None:
        bad = tmp_path / "latin1.scss"
        bad.write_bytes(b".a { content: '\xff'; }")
        result = runner.invoke(cli, ["inspect", str(bad)])
        assert result.exit_code == 1
        assert "Parse error" in result.output

    def test_shorthand_longhands_listed(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["inspect", _fixture("responsive.scss")])
        margin_line = next(line for line in result.output.splitlines() if "margin: 0" in line)
        assert "[sets margin-top, margin-right, margin-bottom, margin-left]" in margin_line

    def test_top_level_rule_never_exempt(self, runner: CliRunner, tmp_path: Path) -> None:
        sheet = tmp_path / "top.scss"
        sheet.write_text("a:hover { color: red; }\n")
        result = runner.invoke(cli, ["inspect", str(sheet)])
        rule_line = next(line for line in result.output.splitlines() if "a:hover" in line)
        assert "exempt" not in rule_line
