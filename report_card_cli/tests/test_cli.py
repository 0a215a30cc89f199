"""Tests for report_card_cli/app.py -- the report card CLI application.

Uses typer.testing.CliRunner against a real project laid out in
``tmp_path``; no part of the engine is mocked.
"""

from __future__ import annotations

import json
import textwrap
from pathlib import Path

import pytest
from typer.testing import CliRunner

from report_card_cli.app import EXIT_ABORTED, EXIT_BELOW_MIN_SCORE, app

runner = CliRunner()

_CONFIG = textwrap.dedent(
    """\
    version: "1"
    checks:
      readme:
        type: FileExists
        config:
          path: README.md
      changelog:
        type: FileExists
        config:
          path: CHANGELOG.md
    """
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("REPORT_CARD_DEBUG", "REPORT_CARD_WORKDIR", "REPORT_CARD_CONFIG_FILE", "REPORT_CARD_OUTPUT_FORMAT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture()
def project(tmp_path: Path) -> Path:
    (tmp_path / "report-card.yml").write_text(_CONFIG, encoding="utf-8")
    (tmp_path / "README.md").write_text("# Demo\n", encoding="utf-8")
    return tmp_path


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------


class TestRunCommand:
    def test_text_report(self, project):
        result = runner.invoke(app, ["run", str(project)])
        assert result.exit_code == 0, result.output
        assert "success" in result.output
        assert "failure" in result.output
        assert "readme" in result.output
        assert "50%  1 failures, 0 warnings" in result.output

    def test_json_report(self, project):
        result = runner.invoke(app, ["run", str(project), "--format", "json"])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert payload["score"] == 50
        assert payload["results"]["readme"] == {"outcome": "success", "details": ""}
        assert payload["results"]["changelog"]["outcome"] == "failure"
        assert payload["skipped"] == []

    def test_format_from_environment(self, project, monkeypatch):
        monkeypatch.setenv("REPORT_CARD_OUTPUT_FORMAT", "json")
        result = runner.invoke(app, ["run", str(project)])
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["score"] == 50

    def test_explicit_config_path(self, project, tmp_path_factory):
        other = tmp_path_factory.mktemp("conf") / "checks.yml"
        other.write_text(
            'version: "1"\nchecks:\n  readme:\n    type: FileExists\n    config:\n      path: README.md\n',
            encoding="utf-8",
        )
        result = runner.invoke(app, ["run", str(project), "--config", str(other), "--format", "json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["score"] == 100

    def test_min_score_met(self, project):
        result = runner.invoke(app, ["run", str(project), "--min-score", "50"])
        assert result.exit_code == 0

    def test_min_score_missed(self, project):
        result = runner.invoke(app, ["run", str(project), "--min-score", "80"])
        assert result.exit_code == EXIT_BELOW_MIN_SCORE

    def test_missing_config_aborts(self, tmp_path):
        result = runner.invoke(app, ["run", str(tmp_path)])
        assert result.exit_code == EXIT_ABORTED
        assert "unable to read report card config" in result.output

    def test_config_error_aborts_without_report(self, project):
        (project / "report-card.yml").write_text(
            'version: "1"\nchecks:\n  deps:\n    type: DependencyBlacklist\n    config:\n      blacklist: oauth\n',
            encoding="utf-8",
        )
        result = runner.invoke(app, ["run", str(project)])
        assert result.exit_code == EXIT_ABORTED
        assert "deps" in result.output
        assert "%" not in result.output

    def test_execution_error_aborts_without_report(self, project):
        (project / "Dockerfile").write_text("RUN echo hi\n", encoding="utf-8")
        (project / "report-card.yml").write_text(
            'version: "1"\nchecks:\n  image:\n    type: BaseImageWhitelist\n    config:\n      whitelist: [alpine]\n',
            encoding="utf-8",
        )
        result = runner.invoke(app, ["run", str(project), "--format", "json"])
        assert result.exit_code == EXIT_ABORTED
        assert "unable to determine base image" in result.output
        assert '"score"' not in result.output

    def test_nonexistent_workdir(self, tmp_path):
        result = runner.invoke(app, ["run", str(tmp_path / "missing")])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# types
# ---------------------------------------------------------------------------


class TestTypesCommand:
    def test_lists_builtin_types(self):
        result = runner.invoke(app, ["types"])
        assert result.exit_code == 0, result.output
        for tag in ("FileExists", "FileHash", "DependencyBlacklist", "BaseImageWhitelist"):
            assert tag in result.output
        assert "CheckFileMD5" in result.output


class TestApp:
    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        assert "run" in result.output
        assert "types" in result.output
