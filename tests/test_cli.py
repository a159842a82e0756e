"""
Tests for daily_helper/cli.py using typer's CliRunner.

What we test
------------
  - validate-config succeeds on the committed default config.
  - recommend-menu draws from the sample files, prints the recent list, and
    exits 1 when filters leave nothing to recommend.
  - top-todos never lists completed todos; bad locale exits 1.
  - week-stats, month-stats and completion print their summaries.
  - Missing record files exit 1 with an [ERROR] message.
  - Default record files resolve regardless of the working directory.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from daily_helper.cli import app

_SAMPLES = Path(__file__).resolve().parents[1] / "data" / "samples"
runner = CliRunner()


@pytest.fixture(autouse=True)
def _reset_logging():
    import logging
    yield
    logging.basicConfig(force=True)


def test_validate_config():
    result = runner.invoke(app, ["validate-config"])
    assert result.exit_code == 0
    assert "[OK] Config valid." in result.output


def test_recommend_menu_with_history():
    result = runner.invoke(app, [
        "recommend-menu",
        "--menus", str(_SAMPLES / "menus.json"),
        "--rules", str(_SAMPLES / "rules.json"),
        "--time-of-day", "lunch",
        "--seed", "1",
        "--times", "3",
    ])
    assert result.exit_code == 0
    assert result.output.count("Pick:") == 3
    assert "Recent:" in result.output


def test_recommend_menu_nothing_to_recommend():
    result = runner.invoke(app, [
        "recommend-menu",
        "--menus", str(_SAMPLES / "menus.json"),
        "--rules", str(_SAMPLES / "rules.json"),
        "--category", "japanese",
        "--time-of-day", "breakfast",
    ])
    assert result.exit_code == 1
    assert "no menus match" in result.output


def test_recommend_menu_bad_category():
    result = runner.invoke(app, [
        "recommend-menu", "--menus", str(_SAMPLES / "menus.json"), "--category", "martian",
    ])
    assert result.exit_code == 1


def test_top_todos_excludes_done():
    result = runner.invoke(app, [
        "top-todos", "--todos", str(_SAMPLES / "todos.json"), "--count", "5", "--locale", "en",
    ])
    assert result.exit_code == 0
    assert "장보기" not in result.output      # the completed sample todo
    assert "월세 이체" in result.output


def test_top_todos_bad_locale():
    result = runner.invoke(app, [
        "top-todos", "--todos", str(_SAMPLES / "todos.json"), "--locale", "fr",
    ])
    assert result.exit_code == 1


def test_week_stats():
    result = runner.invoke(app, ["week-stats", "--todos", str(_SAMPLES / "todos.json")])
    assert result.exit_code == 0
    assert "=== This Week ===" in result.output


def test_missing_file(tmp_path):
    result = runner.invoke(app, ["top-todos", "--todos", str(tmp_path / "nope.json")])
    assert result.exit_code == 1
    assert "[ERROR]" in result.output


def test_month_stats():
    result = runner.invoke(app, ["month-stats", "--todos", str(_SAMPLES / "todos.json")])
    assert result.exit_code == 0
    assert "=== This Month ===" in result.output


def test_completion_dashboard():
    result = runner.invoke(app, ["completion", "--todos", str(_SAMPLES / "todos.json")])
    assert result.exit_code == 0
    assert "=== Completion ===" in result.output
    assert "Today" in result.output


def test_default_record_files_found_from_any_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["week-stats"])
    assert result.exit_code == 0
    assert "=== This Week ===" in result.output
