"""
daily-helper: command-line front end for the menu and todo engines.

Every command runs the same steps: load settings, set up logging, read the
JSON record files (any loader error becomes an ``[ERROR]`` line and exit 1),
call the engine, then echo a formatted report.

Install and run::

    pip install -e .
    daily-helper --help
    daily-helper validate-config
    daily-helper recommend-menu --menus data/samples/menus.json --rules data/samples/rules.json
    daily-helper top-todos --todos data/samples/todos.json --count 3 --locale en
    daily-helper week-stats --todos data/samples/todos.json
    daily-helper month-stats
    daily-helper completion
"""

from __future__ import annotations

import json
import random
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="daily-helper",
    help="Daily helper — menu recommendations and todo prioritisation.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Return AppConfig, or print why it failed and exit 1."""
    from daily_helper.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except ValueError as exc:  # ValidationError and TOMLDecodeError included
        typer.echo(f"[ERROR] Invalid settings: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Route logs to stderr (and the log file) before any engine runs."""
    from daily_helper.utils.logging import configure_logging
    configure_logging(config.logging)


def _load_or_exit(loader, path: Path):
    """Run a record loader, printing a friendly error and exiting on failure."""
    from pydantic import ValidationError

    try:
        return loader(path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except (ValidationError, ValueError) as exc:
        typer.echo(f"[ERROR] Invalid records in {path}: {exc}", err=True)
        raise typer.Exit(code=1)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="TOML settings file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Also dump every setting as JSON.",
    ),
) -> None:
    """Load the settings, print the values the commands will use.

    Exits with code 1 when a file is missing or a value is out of range.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Settings loaded.")
    typer.echo("")
    typer.echo(f"  Menus file:       {config.data.menus_file}")
    typer.echo(f"  Rules file:       {config.data.rules_file}")
    typer.echo(f"  Todos file:       {config.data.todos_file}")
    typer.echo(f"  History size:     {config.recommendation.history_size}")
    typer.echo(f"  Top todo count:   {config.todo.top_count}")
    typer.echo(f"  Reason locale:    {config.todo.reason_locale}")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("All settings:")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("recommend-menu")
def recommend_menu_cmd(
    menus_file: Optional[str] = typer.Option(
        None, "--menus", help="Menu JSON file (default: config.data.menus_file)."
    ),
    rules_file: Optional[str] = typer.Option(
        None,
        "--rules",
        help="Rule JSON file (default: config.data.rules_file; skipped if missing).",
    ),
    category: Optional[str] = typer.Option(
        None, "--category", "-c", help="Only recommend this category (e.g. korean)."
    ),
    time_of_day: Optional[str] = typer.Option(
        None,
        "--time-of-day",
        "-t",
        help="Meal slot: breakfast, lunch, dinner, snack (default: from clock).",
    ),
    tags: Optional[list[str]] = typer.Option(
        None, "--tag", help="Tag filter; repeat for several (any match)."
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Seed the random source for reproducible picks."
    ),
    times: int = typer.Option(1, "--times", "-n", help="Number of picks to draw."),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file."
    ),
) -> None:
    """Recommend a menu using the enabled recommendation rules.

    Exits with code 1 when no menu can be recommended.
    """
    from daily_helper.ingestion.loader import load_menus, load_rules
    from daily_helper.recommendations.recommender import (
        RecommendationHistory,
        recommend_menu,
    )
    from daily_helper.reporting.formatters import format_history, format_recommendation
    from daily_helper.taxonomy.menu_taxonomy import MenuCategory, TimeOfDay

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    try:
        category_filter = MenuCategory(category) if category else None
        slot = TimeOfDay(time_of_day) if time_of_day else None
    except ValueError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    if times < 1:
        typer.echo("[ERROR] --times must be >= 1.", err=True)
        raise typer.Exit(code=1)

    menus = _load_or_exit(load_menus, Path(menus_file or config.data.menus_file))

    rules_path = Path(rules_file or config.data.rules_file)
    if rules_file is None and not rules_path.exists():
        rules = []
    else:
        rules = _load_or_exit(load_rules, rules_path)

    effective_seed = seed if seed is not None else config.recommendation.seed
    rng = random.Random(effective_seed)
    history = RecommendationHistory(max_size=config.recommendation.history_size)

    for _ in range(times):
        result = recommend_menu(
            menus,
            rules,
            category=category_filter,
            time_of_day=slot,
            tags=tags,
            rng=rng,
        )
        typer.echo(format_recommendation(result))
        if not result.ok:
            raise typer.Exit(code=1)
        history.record(result.menu)

    typer.echo(format_history(history.items))


@app.command("top-todos")
def top_todos(
    todos_file: Optional[str] = typer.Option(
        None, "--todos", help="Todo JSON file (default: config.data.todos_file)."
    ),
    count: Optional[int] = typer.Option(
        None, "--count", "-n", help="How many todos to show (default: config.todo.top_count)."
    ),
    locale: Optional[str] = typer.Option(
        None, "--locale", help="Reason language: ko or en (default: config)."
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file."
    ),
) -> None:
    """Show the most urgent open todos with scoring reasons."""
    from daily_helper.ingestion.loader import load_todos
    from daily_helper.reporting.formatters import format_top_todos
    from daily_helper.todos.ranker import get_top_priority_todos
    from daily_helper.todos.scorer import SUPPORTED_LOCALES

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    reason_locale = (locale or config.todo.reason_locale).lower()
    if reason_locale not in SUPPORTED_LOCALES:
        typer.echo(
            f"[ERROR] Unsupported locale '{reason_locale}'. "
            f"Choose from {sorted(SUPPORTED_LOCALES)}.",
            err=True,
        )
        raise typer.Exit(code=1)

    todos = _load_or_exit(load_todos, Path(todos_file or config.data.todos_file))
    ranked = get_top_priority_todos(
        todos,
        count=count if count is not None else config.todo.top_count,
        locale=reason_locale,
    )
    typer.echo(format_top_todos(ranked))


@app.command("week-stats")
def week_stats(
    todos_file: Optional[str] = typer.Option(
        None, "--todos", help="Todo JSON file (default: config.data.todos_file)."
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file."
    ),
) -> None:
    """Show this week's completion rate, category counts and weekday row."""
    from daily_helper.ingestion.loader import load_todos
    from daily_helper.reporting.formatters import format_period_stats
    from daily_helper.todos.stats import calculate_week_stats

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    todos = _load_or_exit(load_todos, Path(todos_file or config.data.todos_file))
    typer.echo(format_period_stats(calculate_week_stats(todos), heading="This Week"))


@app.command("month-stats")
def month_stats(
    todos_file: Optional[str] = typer.Option(
        None, "--todos", help="Todo JSON file (default: config.data.todos_file)."
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file."
    ),
) -> None:
    """Show this calendar month's completion rate and category counts."""
    from daily_helper.ingestion.loader import load_todos
    from daily_helper.reporting.formatters import format_period_stats
    from daily_helper.todos.stats import calculate_month_stats

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    todos = _load_or_exit(load_todos, Path(todos_file or config.data.todos_file))
    typer.echo(format_period_stats(calculate_month_stats(todos), heading="This Month"))


@app.command("completion")
def completion(
    todos_file: Optional[str] = typer.Option(
        None, "--todos", help="Todo JSON file (default: config.data.todos_file)."
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file."
    ),
) -> None:
    """Show today's, this week's and this month's completion rates."""
    from daily_helper.ingestion.loader import load_todos
    from daily_helper.reporting.formatters import format_completion_dashboard
    from daily_helper.todos.stats import calculate_completion_dashboard

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    todos = _load_or_exit(load_todos, Path(todos_file or config.data.todos_file))
    typer.echo(format_completion_dashboard(calculate_completion_dashboard(todos)))


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
