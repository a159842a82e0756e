"""
Layered settings for daily-helper.

Each layer overrides the one before it:
  1. ``config/default.toml``      — committed defaults
  2. ``config/local.toml``        — per-machine overrides next to the file above
  3. ``.env`` at the project root — loaded into the environment, never overriding it
  4. ``DAILY_HELPER_*`` variables — see ``_ENV_OVERRIDES``

Entry point: ``load_config(config_path=None) -> AppConfig``

The engines never read settings themselves. The CLI hands them the values
they need (history size, top-N count, reason locale) as arguments.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Callable, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

_LOCALES = ("ko", "en")
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _at_least_one(name: str, value: int) -> int:
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}.")
    return value


# ── Sections ──────────────────────────────────────────────────────────────────


class DataConfig(BaseModel):
    """Record files used when the CLI is not given explicit paths.

    Relative paths are resolved against the project root by ``load_config``.
    """

    model_config = ConfigDict(frozen=True)

    menus_file: str = "data/samples/menus.json"
    rules_file: str = "data/samples/rules.json"
    todos_file: str = "data/samples/todos.json"


class RecommendationConfig(BaseModel):
    """``[recommendation]``: recent-list length and optional fixed seed."""

    model_config = ConfigDict(frozen=True)

    history_size: int = 5
    seed: Optional[int] = None

    @field_validator("history_size")
    @classmethod
    def check_history_size(cls, v: int) -> int:
        return _at_least_one("history_size", v)


class TodoConfig(BaseModel):
    """``[todo]``: how many todos to surface and which language reasons use."""

    model_config = ConfigDict(frozen=True)

    top_count: int = 3
    reason_locale: str = "ko"

    @field_validator("top_count")
    @classmethod
    def check_top_count(cls, v: int) -> int:
        return _at_least_one("top_count", v)

    @field_validator("reason_locale")
    @classmethod
    def check_locale(cls, v: str) -> str:
        locale = v.strip().lower()
        if locale not in _LOCALES:
            raise ValueError(f"reason_locale must be one of {list(_LOCALES)}, got '{v}'.")
        return locale


class LoggingConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def check_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"logging level must be one of {list(_LEVELS)}, got '{v}'.")
        return level


class AppConfig(BaseModel):
    """All settings, one attribute per TOML table plus the top-level ``debug``."""

    model_config = ConfigDict(frozen=True)

    data: DataConfig = DataConfig()
    recommendation: RecommendationConfig = RecommendationConfig()
    todo: TodoConfig = TodoConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


_SECTIONS: dict[str, type[BaseModel]] = {
    "data": DataConfig,
    "recommendation": RecommendationConfig,
    "todo": TodoConfig,
    "logging": LoggingConfig,
}


# ── Environment overrides ─────────────────────────────────────────────────────


def _truthy(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


# variable -> (table or None for top level, key, converter)
_ENV_OVERRIDES: dict[str, tuple[Optional[str], str, Callable[[str], Any]]] = {
    "DAILY_HELPER_LOG_LEVEL": ("logging", "level", str),
    "DAILY_HELPER_HISTORY_SIZE": ("recommendation", "history_size", int),
    "DAILY_HELPER_REASON_LOCALE": ("todo", "reason_locale", str),
    "DAILY_HELPER_DEBUG": (None, "debug", _truthy),
}


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Write every set ``DAILY_HELPER_*`` variable into ``raw`` in place."""
    for var, (table, key, convert) in _ENV_OVERRIDES.items():
        value = os.environ.get(var)
        if not value:
            continue
        target = raw.setdefault(table, {}) if table else raw
        target[key] = convert(value)
    return raw


# ── Loading ───────────────────────────────────────────────────────────────────


def _project_root() -> Path:
    """Nearest ancestor of this package holding ``pyproject.toml``."""
    here = Path(__file__).resolve()
    for parent in here.parents:
        if (parent / "pyproject.toml").exists():
            return parent
    return here.parents[1]


def _read_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` with ``override`` laid over it, merging nested tables."""
    merged = dict(base)
    for key, val in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(val, dict):
            merged[key] = _deep_merge(current, val)
        else:
            merged[key] = val
    return merged


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Read, merge and validate settings.

    Args:
        config_path: TOML file to start from. Defaults to
            ``<project_root>/config/default.toml``. A ``local.toml`` in the
            same directory is merged over it when present.

    Raises:
        FileNotFoundError: ``config_path`` does not exist.
        pydantic.ValidationError: A merged value is out of range.
    """
    root = _project_root()
    load_dotenv(dotenv_path=root / ".env", override=False)

    path = Path(config_path) if config_path else root / "config" / "default.toml"
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path}. Pass --config or create config/default.toml."
        )

    raw = _read_toml(path)
    local = path.parent / "local.toml"
    if local.exists():
        raw = _deep_merge(raw, _read_toml(local))

    return _build_app_config(_apply_env_overrides(raw), root)


def _resolve_data_paths(data: DataConfig, root: Path) -> DataConfig:
    """Anchor relative record paths at the project root, not the working directory."""
    resolved = {}
    for name, value in data.model_dump().items():
        path = Path(value)
        resolved[name] = str(path if path.is_absolute() else root / path)
    return DataConfig(**resolved)


def _build_app_config(raw: dict[str, Any], root: Path) -> AppConfig:
    sections = {name: model(**raw.get(name, {})) for name, model in _SECTIONS.items()}
    sections["data"] = _resolve_data_paths(sections["data"], root)
    return AppConfig(**sections, debug=raw.get("debug", False))
