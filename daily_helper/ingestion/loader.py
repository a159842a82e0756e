"""
Record loader: JSON files → validated pydantic models.

Accepted file shapes
--------------------
- A JSON array of records, or
- A JSON object holding the array under ``"menus"`` / ``"rules"`` /
  ``"todos"`` (the shape of an app data export).

Keys may be snake_case (model field names) or the camelCase keys used by the
mobile app export (``id``, ``isDone``, ``dueDate``, ``timeOfDay``,
``dayOfWeek``, ``priorityCategories`` …).  Timestamps may be ISO strings or
epoch numbers (epoch milliseconds are detected by pydantic).

Validation rules
----------------
- Duplicate identifiers within one file are rejected (``ValueError``).
- Field-level violations raise ``pydantic.ValidationError``.
- A missing file raises ``FileNotFoundError``.

Usage
-----
    from daily_helper.ingestion.loader import load_menus, load_rules, load_todos

    menus = load_menus(Path("data/samples/menus.json"))
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, TypeVar

from pydantic import BaseModel

from daily_helper.models.menu import MenuItem, RecommendationRule
from daily_helper.models.todo import TodoItem

log = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

_COMMON_KEYS: dict[str, str] = {
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "timeOfDay": "time_of_day",
}

_MENU_KEYS: dict[str, str] = {**_COMMON_KEYS, "id": "menu_id"}

_RULE_KEYS: dict[str, str] = {**_COMMON_KEYS, "id": "rule_id"}

_CONDITION_KEYS: dict[str, str] = {
    "dayOfWeek": "day_of_week",
    "timeOfDay": "time_of_day",
}

_ACTION_KEYS: dict[str, str] = {
    "priorityCategories": "priority_categories",
    "excludeCategories": "exclude_categories",
}

_TODO_KEYS: dict[str, str] = {
    **_COMMON_KEYS,
    "id": "todo_id",
    "isDone": "is_done",
    "dueDate": "due_date",
}


# ── Key normalisation ─────────────────────────────────────────────────────────

def _rename_keys(record: dict[str, Any], mapping: dict[str, str]) -> dict[str, Any]:
    """Return a copy of ``record`` with camelCase keys mapped to field names.

    A snake_case key already present wins over its camelCase alias.
    """
    result: dict[str, Any] = {}
    for key, val in record.items():
        target = mapping.get(key, key)
        if target != key and target in record:
            continue
        result[target] = val
    return result


def _normalize_menu(record: dict[str, Any]) -> dict[str, Any]:
    return _rename_keys(record, _MENU_KEYS)


def _normalize_rule(record: dict[str, Any]) -> dict[str, Any]:
    rule = _rename_keys(record, _RULE_KEYS)
    if isinstance(rule.get("conditions"), dict):
        rule["conditions"] = _rename_keys(rule["conditions"], _CONDITION_KEYS)
    if isinstance(rule.get("actions"), dict):
        rule["actions"] = _rename_keys(rule["actions"], _ACTION_KEYS)
    return rule


def _normalize_todo(record: dict[str, Any]) -> dict[str, Any]:
    return _rename_keys(record, _TODO_KEYS)


# ── File reading ──────────────────────────────────────────────────────────────

def _read_records(path: Path, collection_key: str) -> list[dict[str, Any]]:
    """Read a JSON file and return its list of record dicts."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Record file not found: {path}")

    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get(collection_key, [])

    if not isinstance(data, list):
        raise ValueError(
            f"{path}: expected a JSON array or an object with a '{collection_key}' array."
        )

    for i, rec in enumerate(data):
        if not isinstance(rec, dict):
            raise ValueError(f"{path}: record at index {i} is not a JSON object.")
    return data


def _build_models(
    records:   list[dict[str, Any]],
    normalize: Callable[[dict[str, Any]], dict[str, Any]],
    model:     type[M],
    id_field:  str,
    source:    Path,
) -> list[M]:
    """Normalise, validate and de-duplicate-check a list of records."""
    seen: set[Any] = set()
    result: list[M] = []
    for i, rec in enumerate(records):
        item = model(**normalize(rec))
        ident = getattr(item, id_field)
        if ident is not None:
            if ident in seen:
                raise ValueError(f"{source}: duplicate {id_field} {ident!r} at index {i}.")
            seen.add(ident)
        result.append(item)

    log.debug("Loaded %d %s records from %s", len(result), model.__name__, source)
    return result


# ── Public API ────────────────────────────────────────────────────────────────

def load_menus(path: Path) -> list[MenuItem]:
    """Load menu items from ``path``."""
    return _build_models(
        _read_records(path, "menus"), _normalize_menu, MenuItem, "menu_id", Path(path)
    )


def load_rules(path: Path) -> list[RecommendationRule]:
    """Load recommendation rules from ``path``, preserving file order."""
    return _build_models(
        _read_records(path, "rules"), _normalize_rule, RecommendationRule, "rule_id", Path(path)
    )


def load_todos(path: Path) -> list[TodoItem]:
    """Load todo items from ``path``."""
    return _build_models(
        _read_records(path, "todos"), _normalize_todo, TodoItem, "todo_id", Path(path)
    )
