from __future__ import annotations

import logging
import yaml
from pathlib import Path
from typing import Dict, Any

from core.status import DEFAULT_DELETE_POLICY, DeletePolicy, Panel

USER_CONFIG_PATH = Path.home() / ".todo_config.yaml"
DEFAULT_FILE = "TODO"
DEFAULT_HISTORY_LIMIT = 100

logger = logging.getLogger("todo.config")


def _load_config() -> Dict[str, Any]:
    if not USER_CONFIG_PATH.exists():
        return {}
    try:
        data = yaml.safe_load(USER_CONFIG_PATH.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", USER_CONFIG_PATH, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: top level must be a mapping", USER_CONFIG_PATH)
        return {}
    return data


def get_user_lang() -> str:
    return str(_load_config().get("lang", "") or "").strip()


def get_user_theme() -> str:
    return str(_load_config().get("theme", "") or "").strip()


def get_default_file() -> str:
    return str(_load_config().get("file", "") or "").strip() or DEFAULT_FILE


def get_history_limit() -> int:
    raw = _load_config().get("history_limit", DEFAULT_HISTORY_LIMIT)
    try:
        limit = int(raw)
    except (TypeError, ValueError):
        logger.warning("history_limit must be an integer, got %r", raw)
        return DEFAULT_HISTORY_LIMIT
    if limit < 1:
        logger.warning("history_limit must be positive, got %d", limit)
        return DEFAULT_HISTORY_LIMIT
    return limit


def get_delete_policies() -> Dict[Panel, DeletePolicy]:
    """Per-collection delete policy (``delete_policy: {active: ..., completed: ...}``)."""
    policies = dict(DEFAULT_DELETE_POLICY)
    raw = _load_config().get("delete_policy") or {}
    if not isinstance(raw, dict):
        logger.warning("delete_policy must be a mapping, got %r", raw)
        return policies
    for panel in Panel:
        value = raw.get(panel.value.lower())
        if value is None:
            continue
        policy = DeletePolicy.from_string(str(value), policies[panel])
        if policy.value != str(value).strip().lower():
            logger.warning("Unknown delete policy %r for %s, using %s", value, panel.value.lower(), policy.value)
        policies[panel] = policy
    return policies
