from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

_PACKAGED_PATH = Path(__file__).resolve().with_name("scoring.yaml")
_cache: dict[str, Any] | None = None


def scoring_config_path() -> Path:
    """SCORING_CONFIG_PATH when set, else the scoring.yaml shipped with the package."""
    override = (os.getenv("SCORING_CONFIG_PATH") or "").strip()
    return Path(override) if override else _PACKAGED_PATH


def _read_config(path: Path) -> dict[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise RuntimeError(f"Scoring config not found at '{path}'.") from exc
    except OSError as exc:
        raise RuntimeError(f"Failed to read scoring config '{path}': {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in scoring config '{path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid scoring config '{path}': expected a top-level mapping.")
    return parsed


def get_scoring_config() -> dict[str, Any]:
    """Scoring constants, loaded once per process."""
    global _cache
    if _cache is None:
        path = scoring_config_path()
        _cache = _read_config(path)
        logger.debug("scoring_config_loaded path=%s sections=%d", path, len(_cache))
    return _cache


def clear_scoring_config_cache() -> None:
    global _cache
    _cache = None


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Nested lookup by dot path, e.g. 'keywords.title_boost'; ``default`` when absent."""
    if not path:
        return default

    current: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current
