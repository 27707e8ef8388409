"""Settings loading and validation."""

from __future__ import annotations

import json
import os
from copy import deepcopy
from pathlib import Path
from typing import Any

from shared.errors import ConfigError

APP_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_SETTINGS_FILE = APP_ROOT / "settings.json"
CATALOG_ENV_VAR = "WORD_NAVIGATOR_CATALOG"

DEFAULT_CONFIG: dict[str, Any] = {
    "window": {"width": 800, "height": 1000},
    "search": {"debounce_seconds": 0.12, "max_results": 400},
    "catalog": {"path": str(APP_ROOT / "res" / "catalog.json")},
    "loading": {"delay_seconds": 0.4},
    "logging": {"level": "INFO"},
    "theme": {
        "bg": [0.07, 0.08, 0.10, 1],
        "surface": [0.12, 0.14, 0.18, 1],
        "text": [0.95, 0.98, 1, 1],
        "muted": [0.78, 0.82, 0.88, 1],
        "primary": [0.20, 0.52, 0.90, 1],
        "success": [0.25, 0.65, 0.38, 1],
        "danger": [0.85, 0.32, 0.35, 1],
        "closeButton": [0.5, 0.5, 0.5, 1],
    },
}


def get_default_config() -> dict[str, Any]:
    """Return a deep copy of the default config."""
    return deepcopy(DEFAULT_CONFIG)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _apply_env_overrides(config: dict[str, Any], environ=None) -> dict[str, Any]:
    environ = os.environ if environ is None else environ
    merged = deepcopy(config)
    catalog_path = (environ.get(CATALOG_ENV_VAR) or "").strip()
    if catalog_path:
        merged.setdefault("catalog", {})
        merged["catalog"]["path"] = catalog_path
    return merged


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_config(config: dict[str, Any]) -> None:
    window = config.get("window", {})
    for key in ("width", "height"):
        val = window.get(key)
        if not isinstance(val, int) or isinstance(val, bool) or not (200 <= val <= 10000):
            raise ConfigError(f"window.{key} must be an int in range 200..10000")

    debounce = config.get("search", {}).get("debounce_seconds")
    if not _is_number(debounce) or not (0 <= float(debounce) <= 5):
        raise ConfigError("search.debounce_seconds must be a number in range 0..5")

    max_results = config.get("search", {}).get("max_results")
    if not isinstance(max_results, int) or isinstance(max_results, bool) or max_results < 1:
        raise ConfigError("search.max_results must be a positive int")

    delay = config.get("loading", {}).get("delay_seconds")
    if not _is_number(delay) or float(delay) < 0:
        raise ConfigError("loading.delay_seconds must be a non-negative number")

    path = config.get("catalog", {}).get("path")
    if not isinstance(path, str) or not path.strip():
        raise ConfigError("catalog.path must be a non-empty string")

    for name, rgba in (config.get("theme") or {}).items():
        if not isinstance(rgba, (list, tuple)) or len(rgba) != 4 or not all(_is_number(c) for c in rgba):
            raise ConfigError(f"theme.{name} must be a list of four numbers")


def load_config(path: str | Path | None = None, environ=None) -> dict[str, Any]:
    """Load config from JSON and merge into defaults."""
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    if not config_path.exists():
        return _apply_env_overrides(get_default_config(), environ)

    try:
        loaded = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"{config_path} is not valid JSON: {e}") from e
    if not isinstance(loaded, dict):
        raise ConfigError(f"{config_path} must contain a JSON object")
    merged = _deep_merge(get_default_config(), loaded)
    merged = _apply_env_overrides(merged, environ)
    validate_config(merged)
    return merged


def save_config(config: dict[str, Any], path: str | Path | None = None) -> Path:
    validate_config(config)
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = config_path.with_suffix(".tmp")
    with open(tmp_path, "w", encoding="utf-8") as f:
        json.dump(config, f, ensure_ascii=False, indent=2, sort_keys=True)
    os.replace(tmp_path, config_path)
    return config_path


def save_window_size(width: int, height: int, path: str | Path | None = None) -> Path:
    """Persist the window size into the settings file, leaving its other keys as stored."""
    stored = load_config(path, environ={})
    stored["window"] = {"width": int(width), "height": int(height)}
    return save_config(stored, path)
