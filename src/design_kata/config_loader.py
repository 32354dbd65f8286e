"""
Centralized configuration loading for design_kata.
"""

import copy
import json
import os
import sys
from pathlib import Path
from typing import Any, Optional, TypedDict, cast

CONFIG_DIR_ENV = "DESIGN_KATA_CONFIG_DIR"
STRICT_ENV = "DESIGN_KATA_STRICT_CONFIG"
DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent.parent / "config"
RUNTIME_CONFIG_FILE = "runtime_config.json"
LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(TypedDict):
    console_level: str
    file_level: str
    json_format: bool


class JournalConfig(TypedDict):
    filename: str
    overwrite: bool


class RuntimeConfig(TypedDict):
    logging: LoggingConfig
    journal: JournalConfig


DEFAULT_RUNTIME_CONFIG: RuntimeConfig = {
    "logging": {"console_level": "WARNING", "file_level": "DEBUG", "json_format": False},
    "journal": {"filename": "adfaf/fasdf", "overwrite": False},
}


def _resolve_config_dir(config_dir: Optional[str]) -> Path:
    if config_dir:
        return Path(config_dir)
    env_dir = os.getenv(CONFIG_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return DEFAULT_CONFIG_DIR


def _resolve_strict(strict: Optional[bool]) -> bool:
    if strict is not None:
        return strict
    env = os.getenv(STRICT_ENV, "")
    return env.lower() in {"1", "true", "yes", "on"}


def _load_json(path: Path, *, strict: bool) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as exc:
        if strict:
            raise FileNotFoundError(f"Missing config file: {path}") from exc
        print(f"Warning: {path} not found.", file=sys.stderr)
        return {}
    except json.JSONDecodeError as exc:
        if strict:
            raise ValueError(f"Malformed config file: {path} ({exc})") from exc
        print(f"Warning: {path} is malformed ({exc}).", file=sys.stderr)
        return {}


def _ensure_dict(payload: Any, *, name: str, strict: bool) -> dict[str, Any]:
    if isinstance(payload, dict):
        return payload
    msg = f"Expected {name} to be an object."
    if strict:
        raise ValueError(msg)
    print(f"Warning: {msg}", file=sys.stderr)
    return {}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged



def _reject(msg: str, *, strict: bool) -> None:
    if strict:
        raise ValueError(msg)
    print(f"Warning: {msg}", file=sys.stderr)


def _check_leaf(section: str, key: str, value: Any, *, strict: bool) -> bool:
    defaults = cast(dict[str, Any], DEFAULT_RUNTIME_CONFIG)[section]
    if key not in defaults:
        return True
    expected = type(defaults[key])
    if not isinstance(value, expected):
        _reject(
            f"Expected {RUNTIME_CONFIG_FILE}.{section}.{key} to be a {expected.__name__}, "
            f"got {value!r}.",
            strict=strict,
        )
        return False
    if key.endswith("_level") and value.upper() not in LOG_LEVEL_NAMES:
        _reject(
            f"Unknown log level {value!r} for {RUNTIME_CONFIG_FILE}.{section}.{key}; "
            f"use one of {', '.join(LOG_LEVEL_NAMES)}.",
            strict=strict,
        )
        return False
    return True


def _check_sections(payload: dict[str, Any], *, strict: bool) -> dict[str, Any]:
    """Drops (or, in strict mode, rejects) sections and values of the wrong type."""
    checked: dict[str, Any] = {}
    for key, value in payload.items():
        if key not in DEFAULT_RUNTIME_CONFIG:
            checked[key] = value
            continue
        if not isinstance(value, dict):
            _reject(f"Expected {RUNTIME_CONFIG_FILE}.{key} to be an object.", strict=strict)
            continue
        checked[key] = {
            leaf: leaf_value
            for leaf, leaf_value in value.items()
            if _check_leaf(key, leaf, leaf_value, strict=strict)
        }
    return checked


def load_runtime_config(
    *,
    config_dir: Optional[str] = None,
    strict: Optional[bool] = None,
    overrides: Optional[dict[str, Any]] = None,
) -> RuntimeConfig:
    """
    Load ``runtime_config.json`` layered over the built-in defaults.

    Missing or malformed files, and values of the wrong type, fall back to
    defaults with a warning on stderr, unless strict mode is on, in which case
    they raise.
    """
    strict_flag = _resolve_strict(strict)
    config_path = _resolve_config_dir(config_dir) / RUNTIME_CONFIG_FILE
    payload = _ensure_dict(
        _load_json(config_path, strict=strict_flag), name=RUNTIME_CONFIG_FILE, strict=strict_flag
    )

    merged = _deep_merge(
        cast(dict[str, Any], DEFAULT_RUNTIME_CONFIG), _check_sections(payload, strict=strict_flag)
    )
    if overrides:
        merged = _deep_merge(merged, _check_sections(overrides, strict=strict_flag))
    return cast(RuntimeConfig, merged)


def load_logging_config(
    *, config_dir: Optional[str] = None, strict: Optional[bool] = None
) -> LoggingConfig:
    return load_runtime_config(config_dir=config_dir, strict=strict)["logging"]


def load_journal_config(
    *, config_dir: Optional[str] = None, strict: Optional[bool] = None
) -> JournalConfig:
    return load_runtime_config(config_dir=config_dir, strict=strict)["journal"]
