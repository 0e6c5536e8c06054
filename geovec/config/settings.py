"""Configuration values for the vector library."""

from __future__ import annotations

import argparse
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence

import yaml

from .constants import DEFAULTS

_PATH_FIELDS = {"LOG_DIRECTORY"}
_STRING_FIELDS = {"DEBUG_LOG_FILE", "DEBUG_LOG_LEVEL"}
_BOOL_FIELDS = {"LOG_TO_FILE"}
_FLOAT_FIELDS = {"EQUAL_TOLERANCE"}
_OPTIONAL_INT_FIELDS = {"RANDOM_SEED"}
_TRUE_STRINGS = {"1", "true", "True", "TRUE"}


def _optional_int(raw: Optional[str]) -> Optional[int]:
    if raw is None or raw == "":
        return None
    return int(raw)


EQUAL_TOLERANCE = float(os.getenv("GEOVEC_EQUAL_TOLERANCE", str(DEFAULTS["EQUAL_TOLERANCE"])))
RANDOM_SEED = _optional_int(os.getenv("GEOVEC_RANDOM_SEED"))

CONFIG_ENV_VAR = "GEOVEC_CONFIG_FILE"
DEFAULT_CONFIG_FILE = Path("configs/geovec.yaml")
LOG_DIRECTORY = Path(os.getenv("GEOVEC_LOG_DIR", DEFAULTS["LOG_DIRECTORY"]))
DEBUG_LOG_FILE = os.getenv("GEOVEC_DEBUG_LOG", DEFAULTS["DEBUG_LOG_FILE"])
DEBUG_LOG_LEVEL = os.getenv("GEOVEC_DEBUG_LOG_LEVEL", DEFAULTS["DEBUG_LOG_LEVEL"])
LOG_TO_FILE = os.getenv("GEOVEC_LOG_TO_FILE", "0") in _TRUE_STRINGS


@dataclass(frozen=True)
class VectorSettings:
    EQUAL_TOLERANCE: float = EQUAL_TOLERANCE
    RANDOM_SEED: Optional[int] = RANDOM_SEED
    LOG_DIRECTORY: Path = LOG_DIRECTORY
    DEBUG_LOG_FILE: str = DEBUG_LOG_FILE
    DEBUG_LOG_LEVEL: str = DEBUG_LOG_LEVEL
    LOG_TO_FILE: bool = LOG_TO_FILE

    def with_updates(self, overrides: Dict[str, Any]) -> "VectorSettings":
        merged = asdict(self)
        merged.update(overrides)
        _validate_settings_dict(merged)
        return VectorSettings(**merged)


_ACTIVE_SETTINGS = VectorSettings()
_ENV_VARS: Dict[str, str] = {
    "EQUAL_TOLERANCE": "GEOVEC_EQUAL_TOLERANCE",
    "RANDOM_SEED": "GEOVEC_RANDOM_SEED",
    "LOG_DIRECTORY": "GEOVEC_LOG_DIR",
    "DEBUG_LOG_FILE": "GEOVEC_DEBUG_LOG",
    "DEBUG_LOG_LEVEL": "GEOVEC_DEBUG_LOG_LEVEL",
    "LOG_TO_FILE": "GEOVEC_LOG_TO_FILE",
}


def _coerce(value: str, field: str) -> Any:
    if field in _PATH_FIELDS:
        return Path(value)
    if field in _STRING_FIELDS:
        return value
    if field in _BOOL_FIELDS:
        return value in _TRUE_STRINGS
    if field in _OPTIONAL_INT_FIELDS:
        return _optional_int(value)
    return float(value)


def _collect_env_overrides(env: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for field, env_name in _ENV_VARS.items():
        raw = env.get(env_name)
        if raw is not None:
            overrides[field] = _coerce(raw, field)
    return overrides


def _normalize_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value in _TRUE_STRINGS
    if isinstance(value, (int, float)):
        return bool(value)
    raise ValueError("Invalid boolean value in config")


def _normalize_numeric(value: Any, caster: type[float | int]) -> float | int:
    if isinstance(value, bool):
        raise ValueError("Invalid numeric value in config")
    if isinstance(value, (int, float)):
        return caster(value)
    if isinstance(value, str):
        return caster(float(value) if caster is float else int(float(value)))
    raise ValueError("Invalid numeric value in config")


def _normalize_config_value(field: str, value: Any) -> Any:
    if field in _PATH_FIELDS:
        if isinstance(value, Path):
            return value
        if isinstance(value, str):
            return Path(value)
        raise ValueError(f"Field {field} must be a path or string")
    if field in _STRING_FIELDS:
        if isinstance(value, str):
            return value
        raise ValueError(f"Field {field} must be a string")
    if field in _BOOL_FIELDS:
        return _normalize_bool(value)
    if field in _OPTIONAL_INT_FIELDS:
        if value is None:
            return None
        return int(_normalize_numeric(value, int))
    return float(_normalize_numeric(value, float))


_NUMERIC_BOUNDS: Dict[str, tuple[float, float]] = {
    "EQUAL_TOLERANCE": (0.0, 1.0),
}

_CHOICE_FIELDS: Dict[str, set[str]] = {
    "DEBUG_LOG_LEVEL": {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"},
}


def _validate_settings_dict(values: Dict[str, Any]) -> None:
    for field, (lower, upper) in _NUMERIC_BOUNDS.items():
        current = values.get(field)
        if current is None:
            continue
        if not (lower <= current <= upper):
            raise ValueError(f"{field} must be between {lower} and {upper}, got {current}")
    for field, choices in _CHOICE_FIELDS.items():
        current = values.get(field)
        if current is None:
            continue
        if isinstance(current, str) and current.upper() in choices:
            values[field] = current.upper()
            continue
        raise ValueError(f"{field} must be one of {sorted(choices)} (got {current})")


def _load_config_overrides(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as error:
            raise ValueError(f"Invalid YAML in config file {path}") from error
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must define a mapping")
    valid_fields = set(VectorSettings.__dataclass_fields__.keys())
    overrides: Dict[str, Any] = {}
    for raw_key, value in data.items():
        key = str(raw_key).upper()
        if key not in valid_fields:
            raise ValueError(f"Unknown config field: {raw_key}")
        overrides[key] = _normalize_config_value(key, value)
    return overrides


def _resolve_config_path(cli_value: str | None, env: Mapping[str, str]) -> Path | None:
    candidate_strings = [cli_value, env.get(CONFIG_ENV_VAR)]
    for candidate in candidate_strings:
        if not candidate:
            continue
        path = Path(candidate).expanduser()
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        return path
    if DEFAULT_CONFIG_FILE.exists():
        return DEFAULT_CONFIG_FILE
    return None


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Vector library runtime overrides")
    parser.add_argument("--config", type=str, help="Path to a YAML config file with runtime settings")
    parser.add_argument("--equal-tolerance", type=float, help="Default per-component tolerance for equality checks")
    parser.add_argument("--random-seed", type=int, help="Seed for the shared random source")
    parser.add_argument("--log-dir", type=str, help="Directory for the debug log file")
    parser.add_argument("--debug-log-file", type=str, help="Debug log file name")
    parser.add_argument("--debug-log-level", type=str, help="Log level for the geovec logger")
    parser.add_argument(
        "--log-to-file",
        dest="log_to_file",
        action="store_true",
        help="Write geovec log records to the debug log file",
    )
    parser.add_argument(
        "--no-log-to-file",
        dest="log_to_file",
        action="store_false",
        help="Keep the geovec logger silent",
    )
    parser.set_defaults(log_to_file=None)
    return parser


def load_runtime_settings(args: Sequence[str] | None = None, env: Mapping[str, str] | None = None) -> VectorSettings:
    env_mapping = env if env is not None else os.environ
    parser = _build_arg_parser()
    parsed = parser.parse_args(args=args)
    overrides: Dict[str, Any] = {}
    config_path = _resolve_config_path(parsed.config, env_mapping)
    if config_path is not None:
        overrides.update(_load_config_overrides(config_path))
    overrides.update(_collect_env_overrides(env_mapping))
    cli_mapping = {
        "EQUAL_TOLERANCE": parsed.equal_tolerance,
        "RANDOM_SEED": parsed.random_seed,
        "LOG_DIRECTORY": None if parsed.log_dir is None else Path(parsed.log_dir),
        "DEBUG_LOG_FILE": parsed.debug_log_file,
        "DEBUG_LOG_LEVEL": parsed.debug_log_level,
        "LOG_TO_FILE": parsed.log_to_file,
    }
    overrides.update({k: v for k, v in cli_mapping.items() if v is not None})
    return _ACTIVE_SETTINGS.with_updates(overrides)


def apply_runtime_settings(new_settings: VectorSettings) -> VectorSettings:
    global _ACTIVE_SETTINGS
    global EQUAL_TOLERANCE, RANDOM_SEED
    global LOG_DIRECTORY, DEBUG_LOG_FILE, DEBUG_LOG_LEVEL, LOG_TO_FILE

    _ACTIVE_SETTINGS = new_settings
    EQUAL_TOLERANCE = new_settings.EQUAL_TOLERANCE
    RANDOM_SEED = new_settings.RANDOM_SEED
    LOG_DIRECTORY = new_settings.LOG_DIRECTORY
    DEBUG_LOG_FILE = new_settings.DEBUG_LOG_FILE
    DEBUG_LOG_LEVEL = new_settings.DEBUG_LOG_LEVEL
    LOG_TO_FILE = new_settings.LOG_TO_FILE

    if RANDOM_SEED is not None:
        from .. import random_source

        random_source.seed(RANDOM_SEED)
    return _ACTIVE_SETTINGS


def current_settings() -> VectorSettings:
    return _ACTIVE_SETTINGS
