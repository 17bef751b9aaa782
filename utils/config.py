"""
Loads application settings for the tipping controller from TOML.

Recognised tables:

    [logging]   log_dir, level, console_level, overwrite, cleanup_rotated
    [profiler]  latency_ms
    [tips]      low, average, generous

Missing tables and keys fall back to DEFAULTS. Membership shapes and rules
are code, not configuration.
"""
import logging
import tomllib
from typing import Any, Dict

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "logging": {
        "log_dir": "logs",
        "level": "DEBUG",
        "console_level": "INFO",
        "overwrite": True,
        "cleanup_rotated": True,
    },
    "profiler": {
        "latency_ms": 10.0,
    },
    "tips": {
        "low": 7.5,
        "average": 15.0,
        "generous": 25.0,
    },
}


def _load_toml(path: str) -> dict:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _as_float(section: str, key: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"[{section}] {key} must be a number, got {value!r}")
    return float(value)


def _as_bool(section: str, key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"[{section}] {key} must be true or false, got {value!r}")
    return value


def _as_str(section: str, key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"[{section}] {key} must be a string, got {value!r}")
    return value


def _table(raw: dict, section: str) -> dict:
    table = raw.get(section, {})
    if not isinstance(table, dict):
        raise ValueError(f"[{section}] must be a table, got {table!r}")
    return table


def _as_level(section: str, key: str, value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    level = logging.getLevelName(str(value).upper())
    if not isinstance(level, int):
        raise ValueError(f"[{section}] {key} is not a logging level: {value!r}")
    return level


def load_config(path: str = "config/tip_config.toml") -> Dict[str, Dict[str, Any]]:
    """
    Reads a TOML file and merges it over DEFAULTS.

    Args:
        path (str): Path to the TOML file.

    Returns:
        Dict[str, Dict[str, Any]]: Settings with levels converted to logging
            ints and numbers converted to float.

    Raises:
        FileNotFoundError: If the file does not exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
        ValueError: If a value has the wrong type or a section is not a table.
    """
    raw = _load_toml(path)
    cfg = {section: {**values, **_table(raw, section)} for section, values in DEFAULTS.items()}

    log_cfg = cfg["logging"]
    log_cfg["level"] = _as_level("logging", "level", log_cfg["level"])
    log_cfg["console_level"] = _as_level("logging", "console_level", log_cfg["console_level"])
    log_cfg["log_dir"] = _as_str("logging", "log_dir", log_cfg["log_dir"])
    for key in ("overwrite", "cleanup_rotated"):
        log_cfg[key] = _as_bool("logging", key, log_cfg[key])

    cfg["profiler"]["latency_ms"] = _as_float(
        "profiler", "latency_ms", cfg["profiler"]["latency_ms"]
    )
    for key, value in cfg["tips"].items():
        cfg["tips"][key] = _as_float("tips", key, value)

    return cfg
