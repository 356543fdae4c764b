from __future__ import annotations

from datetime import date, datetime, time
from pathlib import Path
from typing import TypeAlias
import tomllib

from jsonmask.exceptions import ConfigError

DEFAULT_CONFIG_NAME = "jsonmask.toml"

TomlScalar: TypeAlias = str | int | float | bool | None | date | datetime | time
TomlValue: TypeAlias = TomlScalar | list["TomlValue"] | dict[str, "TomlValue"]
TomlTable: TypeAlias = dict[str, TomlValue]

_BOOL_KEYS = ("pretty", "show_keys", "show_values", "obfuscate_keys")


def _load_toml(path: Path, *, required: bool) -> TomlTable:
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        if required:
            raise ConfigError(f"config file not found: {path}")
        return {}
    except OSError as exc:
        if required:
            raise ConfigError(f"cannot read config file {path}: {exc}") from exc
        return {}
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        if required:
            raise ConfigError(f"invalid TOML in {path}: {exc}") from exc
        return {}
    return data if isinstance(data, dict) else {}


def load_config(root: Path | None = None, config_path: Path | None = None) -> TomlTable:
    """Load `jsonmask.toml`; an explicit `config_path` must exist and parse."""
    if config_path is not None:
        return _load_toml(config_path, required=True)
    base = root if root is not None else Path.cwd()
    return _load_toml(base / DEFAULT_CONFIG_NAME, required=False)


def obfuscate_defaults(
    root: Path | None = None, config_path: Path | None = None
) -> TomlTable:
    data = load_config(root=root, config_path=config_path)
    section = data.get("obfuscate", {})
    if not isinstance(section, dict):
        raise ConfigError("[obfuscate] must be a table")
    return _validated_section(section)


def _validated_section(section: TomlTable) -> TomlTable:
    validated: TomlTable = {}
    for key in _BOOL_KEYS:
        if key not in section:
            continue
        value = section[key]
        if not isinstance(value, bool):
            raise ConfigError(f"obfuscate.{key} must be a boolean, got {value!r}")
        validated[key] = value
    if "seed" in section:
        seed = section["seed"]
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise ConfigError(f"obfuscate.seed must be an integer, got {seed!r}")
        validated["seed"] = seed
    return validated


def merge_payload(payload: TomlTable, defaults: TomlTable) -> TomlTable:
    merged = dict(defaults)
    for key, value in payload.items():
        if value is None:
            continue
        merged[key] = value
    return merged
