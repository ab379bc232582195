"""TOML config loading for voidrt.toml."""

from __future__ import annotations

import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from voidrt.symbols import (
    ArraySymbol,
    ObjectSymbol,
    PropertySymbol,
    RuntimeSymbols,
    default_symbols,
)
from voidrt.types import ValueKind

CONFIG_NAME = "voidrt.toml"

# Array, object and property names become part of C identifiers.
_C_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class ConfigError(ValueError):
    """Raised when voidrt.toml has a value of the wrong shape."""


@dataclass
class LimitsConfig:
    max_variables: int = 100
    variable_name_size: int = 64
    variable_value_size: int = 256
    string_size: int = 64  # width of string shadow slots and object fields


@dataclass
class BuildConfig:
    optimize: bool = False
    compiler: str | None = None


@dataclass
class RuntimeConfig:
    deterministic: bool = True
    limits: LimitsConfig = field(default_factory=LimitsConfig)
    build: BuildConfig = field(default_factory=BuildConfig)
    symbols: RuntimeSymbols = field(default_factory=default_symbols)


def find_config(start_path: Path | None = None) -> Path:
    """Walk up directories to find voidrt.toml. Raises FileNotFoundError."""
    path = (start_path or Path.cwd()).resolve()
    if path.is_file():
        path = path.parent
    while True:
        candidate = path / CONFIG_NAME
        if candidate.exists():
            return candidate
        parent = path.parent
        if parent == path:
            raise FileNotFoundError(f"No {CONFIG_NAME} found in any parent directory")
        path = parent


def load_config(path: Path) -> RuntimeConfig:
    """Parse a voidrt.toml file into a RuntimeConfig."""
    with open(path, "rb") as f:
        data = tomllib.load(f)
    return config_from_dict(data)


def config_from_dict(data: dict) -> RuntimeConfig:
    config = RuntimeConfig()

    if "runtime" in data:
        rt = data["runtime"]
        config.deterministic = _expect(rt, "deterministic", bool, True, "runtime")
        config.limits = LimitsConfig(
            max_variables=_positive(rt, "max_variables", 100),
            variable_name_size=_positive(rt, "variable_name_size", 64),
            variable_value_size=_positive(rt, "variable_value_size", 256),
            string_size=_positive(rt, "string_size", 64),
        )
        if "accumulator" in rt:
            config.symbols.accumulator = _expect(rt, "accumulator", int, 0, "runtime")

    if "build" in data:
        bld = data["build"]
        config.build = BuildConfig(
            optimize=_expect(bld, "optimize", bool, False, "build"),
            compiler=_expect(bld, "compiler", str, None, "build"),
        )

    if "arrays" in data:
        config.symbols.arrays = [
            _parse_array(name, values) for name, values in data["arrays"].items()
        ]

    if "objects" in data:
        config.symbols.objects = [
            _parse_object(name, props) for name, props in data["objects"].items()
        ]

    if "constants" in data:
        config.symbols.defaults = {
            name: _render_scalar(f"constants.{name}", value)
            for name, value in data["constants"].items()
        }

    return config


# ── Helpers ────────────────────────────────────────────────────────


def _expect(table: dict, key: str, kind: type, default, section: str):
    value = table.get(key, default)
    if value is default:
        return value
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ConfigError(f"{section}.{key} must be {kind.__name__}, got {value!r}")
    return value


def _positive(table: dict, key: str, default: int) -> int:
    value = _expect(table, key, int, default, "runtime")
    if value <= 0:
        raise ConfigError(f"runtime.{key} must be positive, got {value}")
    return value


def _identifier(key: str, name: str) -> str:
    if not _C_IDENTIFIER.fullmatch(name):
        raise ConfigError(f"{key}: {name!r} is not a valid C identifier")
    return name


def _parse_array(name: str, values) -> ArraySymbol:
    _identifier("arrays", name)
    if not isinstance(values, list) or not values:
        raise ConfigError(f"arrays.{name} must be a non-empty list")
    for v in values:
        if isinstance(v, bool) or not isinstance(v, (int, str)):
            raise ConfigError(f"arrays.{name} elements must be integers or strings")
    if not (all(isinstance(v, int) for v in values) or all(isinstance(v, str) for v in values)):
        raise ConfigError(f"arrays.{name} must not mix integers and strings")
    return ArraySymbol(name, tuple(values))


def _parse_object(name: str, props) -> ObjectSymbol:
    _identifier("objects", name)
    if not isinstance(props, dict):
        raise ConfigError(f"objects.{name} must be a table")
    parsed: list[PropertySymbol] = []
    for prop, value in props.items():
        _identifier(f"objects.{name}", prop)
        if isinstance(value, bool):
            kind = ValueKind.BOOLEAN
        elif isinstance(value, int):
            kind = ValueKind.INTEGER
        elif isinstance(value, str):
            kind = ValueKind.STRING
        else:
            raise ConfigError(
                f"objects.{name}.{prop} must be a string, integer or boolean"
            )
        parsed.append(PropertySymbol(prop, kind, value))
    return ObjectSymbol(name, tuple(parsed))


def _render_scalar(key: str, value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, str)):
        return str(value)
    raise ConfigError(f"{key} must be a scalar")
