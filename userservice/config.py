"""Service configuration loaded from a YAML or JSON file, with defaults."""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

_DEFAULTS: dict[str, Any] = {"server": {"host": "0.0.0.0", "port": 8080}}
_EXTENSIONS = ("yaml", "yml", "json")
_U16_MAX = 65535


class ConfigError(Exception):
    """The configuration could not be found, read or understood."""


@dataclass(frozen=True)
class InMemory:
    """Settings of the in-memory store: how many users to start with."""

    users: int


@dataclass(frozen=True)
class Store:
    inmemory: InMemory | None = None


@dataclass(frozen=True)
class ServerConfig:
    host: str
    port: int


@dataclass(frozen=True)
class Configuration:
    server: ServerConfig
    store: Store | None = None

    @classmethod
    def load_from_file(cls, file_name: str) -> Configuration:
        """Read a configuration file, filling in the server defaults.

        The name may be given with or without its extension. Raises
        :class:`ConfigError` when the file is missing or its content does not
        describe a configuration.
        """
        path = _locate(file_name)
        data = _read(path)
        merged = _merge(copy.deepcopy(_DEFAULTS), data)
        return _configuration(merged)


def _locate(file_name: str) -> Path:
    candidates = [Path(file_name)] + [Path(f"{file_name}.{ext}") for ext in _EXTENSIONS]
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    raise ConfigError(f'configuration file "{file_name}" not found')


def _read(path: Path) -> Mapping[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as err:
        raise ConfigError(f'configuration file "{path}" could not be read: {err}') from err
    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text) if text.strip() else None
        else:
            data = yaml.safe_load(text)
    except (yaml.YAMLError, ValueError) as err:
        raise ConfigError(f'configuration file "{path}" is malformed: {err}') from err
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigError(f"invalid type: {_describe(data)}, expected struct Configuration")
    return data


def _merge(base: dict[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    for key, value in overrides.items():
        current = base.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            base[key] = _merge(current, value)
        else:
            base[key] = value
    return base


def _describe(value: Any) -> str:
    if value is None:
        return "unit value"
    if isinstance(value, bool):
        return f"boolean `{str(value).lower()}`"
    if isinstance(value, int):
        return f"integer `{value}`"
    if isinstance(value, float):
        return f"floating point `{value}`"
    if isinstance(value, str):
        return f'string "{value}"'
    if isinstance(value, (list, tuple)):
        return "sequence"
    if isinstance(value, Mapping):
        return "map"
    return f"value `{value}`"


def _struct(value: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigError(f"invalid type: {_describe(value)}, expected struct {name}")
    return value


def _field(data: Mapping[str, Any], name: str) -> Any:
    if name not in data:
        raise ConfigError(f"missing field `{name}`")
    return data[name]


def _as_u16(value: Any) -> int:
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise ConfigError(f'invalid type: string "{value}", expected u16') from None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"invalid type: {_describe(value)}, expected u16")
    if not 0 <= value <= _U16_MAX:
        raise ConfigError(f"invalid value: integer `{value}`, expected u16")
    return value


def _as_str(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return str(value)
    raise ConfigError(f"invalid type: {_describe(value)}, expected a string")


def _in_memory(value: Any) -> InMemory | None:
    if value is None:
        return None
    data = _struct(value, "InMemory")
    return InMemory(users=_as_u16(_field(data, "users")))


def _store(value: Any) -> Store | None:
    if value is None:
        return None
    data = _struct(value, "Store")
    return Store(inmemory=_in_memory(data.get("inmemory")))


def _server(value: Any) -> ServerConfig:
    data = _struct(value, "ServerConfig")
    return ServerConfig(
        host=_as_str(_field(data, "host")),
        port=_as_u16(_field(data, "port")),
    )


def _configuration(data: Mapping[str, Any]) -> Configuration:
    return Configuration(
        server=_server(_field(data, "server")),
        store=_store(data.get("store")),
    )