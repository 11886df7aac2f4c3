"""Layered application settings from config files and the environment."""

from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

_EXTENSIONS = (".toml", ".json")
_TRUE = {"true", "on", "yes", "1"}
_FALSE = {"false", "off", "no", "0"}
_MISSING = object()


@dataclass(frozen=True)
class Server:
    port: int

    def __str__(self) -> str:
        return f"http://localhost:{self.port}"


@dataclass(frozen=True)
class Logger:
    level: str
    format: str = "text"
    request_id_header: bool = False


@dataclass(frozen=True)
class Database:
    url: str
    pool_size: int


@dataclass(frozen=True)
class Auth:
    secret: str


@dataclass(frozen=True)
class Tor:
    enabled: bool = False
    service_dir: str = "./tor_service"


@dataclass(frozen=True)
class Settings:
    environment: str
    server: Server
    logger: Logger
    database: Database
    auth: Auth
    tor: Tor


def _parse_file(path: Path) -> dict[str, Any]:
    if path.suffix == ".toml":
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    else:
        with path.open(encoding="utf-8") as handle:
            data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: configuration must be a table")
    return data


def _read_source(base: Path, name: str, *, required: bool) -> dict[str, Any]:
    for extension in _EXTENSIONS:
        path = base / f"{name}{extension}"
        if path.is_file():
            return _parse_file(path)
    if required:
        raise FileNotFoundError(f"configuration file {base / name} not found")
    return {}


def _merge(target: dict[str, Any], source: Mapping[str, Any]) -> None:
    for key, value in source.items():
        key = key.lower()
        if isinstance(value, Mapping):
            existing = target.get(key)
            if not isinstance(existing, dict):
                existing = target[key] = {}
            _merge(existing, value)
        else:
            target[key] = value


def _environment_layer(environ: Mapping[str, str]) -> dict[str, Any]:
    layer: dict[str, Any] = {}
    for name, value in environ.items():
        path = name.lower().split("__")
        if not all(path):
            continue
        node = layer
        for part in path[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = node[part] = {}
            node = child
        node[path[-1]] = value
    return layer


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    if name not in data:
        raise ValueError(f"missing field `{name}`")
    value = data[name]
    if not isinstance(value, Mapping):
        raise ValueError(f"`{name}` must be a table")
    return value


def _field(section: Mapping[str, Any], key: str, where: str, default: Any = _MISSING) -> Any:
    if key in section:
        return section[key]
    if default is _MISSING:
        raise ValueError(f"missing field `{key}` in `{where}`")
    return default


def _as_str(value: Any, key: str) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ValueError(f"`{key}` must be a string")


def _as_int(value: Any, key: str, maximum: int) -> int:
    if isinstance(value, bool):
        raise ValueError(f"`{key}` must be an integer")
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise ValueError(f"`{key}` must be an integer, got {value!r}") from None
    if not isinstance(value, int):
        raise ValueError(f"`{key}` must be an integer")
    if not 0 <= value <= maximum:
        raise ValueError(f"`{key}` out of range: {value}")
    return value


def _as_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
    raise ValueError(f"`{key}` must be a boolean, got {value!r}")


def _build(data: Mapping[str, Any]) -> Settings:
    if "environment" not in data:
        raise ValueError("missing field `environment`")
    server = _section(data, "server")
    logger = _section(data, "logger")
    database = _section(data, "database")
    auth = _section(data, "auth")
    tor = _section(data, "tor")
    signing = _as_str(_field(auth, "secret", "auth"), "secret")
    return Settings(
        environment=_as_str(data["environment"], "environment"),
        server=Server(port=_as_int(_field(server, "port", "server"), "port", 65535)),
        logger=Logger(
            level=_as_str(_field(logger, "level", "logger"), "level"),
            format=_as_str(_field(logger, "format", "logger", "text"), "format"),
            request_id_header=_as_bool(
                _field(logger, "request_id_header", "logger", False), "request_id_header"
            ),
        ),
        database=Database(
            url=_as_str(_field(database, "url", "database"), "url"),
            pool_size=_as_int(
                _field(database, "pool_size", "database"), "pool_size", 2**32 - 1
            ),
        ),
        auth=Auth(secret=signing),
        tor=Tor(
            enabled=_as_bool(_field(tor, "enabled", "tor", False), "enabled"),
            service_dir=_as_str(
                _field(tor, "service_dir", "tor", "./tor_service"), "service_dir"
            ),
        ),
    )


def load_settings(
    config_dir: str | os.PathLike[str] = "config",
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Load settings from default, run-mode and local files, then the environment.

    Environment variables use ``__`` to separate nested keys; ``PORT`` overrides
    ``server.port``.
    """
    environ = os.environ if environ is None else environ
    run_mode = environ.get("RUN_MODE", "development")
    base = Path(config_dir)

    merged: dict[str, Any] = {}
    _merge(merged, _read_source(base, "default", required=True))
    _merge(merged, _read_source(base, run_mode, required=False))
    _merge(merged, _read_source(base, "local", required=False))
    _merge(merged, _environment_layer(environ))

    if "PORT" in environ:
        _merge(merged, {"server": {"port": environ["PORT"]}})

    return _build(merged)