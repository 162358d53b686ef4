"""Run configuration assembled once at startup.

Sources, lowest precedence first: built-in defaults, an optional YAML file,
``PARAHASH_*`` environment variables (a ``.env`` file is honoured), then
explicit command-line values.
"""

from __future__ import annotations

import dataclasses
import logging
import os
import pathlib
import re
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import find_dotenv, load_dotenv

from .encoding import DEFAULT_REPRESENTATION, check_representation
from .errors import ConfigError

ENV_PREFIX = "PARAHASH_"
CONFIG_ENV = "PARAHASH_CONFIG"


@dataclasses.dataclass(frozen=True, slots=True)
class ParahashConfig:
    rep: str = DEFAULT_REPRESENTATION
    ptlen: int = 4
    dtlen: int = 8
    outfile: str = ""
    log_level: str = "WARNING"


_FIELDS = tuple(f.name for f in dataclasses.fields(ParahashConfig))
_INT_FIELDS = {"ptlen", "dtlen"}


def _read_yaml(path: pathlib.Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"cannot read config file {path}: {exc.strerror or exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a mapping")
    unknown = sorted(set(data) - set(_FIELDS))
    if unknown:
        raise ConfigError(f"unknown config keys in {path}: {', '.join(unknown)}")
    return {k: _expand_env_vars(v) for k, v in data.items()}


def _from_env() -> Dict[str, Any]:
    out = {}
    for name in _FIELDS:
        val = os.getenv(ENV_PREFIX + name.upper())
        if val is not None:
            out[name] = val
    return out


_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Z0-9_]+)\}")


def _expand_env_vars(value):
    if isinstance(value, str):
        def repl(m):
            return os.getenv(m.group(1), m.group(0))
        return _ENV_VAR_PATTERN.sub(repl, value)
    return value


def _coerce(name: str, value: Any) -> Any:
    if name in _INT_FIELDS:
        if isinstance(value, bool):
            raise ConfigError(f"{name} must be an integer, got {value!r}")
        try:
            return int(value)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"{name} must be an integer, got {value!r}") from exc
    if name == "log_level":
        level = str(value).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigError(f"log_level must be a logging level name, got {value!r}")
        return level
    if value is None:
        return ""
    return str(value)


def load_config(overrides: Optional[Mapping[str, Any]] = None, config_path: Optional[str] = None) -> ParahashConfig:
    load_dotenv(find_dotenv(usecwd=True), override=False)
    merged: Dict[str, Any] = {}
    path = config_path or os.getenv(CONFIG_ENV)
    if path:
        merged.update(_read_yaml(pathlib.Path(path)))
    merged.update(_from_env())
    merged.update({k: v for k, v in (overrides or {}).items() if v is not None})
    values = {k: _coerce(k, v) for k, v in merged.items() if k in _FIELDS}
    cfg = ParahashConfig(**values)
    check_representation(cfg.rep)
    return cfg
