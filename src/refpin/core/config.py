"""Settings for refpin runs.

Values come from, in order of precedence: command-line options, the
environment, an optional ``.refpin.yaml`` file and built-in defaults.
"""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from ruamel.yaml import YAML

from .constants import (
    CONFIG_FILENAME,
    DEFAULT_FREEZE_COMMAND,
    DEFAULT_GUESS_PREFIXES,
    DEFAULT_HOST,
    FREEZE_COMMAND_ENV_VAR,
    TOKEN_ENV_VARS,
)
from .exceptions import ConfigError


def split_command(value: object, *, source: str) -> list[str]:
    """Accept a shell-like string or a list of strings."""
    if isinstance(value, str):
        parts = shlex.split(value)
    elif isinstance(value, list) and all(isinstance(item, str) for item in value):
        parts = [str(item) for item in value]
    else:
        raise ConfigError(f"{source}: freeze_command must be a string or a list of strings")
    if not parts:
        raise ConfigError(f"{source}: freeze_command is empty")
    return parts


def _string_list(data: Mapping[str, object], key: str, source: str) -> list[str] | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return [str(item) for item in value]
    raise ConfigError(f"{source}: {key} must be a string or a list of strings")


@dataclass(slots=True)
class RefpinConfig:
    """Settings stored in ``.refpin.yaml``."""

    specs: list[str] = field(default_factory=list)
    freeze_command: list[str] = field(default_factory=lambda: list(DEFAULT_FREEZE_COMMAND))
    allow_unused: bool = False
    guess_prefixes: list[str] = field(default_factory=lambda: list(DEFAULT_GUESS_PREFIXES))
    host: str = DEFAULT_HOST

    @classmethod
    def from_dict(cls, data: object, source: str = CONFIG_FILENAME) -> "RefpinConfig":
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"{source}: expected a mapping at the top level")

        config = cls()
        specs = _string_list(data, "specs", source)
        if specs is not None:
            config.specs = specs

        if data.get("freeze_command") is not None:
            config.freeze_command = split_command(data["freeze_command"], source=source)

        allow_unused = data.get("allow_unused")
        if allow_unused is not None:
            if not isinstance(allow_unused, bool):
                raise ConfigError(f"{source}: allow_unused must be true or false")
            config.allow_unused = allow_unused

        prefixes = _string_list(data, "guess_prefixes", source)
        if prefixes is not None:
            config.guess_prefixes = prefixes

        host = data.get("host")
        if host is not None:
            if not isinstance(host, str) or not host.strip():
                raise ConfigError(f"{source}: host must be a non-empty string")
            config.host = host.strip()

        return config


def load_config(path: Path | None = None, cwd: Path | None = None) -> RefpinConfig:
    """Load settings from ``path``, or from ``.refpin.yaml`` in ``cwd`` if present.

    An explicitly named file must exist; the implicit one is optional.
    """
    if path is None:
        candidate = (cwd or Path.cwd()) / CONFIG_FILENAME
        if not candidate.is_file():
            return RefpinConfig()
        path = candidate
    elif not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    yaml = YAML()
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = yaml.load(handle)
    except Exception as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc

    return RefpinConfig.from_dict(payload, source=str(path))


def github_token(cli_token: str | None = None, environ: Mapping[str, str] | None = None) -> str | None:
    """Return a sanitized GitHub token (cli arg takes precedence) or None."""
    env = os.environ if environ is None else environ
    if cli_token and cli_token.strip():
        return cli_token.strip()
    for name in TOKEN_ENV_VARS:
        value = (env.get(name) or "").strip()
        if value:
            return value
    return None


def effective_freeze_command(
    cli_value: str | None,
    config: RefpinConfig,
    environ: Mapping[str, str] | None = None,
) -> list[str]:
    env = os.environ if environ is None else environ
    if cli_value:
        return split_command(cli_value, source="--freeze-command")
    env_value = (env.get(FREEZE_COMMAND_ENV_VAR) or "").strip()
    if env_value:
        return split_command(env_value, source=FREEZE_COMMAND_ENV_VAR)
    return list(config.freeze_command)


__all__ = [
    "RefpinConfig",
    "effective_freeze_command",
    "github_token",
    "load_config",
    "split_command",
]
