"""Shared defaults for refpin."""

from __future__ import annotations

DEFAULT_HOST = "github.com"
DEFAULT_GUESS_PREFIXES = ("https://raw.githubusercontent.com/",)
DEFAULT_FREEZE_COMMAND = ("refreeze", "--freeze")
CONFIG_FILENAME = ".refpin.yaml"

TOKEN_ENV_VARS = ("GH_TOKEN", "GITHUB_TOKEN")
FREEZE_COMMAND_ENV_VAR = "REFPIN_FREEZE_COMMAND"

__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_GUESS_PREFIXES",
    "DEFAULT_FREEZE_COMMAND",
    "CONFIG_FILENAME",
    "TOKEN_ENV_VARS",
    "FREEZE_COMMAND_ENV_VAR",
]
