"""Tests for settings loading and precedence."""

from __future__ import annotations

from pathlib import Path

import pytest

from refpin.core.config import (
    RefpinConfig,
    effective_freeze_command,
    github_token,
    load_config,
)
from refpin.core.constants import DEFAULT_FREEZE_COMMAND, DEFAULT_GUESS_PREFIXES
from refpin.core.exceptions import ConfigError


def test_defaults_without_file(tmp_path: Path) -> None:
    config = load_config(cwd=tmp_path)

    assert config == RefpinConfig()
    assert config.freeze_command == list(DEFAULT_FREEZE_COMMAND)
    assert config.guess_prefixes == list(DEFAULT_GUESS_PREFIXES)
    assert config.host == "github.com"


def test_implicit_file_is_loaded(tmp_path: Path) -> None:
    (tmp_path / ".refpin.yaml").write_text(
        "specs:\n"
        "  - owner/repo\n"
        "  - other/lib:main\n"
        "freeze_command: deno-freeze --freeze --quiet\n"
        "allow_unused: true\n"
        "guess_prefixes: https://cdn.example.com/gh/\n"
        "host: git.example.com\n"
        "unknown_key: ignored\n",
        encoding="utf-8",
    )

    config = load_config(cwd=tmp_path)

    assert config.specs == ["owner/repo", "other/lib:main"]
    assert config.freeze_command == ["deno-freeze", "--freeze", "--quiet"]
    assert config.allow_unused is True
    assert config.guess_prefixes == ["https://cdn.example.com/gh/"]
    assert config.host == "git.example.com"


def test_freeze_command_as_list(tmp_path: Path) -> None:
    path = tmp_path / "custom.yaml"
    path.write_text("freeze_command:\n  - my tool\n  - --freeze\n", encoding="utf-8")

    assert load_config(path).freeze_command == ["my tool", "--freeze"]


def test_explicit_missing_file_fails(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yaml")


def test_invalid_yaml_fails(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("specs: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


@pytest.mark.parametrize(
    "body",
    [
        "- just\n- a list\n",
        "allow_unused: sometimes\n",
        "specs: 3\n",
        "freeze_command: []\n",
        "host: ''\n",
    ],
)
def test_wrong_types_fail(tmp_path: Path, body: str) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(body, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(path) == RefpinConfig()


class TestGithubToken:
    def test_cli_token_wins(self) -> None:
        assert github_token(" cli ", {"GH_TOKEN": "env"}) == "cli"

    def test_gh_token_before_github_token(self) -> None:
        assert github_token(None, {"GH_TOKEN": "gh", "GITHUB_TOKEN": "github"}) == "gh"

    def test_github_token_fallback(self) -> None:
        assert github_token(None, {"GH_TOKEN": "  ", "GITHUB_TOKEN": "github"}) == "github"

    def test_absent_token(self) -> None:
        assert github_token(None, {}) is None


class TestFreezeCommand:
    def test_cli_value_wins(self) -> None:
        config = RefpinConfig(freeze_command=["from-config"])

        assert effective_freeze_command("cli --freeze", config, {"REFPIN_FREEZE_COMMAND": "env"}) == [
            "cli",
            "--freeze",
        ]

    def test_environment_before_config(self) -> None:
        config = RefpinConfig(freeze_command=["from-config"])

        assert effective_freeze_command(None, config, {"REFPIN_FREEZE_COMMAND": "env --freeze"}) == [
            "env",
            "--freeze",
        ]

    def test_config_value(self) -> None:
        config = RefpinConfig(freeze_command=["from-config"])

        assert effective_freeze_command(None, config, {}) == ["from-config"]
