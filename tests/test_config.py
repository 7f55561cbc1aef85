"""Tests for configuration loading."""

from __future__ import annotations

import pytest

from nl_shell.config import get_command_exceptions, load_config
from nl_shell.constants import COMMAND_EXCEPTIONS, DEFAULT_CONFIG
from nl_shell.errors import ConfigError


def test_missing_default_file_gives_defaults(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr("nl_shell.config.CONFIG_FILE_PATH", tmp_path / "absent.yaml")

    config = load_config()

    assert config == DEFAULT_CONFIG
    # Defaults are copied, never shared
    config["settings"]["api_timeout"] = 1
    assert DEFAULT_CONFIG["settings"]["api_timeout"] != 1


def test_missing_explicit_file_is_rejected(tmp_path) -> None:
    with pytest.raises(ConfigError, match="does not exist"):
        load_config(tmp_path / "typo.yaml")


def test_values_merge_over_defaults(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("models:\n  gpt4: gpt-4-turbo\nsettings:\n  api_timeout: 10\n")

    config = load_config(path)

    assert config["models"]["gpt4"] == "gpt-4-turbo"
    assert config["models"]["claude"] == DEFAULT_CONFIG["models"]["claude"]
    assert config["settings"]["api_timeout"] == 10
    assert config["settings"]["persist_history"] is True


def test_empty_file_gives_defaults(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("")

    assert load_config(path) == DEFAULT_CONFIG


@pytest.mark.parametrize(
    "content",
    [
        "models: [unclosed",
        "- just\n- a list\n",
        "settings: 3\n",
        "settings:\n  api_timeout: -1\n",
        "settings:\n  api_timeout: soon\n",
        "settings:\n  command_exceptions: find\n",
    ],
)
def test_malformed_config_is_rejected(tmp_path, content) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(content)

    with pytest.raises(ConfigError):
        load_config(path)


def test_oversized_config_is_rejected(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("#" * (1024 * 1024 + 1))

    with pytest.raises(ConfigError, match="too large"):
        load_config(path)


def test_directory_is_not_a_config(tmp_path) -> None:
    with pytest.raises(ConfigError, match="not readable"):
        load_config(tmp_path)


def test_command_exceptions_default_and_override() -> None:
    assert get_command_exceptions(DEFAULT_CONFIG) is COMMAND_EXCEPTIONS

    custom = get_command_exceptions({"settings": {"command_exceptions": ["Find", "sort"]}})

    assert custom == frozenset({"find", "sort"})
