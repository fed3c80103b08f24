"""Tests for reading and writing the JSON config file."""

import json
from pathlib import Path

import pytest

from maskedprompt import constants
from maskedprompt.config import PromptConfig


def test_from_file_creates_a_default_config(tmp_path: Path) -> None:
    config_path = tmp_path / "nested" / "config.json"

    config = PromptConfig.from_file(str(config_path))

    assert config == PromptConfig.make_default()
    assert config_path.is_file()
    assert json.loads(config_path.read_text(encoding="utf-8"))["mask"] == "▪"


def test_to_file_round_trip(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    PromptConfig(version=constants.CONFIG_VERSION, mask="#", color=False).to_file(
        str(config_path)
    )

    config = PromptConfig.from_file(str(config_path))

    assert config is not None
    assert config.mask == "#"
    assert config.color is False


def test_unreadable_config_warns_and_returns_none(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text("{not json", encoding="utf-8")

    with pytest.warns(UserWarning, match="Unable to read config"):
        assert PromptConfig.from_file(str(config_path)) is None


def test_default_path_is_a_json_file() -> None:
    assert PromptConfig.default_path().endswith("config.json")
