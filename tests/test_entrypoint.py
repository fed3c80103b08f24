"""Tests for the maskedprompt console script."""

from pathlib import Path

from prompt_toolkit.input import PipeInput

from maskedprompt import constants
from maskedprompt.entrypoint import main
from maskedprompt.prompt.backends.prompt_toolkit import PromptToolkitBackend


def test_main_submits_and_returns_zero(
    tmp_path: Path, pipe_input: PipeInput, pipe_backend: PromptToolkitBackend
) -> None:
    config_path = tmp_path / "config.json"
    pipe_input.send_text("hunter22\r")

    exit_code = main(
        ["Token:", "--config", str(config_path), "--min-length", "4", "--no-color"],
        backend=pipe_backend,
    )

    assert exit_code == 0
    assert config_path.is_file()


def test_main_returns_interrupted_code_on_cancel(
    tmp_path: Path, pipe_input: PipeInput, pipe_backend: PromptToolkitBackend
) -> None:
    pipe_input.send_text("\x03")

    exit_code = main(["--config", str(tmp_path / "config.json")], backend=pipe_backend)

    assert exit_code == constants.EXIT_CODE_INTERRUPTED


def test_main_rejects_a_multi_character_mask(
    tmp_path: Path, pipe_backend: PromptToolkitBackend
) -> None:
    exit_code = main(
        ["--config", str(tmp_path / "config.json"), "--mask", "**"],
        backend=pipe_backend,
    )

    assert exit_code == constants.EXIT_CODE_ERROR


def test_main_rejects_a_negative_minimum_length(
    tmp_path: Path, pipe_backend: PromptToolkitBackend
) -> None:
    exit_code = main(
        ["--config", str(tmp_path / "config.json"), "--min-length", "-1"],
        backend=pipe_backend,
    )

    assert exit_code == constants.EXIT_CODE_ERROR
