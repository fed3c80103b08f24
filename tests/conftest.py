"""Shared fixtures for the maskedprompt test suite."""

from typing import Iterator

import pytest
from prompt_toolkit.input import create_pipe_input, PipeInput
from prompt_toolkit.output import DummyOutput

from maskedprompt import Password
from maskedprompt.prompt.backends.prompt_toolkit import PromptToolkitBackend
from maskedprompt.theme import ClackTheme


@pytest.fixture
def plain_password() -> Password:
    return Password("Password:", theme=ClackTheme(color=False)).with_mask("*")


@pytest.fixture
def pipe_input() -> Iterator[PipeInput]:
    with create_pipe_input() as pipe:
        yield pipe


@pytest.fixture
def pipe_backend(pipe_input: PipeInput) -> PromptToolkitBackend:
    return PromptToolkitBackend(input=pipe_input, output=DummyOutput())
