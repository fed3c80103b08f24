"""Tests for validator normalization."""

import pytest
from prompt_toolkit.validation import Validator as PromptToolkitValidator

from maskedprompt.validate import adapt_validator, MinLengthValidator, Validator


class _NoDigits(Validator):
    def validate(self, value: str) -> ValueError | None:
        if any(char.isdigit() for char in value):
            return ValueError("Digits are not allowed")
        return None


def test_min_length_validator() -> None:
    validator = MinLengthValidator(8)

    assert validator.validate("12345678") is None
    assert validator.validate("short") == "Must be at least 8 characters long"
    assert MinLengthValidator(2, message="Too short").validate("a") == "Too short"


def test_min_length_validator_rejects_negative_lengths() -> None:
    with pytest.raises(ValueError):
        MinLengthValidator(-1)


def test_class_based_validator_errors_are_stringified() -> None:
    validate = adapt_validator(_NoDigits())

    assert validate("abc") is None
    assert validate("abc1") == "Digits are not allowed"


def test_plain_callable() -> None:
    validate = adapt_validator(lambda value: None if value else 404)

    assert validate("x") is None
    assert validate("") == "404"


def test_prompt_toolkit_validator() -> None:
    validate = adapt_validator(
        PromptToolkitValidator.from_callable(
            lambda text: len(text) >= 3, error_message="Need three characters"
        )
    )

    assert validate("abc") is None
    assert validate("ab") == "Need three characters"


def test_unsupported_object_is_rejected() -> None:
    with pytest.raises(TypeError):
        adapt_validator(42)


@pytest.mark.parametrize("result", [True, False])
def test_bool_results_are_rejected(result: bool) -> None:
    validate = adapt_validator(lambda value: result)

    with pytest.raises(TypeError):
        validate("anything")
