"""
module maskedprompt.validate.adapt

Contains the definition of the adapt_validator() function which converts any
supported kind of validator into a ValidationFunction
"""

from typing import Any, Callable

from prompt_toolkit.document import Document
from prompt_toolkit.validation import (
    ValidationError,
    Validator as PromptToolkitValidator,
)

from .abstract import Validator

ValidationFunction = Callable[[str], str | None]


def _stringify(error: Any | None) -> str | None:
    # a predicate returning True on success would otherwise be shown as the error "True"
    if isinstance(error, bool):
        raise TypeError(
            "Validators must return None on success or an error, not a bool"
        )

    return None if error is None else str(error)


def adapt_validator(validator: Any) -> ValidationFunction:
    """
    Converts a validator into a function that takes the current input and
    returns either None on success or the error message to show the user

    Args:
        validator (Any): One of a maskedprompt Validator, a prompt_toolkit
            Validator or a callable that returns None on success and an
            error value otherwise

    Returns:
        ValidationFunction: The normalized validation function

    Raises:
        TypeError: If the provided object is not a supported kind of validator
            (the returned function raises TypeError if the validator returns a bool)
    """

    match validator:
        case Validator():
            return lambda value: _stringify(validator.validate(value))
        case PromptToolkitValidator():

            def validate_document(value: str) -> str | None:
                try:
                    validator.validate(Document(value, cursor_position=len(value)))
                except ValidationError as validation_error:
                    return validation_error.message

                return None

            return validate_document
        case _ if callable(validator):
            return lambda value: _stringify(validator(value))
        case _:
            raise TypeError(
                f"Object of type {type(validator).__name__} is not a validator"
            )
