"""
module maskedprompt.validate.minlengthvalidator

Contains the definition of the MinLengthValidator class, a validator that
rejects input shorter than a fixed number of characters
"""

from .abstract import Validator


class MinLengthValidator(Validator):
    """
    class MinLengthValidator

    A validator that rejects input shorter than a fixed number of characters
    """

    min_length: int
    message: str

    def __init__(
        self: "MinLengthValidator", min_length: int, message: str | None = None
    ) -> None:
        if min_length < 0:
            raise ValueError(f"Minimum length must not be negative, got {min_length}")

        self.min_length = min_length
        self.message = (
            message
            if message is not None
            else f"Must be at least {min_length} characters long"
        )

    def validate(self: "MinLengthValidator", value: str) -> str | None:
        if len(value) < self.min_length:
            return self.message

        return None
