"""
module maskedprompt.validate.abstract.validator

Contains the definition of the Validator class, an abstract base class that
is extended by all class-based validators
"""

from abc import ABCMeta, abstractmethod
from typing import Any


class Validator(metaclass=ABCMeta):
    """
    class Validator

    Abstract base class that is extended by all class-based validators
    """

    # pylint: disable=too-few-public-methods

    @abstractmethod
    def validate(self: "Validator", value: str) -> Any | None:
        """
        Checks the provided value

        Args:
            value (str): The input to check

        Returns:
            Any | None: None if the value is acceptable. Otherwise, an error
                value whose string form is shown to the user

        Raises:
            Nothing
        """
