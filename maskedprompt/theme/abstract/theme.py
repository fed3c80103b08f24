"""
module maskedprompt.theme.abstract.theme

Contains the definition of the Theme class, an abstract base class for the
stateless services that turn a prompt's state and content into display strings
"""

from abc import ABCMeta, abstractmethod

from ...cursor import StringCursor
from ...prompt.dataclasses import State


class Theme(metaclass=ABCMeta):
    """
    class Theme

    Abstract base class for the stateless services that turn a prompt's state
    and content into display strings. Each format method returns a segment
    ending in a newline (or an empty string) so that segments can be
    concatenated directly.
    """

    @abstractmethod
    def format_footer(self: "Theme", state: State) -> str:
        """
        Formats the line(s) shown below a prompt's input

        Args:
            state (State): The current state of the interaction

        Returns:
            str: The formatted footer

        Raises:
            Nothing
        """

    @abstractmethod
    def format_header(self: "Theme", state: State, prompt: str) -> str:
        """
        Formats the line(s) shown above a prompt's input

        Args:
            state (State): The current state of the interaction
            prompt (str): The question being asked

        Returns:
            str: The formatted header

        Raises:
            Nothing
        """

    @abstractmethod
    def format_input(self: "Theme", state: State, cursor: StringCursor) -> str:
        """
        Formats the input line of a prompt including its cursor

        Args:
            state (State): The current state of the interaction
            cursor (StringCursor): The content to show. For password prompts
                this is already masked

        Returns:
            str: The formatted input line

        Raises:
            Nothing
        """

    @abstractmethod
    def password_mask(self: "Theme") -> str:
        """
        Returns the character password prompts use to mask input by default

        Args:
            None

        Returns:
            str: A single mask character

        Raises:
            Nothing
        """
