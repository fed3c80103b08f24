"""
module maskedprompt.password

Contains the definition of the Password class, a prompt that collects masked
input from the user and optionally validates it when it is submitted
"""

from typing import Any

from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys

from .cursor import StringCursor
from .invalidmaskexception import InvalidMaskException
from .prompt.abstract import InteractionBackend, PromptInteraction
from .prompt.dataclasses import Active, Error, State, Submit
from .theme import ClackTheme, Theme
from .validate import adapt_validator, ValidationFunction


class Password(PromptInteraction):
    """
    class Password

    A prompt that collects masked input from the user. The buffer always holds
    the characters that were actually typed; the mask is only applied when the
    prompt is rendered
    """

    __input: StringCursor
    __mask: str
    __prompt: str
    __theme: Theme
    __validate: ValidationFunction | None

    _submit_keys: tuple[Keys, ...] = (Keys.Enter, Keys.ControlJ)

    def __init__(
        self: "Password", prompt_text: str, theme: Theme | None = None
    ) -> None:
        self.__prompt = str(prompt_text)
        self.__theme = theme if theme is not None else ClackTheme()
        self.__input = StringCursor()
        self.__mask = self.__theme.password_mask()
        self.__validate = None

    def input(self: "Password") -> StringCursor:
        """
        Returns the buffer holding the unmasked characters the user has typed so
        that generic line editing can be applied to it

        Args:
            None

        Returns:
            StringCursor: The input buffer of this prompt

        Raises:
            Nothing
        """

        return self.__input

    def interact(self: "Password", backend: InteractionBackend | None = None) -> str:
        """
        Prompts the user on the terminal until they submit input that passes
        validation

        Args:
            backend (InteractionBackend | None): The backend to run the prompt
                with. Defaults to a PromptToolkitBackend on the current terminal

        Returns:
            str: The unmasked text the user submitted

        Raises:
            UserCancel: If the user abandoned the prompt
            Exception: Terminal I/O errors are propagated unchanged
        """

        return super().interact(backend)

    @property
    def mask(self: "Password") -> str:
        """
        Returns the character that is shown in place of each input character

        Args:
            None

        Returns:
            str: The current mask character

        Raises:
            Nothing
        """

        return self.__mask

    def on_event(self: "Password", event: KeyPress) -> State:
        if event.key not in self._submit_keys:
            return Active()

        value: str = str(self.__input)
        if self.__validate is not None:
            if (error_message := self.__validate(value)) is not None:
                return Error(error_message)

        return Submit(value)

    @property
    def prompt(self: "Password") -> str:
        return self.__prompt

    def render(self: "Password", state: State) -> str:
        masked: StringCursor = self.__input.copy()
        for index in range(len(masked)):
            masked[index] = self.__mask

        return (
            self.__theme.format_header(state, self.__prompt)
            + self.__theme.format_input(state, masked)
            + self.__theme.format_footer(state)
        )

    def with_mask(self: "Password", mask: str) -> "Password":
        """
        Replaces the character that is shown in place of each input character

        Args:
            mask (str): The new mask character

        Returns:
            Password: This prompt

        Raises:
            InvalidMaskException: If mask is not exactly one character
        """

        if not isinstance(mask, str) or len(mask) != 1:
            raise InvalidMaskException(
                f"A mask must be exactly one character, got {mask!r}"
            )

        self.__mask = mask
        return self

    def with_validator(self: "Password", validator: Any) -> "Password":
        """
        Attaches a validator that is run against the unmasked input whenever the
        user presses enter. Replaces any previously attached validator

        Args:
            validator (Any): A maskedprompt Validator, a prompt_toolkit Validator
                or a callable returning None on success and an error otherwise

        Returns:
            Password: This prompt

        Raises:
            TypeError: If validator is not a supported kind of validator
            TypeError: On submission, if the validator returned a bool instead of
                None or an error
        """

        self.__validate = adapt_validator(validator)
        return self
