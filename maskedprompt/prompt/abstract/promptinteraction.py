"""
module maskedprompt.prompt.abstract.promptinteraction

Contains the definition of the PromptInteraction class, an abstract base class
that is extended by every prompt. It implements the generic line editing that
is shared by all prompts with a text buffer
"""

from abc import ABCMeta, abstractmethod
from typing import Any

from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys

from ...cursor import StringCursor
from ..dataclasses import State
from .interactionbackend import InteractionBackend


class PromptInteraction(metaclass=ABCMeta):
    """
    class PromptInteraction

    Abstract base class that is extended by every prompt. A backend delivers
    key presses to handle_key() and displays the result of render()
    """

    def _apply_edit(self: "PromptInteraction", key_press: KeyPress) -> None:
        cursor: StringCursor | None = self.input()
        if cursor is None:
            return

        match key_press.key:
            case Keys.Left:
                cursor.move_left()
            case Keys.Right:
                cursor.move_right()
            case Keys.Home | Keys.ControlA:
                cursor.move_home()
            case Keys.End | Keys.ControlE:
                cursor.move_end()
            case Keys.Backspace:
                cursor.delete_left()
            case Keys.Delete:
                cursor.delete_right()
            case Keys.ControlU:
                cursor.clear()
            case Keys.BracketedPaste:
                # pasted line breaks must not submit or end up in the buffer
                for char in key_press.data:
                    if char.isprintable():
                        cursor.insert(char)
            case Keys():
                # every other special key (including enter) leaves the buffer alone
                ...
            case str(char) if len(char) == 1 and char.isprintable():
                cursor.insert(char)

    def handle_key(self: "PromptInteraction", key_press: KeyPress) -> State:
        """
        Applies generic line editing for the provided key press to this prompt's
        input buffer (if it has one) and then lets the prompt interpret the key

        Args:
            key_press (KeyPress): The key the user pressed

        Returns:
            State: The state of the interaction after processing the key

        Raises:
            Nothing
        """

        self._apply_edit(key_press)
        return self.on_event(key_press)

    def input(self: "PromptInteraction") -> StringCursor | None:
        """
        Returns the editable buffer of this prompt so that generic line editing
        can be applied to it. Prompts without a text buffer return None

        Args:
            None

        Returns:
            StringCursor | None: The buffer of this prompt if it has one

        Raises:
            Nothing
        """

        return None

    def interact(
        self: "PromptInteraction", backend: InteractionBackend | None = None
    ) -> Any:
        """
        Runs this prompt on the terminal until the user submits it

        Args:
            backend (InteractionBackend | None): The backend to run the prompt
                with. Defaults to a PromptToolkitBackend on the current terminal

        Returns:
            Any: The submitted value

        Raises:
            UserCancel: If the user abandoned the prompt
            Exception: Terminal I/O errors are propagated unchanged
        """

        if backend is None:
            backend = PromptToolkitBackend()

        return backend.run(self)

    @abstractmethod
    def on_event(self: "PromptInteraction", event: KeyPress) -> State:
        """
        Interprets a key press after generic line editing has been applied

        Args:
            event (KeyPress): The key the user pressed

        Returns:
            State: The state of the interaction after the key press

        Raises:
            Nothing
        """

    @abstractmethod
    def render(self: "PromptInteraction", state: State) -> str:
        """
        Renders this prompt for the provided state. Must not change the prompt

        Args:
            state (State): The state to render the prompt in

        Returns:
            str: The redraw-ready display string

        Raises:
            Nothing
        """


# pylint: disable=wrong-import-position
from ..backends.prompt_toolkit import PromptToolkitBackend
