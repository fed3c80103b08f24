"""
module maskedprompt.prompt.backends.prompt_toolkit.prompttoolkitbackend

Contains the definition of the PromptToolkitBackend class, an interaction backend
that runs a prompt inside of a prompt_toolkit Application
"""

from typing import Any, List

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.key_processor import KeyPressEvent
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout.containers import Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.layout import Layout
from prompt_toolkit.output import Output

from ...abstract.interactionbackend import InteractionBackend
from ...abstract.promptinteraction import PromptInteraction
from ...dataclasses import Active, Cancel, State, Submit
from ...exceptions import UserCancel

# NOTE: prompt_toolkit's default bindings swallow most special keys before they can
# reach a Keys.Any handler so every key used for editing is bound explicitly
_editing_keys: List[Keys | str] = [
    Keys.Enter,
    Keys.ControlJ,
    Keys.Left,
    Keys.Right,
    Keys.Home,
    Keys.End,
    Keys.ControlA,
    Keys.ControlE,
    Keys.Backspace,
    Keys.Delete,
    Keys.ControlU,
    Keys.BracketedPaste,
    Keys.Any,
]


class PromptToolkitBackend(InteractionBackend):
    """
    class PromptToolkitBackend

    An interaction backend that runs a prompt inside of a prompt_toolkit
    Application. The input and output may be overridden (i.e., with a pipe
    input and a dummy output) to run prompts without a terminal
    """

    __input: Input | None
    __output: Output | None

    # pylint: disable=redefined-builtin
    def __init__(
        self: "PromptToolkitBackend",
        input: Input | None = None,
        output: Output | None = None,
    ) -> None:
        self.__input = input
        self.__output = output

    def _build_application(
        self: "PromptToolkitBackend", interaction: PromptInteraction
    ) -> Application:
        state: State = Active()
        bindings: KeyBindings = KeyBindings()

        def get_frame() -> ANSI:
            # the trailing newline would otherwise show up as a blank line
            return ANSI(interaction.render(state).rstrip("\n"))

        def binding_key_press(event: KeyPressEvent) -> None:
            nonlocal state

            state = interaction.handle_key(event.key_sequence[-1])
            if isinstance(state, Submit):
                event.app.exit(result=state.value)

        for key in _editing_keys:
            bindings.add(key)(binding_key_press)

        @bindings.add("c-c")
        @bindings.add("c-d")
        @bindings.add(Keys.Escape)
        def binding_cancel(event: KeyPressEvent) -> None:
            nonlocal state

            state = Cancel()
            event.app.exit(exception=UserCancel("Prompt cancelled by the user"))

        return Application(
            layout=Layout(
                Window(
                    content=FormattedTextControl(get_frame, show_cursor=False),
                    dont_extend_height=True,
                )
            ),
            key_bindings=bindings,
            full_screen=False,
            input=self.__input,
            output=self.__output,
        )

    def run(
        self: "PromptToolkitBackend", interaction: PromptInteraction
    ) -> Any:
        application: Application = self._build_application(interaction)

        try:
            return application.run()
        except EOFError as eof:
            raise UserCancel("EOFError while prompting for input") from eof
