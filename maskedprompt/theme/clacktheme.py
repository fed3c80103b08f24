"""
module maskedprompt.theme.clacktheme

Contains the definition of the ClackTheme class, the default theme which draws
prompts as a vertical bar with a state symbol next to the question
"""

from pygments.console import ansiformat, colorize

from .. import constants
from ..cursor import StringCursor
from ..prompt.dataclasses import Active, Cancel, Error, State, Submit
from .abstract import Theme


class ClackTheme(Theme):
    """
    class ClackTheme

    The default theme. Draws prompts as a vertical bar with a state symbol
    next to the question. When color is disabled every segment is plain text.
    """

    color: bool

    def __init__(self: "ClackTheme", color: bool = True) -> None:
        self.color = color

    def _bar_color(self: "ClackTheme", state: State) -> str:
        match state:
            case Active():
                return "cyan"
            case Error():
                return "yellow"
            case Cancel():
                return "red"
            case _:
                return "brightblack"

    def _colorize(self: "ClackTheme", color_key: str, text: str) -> str:
        return colorize(color_key, text) if self.color else text

    def _cursor_text(self: "ClackTheme", cursor: StringCursor) -> str:
        if not self.color:
            text: str = str(cursor)
            return (
                text[: cursor.position] + constants.PLAIN_CURSOR + text[cursor.position :]
            )

        left, current, right = cursor.split()
        return left + constants.INVERSE_ON + current + constants.INVERSE_OFF + right

    def _dim(self: "ClackTheme", text: str) -> str:
        return ansiformat("faint", text) if self.color and text else text

    def _state_symbol(self: "ClackTheme", state: State) -> str:
        match state:
            case Active():
                return self._colorize("cyan", constants.S_STEP_ACTIVE)
            case Error():
                return self._colorize("yellow", constants.S_STEP_ERROR)
            case Submit():
                return self._colorize("green", constants.S_STEP_SUBMIT)
            case Cancel():
                return self._colorize("red", constants.S_STEP_CANCEL)

        raise TypeError(f"Unknown state {state!r}")

    def _strikethrough(self: "ClackTheme", text: str) -> str:
        if not self.color or not text:
            return text

        return constants.STRIKETHROUGH_ON + text + constants.STRIKETHROUGH_OFF

    def format_footer(self: "ClackTheme", state: State) -> str:
        match state:
            case Error(message=message):
                return self._colorize("yellow", f"{constants.S_BAR_END} {message}") + "\n"
            case Submit():
                return self._colorize(self._bar_color(state), constants.S_BAR) + "\n"

        return self._colorize(self._bar_color(state), constants.S_BAR_END) + "\n"

    def format_header(self: "ClackTheme", state: State, prompt: str) -> str:
        return (
            self._colorize("brightblack", constants.S_BAR)
            + "\n"
            + f"{self._state_symbol(state)} {prompt}\n"
        )

    def format_input(self: "ClackTheme", state: State, cursor: StringCursor) -> str:
        bar: str = self._colorize(self._bar_color(state), constants.S_BAR)

        match state:
            case Submit():
                return f"{bar} {self._dim(str(cursor))}\n"
            case Cancel():
                return f"{bar} {self._strikethrough(self._dim(str(cursor)))}\n"

        return f"{bar} {self._cursor_text(cursor)}\n"

    def password_mask(self: "ClackTheme") -> str:
        return constants.S_PASSWORD_MASK
