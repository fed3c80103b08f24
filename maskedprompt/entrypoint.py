"""
module maskedprompt.entrypoint

Contains the definition of the main() method that is invoked when
maskedprompt is run directly as a module from the command line
"""

from argparse import ArgumentParser, Namespace
from typing import List

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.styles import Style

from . import constants
from .config import PromptConfig
from .maskedpromptexception import MaskedPromptException
from .password import Password
from .prompt.abstract import InteractionBackend
from .prompt.exceptions import UserCancel
from .theme import ClackTheme
from .validate import MinLengthValidator

_style: Style = Style.from_dict(
    {
        "error.type": "fg:ansibrightred",
        "error.message": "fg:ansibrightred",
        "message.info": "fg:darkgray",
    }
)


def _build_argument_parser() -> ArgumentParser:
    parser: ArgumentParser = ArgumentParser(
        prog=constants.APPLICATION_NAME,
        description="Prompts for a masked value on the current terminal",
    )
    parser.add_argument(
        "prompt",
        nargs="?",
        default=constants.DEFAULT_PROMPT_TEXT,
        help="The question to show the user",
    )
    parser.add_argument("--mask", help="The character shown for each typed character")
    parser.add_argument(
        "--min-length",
        type=int,
        default=None,
        help="Reject input shorter than this many characters",
    )
    parser.add_argument(
        "--no-color", action="store_true", help="Disable colored output"
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path of the JSON config file to read settings from",
    )

    return parser


def _display_exception(exception: Exception) -> None:
    print_formatted_text(
        FormattedText(
            [
                ("class:error.type", f"{type(exception).__name__}: "),
                ("class:error.message", "\n".join(str(arg) for arg in exception.args)),
            ]
        ),
        style=_style,
    )


def main(
    argv: List[str] | None = None, backend: InteractionBackend | None = None
) -> int:
    """
    Prompts the user for a masked value on the current terminal

    Args:
        argv (List[str] | None): The command line arguments. Defaults to sys.argv
        backend (InteractionBackend | None): The backend to run the prompt with.
            Defaults to the current terminal

    Returns:
        int: Exit code to return to be returned to the system

    Raises:
        Nothing
    """

    args: Namespace = _build_argument_parser().parse_args(argv)

    # try reading a config instance from the provided config file. otherwise, construct
    # a default config
    config: PromptConfig | None = PromptConfig.from_file(
        args.config if args.config is not None else PromptConfig.default_path()
    )
    if config is None:
        config = PromptConfig.make_default()

    try:
        prompt: Password = Password(
            args.prompt, theme=ClackTheme(color=config.color and not args.no_color)
        ).with_mask(args.mask if args.mask is not None else config.mask)
        if args.min_length is not None:
            prompt = prompt.with_validator(MinLengthValidator(args.min_length))

        value: str = prompt.interact(backend)
    except UserCancel:
        return constants.EXIT_CODE_INTERRUPTED
    except (MaskedPromptException, ValueError) as exc:
        _display_exception(exc)
        return constants.EXIT_CODE_ERROR

    print_formatted_text(
        FormattedText([("class:message.info", f"Received {len(value)} characters")]),
        style=_style,
    )
    return 0
