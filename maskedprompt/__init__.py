"""
module maskedprompt.__init__

Contains the import of the Password class that is used to prompt a user for
masked input. Also contains definitions that indicate the current version of
maskedprompt.
"""

__version_info__: tuple[int, ...] = (0, 1, 0)
__version__: str = ".".join(map(str, __version_info__))

from .password import Password


def password(prompt_text: str) -> Password:
    """
    Constructs a new Password prompt with the provided prompt text

    Args:
        prompt_text (str): The question to display to the user

    Returns:
        Password: A Password prompt with an empty buffer and default settings

    Raises:
        Nothing
    """

    return Password(prompt_text)
