"""
module maskedprompt.invalidmaskexception

Contains the definition of the InvalidMaskException class, an exception thrown
whenever a mask that is not exactly one character is provided to a prompt
"""

from .maskedpromptexception import MaskedPromptException


class InvalidMaskException(MaskedPromptException):
    """
    class InvalidMaskException

    An exception thrown whenever a mask that is not exactly one character
    is provided to a prompt
    """
