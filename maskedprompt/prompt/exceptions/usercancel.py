"""
module maskedprompt.prompt.exceptions.usercancel

Contains the definition of the UserCancel exception class, an exception
thrown whenever the user has performed an action that represents intent
to abandon the current prompt
"""

from ...maskedpromptexception import MaskedPromptException


class UserCancel(MaskedPromptException):
    """
    class UserCancel

    An exception thrown whenever the user has performed an action that
    represents intent to abandon the current prompt
    """
