"""
module maskedprompt.maskedpromptexception

Contains the definition of the MaskedPromptException class, the parent of all
exceptions directly thrown by maskedprompt
"""


class MaskedPromptException(RuntimeError):
    """
    class MaskedPromptException

    The parent class of all exceptions directly thrown by maskedprompt
    """
