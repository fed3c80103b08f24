"""
module maskedprompt.prompt.exceptions

Contains the definitions of all exceptions thrown by prompt interactions
"""

from .usercancel import UserCancel
