"""
module maskedprompt.theme.abstract

Contains the definition of the Theme abstract base class that is implemented
by every theme
"""

from .theme import Theme
