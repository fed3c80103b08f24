"""
module maskedprompt.theme

Contains the Theme abstract base class and the themes that ship with
maskedprompt
"""

from .abstract import Theme
from .clacktheme import ClackTheme
