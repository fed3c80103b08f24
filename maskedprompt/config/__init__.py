"""
module maskedprompt.config

Contains the definition of the PromptConfig dataclass that stores the user's
maskedprompt settings
"""

from .promptconfig import PromptConfig
