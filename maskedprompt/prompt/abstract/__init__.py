"""
module maskedprompt.prompt.abstract

Contains the definitions of the PromptInteraction abstract base class that is
extended by every prompt and the InteractionBackend abstract base class that
is extended by every terminal integration (i.e., prompt_toolkit) that drives them
"""

from .interactionbackend import InteractionBackend
from .promptinteraction import PromptInteraction
