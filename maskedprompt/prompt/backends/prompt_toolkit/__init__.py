"""
module maskedprompt.prompt.backends.prompt_toolkit

Contains the definition of the PromptToolkitBackend class, the interaction
backend that drives prompts using prompt_toolkit
"""

from .prompttoolkitbackend import PromptToolkitBackend
