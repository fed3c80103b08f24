"""
module maskedprompt.prompt.dataclasses

Contains the dataclass definitions of every state that a prompt interaction
can be in after processing a key press
"""

from .states import Active, Cancel, Error, State, Submit
