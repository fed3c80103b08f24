"""
module maskedprompt.prompt.abstract.interactionbackend

Contains the definition of the InteractionBackend class, an abstract base class
that is extended by all terminal integrations (i.e., prompt_toolkit) that can
drive a prompt interaction
"""

from abc import ABCMeta, abstractmethod
from typing import Any


class InteractionBackend(metaclass=ABCMeta):
    """
    class InteractionBackend

    Abstract base class that is extended by all terminal integrations
    (i.e., prompt_toolkit) that can drive a prompt interaction
    """

    # pylint: disable=too-few-public-methods

    @abstractmethod
    def run(
        self: "InteractionBackend",
        interaction: "promptinteraction.PromptInteraction",
    ) -> Any:
        """
        Runs the provided interaction on the terminal until it is submitted or
        cancelled. Key presses are passed to interaction.handle_key() one at a
        time and the interaction is rendered after each of them.

        Args:
            interaction (PromptInteraction): The prompt to drive

        Returns:
            Any: The value the interaction was submitted with

        Raises:
            UserCancel: If the user abandoned the prompt
            Exception: Terminal I/O errors are propagated unchanged
        """


# pylint: disable=wrong-import-position
from . import promptinteraction
