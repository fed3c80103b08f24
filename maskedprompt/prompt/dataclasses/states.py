"""
module maskedprompt.prompt.dataclasses.states

Contains the definitions of the Active, Error, Submit and Cancel dataclasses and
the State union that combines them. Exactly one of these describes a prompt
interaction at any time.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Active:
    """
    class Active

    The interaction continues accepting input
    """


@dataclass(frozen=True)
class Error:
    """
    class Error

    Validation failed. The interaction continues accepting input and the
    message should be shown to the user
    """

    message: str


@dataclass(frozen=True)
class Submit:
    """
    class Submit

    The interaction has ended and produced a value
    """

    value: Any


@dataclass(frozen=True)
class Cancel:
    """
    class Cancel

    The interaction was aborted by the user. Only ever produced by an
    interaction backend, never by a prompt itself
    """


State = Active | Error | Submit | Cancel
