"""
module maskedprompt.validate.abstract

Contains the definition of the Validator abstract base class that is
extended by all class-based validators
"""

from .validator import Validator
