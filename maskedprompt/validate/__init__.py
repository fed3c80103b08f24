"""
module maskedprompt.validate

Contains the Validator abstract base class, the built-in validators and the
adapt_validator() function that normalizes any supported validator into a
plain validation function
"""

from .abstract import Validator
from .adapt import adapt_validator, ValidationFunction
from .minlengthvalidator import MinLengthValidator
