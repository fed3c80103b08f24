"""
module maskedprompt.cursor

Contains the definition of the StringCursor class, the editable character
sequence that every prompt stores its input buffer in
"""

from .stringcursor import StringCursor
