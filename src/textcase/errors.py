"""Errors raised by textcase functions."""

__docformat__ = 'google'

__all__ = [
    'INVALID_INPUT_MESSAGE',
    'InvalidInputType'
]

INVALID_INPUT_MESSAGE: str = "Input must be a string"
"""Message carried by every `InvalidInputType` error."""

class InvalidInputType(TypeError):
    """
    Raised when a validating transform receives something other than a `str`.

    Subclasses `TypeError`, so existing `except TypeError` handlers still apply.
    """
    def __init__(self, message: str = INVALID_INPUT_MESSAGE):
        super().__init__(message)
