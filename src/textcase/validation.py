__docformat__ = 'google'

__all__ = [
    'validate_and_clean'
]

from typing import Any
from textcase.errors import InvalidInputType
from textcase.patterns import WHITESPACE

def validate_and_clean(text: Any) -> str:
    """
    Check that input is a string and trim surrounding whitespace.

    Whitespace means the Unicode White_Space characters listed in
    `textcase.patterns.WHITESPACE`, not Python's wider `str.isspace()` set.

    Args:
        text: Any value; only `str` is accepted

    Returns:
        Input with leading and trailing whitespace removed

    Raises:
        InvalidInputType: if `text` is not a string

    Example:
        >>> validate_and_clean('  Cross Lake  ')
        'Cross Lake'
        >>> validate_and_clean('   ')
        ''
    """
    if not isinstance(text, str):
        raise InvalidInputType()
    return text.strip(WHITESPACE)
