__docformat__ = 'google'

__all__ = [
    'to_upper',
    'to_lower',
    'capitalize',
    'to_camel_case',
    'to_snake_case',
    'to_kebab_case',
    'to_pascal_case',
    'separate_word_boundaries'
]

from typing import List
from textcase.errors import InvalidInputType
from textcase.validation import validate_and_clean
from textcase.patterns import (
    WHITESPACE_RUN_PATTERN,
    WORD_BOUNDARY_PATTERN,
    WORD_BOUNDARY_FORMAT,
    SPACE,
    SNAKE_SEPARATOR,
    KEBAB_SEPARATOR
)

def to_upper(text: str) -> str:
    """
    Uppercase every character.

    Not validated: a non-string fails with `AttributeError`.

    Example:
        >>> to_upper('Fort Kent')
        'FORT KENT'
    """
    return text.upper()

def to_lower(text: str) -> str:
    """
    Lowercase every character.

    Not validated: a non-string fails with `AttributeError`.

    Example:
        >>> to_lower('Fort Kent')
        'fort kent'
    """
    return text.lower()

def title_word(word: str) -> str:
    """
    Uppercase the first character of a word and lowercase the rest.

    An empty word stays empty.

    @private
    """
    return word[:1].upper() + word[1:].lower()

def split_words(text: str) -> List[str]:
    """
    Validate, trim and split text on runs of whitespace.

    Whitespace-only input gives a single empty word, not an empty list.

    @private
    """
    return WHITESPACE_RUN_PATTERN.split(validate_and_clean(text))

def capitalize(text: str) -> str:
    """
    Capitalize the first letter of each space-separated word.

    Text is split on single spaces, so runs of spaces survive unchanged.
    Only the space character is a delimiter; tabs and newlines are part of words.
    Not validated: a non-string fails with `AttributeError`.

    Args:
        text: Text to capitalize

    Returns:
        Text with each word's first character uppercased and the rest lowercased

    Example:
        >>> capitalize('hello world')
        'Hello World'
        >>> capitalize('BIG  twenty')
        'Big  Twenty'
        >>> capitalize('')
        ''
    """
    words = text.split(SPACE)
    return SPACE.join(word if not word else title_word(word) for word in words)

def to_camel_case(text: str) -> str:
    """
    Convert text to camelCase.

    Args:
        text: Whitespace-separated words

    Returns:
        First word lowercased, later words capitalized, no separators

    Raises:
        InvalidInputType: if `text` is not a string

    Example:
        >>> to_camel_case('hello world')
        'helloWorld'
        >>> to_camel_case('  Hello   World  ')
        'helloWorld'
    """
    first, *rest = split_words(text)
    return first.lower() + ''.join(map(title_word, rest))

def to_snake_case(text: str) -> str:
    """
    Convert text to snake_case.

    Raises:
        InvalidInputType: if `text` is not a string

    Example:
        >>> to_snake_case('Hello World')
        'hello_world'
    """
    return SNAKE_SEPARATOR.join(map(str.lower, split_words(text)))

def to_kebab_case(text: str) -> str:
    """
    Convert text to kebab-case.

    Raises:
        InvalidInputType: if `text` is not a string

    Example:
        >>> to_kebab_case('Hello World')
        'hello-world'
    """
    return KEBAB_SEPARATOR.join(map(str.lower, split_words(text)))

def to_pascal_case(text: str) -> str:
    """
    Convert text to PascalCase.

    Raises:
        InvalidInputType: if `text` is not a string

    Example:
        >>> to_pascal_case('hello world')
        'HelloWorld'
    """
    return ''.join(map(title_word, split_words(text)))

def separate_word_boundaries(text: str) -> str:
    """
    Insert a space wherever a lowercase letter is followed by an uppercase letter.

    Separates camelCase and PascalCase names into words. Acronyms are kept
    together because an uppercase-to-uppercase step is not a boundary.
    The text is not trimmed and its case is not changed.

    Args:
        text: A camelCase or PascalCase name

    Returns:
        Input with spaces added between words

    Raises:
        InvalidInputType: if `text` is not a string

    Example:
        >>> separate_word_boundaries('helloWorld')
        'hello World'
        >>> separate_word_boundaries('myHTTPRequest')
        'my HTTPRequest'
        >>> separate_word_boundaries('HTTPServer')
        'HTTPServer'
    """
    if not isinstance(text, str):
        raise InvalidInputType()
    return WORD_BOUNDARY_PATTERN.sub(WORD_BOUNDARY_FORMAT, text)
