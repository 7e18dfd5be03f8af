"""Regex patterns used by the case transforms.
"""

__docformat__ = 'google'

import re
from typing import List

# Building blocks
LOWER_ASCII: str = "[a-z]"
"""@private"""

UPPER_ASCII: str = "[A-Z]"
"""@private"""

WORD_BOUNDARY: str = f"({LOWER_ASCII})({UPPER_ASCII})"
""" Uncompiled regex building block representing a camelCase word boundary.

Only ASCII letters count. Digits, punctuation, non-ASCII letters and
runs of capitals (acronyms) never form a boundary."""

WHITESPACE_CODEPOINTS: List[int] = [
    *range(0x0009, 0x000D + 1), 0x0020, 0x0085, 0x00A0, 0x1680,
    *range(0x2000, 0x200A + 1), 0x2028, 0x2029, 0x202F, 0x205F, 0x3000
]
"""Code points with the Unicode White_Space property.

Python's `str.strip()` and `\\s` also treat the information separators
U+001C to U+001F as whitespace; Unicode does not, and neither does this list."""

WHITESPACE: str = ''.join(map(chr, WHITESPACE_CODEPOINTS))
"""Every Unicode whitespace character, usable as a `str.strip()` argument.

Used in `textcase.validation.validate_and_clean`."""

# Patterns
WHITESPACE_RUN_PATTERN: re.Pattern = re.compile(f"[{re.escape(WHITESPACE)}]+")
"""Compiled regex matching one or more Unicode whitespace characters.

Used in `textcase.transforms.split_words`."""

WORD_BOUNDARY_PATTERN: re.Pattern = re.compile(WORD_BOUNDARY)
"""Compiled regex matching a lowercase letter followed by an uppercase letter.

Capture groups:
    1. the lowercase letter
    2. the uppercase letter

Used in `textcase.transforms.separate_word_boundaries`."""

WORD_BOUNDARY_FORMAT: str = r"\1 \2"
"""Replacement that puts a single space between the two captured letters."""

## Word separators
SPACE: str = " "
"""Delimiter used by `textcase.transforms.capitalize` for both splitting and joining."""

SNAKE_SEPARATOR: str = "_"
KEBAB_SEPARATOR: str = "-"
