"""
Pure text-case transformations: upper/lower case, word capitalization,
camelCase, snake_case, kebab-case, PascalCase, and splitting camelCase
names back into words.

See individual module documentation for detailed information.
"""
from . import errors
from . import patterns
from . import validation
from . import transforms
from . import styles
from . import frames

from .errors import InvalidInputType
from .validation import validate_and_clean
from .transforms import (
    to_upper,
    to_lower,
    capitalize,
    to_camel_case,
    to_snake_case,
    to_kebab_case,
    to_pascal_case,
    separate_word_boundaries
)
from .styles import CaseStyle, convert

__all__ = [
    'errors',
    'patterns',
    'validation',
    'transforms',
    'styles',
    'frames',
    'InvalidInputType',
    'validate_and_clean',
    'to_upper',
    'to_lower',
    'capitalize',
    'to_camel_case',
    'to_snake_case',
    'to_kebab_case',
    'to_pascal_case',
    'separate_word_boundaries',
    'CaseStyle',
    'convert'
]
