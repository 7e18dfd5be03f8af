"""Case transformation utilities.

This module provides functions for changing the case of text and for
converting between naming conventions (camelCase, snake_case, kebab-case,
PascalCase).
"""

from .transforms import __all__
from .transforms import *
