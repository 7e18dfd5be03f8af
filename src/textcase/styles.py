"""Named case styles and a single entry point for converting between them."""

__docformat__ = 'google'

__all__ = [
    'CaseStyle',
    'convert'
]

from enum import Enum
from typing import Callable, Union
from textcase import transforms

class CaseStyle(Enum):
    """
    Enumeration of the case styles supported by `textcase.styles.convert`.
    """
    UPPER = "upper"
    LOWER = "lower"
    CAPITALIZE = "capitalize"
    CAMEL = "camel"
    SNAKE = "snake"
    KEBAB = "kebab"
    PASCAL = "pascal"
    SEPARATED = "separated"

    @property
    def transform(self) -> Callable[[str], str]:
        """The function in `textcase.transforms` that produces this style."""
        return _TRANSFORMS[self]

    @classmethod
    def parse(cls, style: Union['CaseStyle', str]) -> 'CaseStyle':
        """
        Resolve a style given as a member or as its name.

        Args:
            style: A `CaseStyle`, or a string such as 'snake' or 'SNAKE'

        Raises:
            ValueError: if the name does not match any style

        Example:
            >>> CaseStyle.parse('Kebab')
            <CaseStyle.KEBAB: 'kebab'>
        """
        if isinstance(style, cls):
            return style
        try:
            return cls(str(style).lower())
        except ValueError:
            valid = ', '.join(member.value for member in cls)
            raise ValueError(f"Unknown case style {style!r}; expected one of: {valid}") from None

_TRANSFORMS = {
    CaseStyle.UPPER: transforms.to_upper,
    CaseStyle.LOWER: transforms.to_lower,
    CaseStyle.CAPITALIZE: transforms.capitalize,
    CaseStyle.CAMEL: transforms.to_camel_case,
    CaseStyle.SNAKE: transforms.to_snake_case,
    CaseStyle.KEBAB: transforms.to_kebab_case,
    CaseStyle.PASCAL: transforms.to_pascal_case,
    CaseStyle.SEPARATED: transforms.separate_word_boundaries
}

def convert(text: str, style: Union[CaseStyle, str]) -> str:
    """
    Convert text to the given case style.

    Args:
        text: Text to convert
        style: A `CaseStyle` or its string value

    Returns:
        Exactly what the style's transform returns for `text`

    Raises:
        ValueError: if `style` is not a known style
        InvalidInputType: if the style validates its input and `text` is not a string

    Example:
        >>> convert('Cross Lake Twp', 'snake')
        'cross_lake_twp'
        >>> convert('crossLakeTwp', CaseStyle.SEPARATED)
        'cross Lake Twp'
    """
    return CaseStyle.parse(style).transform(text)
