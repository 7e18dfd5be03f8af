"""Apply case transforms to pandas columns and column labels.

Names usually arrive in tables (one name per row, or one field per column),
so these helpers run the transforms across a `pandas.Series` or over the
labels of a `pandas.DataFrame` without touching the original object.
"""

__docformat__ = 'google'

__all__ = [
    'transform_series',
    'rename_columns',
    'identifier_columns'
]

import logging
from collections import defaultdict
from keyword import iskeyword
from typing import Union
import pandas as pd
from textcase.styles import CaseStyle

logger = logging.getLogger(__name__)

def transform_series(series: pd.Series, style: Union[CaseStyle, str]) -> pd.Series:
    """
    Apply a case style to every value of a Series.

    Missing values are left in place and a nullable `string` dtype is kept,
    so `pd.NA` stays `pd.NA`. Index and name are kept.

    Args:
        series: Series of strings
        style: A `CaseStyle` or its string value

    Returns:
        A new Series with converted values

    Example:
        >>> transform_series(pd.Series(['Fort Kent', None], dtype=object), 'kebab').tolist()
        ['fort-kent', None]
    """
    case_style = CaseStyle.parse(style)
    logger.debug("Applying %s case to %d values", case_style.value, len(series))
    result = series.map(case_style.transform, na_action='ignore')
    # map() hands back object dtype with nan in place of pd.NA
    if isinstance(series.dtype, pd.StringDtype):
        result = result.astype(series.dtype)
    return result

def rename_columns(frame: pd.DataFrame, style: Union[CaseStyle, str]) -> pd.DataFrame:
    """
    Convert the column labels of a DataFrame to a case style.

    Labels that are not strings are kept as they are.

    Args:
        frame: Any DataFrame
        style: A `CaseStyle` or its string value

    Returns:
        A copy of `frame` with renamed columns

    Raises:
        ValueError: if two different labels convert to the same name

    Example:
        >>> rename_columns(pd.DataFrame(columns=['Town Name', 'GNIS ID']), 'snake').columns.tolist()
        ['town_name', 'gnis_id']
    """
    case_style = CaseStyle.parse(style)
    mapping = {
        column: case_style.transform(column)
        for column in frame.columns if isinstance(column, str)
    }
    _check_collisions(frame.columns, mapping)
    logger.debug("Renaming %d columns to %s case", len(mapping), case_style.value)
    return frame.rename(columns=mapping)

def identifier_columns(frame: pd.DataFrame) -> pd.DataFrame:
    """
    Rename columns to snake_case names that are safe to use as attributes.

    Names that collide with Python keywords get a trailing underscore.

    Example:
        >>> identifier_columns(pd.DataFrame(columns=['Class', 'From'])).columns.tolist()
        ['class_', 'from_']
    """
    renamed = rename_columns(frame, CaseStyle.SNAKE)
    keywords = {
        column: f"{column}_"
        for column in renamed.columns if isinstance(column, str) and iskeyword(column)
    }
    _check_collisions(renamed.columns, keywords)
    return renamed.rename(columns=keywords)

def _check_collisions(columns: pd.Index, mapping: dict):
    sources = defaultdict(set)
    for column in columns:
        sources[mapping.get(column, column)].add(column)
    clashes = [
        f"{', '.join(sorted(map(repr, labels)))} -> {name!r}"
        for name, labels in sources.items() if len(labels) > 1
    ]
    if clashes:
        raise ValueError(f"Renaming would merge distinct columns: {'; '.join(sorted(clashes))}")
