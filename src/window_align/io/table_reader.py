"""
Author: Rowel Facunla
Loading source and query string columns from tabular files.
"""

import logging
import os
from typing import List, Optional, Union

import pandas as pd

from ..core.errors import InputFormatError, InvalidQueryError

logger = logging.getLogger(__name__)

QUERY_LENGTH = 20


def read_table(filepath: str) -> pd.DataFrame:
    """
    Read a CSV file with every cell kept as a string.

    Args:
        filepath: Path to the CSV file

    Returns:
        DataFrame of strings (empty cells are '')
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"Input file not found: {filepath}")
    if not os.path.isfile(filepath):
        raise InputFormatError(f"Not a file: {filepath}")

    try:
        return pd.read_csv(filepath, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError as e:
        raise InputFormatError(f"File is empty: {filepath}") from e
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise InputFormatError(f"Malformed table in {filepath}: {e}") from e


def select_column(df: pd.DataFrame, column: Optional[Union[str, int]], filepath: str = "<table>") -> pd.Series:
    """
    Pick the string column by header name, falling back to position 0.

    An integer selects by position. A name that is not in the header falls
    back to the first column, matching files written without that header.
    """
    if df.shape[1] == 0:
        raise InputFormatError(f"No columns found in {filepath}")

    if isinstance(column, int):
        if column < 0 or column >= df.shape[1]:
            raise InputFormatError(
                f"Column position {column} out of range in {filepath} ({df.shape[1]} columns)"
            )
        return df.iloc[:, column]

    if column and column in df.columns:
        return df[column]

    if column:
        logger.debug(f"Column '{column}' not in {filepath}; using column 0 ({df.columns[0]!r})")
    return df.iloc[:, 0]


def _fold(series: pd.Series) -> List[str]:
    return series.str.upper().tolist()


def load_sources(filepath: str, column: Optional[Union[str, int]] = 'a_sequence') -> List[str]:
    """Load source strings, upper-cased. Values of any length are kept as-is."""
    df = read_table(filepath)
    sources = _fold(select_column(df, column, filepath))
    logger.info(f"Loaded {len(sources)} source strings from {filepath}")
    return sources


def load_queries(
    filepath: str,
    column: Optional[Union[str, int]] = 'b_sequence',
    query_length: int = QUERY_LENGTH,
) -> List[str]:
    """Load query strings, upper-cased; every one must be query_length long."""
    df = read_table(filepath)
    queries = _fold(select_column(df, column, filepath))
    validate_queries(queries, query_length)
    logger.info(f"Loaded {len(queries)} query strings from {filepath}")
    return queries


def validate_queries(queries: List[str], query_length: int = QUERY_LENGTH):
    """Raise InvalidQueryError on the first query with the wrong length."""
    for row, query in enumerate(queries, start=1):
        if len(query) != query_length:
            raise InvalidQueryError(row, query, query_length)


__all__ = [
    'QUERY_LENGTH',
    'read_table',
    'select_column',
    'load_sources',
    'load_queries',
    'validate_queries',
]
