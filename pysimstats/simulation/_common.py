"""
Common types and helpers for data simulation.

Column-code derivation, half-up rounding and the parameter payloads the
generator backend returns.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray


_NON_ALNUM = re.compile(r'[^a-zA-Z0-9\s]')

ID_COLUMN = 'ID'
TOTAL_PREFIX = 'Total_'


def short_code(name: str, max_length: int = 10) -> str:
    """
    Column code from the initials of a human-readable name.

    Characters other than ASCII letters, digits and whitespace are
    dropped, then the first character of every whitespace-separated
    token is upper-cased and joined. Blank names give ''.

    >>> short_code("Work Engagement Scale")
    'WES'
    >>> short_code("Big-Five  inventory (short)")
    'BIS'
    """
    if not isinstance(name, str) or not name.strip():
        return ''
    tokens = _NON_ALNUM.sub('', name).split()
    return ''.join(token[0].upper() for token in tokens)[:max_length]


def round_half_up(values: ArrayLike, decimals: int = 0) -> NDArray[np.float64]:
    """
    Round to the given decimal places with halves rounded toward +inf.

    Unlike np.round (banker's rounding), 2.5 -> 3 and -2.5 -> -2.
    """
    factor = 10.0 ** decimals
    return np.floor(np.asarray(values, dtype=np.float64) * factor + 0.5) / factor


@dataclass(frozen=True)
class TestScores:
    """
    Item scores of one simulated respondent on one test.

    Attributes:
        items: Integer item scores, shape (item_count,).
        total: Sum of the item scores.
    """
    __test__ = False  # keep pytest from collecting this as a test class

    items: NDArray[np.int64]
    total: int


@dataclass(frozen=True)
class DatasetParams:
    """
    Parameter payload for a generated dataset.

    Attributes:
        columns: Column name -> values, in export order, ID first.
        sample_size: Number of rows.
    """
    columns: dict[str, NDArray[Any]]
    sample_size: int
