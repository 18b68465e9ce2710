"""
SampleDesign: data wrapper for a single numeric sample.

Wraps a 1D sample and provides validation and metadata for the
descriptive and normality pipelines. Follows the Design pattern used by
every PySimStats domain.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pysimstats.core.validation import check_sample


@dataclass(frozen=True)
class SampleDesign:
    """
    Design for one-sample statistics.

    Holds a private float64 copy of the caller's sample, so nothing
    downstream can mutate the caller's array. Immutable after construction.

    Construction:
        SampleDesign.from_array(values)
        SampleDesign.from_array(values, name='age')
    """
    _data: NDArray[np.floating[Any]]
    _name: str

    @classmethod
    def from_array(cls, data: ArrayLike, *, name: str = 'x') -> SampleDesign:
        """
        Build SampleDesign from array-like data.

        Parameters
        ----------
        data : array-like
            1D numeric sample. Must be finite; may be empty (the consuming
            statistic decides which error an empty sample deserves).
        name : str
            Variable name used in error messages and reports.
        """
        if hasattr(data, 'values') and not isinstance(data, dict):
            data = data.values
        arr = check_sample(data, name)
        arr = arr.copy()
        arr.setflags(write=False)
        return cls(_data=arr, _name=name)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Sample values in input order (read-only)."""
        return self._data

    @property
    def name(self) -> str:
        """Variable name."""
        return self._name

    @property
    def n(self) -> int:
        """Number of observations."""
        return int(self._data.shape[0])

    def sorted(self) -> NDArray[np.floating[Any]]:
        """Ascending copy of the sample."""
        return np.sort(self._data)

    def __repr__(self) -> str:
        return f"SampleDesign(name={self._name!r}, n={self.n})"
