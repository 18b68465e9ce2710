"""
Generated dataset solution type.

GeneratedDataset wraps Result[DatasetParams] with row and column access,
descriptive statistics per column and CSV export.
"""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pysimstats.core.exceptions import ValidationError
from pysimstats.core.result import Result
from pysimstats.descriptive.solution import DescriptiveSolution
from pysimstats.descriptive.solvers import compute_descriptives
from pysimstats.simulation._common import DatasetParams
from pysimstats.simulation.design import GeneratorConfig


def _cell(value: Any) -> int | float:
    if isinstance(value, np.integer):
        return int(value)
    return float(value)


@dataclass
class GeneratedDataset:
    """
    User-facing simulated dataset.

    Columns are stored as read-only arrays. rows and to_records() build
    plain dicts keyed by column name with ID first.
    """
    _result: Result[DatasetParams]
    _config: GeneratorConfig

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    @property
    def columns(self) -> tuple[str, ...]:
        return tuple(self._result.params.columns)

    @property
    def numeric_columns(self) -> tuple[str, ...]:
        """Every column except ID."""
        return self.columns[1:]

    @property
    def sample_size(self) -> int:
        return self._result.params.sample_size

    def __len__(self) -> int:
        return self.sample_size

    def column(self, name: str) -> NDArray:
        """
        Values of one column (read-only).

        Raises:
            ValidationError: If the column does not exist.
        """
        try:
            return self._result.params.columns[name]
        except KeyError:
            raise ValidationError(
                f"Unknown column {name!r}; available: {', '.join(self.columns)}"
            ) from None

    @property
    def rows(self) -> tuple[dict[str, int | float], ...]:
        return tuple(self.to_records())

    def to_records(self) -> list[dict[str, int | float]]:
        """Fresh list of row dicts; mutating it does not affect the dataset."""
        columns = self._result.params.columns
        names = list(columns)
        return [
            {name: _cell(columns[name][i]) for name in names}
            for i in range(self.sample_size)
        ]

    def describe(self, name: str) -> DescriptiveSolution:
        """Descriptive statistics of one column."""
        return compute_descriptives(self.column(name), name=name)

    def to_csv(self) -> str:
        """
        Comma-separated text with a header row.

        Floats are written with repr() so the decimal separator is always '.'.
        """
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator='\n')
        writer.writerow(self.columns)
        for record in self.to_records():
            writer.writerow(
                str(v) if isinstance(v, int) else repr(v) for v in record.values()
            )
        return buffer.getvalue()

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        lines = [
            f"Simulated dataset: {self.sample_size} rows, {len(self.columns)} columns",
            f"Demographics: {', '.join(d.code for d in self._config.demographics) or 'none'}",
            f"Tests: {', '.join(f'{t.code} ({t.item_count} items)' for t in self._config.tests) or 'none'}",
        ]
        lines.extend(f"Warning: {w}" for w in self.warnings)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"GeneratedDataset(n={self.sample_size}, columns={len(self.columns)})"
