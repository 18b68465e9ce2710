"""
PairedDesign: validated input for correlation analysis.

Holds two equal-length samples, the requested sidedness and the engine
settings. Immutable, validated at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from numpy.typing import ArrayLike

from pysimstats.core.config import CorrelationConfig, DEFAULT_CORRELATION
from pysimstats.core.validation import check_consistent_length, check_min_samples
from pysimstats.descriptive.design import SampleDesign
from pysimstats.correlation._common import Sidedness


@dataclass(frozen=True)
class PairedDesign:
    """
    Design for a correlation between two paired samples.

    Construction:
        PairedDesign.from_arrays(x, y)
        PairedDesign.from_arrays(x, y, sidedness='one-sided', names=('age', 'iq'))
    """
    x: SampleDesign
    y: SampleDesign
    sidedness: Sidedness
    config: CorrelationConfig

    @classmethod
    def from_arrays(
        cls,
        x: ArrayLike | SampleDesign,
        y: ArrayLike | SampleDesign,
        *,
        sidedness: Sidedness | str = Sidedness.TWO_SIDED,
        config: CorrelationConfig | None = None,
        names: tuple[str, str] = ('x', 'y'),
    ) -> PairedDesign:
        """
        Create a paired design with validation.

        Raises:
            ValidationError: If sidedness is not recognised or either
                sample is non-numeric or non-finite.
            LengthMismatchError: If x and y differ in length.
            InsufficientDataError: If there are fewer than
                config.min_observations pairs.
        """
        cfg = config if config is not None else DEFAULT_CORRELATION
        side = Sidedness.parse(sidedness)

        x_design = x if isinstance(x, SampleDesign) else SampleDesign.from_array(x, name=names[0])
        y_design = y if isinstance(y, SampleDesign) else SampleDesign.from_array(y, name=names[1])

        check_consistent_length(
            x_design.data, y_design.data, names=(x_design.name, y_design.name)
        )
        check_min_samples(x_design.data, cfg.min_observations, x_design.name)

        return cls(x=x_design, y=y_design, sidedness=side, config=cfg)

    @property
    def n(self) -> int:
        return self.x.n

    def __repr__(self) -> str:
        return (
            f"PairedDesign(x={self.x.name!r}, y={self.y.name!r}, n={self.n}, "
            f"sidedness={self.sidedness.value!r})"
        )
