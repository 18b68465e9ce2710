"""
Configuration designs for the data generator.

PsychometricTestConfig, DemographicConfig and GeneratorConfig are frozen
and validated at construction. The from_mapping() constructors accept
raw form-style mappings where every value may still be a string.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from pysimstats.core.config import GeneratorLimits, DEFAULT_GENERATOR_LIMITS
from pysimstats.core.exceptions import InvalidConfigurationError, DuplicateColumnError
from pysimstats.simulation._common import short_code, ID_COLUMN, TOTAL_PREFIX


DEFAULT_MIN_ITEM = 1.0
DEFAULT_MAX_ITEM = 7.0


def _require_finite(value: float | None, name: str, owner: str) -> None:
    if value is not None and not math.isfinite(value):
        raise InvalidConfigurationError(
            f"{owner}: {name} must be finite, got {value}", field=name, value=value
        )


def _require_integer(value: Any, name: str, owner: str) -> None:
    if not isinstance(value, numbers.Integral):
        raise InvalidConfigurationError(
            f"{owner}: {name} must be an integer, got {value!r}", field=name, value=value
        )


def _require_positive_sd(sd: float, owner: str) -> None:
    if not sd > 0:
        raise InvalidConfigurationError(
            f"{owner}: sd must be > 0, got {sd}", field='sd', value=sd
        )


def _require_ordered_bounds(minimum: float | None, maximum: float | None, owner: str) -> None:
    if minimum is not None and maximum is not None and minimum >= maximum:
        raise InvalidConfigurationError(
            f"{owner}: min ({minimum}) must be less than max ({maximum})",
            field='min', value=minimum,
        )


def _resolve_code(name: str, code: str | None, owner: str, limits: GeneratorLimits) -> str:
    resolved = code if code is not None else short_code(name, limits.short_code_length)
    if not resolved:
        raise InvalidConfigurationError(
            f"{owner}: name {name!r} yields an empty column code; pass code= explicitly",
            field='name', value=name,
        )
    return resolved


# --- raw mapping parsing ---

def _text(raw: Mapping[str, Any], key: str) -> str:
    value = raw.get(key)
    if value is None or not str(value).strip():
        raise InvalidConfigurationError(f"'{key}' is required", field=key, value=value)
    return str(value).strip()


def _number(raw: Mapping[str, Any], key: str) -> float:
    value = raw.get(key)
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationError(
            f"'{key}' must be a number, got {value!r}", field=key, value=value
        ) from e
    if not math.isfinite(number):
        raise InvalidConfigurationError(
            f"'{key}' must be a finite number, got {value!r}", field=key, value=value
        )
    return number


def _integer(raw: Mapping[str, Any], key: str) -> int:
    number = _number(raw, key)
    if number != int(number):
        raise InvalidConfigurationError(
            f"'{key}' must be a whole number, got {raw.get(key)!r}", field=key, value=raw.get(key)
        )
    return int(number)


def _optional_number(raw: Mapping[str, Any], key: str) -> float | None:
    """Blank or missing entries become None."""
    value = raw.get(key)
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return _number(raw, key)


@dataclass(frozen=True)
class PsychometricTestConfig:
    """
    A multi-item test whose items are drawn from N(mean, sd).

    Attributes:
        name: Human-readable test name.
        item_count: Number of items.
        mean: Expected score per item.
        sd: Standard deviation per item (> 0).
        min: Lowest item score; 1 when omitted.
        max: Highest item score; 7 when omitted.
        code: Column code; derived from name when omitted.
    """
    name: str
    item_count: int
    mean: float
    sd: float
    min: float | None = None
    max: float | None = None
    code: str | None = None
    limits: GeneratorLimits = field(default=DEFAULT_GENERATOR_LIMITS, repr=False, compare=False)

    def __post_init__(self) -> None:
        owner = f"test {self.name!r}"
        _require_integer(self.item_count, 'item_count', owner)
        if not (self.limits.items_min <= self.item_count <= self.limits.items_max):
            raise InvalidConfigurationError(
                f"{owner}: item_count must be in [{self.limits.items_min}, "
                f"{self.limits.items_max}], got {self.item_count}",
                field='item_count', value=self.item_count,
            )
        for name in ('mean', 'sd', 'min', 'max'):
            _require_finite(getattr(self, name), name, owner)
        _require_positive_sd(self.sd, owner)
        _require_ordered_bounds(self.item_min, self.item_max, owner)
        object.__setattr__(self, 'code', _resolve_code(self.name, self.code, owner, self.limits))

    def advisories(self) -> list[str]:
        """Non-fatal remarks on the configuration."""
        if self.sd > self.item_count * 5 / 2:
            return [
                f"test {self.name!r}: sd={self.sd} seems high for {self.item_count} items"
            ]
        return []

    @property
    def item_min(self) -> float:
        return self.min if self.min is not None else DEFAULT_MIN_ITEM

    @property
    def item_max(self) -> float:
        return self.max if self.max is not None else DEFAULT_MAX_ITEM

    @property
    def item_columns(self) -> list[str]:
        return [f"{self.code}{k}" for k in range(1, self.item_count + 1)]

    @property
    def total_column(self) -> str:
        return f"{TOTAL_PREFIX}{self.code}"

    @classmethod
    def from_mapping(
        cls,
        raw: Mapping[str, Any],
        *,
        limits: GeneratorLimits = DEFAULT_GENERATOR_LIMITS,
    ) -> PsychometricTestConfig:
        """
        Build from a form-style mapping with keys name, item_count, mean,
        sd, and optionally min, max and code. Blank min/max mean omitted.
        """
        code = raw.get('code')
        return cls(
            name=_text(raw, 'name'),
            item_count=_integer(raw, 'item_count'),
            mean=_number(raw, 'mean'),
            sd=_number(raw, 'sd'),
            min=_optional_number(raw, 'min'),
            max=_optional_number(raw, 'max'),
            code=str(code).strip() if code else None,
            limits=limits,
        )


@dataclass(frozen=True)
class DemographicConfig:
    """
    A single-value variable drawn from N(mean, sd).

    Values are clamped to [min, max] only when both bounds are given,
    then rounded half-up to decimal_places.
    """
    category: str
    mean: float
    sd: float
    min: float | None = None
    max: float | None = None
    decimal_places: int = 2
    code: str | None = None
    limits: GeneratorLimits = field(default=DEFAULT_GENERATOR_LIMITS, repr=False, compare=False)

    def __post_init__(self) -> None:
        owner = f"variable {self.category!r}"
        for name in ('mean', 'sd', 'min', 'max'):
            _require_finite(getattr(self, name), name, owner)
        _require_positive_sd(self.sd, owner)
        _require_ordered_bounds(self.min, self.max, owner)
        _require_integer(self.decimal_places, 'decimal_places', owner)
        if not (self.limits.decimals_min <= self.decimal_places <= self.limits.decimals_max):
            raise InvalidConfigurationError(
                f"{owner}: decimal_places must be in [{self.limits.decimals_min}, "
                f"{self.limits.decimals_max}], got {self.decimal_places}",
                field='decimal_places', value=self.decimal_places,
            )
        object.__setattr__(self, 'code', _resolve_code(self.category, self.code, owner, self.limits))

    @property
    def is_bounded(self) -> bool:
        return self.min is not None and self.max is not None

    def advisories(self) -> list[str]:
        """Non-fatal remarks on the configuration."""
        if self.is_bounded and not (self.min <= self.mean <= self.max):
            return [
                f"variable {self.category!r}: mean={self.mean} lies outside "
                f"[{self.min}, {self.max}]"
            ]
        return []

    @classmethod
    def from_mapping(
        cls,
        raw: Mapping[str, Any],
        *,
        limits: GeneratorLimits = DEFAULT_GENERATOR_LIMITS,
    ) -> DemographicConfig:
        """
        Build from a form-style mapping with keys category, mean, sd and
        optionally min, max, decimal_places and code.

        Blank min/max mean omitted. decimal_places is clamped into the
        allowed range; blank or missing gives the default of 2.
        """
        raw_decimals = raw.get('decimal_places')
        if raw_decimals is None or (isinstance(raw_decimals, str) and not raw_decimals.strip()):
            decimals = limits.decimals_default
        else:
            decimals = min(max(int(_number(raw, 'decimal_places')), limits.decimals_min),
                           limits.decimals_max)
        code = raw.get('code')
        return cls(
            category=_text(raw, 'category'),
            mean=_number(raw, 'mean'),
            sd=_number(raw, 'sd'),
            min=_optional_number(raw, 'min'),
            max=_optional_number(raw, 'max'),
            decimal_places=decimals,
            code=str(code).strip() if code else None,
            limits=limits,
        )


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Full generator configuration.

    Attributes:
        sample_size: Number of rows to generate.
        tests: Psychometric tests, in column order.
        demographics: Demographic variables, placed before the tests.
        limits: Bounds used for validation and sample-size warnings.
    """
    sample_size: int
    tests: tuple[PsychometricTestConfig, ...] = ()
    demographics: tuple[DemographicConfig, ...] = ()
    limits: GeneratorLimits = DEFAULT_GENERATOR_LIMITS

    def __post_init__(self) -> None:
        object.__setattr__(self, 'tests', tuple(self.tests))
        object.__setattr__(self, 'demographics', tuple(self.demographics))
        _require_integer(self.sample_size, 'sample_size', 'generator')
        low, high = self.limits.sample_size_min, self.limits.sample_size_max
        if not (low <= self.sample_size <= high):
            raise InvalidConfigurationError(
                f"sample_size must be in [{low}, {high}], got {self.sample_size}",
                field='sample_size', value=self.sample_size,
            )

    @classmethod
    def from_mappings(
        cls,
        sample_size: int | str,
        tests: Sequence[Mapping[str, Any]] = (),
        demographics: Sequence[Mapping[str, Any]] = (),
        *,
        limits: GeneratorLimits = DEFAULT_GENERATOR_LIMITS,
    ) -> GeneratorConfig:
        """Build the full configuration from raw form-style mappings."""
        return cls(
            sample_size=_integer({'sample_size': sample_size}, 'sample_size'),
            tests=tuple(PsychometricTestConfig.from_mapping(t, limits=limits) for t in tests),
            demographics=tuple(
                DemographicConfig.from_mapping(d, limits=limits) for d in demographics
            ),
            limits=limits,
        )

    def column_plan(self) -> list[str]:
        """
        Column names in export order: ID, demographics, then each test's
        items followed by its total.

        Raises:
            DuplicateColumnError: If two variables produce the same column.
        """
        sources: dict[str, list[str]] = {ID_COLUMN: ['row identifier']}
        plan = [ID_COLUMN]

        def add(column: str, source: str) -> None:
            if column in sources:
                sources[column].append(source)
            else:
                sources[column] = [source]
                plan.append(column)

        for demo in self.demographics:
            add(demo.code, demo.category)
        for test in self.tests:
            for column in test.item_columns:
                add(column, test.name)
            add(test.total_column, test.name)

        for column, owners in sources.items():
            if len(owners) > 1:
                raise DuplicateColumnError(
                    f"Column {column!r} is produced by {', '.join(repr(o) for o in owners)}; "
                    f"pass an explicit code= to disambiguate",
                    column=column,
                    sources=tuple(owners),
                )
        return plan

    def sample_size_warnings(self) -> list[str]:
        warnings_list = []
        if self.sample_size < self.limits.low_power_n:
            warnings_list.append(
                f"sample_size={self.sample_size} is below {self.limits.low_power_n}; "
                f"analyses will have low statistical power"
            )
        elif self.sample_size > self.limits.large_n:
            warnings_list.append(
                f"sample_size={self.sample_size} exceeds {self.limits.large_n}; "
                f"unrealistically large for most studies"
            )
        return warnings_list

    def config_warnings(self) -> list[str]:
        """Sample-size warnings followed by each variable's advisories."""
        warnings_list = self.sample_size_warnings()
        for demo in self.demographics:
            warnings_list.extend(demo.advisories())
        for test in self.tests:
            warnings_list.extend(test.advisories())
        return warnings_list
