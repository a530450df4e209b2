"""Aggregation, formula and frequency options for advanced queries.

The service resamples a series to ``frequency`` using ``aggregationTypes``
and then applies ``formulas``; both of the latter take one token per series.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .config import SERIES_SEPARATOR
from .core.errors import EvdsValidationError, ReturnError
from .date import Date, DatePreference, DateRange


class AggregationType(Enum):
    AVERAGE = "avg"
    MINIMUM = "min"
    MAXIMUM = "max"
    BEGINNING = "first"
    END = "last"
    CUMULATIVE = "sum"


class Formula(Enum):
    LEVEL = 0
    PERCENTAGE_CHANGE = 1
    DIFFERENCE = 2
    YEAR_TO_YEAR_PERCENT_CHANGE = 3
    YEAR_TO_YEAR_DIFFERENCES = 4
    PERCENTAGE_CHANGE_FROM_END_OF_PREVIOUS_YEAR = 5
    DIFFERENCE_FROM_END_OF_PREVIOUS_YEAR = 6
    MOVING_AVERAGE = 7
    MOVING_SUM = 8


class DataFrequency(Enum):
    DAILY = 1
    BUSINESS = 2
    WEEKLY = 3
    SEMIMONTHLY = 4
    MONTHLY = 5
    QUARTERLY = 6
    SEMIANNUAL = 7
    ANNUAL = 8


_SINGLE_DATE_FREQUENCIES = frozenset({DataFrequency.DAILY, DataFrequency.BUSINESS})


@dataclass(slots=True, frozen=True)
class AdvancedProcesses:
    aggregation_type: AggregationType = AggregationType.AVERAGE
    formula: Formula = Formula.LEVEL
    data_frequency: DataFrequency = DataFrequency.DAILY

    def __post_init__(self) -> None:
        if not isinstance(self.aggregation_type, AggregationType):
            raise TypeError("aggregation_type must be AggregationType")
        if not isinstance(self.formula, Formula):
            raise TypeError("formula must be Formula")
        if not isinstance(self.data_frequency, DataFrequency):
            raise TypeError("data_frequency must be DataFrequency")

    def check_compatibility(self, preference: DatePreference) -> None:
        """Reject combinations a single observation cannot satisfy."""

        if isinstance(preference, DateRange):
            return
        if not isinstance(preference, Date):
            raise TypeError(
                f"date preference must be Date or DateRange, not {type(preference).__name__}"
            )
        if self.formula is not Formula.LEVEL:
            raise EvdsValidationError(
                ReturnError.INCOMPATIBLE_ADVANCED_PROCESS,
                field="formula",
                value=f"{self.formula.name} needs a date range",
            )
        if self.data_frequency not in _SINGLE_DATE_FREQUENCIES:
            raise EvdsValidationError(
                ReturnError.INCOMPATIBLE_ADVANCED_PROCESS,
                field="data_frequency",
                value=f"{self.data_frequency.name} needs a date range",
            )

    def to_params(self, series_count: int) -> list[tuple[str, str]]:
        if series_count < 1:
            raise ValueError("series_count must be >= 1")
        aggregation = SERIES_SEPARATOR.join([self.aggregation_type.value] * series_count)
        formula = SERIES_SEPARATOR.join([str(self.formula.value)] * series_count)
        return [
            ("aggregationTypes", aggregation),
            ("formulas", formula),
            ("frequency", str(self.data_frequency.value)),
        ]


__all__ = [
    "AggregationType",
    "Formula",
    "DataFrequency",
    "AdvancedProcesses",
]
