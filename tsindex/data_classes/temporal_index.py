# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0
"""Specifies the temporal index dataclass."""

from typing import Iterator, Optional, Union

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, model_validator

from tsindex.enums import IndexClass
from tsindex.exceptions import UnsupportedIndexClassError

# Base frequency codes of the period classes, e.g. "Q" for "Q-DEC"
PERIOD_FREQUENCY_CLASSES = {
    "D": IndexClass.DATE,
    "M": IndexClass.YEARMONTH,
    "Q": IndexClass.YEARQUARTER,
}


def infer_index_class(values: pd.Index) -> IndexClass:
    """Determine the class of a pandas index holding temporal values.

    Args:
        values: A ``pd.DatetimeIndex`` or ``pd.PeriodIndex``.

    Returns:
        The matching index class.

    Raises:
        UnsupportedIndexClassError: For any other index, or for a period index
            with a frequency other than daily, monthly or quarterly.

    """
    if isinstance(values, pd.DatetimeIndex):
        return IndexClass.DATETIME
    if isinstance(values, pd.PeriodIndex):
        base_frequency = values.freqstr.split("-")[0]
        if base_frequency in PERIOD_FREQUENCY_CLASSES:
            return PERIOD_FREQUENCY_CLASSES[base_frequency]
        raise UnsupportedIndexClassError(found=f"period frequency {values.freqstr}")
    raise UnsupportedIndexClassError(found=type(values).__name__)


class TemporalIndex(BaseModel):
    """Ordered sequence of instants of a single recognized class.

    Datetimes are held as a ``pd.DatetimeIndex`` (optionally timezone aware),
    dates, year-months and year-quarters as a ``pd.PeriodIndex`` with daily,
    monthly and quarterly frequency. The order of the source is kept as is.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    instants: Union[pd.DatetimeIndex, pd.PeriodIndex] = Field(
        ..., description="The instants, in the order presented by the source."
    )
    index_class: IndexClass = Field(
        ..., description="Class shared by all instants."
    )

    @model_validator(mode="after")
    def _instants_match_index_class(self) -> "TemporalIndex":
        found = infer_index_class(self.instants)
        if found != self.index_class:
            raise ValueError(
                f"Instants of class {found.value} do not match declared class "
                f"{self.index_class.value}"
            )
        return self

    @property
    def tzone(self) -> Optional[str]:
        """Timezone name of a timezone aware datetime index, None otherwise."""
        if self.index_class != IndexClass.DATETIME or self.instants.tz is None:
            return None
        return str(self.instants.tz)

    @property
    def start(self):
        return self.instants[0] if len(self.instants) > 0 else None

    @property
    def end(self):
        return self.instants[-1] if len(self.instants) > 0 else None

    def __len__(self) -> int:
        return len(self.instants)

    def __iter__(self) -> Iterator:
        return iter(self.instants)

    def __getitem__(self, key):
        """Positional access; slices return a TemporalIndex of the same class."""
        if isinstance(key, slice):
            return TemporalIndex(
                instants=self.instants[key], index_class=self.index_class
            )
        return self.instants[key]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TemporalIndex):
            return NotImplemented
        return (
            self.index_class == other.index_class
            and self.tzone == other.tzone
            and self.instants.equals(other.instants)
        )

    __hash__ = None

    def to_list(self) -> list:
        return self.instants.to_list()
