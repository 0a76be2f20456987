# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0
"""Conversions of a temporal index to numeric and timestamp representations."""

import numpy as np
import pandas as pd

from tsindex.data_classes.temporal_index import TemporalIndex
from tsindex.enums import IndexClass
from tsindex.exceptions import UnsupportedIndexClassError

NANOSECONDS_PER_SECOND = 10**9


def to_timestamps(index: TemporalIndex) -> pd.DatetimeIndex:
    """Convert an index to timestamps.

    Period classes are represented by their canonical instant, the start of the
    day, month or quarter. Timezone aware datetimes keep their timezone.
    """
    match index.index_class:
        case IndexClass.DATETIME:
            return index.instants
        case IndexClass.DATE | IndexClass.YEARMONTH | IndexClass.YEARQUARTER:
            return index.instants.to_timestamp(how="start")
        case _:
            raise UnsupportedIndexClassError(found=index.index_class)


def to_epoch_nanoseconds(index: TemporalIndex) -> np.ndarray:
    """Nanoseconds since 1970-01-01T00:00:00 UTC.

    Naive timestamps are read as UTC, timezone aware timestamps are converted.
    """
    timestamps = to_timestamps(index)
    if timestamps.tz is not None:
        timestamps = timestamps.tz_convert("UTC").tz_localize(None)
    return timestamps.as_unit("ns").asi8


def to_epoch_seconds(index: TemporalIndex) -> np.ndarray:
    """Whole seconds since 1970-01-01T00:00:00 UTC, as int64."""
    return to_epoch_nanoseconds(index) // NANOSECONDS_PER_SECOND


def to_wall_clock(index: TemporalIndex) -> pd.DatetimeIndex:
    """Naive timestamps holding the local wall-clock time of every instant."""
    timestamps = to_timestamps(index)
    if timestamps.tz is not None:
        timestamps = timestamps.tz_localize(None)
    return timestamps.as_unit("ns")
