# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0
"""This module contains the calendar signature of a temporal index.

The signature decomposes every instant into numeric and labelled calendar
features (year, quarter, weekday, week of year, ...) which can be used as
model features or to detect bi-, tri- and quad-weekly patterns.
"""

from typing import Union

import numpy as np
import pandas as pd

from tsindex.data_classes.temporal_index import TemporalIndex
from tsindex.index.conversion import to_epoch_seconds, to_wall_clock
from tsindex.index.normalizer import extract_index
from tsindex.logging.logger_factory import get_logger
from tsindex.settings import Settings
from tsindex.validation.validation import validate_index_order

MONTH_LABELS = [
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]
WEEKDAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

SIGNATURE_COLUMNS = [
    "index",
    "index.num",
    "diff",
    "year",
    "year.iso",
    "half",
    "quarter",
    "month",
    "month.xts",
    "month.lbl",
    "day",
    "hour",
    "minute",
    "second",
    "hour12",
    "am.pm",
    "wday",
    "wday.xts",
    "wday.lbl",
    "mday",
    "qday",
    "yday",
    "mweek",
    "week",
    "week.iso",
    "week2",
    "week3",
    "week4",
    "mday7",
]
LABEL_COLUMNS = ["month.lbl", "wday.lbl"]


def _as_int(values) -> np.ndarray:
    return np.asarray(values, dtype=np.int64)


def decompose_signature(index: Union[TemporalIndex, object]) -> pd.DataFrame:
    """Decompose every instant of an index into its calendar signature.

    Calendar fields of timezone aware datetimes are computed on local wall-clock
    time. Dates, year-months and year-quarters are represented by the start of
    the day, month or quarter, so their time of day fields are zero.

    Args:
        index: A ``TemporalIndex`` or any container accepted by ``extract_index``.

    Returns:
        Dataframe with one row per instant, in the original order, and the
        columns of ``SIGNATURE_COLUMNS``.

    Raises:
        UnsupportedIndexClassError: If the values are not of a recognized class.
        InvalidOrderError: If the index is not sorted ascending and
            ``Settings.check_index_order`` is enabled.

    """
    index = extract_index(index)
    if Settings.check_index_order:
        validate_index_order(index)

    timestamps = to_wall_clock(index)
    index_num = to_epoch_seconds(index)

    diff = np.full(len(index_num), np.nan)
    diff[1:] = np.diff(index_num)

    month = _as_int(timestamps.month)
    hour = _as_int(timestamps.hour)
    mday = _as_int(timestamps.day)
    yday = _as_int(timestamps.dayofyear)
    # pandas counts weekdays from Monday=0, the signature from Sunday=0
    wday_xts = (_as_int(timestamps.dayofweek) + 1) % 7
    iso_calendar = timestamps.isocalendar()
    quarter_start = timestamps.to_period("Q").start_time
    # Sunday-start week of year, days before the first Sunday are week 0
    week = (yday + 6 - wday_xts) // 7

    signature = pd.DataFrame(
        {
            "index": index.instants,
            "index.num": index_num,
            "diff": diff,
            "year": _as_int(timestamps.year),
            "year.iso": _as_int(iso_calendar["year"]),
            "half": np.where(month <= 6, 1, 2),
            "quarter": _as_int(timestamps.quarter),
            "month": month,
            "month.xts": month - 1,
            "month.lbl": pd.Categorical.from_codes(
                month - 1, categories=MONTH_LABELS, ordered=True
            ),
            "day": mday,
            "hour": hour,
            "minute": _as_int(timestamps.minute),
            "second": _as_int(timestamps.second),
            "hour12": (hour + 11) % 12 + 1,
            "am.pm": np.where(hour < 12, 1, 2),
            "wday": wday_xts + 1,
            "wday.xts": wday_xts,
            "wday.lbl": pd.Categorical.from_codes(
                wday_xts, categories=WEEKDAY_LABELS, ordered=True
            ),
            "mday": mday,
            "qday": _as_int((timestamps.normalize() - quarter_start).days) + 1,
            "yday": yday,
            "mweek": (mday - 1) // 7,
            "week": week,
            "week.iso": _as_int(iso_calendar["week"]),
            "week2": week % 2,
            "week3": week % 3,
            "week4": week % 4,
            "mday7": 1 + (mday - 1) // 7,
        },
        columns=SIGNATURE_COLUMNS,
    )
    return signature


def augment_with_signature(
    data: Union[pd.DataFrame, pd.Series], numeric_only: bool = False
) -> pd.DataFrame:
    """Append the calendar signature of a container's temporal index as columns.

    .. note::
        With ``numeric_only`` the result models a container restricted to
        homogeneous numeric storage: the labelled columns ``month.lbl`` and
        ``wday.lbl`` are dropped and all signature columns are float. This
        loss of information is caused by the storage format.

    Args:
        data: Dataframe or series with a temporal row index or temporal column.
        numeric_only: Only append numeric signature columns, as float.

    Returns:
        Copy of the input as a dataframe, with the signature columns (except
        ``index``) appended.

    Raises:
        TypeError: If data is not a dataframe or series.
        ValueError: If data already holds one of the signature columns.

    """
    logger = get_logger(__name__)

    if isinstance(data, pd.Series):
        data = data.to_frame()
    if not isinstance(data, pd.DataFrame):
        raise TypeError(
            f"Can only augment a pandas DataFrame or Series, got: {type(data).__name__}"
        )

    signature = decompose_signature(extract_index(data)).drop(columns="index")
    if numeric_only:
        signature = signature.drop(columns=LABEL_COLUMNS).astype(float)

    existing_columns = [column for column in signature.columns if column in data]
    if existing_columns:
        raise ValueError(
            f"Data already contains signature columns: {existing_columns}"
        )

    signature.index = data.index
    logger.debug(
        "Appending signature features",
        num_features=signature.shape[1],
        numeric_only=numeric_only,
    )
    return pd.concat([data, signature], axis=1)
