# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0
"""Extraction of a temporal index from the containers used by callers.

Supported are pandas dataframes (temporal row index or first temporal
column), series (temporal values or temporal row index), pandas indexes and
plain sequences of ``datetime.date``, ``datetime.datetime``, ``pd.Timestamp``,
``np.datetime64`` or ``pd.Period`` values.
"""

from collections.abc import Iterable
from datetime import date, datetime
from typing import Union

import numpy as np
import pandas as pd

from tsindex.data_classes.temporal_index import TemporalIndex, infer_index_class
from tsindex.exceptions import UnsupportedIndexClassError
from tsindex.logging.logger_factory import get_logger

TemporalValues = Union[pd.DatetimeIndex, pd.PeriodIndex]


def _from_scalars(values: list) -> TemporalValues:
    """Build a pandas index from a list of temporal scalars of a single type."""
    if len(values) == 0:
        raise UnsupportedIndexClassError(found="empty sequence")

    if all(isinstance(value, pd.Period) for value in values):
        try:
            return pd.PeriodIndex(values)
        except (TypeError, ValueError) as e:
            raise UnsupportedIndexClassError(found="periods of mixed frequency") from e

    # datetime is a subclass of date, so datetimes are checked first
    if all(isinstance(value, (datetime, np.datetime64)) for value in values):
        try:
            return pd.DatetimeIndex(values)
        except (TypeError, ValueError) as e:
            raise UnsupportedIndexClassError(
                found="datetimes of mixed timezones"
            ) from e

    if all(
        isinstance(value, date) and not isinstance(value, datetime) for value in values
    ):
        return pd.DatetimeIndex(values).to_period("D")

    found = sorted({type(value).__name__ for value in values})
    raise UnsupportedIndexClassError(found=", ".join(found))


def to_temporal_values(values) -> TemporalValues:
    """Convert a column, index or sequence to a recognized pandas index.

    Raises:
        UnsupportedIndexClassError: If the values are not all of one recognized
            temporal class.

    """
    if isinstance(values, (pd.DatetimeIndex, pd.PeriodIndex)):
        infer_index_class(values)
        return values

    if isinstance(values, (pd.Series, pd.Index, np.ndarray)):
        dtype = values.dtype
        if isinstance(dtype, pd.PeriodDtype):
            values = pd.PeriodIndex(values)
            infer_index_class(values)
            return values
        if pd.api.types.is_datetime64_any_dtype(dtype):
            return pd.DatetimeIndex(values)
        if dtype != object:
            raise UnsupportedIndexClassError(found=f"dtype {dtype}")
        return _from_scalars(list(values))

    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise UnsupportedIndexClassError(found=type(values).__name__)

    return _from_scalars(list(values))


def get_timeseries_variables(data: pd.DataFrame) -> list[str]:
    """Find the columns of a dataframe holding temporal values.

    Args:
        data: Dataframe to inspect.

    Returns:
        Names of the columns of a recognized temporal class, in column order.

    """
    timeseries_variables = []
    for column in data.columns:
        try:
            to_temporal_values(data[column])
        except UnsupportedIndexClassError:
            continue
        timeseries_variables.append(column)
    return timeseries_variables


def extract_index(container) -> TemporalIndex:
    """Extract the temporal index of a container.

    A dataframe contributes its row index when that is temporal and otherwise
    its first temporal column. A series contributes its values when these are
    temporal and otherwise its row index.

    Args:
        container: Dataframe, series, pandas index, ``TemporalIndex`` or sequence
            of temporal scalars.

    Returns:
        The instants of the container, in the order presented, tagged with their
        class.

    Raises:
        UnsupportedIndexClassError: If no values of a recognized class are found.
        ValueError: If the temporal values contain missing values.

    """
    logger = get_logger(__name__)

    if isinstance(container, TemporalIndex):
        return container

    if isinstance(container, pd.DataFrame):
        try:
            instants = to_temporal_values(container.index)
            source = "index"
        except UnsupportedIndexClassError:
            timeseries_variables = get_timeseries_variables(container)
            if not timeseries_variables:
                raise UnsupportedIndexClassError(
                    found="dataframe without temporal index or columns"
                )
            source = timeseries_variables[0]
            instants = to_temporal_values(container[source])
    elif isinstance(container, pd.Series):
        try:
            instants = to_temporal_values(container)
            source = "values"
        except UnsupportedIndexClassError:
            instants = to_temporal_values(container.index)
            source = "index"
    else:
        instants = to_temporal_values(container)
        source = type(container).__name__

    if instants.hasnans:
        raise ValueError("Temporal index contains missing values.")

    index_class = infer_index_class(instants)
    logger.debug(
        "Extracted temporal index",
        source=str(source),
        index_class=index_class.value,
        n_obs=len(instants),
    )
    return TemporalIndex(instants=instants, index_class=index_class)
