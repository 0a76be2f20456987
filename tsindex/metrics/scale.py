# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0
"""Classification of the periodicity of a temporal index."""

import math

import pandas as pd

from tsindex.data_classes.summary import ScaleClassification
from tsindex.data_classes.temporal_index import TemporalIndex
from tsindex.enums import IndexClass, Scale, Units
from tsindex.exceptions import UnsupportedIndexClassError
from tsindex.index.normalizer import extract_index
from tsindex.metrics.differences import get_difference_stats

SECONDS_PER_DAY = 24 * 60 * 60
SECONDS_PER_YEAR = 365.25 * SECONDS_PER_DAY
SECONDS_PER_MONTH = SECONDS_PER_YEAR / 12

# Canonical duration of every scale in seconds, finest first
UNIT_FREQUENCY = {
    Scale.SECOND: 1,
    Scale.MINUTE: 60,
    Scale.HOUR: 60 * 60,
    Scale.DAY: SECONDS_PER_DAY,
    Scale.WEEK: 7 * SECONDS_PER_DAY,
    Scale.MONTH: SECONDS_PER_MONTH,
    Scale.QUARTER: 3 * SECONDS_PER_MONTH,
    Scale.YEAR: SECONDS_PER_YEAR,
}


def get_unit_frequency() -> pd.Series:
    """Canonical duration in seconds of every scale, indexed by scale name."""
    return pd.Series(
        {scale.value: float(seconds) for scale, seconds in UNIT_FREQUENCY.items()},
        name="seconds",
    )


def _scale_of_median(median_seconds: float) -> Scale:
    """Coarsest scale whose canonical duration does not exceed the median gap."""
    scale = Scale.SECOND
    if math.isnan(median_seconds):
        return scale
    for candidate, seconds in UNIT_FREQUENCY.items():
        if seconds <= median_seconds:
            scale = candidate
    return scale


def classify_scale(
    median_seconds: float, index_class: IndexClass
) -> ScaleClassification:
    """Map the median gap and index class to a scale and reporting unit.

    Year-month and year-quarter indexes are month and quarter scaled by
    definition; their spacing in seconds only reflects the varying length of
    months and quarters.

    Args:
        median_seconds: Median gap between consecutive instants. NaN or values
            below one second classify as ``second``.
        index_class: Class of the index.

    Returns:
        The scale and the unit used to report the index.

    """
    match index_class:
        case IndexClass.DATETIME:
            return ScaleClassification(
                scale=_scale_of_median(median_seconds), units=Units.SECONDS
            )
        case IndexClass.DATE:
            return ScaleClassification(
                scale=_scale_of_median(median_seconds), units=Units.DAYS
            )
        case IndexClass.YEARMONTH:
            return ScaleClassification(scale=Scale.MONTH, units=Units.DAYS)
        case IndexClass.YEARQUARTER:
            return ScaleClassification(scale=Scale.QUARTER, units=Units.DAYS)
        case _:
            raise UnsupportedIndexClassError(found=index_class)


def get_scale(index: TemporalIndex) -> ScaleClassification:
    """Classify the scale of an index from its median gap."""
    index = extract_index(index)
    return classify_scale(get_difference_stats(index).median, index.index_class)
