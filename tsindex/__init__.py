# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0
"""Analysis of the temporal index of a time series.

Decomposes timestamps into calendar signatures, summarizes the gaps between
them and extends the index into the future along the observed cadence.
"""

from importlib.metadata import PackageNotFoundError, version

from tsindex.data_classes.summary import (
    DifferenceStats,
    ScaleClassification,
    SummaryRecord,
)
from tsindex.data_classes.temporal_index import TemporalIndex
from tsindex.enums import IndexClass, Scale, Units
from tsindex.feature_engineering.signature_features import (
    augment_with_signature,
    decompose_signature,
)
from tsindex.index.future_index import make_future_index
from tsindex.index.normalizer import extract_index, get_timeseries_variables
from tsindex.metrics.differences import compute_differences, get_difference_stats
from tsindex.metrics.scale import classify_scale, get_scale, get_unit_frequency
from tsindex.pipeline.summarize import summarize

try:
    __version__ = version("tsindex")
except PackageNotFoundError:
    # package is not installed
    pass

__all__ = [
    "DifferenceStats",
    "IndexClass",
    "Scale",
    "ScaleClassification",
    "SummaryRecord",
    "TemporalIndex",
    "Units",
    "augment_with_signature",
    "classify_scale",
    "compute_differences",
    "decompose_signature",
    "extract_index",
    "get_difference_stats",
    "get_scale",
    "get_timeseries_variables",
    "get_unit_frequency",
    "make_future_index",
    "summarize",
]
