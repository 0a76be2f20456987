# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0
import numpy as np
import pandas as pd

from tsindex.data_classes.summary import DifferenceStats
from tsindex.data_classes.temporal_index import TemporalIndex
from tsindex.index.conversion import NANOSECONDS_PER_SECOND, to_epoch_nanoseconds
from tsindex.index.normalizer import extract_index


def compute_differences(index: TemporalIndex) -> pd.Series:
    """Gaps between consecutive instants in seconds.

    Args:
        index: A ``TemporalIndex`` or any container accepted by ``extract_index``.

    Returns:
        Series of the n - 1 gaps, as float. Period classes are measured between
        their canonical instants, so consecutive months differ in length.

    """
    index = extract_index(index)
    nanoseconds = to_epoch_nanoseconds(index)
    return pd.Series(np.diff(nanoseconds) / NANOSECONDS_PER_SECOND, name="diff")


def get_difference_stats(index: TemporalIndex) -> DifferenceStats:
    """Quartiles and mean of the gaps between consecutive instants.

    An index with fewer than two instants has no gaps, every statistic is NaN.
    """
    differences = compute_differences(index)
    if len(differences) == 0:
        return DifferenceStats()

    minimum, q1, median, q3, maximum = np.quantile(
        differences.to_numpy(), [0.0, 0.25, 0.5, 0.75, 1.0]
    )
    return DifferenceStats(
        minimum=minimum,
        q1=q1,
        median=median,
        mean=differences.mean(),
        q3=q3,
        maximum=maximum,
    )
