# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0
from tsindex.data_classes.summary import SummaryRecord
from tsindex.data_classes.temporal_index import TemporalIndex
from tsindex.index.normalizer import extract_index
from tsindex.logging.logger_factory import get_logger
from tsindex.metrics.differences import get_difference_stats
from tsindex.metrics.scale import classify_scale
from tsindex.settings import Settings
from tsindex.validation.validation import validate_index_order


def summarize(index: TemporalIndex) -> SummaryRecord:
    """Summarize the extent and spacing of a temporal index.

    Steps:
    1. Extract the index and check that it is sorted ascending (if enabled in
       the settings).
    2. Compute the quartiles of the gaps between consecutive instants.
    3. Classify the scale from the median gap.

    An index with a single instant is summarized with NaN gap statistics.

    Args:
        index: A ``TemporalIndex`` or any container accepted by ``extract_index``.

    Returns:
        Summary with count, start, end, units, scale, timezone and gap
        statistics.

    Raises:
        InvalidOrderError: If the index is not sorted ascending and
            ``Settings.check_index_order`` is enabled.

    """
    logger = get_logger(__name__)

    index = extract_index(index)
    if Settings.check_index_order:
        validate_index_order(index)

    diff_stats = get_difference_stats(index)
    classification = classify_scale(diff_stats.median, index.index_class)

    summary = SummaryRecord(
        n_obs=len(index),
        start=index.start,
        end=index.end,
        units=classification.units,
        scale=classification.scale,
        tzone=index.tzone,
        diff_minimum=diff_stats.minimum,
        diff_q1=diff_stats.q1,
        diff_median=diff_stats.median,
        diff_mean=diff_stats.mean,
        diff_q3=diff_stats.q3,
        diff_maximum=diff_stats.maximum,
    )

    if len(index) < 2:
        logger.warning(
            "Index holds fewer than two instants, gap statistics are undefined",
            n_obs=len(index),
        )
    logger.info(
        "Summarized temporal index",
        n_obs=summary.n_obs,
        index_class=index.index_class.value,
        scale=summary.scale.value,
        regular=summary.is_regular,
    )
    return summary
