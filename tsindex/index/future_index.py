# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0
"""Continuation of a temporal index into the future.

The future index follows the cadence of the history:

1. The typical step is the mode of the gaps between consecutive instants,
   measured on an integer grid in the natural unit of the index class: days for
   dates, nanoseconds of wall-clock time for datetimes (absolute time for
   intraday timezone aware datetimes), months for year-months and quarters
   for year-quarters. Irregular dates and datetimes with a median gap of at
   least the shortest month are stepped in calendar months.
2. A regular history (all gaps equal) is continued by repeatedly adding the
   step. A daily history covering a working week, with at most two weekdays
   unobserved, keeps skipping the unobserved weekdays.
3. An irregular history is projected onto the slots of a cycle (weekdays
   within the week, steps within the day, months within the year) that are
   present in the history, skipping the absent ones. Occasional skipped
   present slots such as holidays are tolerated. When the gaps are not
   explained by such a pattern the plain modal step is used.
"""

from collections.abc import Callable
from datetime import date
from typing import Optional

import numpy as np
import pandas as pd

from tsindex.data_classes.temporal_index import TemporalIndex
from tsindex.enums import IndexClass
from tsindex.exceptions import UnsupportedIndexClassError
from tsindex.index.conversion import to_epoch_nanoseconds, to_wall_clock
from tsindex.index.normalizer import extract_index
from tsindex.logging.logger_factory import get_logger
from tsindex.metrics.differences import get_difference_stats
from tsindex.metrics.scale import classify_scale
from tsindex.validation.validation import (
    validate_horizon,
    validate_index_length,
    validate_index_order,
)

NANOSECONDS_PER_DAY = 24 * 60 * 60 * 10**9
NANOSECONDS_PER_WEEK = 7 * NANOSECONDS_PER_DAY
DAYS_PER_WEEK = 7
MONTHS_PER_YEAR = 12
SHORTEST_MONTH_SECONDS = 28 * 24 * 60 * 60
MAX_WEEKEND_DAYS = 2

ToInstants = Callable[[np.ndarray], pd.Index]


def _localize(index: TemporalIndex, wall_clock: pd.DatetimeIndex) -> pd.DatetimeIndex:
    """Give wall-clock timestamps the timezone and resolution of the index."""
    instants = index.instants
    if instants.tz is not None:
        # Ambiguous wall-clock times resolve to standard time, times in a DST gap
        # move forward
        wall_clock = wall_clock.tz_localize(
            instants.tz,
            ambiguous=np.zeros(len(wall_clock), dtype=bool),
            nonexistent="shift_forward",
        )
    return wall_clock.as_unit(instants.unit).rename(instants.name)


def _is_intraday(index: TemporalIndex) -> bool:
    return bool(np.median(np.diff(to_epoch_nanoseconds(index))) < NANOSECONDS_PER_DAY)


def _native_grid(index: TemporalIndex) -> tuple[np.ndarray, ToInstants]:
    """Integer ordinals of the instants in the natural unit of the index class.

    Returns:
        The ordinals and a function converting ordinals back into instants.

    """
    match index.index_class:
        case IndexClass.DATETIME if index.tzone is not None and _is_intraday(index):
            # Intraday steps are absolute durations, unaffected by DST changes
            ordinals = to_epoch_nanoseconds(index)

            def to_instants(values: np.ndarray) -> pd.Index:
                instants = index.instants
                return (
                    pd.to_datetime(values, unit="ns", utc=True)
                    .tz_convert(instants.tz)
                    .as_unit(instants.unit)
                    .rename(instants.name)
                )

        case IndexClass.DATETIME:
            ordinals = to_wall_clock(index).asi8

            def to_instants(values: np.ndarray) -> pd.Index:
                return _localize(index, pd.to_datetime(values, unit="ns"))

        case IndexClass.DATE | IndexClass.YEARMONTH | IndexClass.YEARQUARTER:
            ordinals = index.instants.asi8

            def to_instants(values: np.ndarray) -> pd.Index:
                return pd.PeriodIndex.from_ordinals(
                    values, freq=index.instants.freq, name=index.instants.name
                )

        case _:
            raise UnsupportedIndexClassError(found=index.index_class)

    return ordinals, to_instants


def _calendar_month_grid(index: TemporalIndex) -> tuple[np.ndarray, ToInstants]:
    """Month ordinals of dates or datetimes, stepping from the last instant.

    Future instants are offset from the last instant by whole months, so the day
    of month is kept (clipped to the month end) without accumulating drift. A
    history made of month ends continues on month ends.
    """
    wall_clock = to_wall_clock(index)
    ordinals = np.asarray(
        wall_clock.year * MONTHS_PER_YEAR + wall_clock.month - 1, dtype=np.int64
    )
    last_timestamp = wall_clock[-1]
    last_ordinal = ordinals[-1]
    on_month_ends = bool(wall_clock.is_month_end.all())

    def to_instants(values: np.ndarray) -> pd.Index:
        timestamps = pd.DatetimeIndex(
            [
                last_timestamp + pd.DateOffset(months=int(value - last_ordinal))
                for value in values
            ]
        ).as_unit("ns")
        if on_month_ends:
            timestamps = timestamps + pd.offsets.MonthEnd(0)
        match index.index_class:
            case IndexClass.DATE:
                return timestamps.to_period(index.instants.freq).rename(
                    index.instants.name
                )
            case IndexClass.DATETIME:
                return _localize(index, timestamps)
            case _:
                raise UnsupportedIndexClassError(found=index.index_class)

    return ordinals, to_instants


def _modal_step(gaps: np.ndarray) -> int:
    """Most frequent positive gap, the smallest one on ties."""
    positive_gaps = gaps[gaps > 0]
    if len(positive_gaps) == 0:
        return 1
    values, counts = np.unique(positive_gaps, return_counts=True)
    return int(values[np.argmax(counts)])


def _cycle_length(
    index_class: IndexClass,
    month_grid: bool,
    step: int,
    span: int,
    inspect_weekdays: bool,
    inspect_months: bool,
) -> Optional[int]:
    """Length in steps of the cycle whose slots are inspected, if any."""
    if month_grid:
        cycle_units = MONTHS_PER_YEAR if inspect_months else None
    elif not inspect_weekdays:
        cycle_units = None
    else:
        match index_class:
            case IndexClass.DATE:
                cycle_units = DAYS_PER_WEEK
            case IndexClass.DATETIME:
                # Intraday histories shorter than a week repeat daily
                if step < NANOSECONDS_PER_DAY and span < NANOSECONDS_PER_WEEK:
                    cycle_units = NANOSECONDS_PER_DAY
                else:
                    cycle_units = NANOSECONDS_PER_WEEK
            case IndexClass.YEARMONTH | IndexClass.YEARQUARTER:
                cycle_units = None
            case _:
                raise UnsupportedIndexClassError(found=index_class)

    if cycle_units is None or cycle_units % step != 0 or cycle_units // step < 2:
        return None
    return cycle_units // step


def _slot_pattern(ordinals: np.ndarray, step: int, cycle: int) -> Optional[set[int]]:
    """Slots of the cycle present in the history, relative to the last instant.

    Slots never observed in the history are absent. The pattern holds when every
    instant lies on the step grid through the last instant, the history spans at
    least one full cycle and no gap is longer than a cycle. Grid positions
    skipped by a gap are expected on absent slots. Skipped positions on present
    slots, such as holidays, are tolerated while skipped positions on absent
    slots outnumber them.

    Returns:
        The present slots, or None when the history does not follow a pattern.

    """
    offsets = ordinals - ordinals[-1]
    if np.any(offsets % step != 0):
        return None

    positions = offsets // step
    if positions[-1] - positions[0] < cycle:
        return None

    gap_steps = np.diff(positions)
    if np.any(gap_steps > cycle):
        return None

    slots = positions % cycle
    present_slots = set(slots.tolist())
    skipped_slots = [
        int(slots[i] + k) % cycle
        for i in np.flatnonzero(gap_steps > 1)
        for k in range(1, int(gap_steps[i]))
    ]
    n_skipped_present = sum(slot in present_slots for slot in skipped_slots)
    n_skipped_absent = len(skipped_slots) - n_skipped_present
    if n_skipped_absent == 0 or n_skipped_present > n_skipped_absent:
        return None

    return present_slots


def _weekend_pattern(
    ordinals: np.ndarray, step: int, cycle: int
) -> Optional[set[int]]:
    """Weekday slots of a regular daily history that leaves out a weekend.

    A regular history shorter than a week observes a contiguous run of weekdays.
    The run is only taken as a working week when at most ``MAX_WEEKEND_DAYS``
    weekdays are missing.

    Returns:
        The present slots, or None when the history continues by plain steps.

    """
    positions = (ordinals - ordinals[-1]) // step
    present_slots = set((positions % cycle).tolist())
    if not 0 < cycle - len(present_slots) <= MAX_WEEKEND_DAYS:
        return None
    return present_slots


def _project(
    last: int,
    step: int,
    count: int,
    cycle: Optional[int] = None,
    present_slots: Optional[set[int]] = None,
) -> np.ndarray:
    """Ordinals following ``last`` on the step grid, restricted to present slots."""
    ordinals = []
    k = 0
    while len(ordinals) < count:
        k += 1
        if present_slots is not None and k % cycle not in present_slots:
            continue
        ordinals.append(last + k * step)
    return np.asarray(ordinals, dtype=np.int64)


def _skip_instants(index: TemporalIndex, skip_values) -> Optional[pd.Index]:
    """Instants of the index class that must not appear in the future index."""
    if skip_values is None:
        return None
    if isinstance(skip_values, (date, pd.Period, np.datetime64)):
        skip_values = [skip_values]

    skip = extract_index(skip_values)
    if skip.index_class != index.index_class:
        raise UnsupportedIndexClassError(
            found=f"skip values of class {skip.index_class.value} for an index of "
            f"class {index.index_class.value}"
        )

    instants = skip.instants
    if skip.index_class == IndexClass.DATETIME:
        if index.instants.tz is not None and instants.tz is None:
            instants = instants.tz_localize(index.instants.tz)
        elif index.instants.tz is None and instants.tz is not None:
            raise ValueError("Cannot skip timezone aware values of a naive index.")
    return instants


def make_future_index(
    index: TemporalIndex,
    n_future: int,
    skip_values=None,
    inspect_weekdays: bool = True,
    inspect_months: bool = False,
) -> TemporalIndex:
    """Continue a temporal index with instants following its cadence.

    Args:
        index: Historical index, a ``TemporalIndex`` or any container accepted by
            ``extract_index``. Must be strictly increasing.
        n_future: Number of future instants.
        skip_values: Instants of the same class to leave out of the future index,
            e.g. known holidays. Generation continues until ``n_future`` instants
            remain.
        inspect_weekdays: Only continue on the weekdays (or, for intraday
            histories shorter than a week, the times of day) present in the
            history.
        inspect_months: Only continue on the months of the year present in the
            history, for monthly indexes.

    Returns:
        ``n_future`` instants of the same class, all after the last historical
        instant.

    Raises:
        InvalidHorizonError: If ``n_future`` is not a positive integer.
        EmptyIndexError: If the history holds fewer than two instants.
        InvalidOrderError: If the history is not strictly increasing.

    """
    logger = get_logger(__name__)

    n_future = validate_horizon(n_future)
    index = extract_index(index)
    validate_index_length(index, minimum=2)
    validate_index_order(index, strict=True)
    skip_instants = _skip_instants(index, skip_values)

    ordinals, to_instants = _native_grid(index)
    gaps = np.diff(ordinals)
    regular = bool(np.all(gaps == gaps[0]))
    month_grid = index.index_class == IndexClass.YEARMONTH

    diff_stats = get_difference_stats(index)
    classification = classify_scale(diff_stats.median, index.index_class)
    # Month lengths vary, so gaps of a month or more are stepped in calendar months
    if (
        not regular
        and index.index_class in (IndexClass.DATE, IndexClass.DATETIME)
        and diff_stats.median >= SHORTEST_MONTH_SECONDS
    ):
        ordinals, to_instants = _calendar_month_grid(index)
        gaps = np.diff(ordinals)
        regular = bool(np.all(gaps == gaps[0]))
        month_grid = True

    step = int(gaps[0]) if regular else _modal_step(gaps)
    one_day = {IndexClass.DATE: 1, IndexClass.DATETIME: NANOSECONDS_PER_DAY}
    cycle = _cycle_length(
        index_class=index.index_class,
        month_grid=month_grid,
        step=step,
        span=int(ordinals[-1] - ordinals[0]),
        inspect_weekdays=inspect_weekdays,
        inspect_months=inspect_months,
    )

    present_slots = None
    if cycle is not None and regular:
        if not month_grid and step == one_day.get(index.index_class):
            present_slots = _weekend_pattern(ordinals, step, cycle)
    elif cycle is not None:
        present_slots = _slot_pattern(ordinals, step, cycle)
        if present_slots is None:
            logger.warning(
                "Gaps do not follow a repeating slot pattern, continuing with the"
                " modal step",
                step=step,
                cycle=cycle,
            )

    n_candidates = n_future + (0 if skip_instants is None else len(skip_instants))
    future = to_instants(
        _project(ordinals[-1], step, n_candidates, cycle, present_slots)
    )
    if skip_instants is not None:
        future = future[~future.isin(skip_instants)]

    logger.info(
        "Generated future index",
        index_class=index.index_class.value,
        scale=classification.scale.value,
        n_future=n_future,
        step=step,
        regular=regular,
        num_slots=None if present_slots is None else len(present_slots),
        cycle=cycle,
    )
    return TemporalIndex(instants=future[:n_future], index_class=index.index_class)
