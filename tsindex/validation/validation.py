# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0
"""Preconditions shared by the analysis components."""

import numbers

import numpy as np

from tsindex.data_classes.temporal_index import TemporalIndex
from tsindex.exceptions import EmptyIndexError, InvalidHorizonError, InvalidOrderError


def validate_index_order(index: TemporalIndex, strict: bool = False) -> None:
    """Check that an index is sorted chronologically.

    Timezone aware instants are compared as absolute points in time.

    Args:
        index: Index to check.
        strict: Also reject repeated instants.

    Raises:
        InvalidOrderError: If an instant precedes (or, with ``strict``, equals)
            its predecessor.

    """
    gaps = np.diff(index.instants.asi8)
    violations = np.flatnonzero(gaps <= 0 if strict else gaps < 0)
    if len(violations) > 0:
        message = (
            "Index is not strictly increasing"
            if strict
            else "Index is not sorted ascending"
        )
        raise InvalidOrderError(position=int(violations[0]) + 1, message=message)


def validate_index_length(index: TemporalIndex, minimum: int = 2) -> None:
    """Raises EmptyIndexError when the index holds fewer than ``minimum`` instants."""
    if len(index) < minimum:
        raise EmptyIndexError(n_obs=len(index), minimum=minimum)


def validate_horizon(n_future) -> int:
    """Check the number of requested future instants.

    Returns:
        ``n_future`` as a plain int.

    Raises:
        InvalidHorizonError: If ``n_future`` is not a positive integer.

    """
    if isinstance(n_future, bool) or not isinstance(n_future, numbers.Integral):
        raise InvalidHorizonError(n_future, message="n_future must be an integer")
    if n_future <= 0:
        raise InvalidHorizonError(n_future)
    return int(n_future)
