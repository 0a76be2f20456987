# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

"""tsindex custom exceptions."""


class TemporalIndexError(Exception):
    """Base class of all errors raised while analysing a temporal index."""


class UnsupportedIndexClassError(TemporalIndexError, TypeError):
    """Values are not of a recognized temporal class."""

    def __init__(
        self,
        found: object = None,
        message: str = "No values of a recognized temporal class "
        "(date, datetime, year-month, year-quarter) found",
    ):
        self.found = found
        if found is not None:
            message = f"{message}, got: {found}"
        self.message = message
        super().__init__(self.message)


class InvalidHorizonError(TemporalIndexError, ValueError):
    """Requested number of future instants is not a positive integer."""

    def __init__(self, n_future: object, message: str = "n_future must be > 0"):
        self.n_future = n_future
        self.message = f"{message}, got: {n_future!r}"
        super().__init__(self.message)


class EmptyIndexError(TemporalIndexError):
    """Index holds too few instants to infer a step."""

    def __init__(self, n_obs: int, minimum: int = 2):
        self.n_obs = n_obs
        self.minimum = minimum
        self.message = (
            f"At least {minimum} instants are needed to infer a step, got: {n_obs}"
        )
        super().__init__(self.message)


class InvalidOrderError(TemporalIndexError):
    """Index is not sorted chronologically."""

    def __init__(self, position: int, message: str = "Index is not sorted ascending"):
        self.position = position
        self.message = f"{message}, first violation at position {position}"
        super().__init__(self.message)
