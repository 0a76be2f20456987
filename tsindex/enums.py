# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0
from enum import Enum, StrEnum


class IndexClass(Enum):
    """Recognized classes of temporal values.

    The set is closed: every component dispatches on these four members.
    """

    DATE = "date"
    DATETIME = "datetime"
    YEARMONTH = "yearmon"
    YEARQUARTER = "yearqtr"


class Scale(Enum):
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"


class Units(Enum):
    SECONDS = "seconds"
    DAYS = "days"


class LoggerType(StrEnum):
    STANDARD = "logging"
    STRUCTLOG = "structlog"
