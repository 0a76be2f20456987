# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

from tsindex.enums import LoggerType
from tsindex.logging.loggers import BaseLogger, StandardLogger, StructlogLogger
from tsindex.settings import Settings


def get_logger(name: str, logger_type: str | None = None) -> BaseLogger:
    """Create a logger of the configured type.

    Args:
        name: Name of the logger, usually ``__name__`` of the calling module.
        logger_type: Overrides ``Settings.logger_type`` when given.

    Returns:
        Logger accepting keyword context on every call.

    Raises:
        ValueError: If the logger type is unknown.

    """
    if logger_type is None:
        logger_type = Settings.logger_type

    if logger_type == LoggerType.STANDARD:
        return StandardLogger(name)
    elif logger_type == LoggerType.STRUCTLOG:
        return StructlogLogger(name)
    else:
        raise ValueError(f"Unknown logger type: {logger_type}")
