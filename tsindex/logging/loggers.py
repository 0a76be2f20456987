# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0
"""Logger implementations used throughout tsindex.

Both loggers accept keyword context on every call, so analysis code can log
``logger.info("Summarized index", n_obs=12, scale="day")`` regardless of the
configured backend.
"""

import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any

import structlog

from tsindex.settings import Settings


class BaseLogger(ABC):
    """Abstract Base Logger Interface"""

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def exception(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def bind(self, **kwargs: Any) -> "BaseLogger":
        pass


class StandardLogger(BaseLogger):
    """Logger on top of the standard library ``logging`` module.

    Keyword context is rendered as ``key=value`` pairs behind the message, since
    the default ``logging`` formatters ignore ``extra`` attributes.
    """

    def __init__(self, name: str, context: dict[str, Any] | None = None):
        self.name = name
        self.context = dict(context or {})
        self.logger = logging.getLogger(name)
        logging.basicConfig(level=Settings.log_level)

    def _render(self, message: str, kwargs: dict[str, Any]) -> str:
        context = {**self.context, **kwargs}
        if not context:
            return message
        pairs = " ".join(f"{key}={value!r}" for key, value in context.items())
        return f"{message} {pairs}"

    def debug(self, message: str, **kwargs):
        self.logger.debug(self._render(message, kwargs))

    def info(self, message: str, **kwargs):
        self.logger.info(self._render(message, kwargs))

    def warning(self, message: str, **kwargs):
        self.logger.warning(self._render(message, kwargs))

    def error(self, message: str, **kwargs):
        self.logger.error(self._render(message, kwargs))

    def exception(self, message: str, **kwargs):
        self.logger.exception(self._render(message, kwargs))

    def bind(self, **kwargs):
        return StandardLogger(self.name, {**self.context, **kwargs})


@lru_cache
def _configure_structlog(log_level: str) -> None:
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(log_level)
        )
    )


class StructlogLogger(BaseLogger):
    """Logger on top of a structlog filtering bound logger."""

    def __init__(self, name: str, logger=None):
        _configure_structlog(Settings.log_level)
        self.logger = logger if logger is not None else structlog.get_logger(name)
        self.name = name

    def debug(self, message: str, **kwargs):
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        self.logger.error(message, **kwargs)

    def exception(self, message: str, **kwargs):
        self.logger.exception(message, **kwargs)

    def bind(self, **kwargs):
        return StructlogLogger(self.name, self.logger.bind(**kwargs))
