# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0
"""Process-wide settings, read once from the environment on import."""

from functools import lru_cache

from tsindex.app_settings import AppSettings


@lru_cache
def get_app_settings() -> AppSettings:
    """Settings read from ``TSINDEX_`` prefixed environment variables or ``.env``."""
    return AppSettings()


Settings = get_app_settings()
