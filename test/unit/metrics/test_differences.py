# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

from datetime import date

import pandas as pd

from test.unit.utils.base import BaseTestCase
from tsindex.metrics.differences import compute_differences, get_difference_stats


class TestDifferences(BaseTestCase):
    def test_compute_differences(self):
        index = pd.DatetimeIndex(
            ["2013-01-01 00:00:00", "2013-01-01 00:00:01.5", "2013-01-01 00:01:00"]
        )

        differences = compute_differences(index)

        self.assertEqual(differences.to_list(), [1.5, 58.5])

    def test_regular_index(self):
        stats = get_difference_stats(
            pd.period_range("2013-01-01", "2013-01-04", freq="D")
        )

        self.assertEqual(stats.minimum, 86400)
        self.assertEqual(stats.maximum, 86400)
        self.assertEqual(stats.median, 86400)
        self.assertEqual(stats.mean, 86400)

    def test_irregular_index(self):
        # Thursday, Friday, skipped weekend, Monday
        stats = get_difference_stats(
            [date(2013, 1, 2), date(2013, 1, 3), date(2013, 1, 4), date(2013, 1, 7)]
        )

        self.assertEqual(stats.minimum, 86400)
        self.assertEqual(stats.q1, 86400)
        self.assertEqual(stats.median, 86400)
        self.assertEqual(stats.mean, 144000)
        self.assertEqual(stats.q3, 172800)
        self.assertEqual(stats.maximum, 259200)

    def test_quarters_differ_in_seconds(self):
        stats = get_difference_stats(pd.period_range("2013Q1", periods=5, freq="Q"))

        self.assertEqual(stats.minimum, 90 * 86400)
        self.assertEqual(stats.maximum, 92 * 86400)

    def test_single_instant_gives_nan(self):
        stats = get_difference_stats([date(2013, 1, 1)])

        for value in stats.model_dump().values():
            self.assertIsNAN(value)
