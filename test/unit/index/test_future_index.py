# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

from datetime import date

import pandas as pd

from test.unit.utils.base import BaseTestCase
from tsindex.enums import IndexClass
from tsindex.exceptions import (
    EmptyIndexError,
    InvalidHorizonError,
    InvalidOrderError,
    UnsupportedIndexClassError,
)
from tsindex.index.future_index import make_future_index
from tsindex.index.normalizer import extract_index


def days(*values: str) -> list[pd.Period]:
    return [pd.Period(value, freq="D") for value in values]


class TestRegularHistory(BaseTestCase):
    def test_year_months_step_exactly(self):
        index = pd.period_range("2013-01", periods=3, freq="M")

        future = make_future_index(index, 2)

        self.assertEqual(future.index_class, IndexClass.YEARMONTH)
        self.assertEqual(
            future.to_list(),
            [pd.Period("2013-04", freq="M"), pd.Period("2013-05", freq="M")],
        )

    def test_year_quarters_carry_year(self):
        index = pd.period_range("2013Q2", periods=3, freq="Q")

        future = make_future_index(index, 2)

        self.assertEqual(future.index_class, IndexClass.YEARQUARTER)
        self.assertEqual(
            future.to_list(),
            [pd.Period("2014Q1", freq="Q"), pd.Period("2014Q2", freq="Q")],
        )

    def test_constant_gap_is_repeated(self):
        index = extract_index([date(2013, 1, 1), date(2013, 1, 3), date(2013, 1, 5)])

        future = make_future_index(index, 3)

        self.assertEqual(
            future.to_list(), days("2013-01-07", "2013-01-09", "2013-01-11")
        )

    def test_daily_history_covering_every_weekday(self):
        index = pd.date_range("2013-01-01", periods=10, freq="D")

        future = make_future_index(index, 3)

        self.assertEqual(future.index_class, IndexClass.DATETIME)
        self.assertEqual(
            future.to_list(),
            pd.date_range("2013-01-11", periods=3, freq="D").to_list(),
        )

    def test_hourly_history(self):
        index = pd.date_range("2013-01-01", periods=5, freq="h")

        future = make_future_index(index, 3)

        self.assertEqual(
            future.to_list(),
            pd.date_range("2013-01-01 05:00", periods=3, freq="h").to_list(),
        )

    def test_business_week_ending_on_friday_skips_weekend(self):
        index = pd.period_range("2013-01-07", "2013-01-11", freq="D")

        future = make_future_index(index, 3)

        self.assertEqual(
            future.to_list(), days("2013-01-14", "2013-01-15", "2013-01-16")
        )

    def test_short_daily_histories_step_plainly(self):
        # Two days, and Tuesday to Friday, do not reveal a working week
        two_days = pd.period_range("2013-01-01", "2013-01-02", freq="D")
        tuesday_to_friday = pd.period_range("2013-01-01", "2013-01-04", freq="D")

        self.assertEqual(
            make_future_index(two_days, 3).to_list(),
            days("2013-01-03", "2013-01-04", "2013-01-05"),
        )
        self.assertEqual(
            make_future_index(tuesday_to_friday, 3).to_list(),
            days("2013-01-05", "2013-01-06", "2013-01-07"),
        )

    def test_business_week_without_weekday_inspection(self):
        index = pd.period_range("2013-01-07", "2013-01-11", freq="D")

        future = make_future_index(index, 3, inspect_weekdays=False)

        self.assertEqual(
            future.to_list(), days("2013-01-12", "2013-01-13", "2013-01-14")
        )

    def test_daily_across_dst_keeps_wall_clock_time(self):
        index = pd.date_range("2013-03-25", periods=7, freq="D", tz="Europe/Amsterdam")

        future = make_future_index(index, 3)

        self.assertEqual(future.tzone, "Europe/Amsterdam")
        self.assertEqual(
            future.to_list(),
            pd.date_range(
                "2013-04-01", periods=3, freq="D", tz="Europe/Amsterdam"
            ).to_list(),
        )

    def test_hourly_across_dst_keeps_absolute_step(self):
        index = pd.date_range(
            "2013-03-31 00:00", periods=4, freq="h", tz="Europe/Amsterdam"
        )

        future = make_future_index(index, 2)

        self.assertEqual(
            future.to_list(),
            pd.date_range(
                "2013-03-31 05:00", periods=2, freq="h", tz="Europe/Amsterdam"
            ).to_list(),
        )


class TestIrregularHistory(BaseTestCase):
    def test_business_days_follow_weekday_slots(self):
        index = pd.bdate_range("2013-01-01", "2013-01-18")

        future = make_future_index(index, 6)

        self.assertEqual(
            future.to_list(),
            pd.bdate_range("2013-01-21", periods=6).to_list(),
        )

    def test_business_days_with_holiday_follow_weekday_slots(self):
        index = pd.bdate_range("2013-01-07", "2013-01-25").drop(
            pd.Timestamp("2013-01-16")
        )

        future = make_future_index(index, 3)

        self.assertEqual(
            future.to_list(),
            pd.DatetimeIndex(["2013-01-28", "2013-01-29", "2013-01-30"]).to_list(),
        )

    def test_gaps_without_slot_pattern_fall_back_to_modal_step(self):
        # Most skipped days are weekdays observed elsewhere in the history
        index = extract_index(
            [
                date(2013, 1, 1),
                date(2013, 1, 2),
                date(2013, 1, 3),
                date(2013, 1, 5),
                date(2013, 1, 6),
                date(2013, 1, 7),
                date(2013, 1, 10),
            ]
        )

        future = make_future_index(index, 3)

        self.assertEqual(
            future.to_list(), days("2013-01-11", "2013-01-12", "2013-01-13")
        )

    def test_intraday_history_follows_times_of_day(self):
        monday = pd.date_range("2013-01-07 09:00", "2013-01-07 17:00", freq="h")
        tuesday = pd.date_range("2013-01-08 09:00", "2013-01-08 17:00", freq="h")
        index = monday.append(tuesday)

        future = make_future_index(index, 2)

        self.assertEqual(
            future.to_list(),
            [pd.Timestamp("2013-01-09 09:00"), pd.Timestamp("2013-01-09 10:00")],
        )

    def test_month_starts_as_dates_step_in_calendar_months(self):
        index = pd.PeriodIndex(
            ["2013-01-01", "2013-02-01", "2013-03-01", "2013-04-01"], freq="D"
        )

        future = make_future_index(index, 2)

        self.assertEqual(future.index_class, IndexClass.DATE)
        self.assertEqual(future.to_list(), days("2013-05-01", "2013-06-01"))

    def test_month_ends_continue_on_month_ends(self):
        index = pd.DatetimeIndex(
            ["2013-01-31", "2013-02-28", "2013-03-31", "2013-04-30"]
        )

        future = make_future_index(index, 3)

        self.assertEqual(
            future.to_list(),
            pd.DatetimeIndex(["2013-05-31", "2013-06-30", "2013-07-31"]).to_list(),
        )

    def test_year_months_with_modal_step(self):
        index = pd.PeriodIndex(["2013-01", "2013-02", "2013-03", "2013-05"], freq="M")

        future = make_future_index(index, 2)

        self.assertEqual(
            future.to_list(),
            [pd.Period("2013-06", freq="M"), pd.Period("2013-07", freq="M")],
        )

    def test_year_months_follow_month_slots(self):
        # A school calendar without July and August
        first_half = pd.period_range("2012-01", "2012-06", freq="M")
        second_half = pd.period_range("2012-09", "2013-06", freq="M")
        index = first_half.append(second_half)

        future = make_future_index(index, 3, inspect_months=True)
        without_inspection = make_future_index(index, 3)

        self.assertEqual(
            future.to_list(),
            [pd.Period(month, freq="M") for month in ["2013-09", "2013-10", "2013-11"]],
        )
        self.assertEqual(
            without_inspection.to_list(),
            [pd.Period(month, freq="M") for month in ["2013-07", "2013-08", "2013-09"]],
        )


class TestFutureIndexContract(BaseTestCase):
    def test_future_follows_history(self):
        histories = [
            pd.period_range("2013-01-07", "2013-01-11", freq="D"),
            pd.bdate_range("2013-01-01", "2013-03-01"),
            pd.date_range("2013-01-01", periods=50, freq="15min"),
            pd.period_range("2010Q1", periods=9, freq="Q"),
            pd.DatetimeIndex(["2013-01-01", "2013-01-02", "2013-01-09", "2013-01-10"]),
        ]
        for history in histories:
            index = extract_index(history)
            for n_future in [1, 7, 30]:
                with self.subTest(history=history[0], n_future=n_future):
                    future = make_future_index(index, n_future)

                    self.assertEqual(len(future), n_future)
                    self.assertEqual(future.index_class, index.index_class)
                    self.assertTrue(all(value > index.end for value in future))
                    self.assertTrue(future.instants.is_monotonic_increasing)

    def test_skip_values(self):
        index = pd.period_range("2013-01-07", "2013-01-11", freq="D")

        future = make_future_index(index, 3, skip_values=date(2013, 1, 14))

        self.assertEqual(
            future.to_list(), days("2013-01-15", "2013-01-16", "2013-01-17")
        )

    def test_skip_values_of_timezone_aware_index(self):
        index = pd.date_range("2013-01-01", periods=10, freq="D", tz="UTC")

        future = make_future_index(
            index, 2, skip_values=[pd.Timestamp("2013-01-11"), pd.Timestamp("2013-01-20")]
        )

        self.assertEqual(
            future.to_list(),
            pd.DatetimeIndex(["2013-01-12", "2013-01-13"], tz="UTC").to_list(),
        )

    def test_skip_values_of_other_class_raise(self):
        index = pd.period_range("2013-01", periods=3, freq="M")

        with self.assertRaises(UnsupportedIndexClassError):
            make_future_index(index, 2, skip_values=[date(2013, 4, 1)])

    def test_invalid_horizon(self):
        index = pd.period_range("2013-01", periods=3, freq="M")

        for n_future in [0, -3, 2.5]:
            with self.subTest(n_future=n_future):
                with self.assertRaises(InvalidHorizonError):
                    make_future_index(index, n_future)

    def test_too_short_history(self):
        with self.assertRaises(EmptyIndexError):
            make_future_index([date(2013, 1, 1)], 3)

    def test_unsorted_or_repeated_history(self):
        for values in [
            [date(2013, 1, 2), date(2013, 1, 1)],
            [date(2013, 1, 1), date(2013, 1, 1), date(2013, 1, 2)],
        ]:
            with self.subTest(values=values):
                with self.assertRaises(InvalidOrderError):
                    make_future_index(values, 3)
