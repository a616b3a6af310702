from datetime import date

import numpy as np
import pytest

from classin_gradebook.dates import assign_dates, format_date, is_future_start, parse_start_date, working_days
from classin_gradebook.structure import Assignment

ASSIGNMENTS = [Assignment(name=f"HW{i}", total_marks="10", source_column_index=i) for i in range(1, 6)]


def test_working_days_skip_weekends():
    days = working_days(date(2024, 3, 11), date(2024, 3, 17))
    assert days == [date(2024, 3, d) for d in range(11, 16)]


def test_start_equal_to_today_yields_single_date(today):
    assert working_days(today, today) == [today]
    dates = assign_dates(ASSIGNMENTS, today, today, rng=np.random.default_rng(0))
    assert set(dates.values()) == {format_date(today)}


def test_weekend_only_range_falls_back_to_start():
    saturday = date(2024, 3, 16)
    assert working_days(saturday, date(2024, 3, 17)) == [saturday]


def test_future_start_collapses_to_start(today):
    future = date(2024, 4, 1)
    assert is_future_start(future, today)
    assert working_days(future, today) == [future]
    assert set(assign_dates(ASSIGNMENTS, future, today).values()) == {"01/04/2024"}


def test_assign_dates_draw_from_working_days(today):
    start = date(2024, 3, 1)
    pool = {format_date(d) for d in working_days(start, today)}
    dates = assign_dates(ASSIGNMENTS, start, today, rng=np.random.default_rng(5))
    assert set(dates) == {a.name for a in ASSIGNMENTS}
    assert set(dates.values()) <= pool


def test_seeded_generator_is_reproducible(today):
    start = date(2024, 1, 1)
    first = assign_dates(ASSIGNMENTS, start, today, rng=np.random.default_rng(42))
    second = assign_dates(ASSIGNMENTS, start, today, rng=np.random.default_rng(42))
    assert first == second


def test_format_date_is_day_first():
    assert format_date(date(2024, 3, 5)) == "05/03/2024"


def test_parse_start_date():
    assert parse_start_date("2024-03-05") == date(2024, 3, 5)
    assert parse_start_date(date(2024, 3, 5)) == date(2024, 3, 5)
    with pytest.raises(ValueError):
        parse_start_date("05/03/2024")
