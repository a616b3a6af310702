from datetime import date

import numpy as np
import pytest

from app.sample_data import load_sample_export, load_sample_table
from classin_gradebook.mapping import DEFAULT_GRADE_MAPPING

# A Friday, so the working-day pool for a week-long range is easy to reason about.
TODAY = date(2024, 3, 15)


@pytest.fixture()
def sample_export():
    return load_sample_export()


@pytest.fixture()
def sample_table():
    return load_sample_table()


@pytest.fixture()
def grade_mapping():
    return dict(DEFAULT_GRADE_MAPPING)


@pytest.fixture()
def today():
    return TODAY


@pytest.fixture()
def rng():
    return np.random.default_rng(1234)
