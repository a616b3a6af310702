import pytest

from classin_gradebook import convert
from classin_gradebook.export import records_to_frame
from classin_gradebook.metrics import assignment_summary, mark_distribution, overall_summary
from classin_gradebook.plots import assignment_average_bar, mark_distribution_chart


@pytest.fixture()
def sample_frame(sample_export, grade_mapping, today, rng):
    return records_to_frame(convert(sample_export, "2024-03-01", grade_mapping, rng=rng, today=today).records)


def test_overall_summary(sample_frame):
    summary = overall_summary(sample_frame)
    assert summary["records"] == 16
    assert summary["students"] == 4
    assert summary["assignments"] == 4
    assert summary["blank_marks"] == 1


def test_overall_summary_empty(sample_frame):
    assert overall_summary(sample_frame.iloc[0:0])["records"] == 0


def test_assignment_summary(sample_frame):
    summary = assignment_summary(sample_frame)
    assert list(summary["Assignment Name"]) == ["Homework 1", "Quiz 1", "Lab Report", "Reading Log"]

    homework = summary.iloc[0]
    assert homework["graded"] == 3
    assert homework["blank"] == 1
    assert homework["avg_marks"] == pytest.approx((8 + 9.5 + 7) / 3)

    lab = summary[summary["Assignment Name"] == "Lab Report"].iloc[0]
    assert lab["avg_percent"] == pytest.approx((100 + 0 + 100 + 60) / 4)


def test_mark_distribution_counts_every_graded_record(sample_frame):
    dist = mark_distribution(sample_frame, bins=5)
    assert list(dist["bin"]) == ["0-20", "20-40", "40-60", "60-80", "80-100"]
    assert dist["count"].sum() == 15


def test_charts_handle_empty_frames(sample_frame):
    empty = sample_frame.iloc[0:0]
    assert not assignment_average_bar(assignment_summary(empty)).data
    assert not mark_distribution_chart(mark_distribution(empty)).data
    assert assignment_average_bar(assignment_summary(sample_frame)).data
