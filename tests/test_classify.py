import pytest

from classin_gradebook.classify import ColumnKind, ColumnStat, classify_column, classify_columns
from classin_gradebook.structure import Assignment, extract_assignments


def _assignment(total="100", name="HW1"):
    return Assignment(name=name, total_marks=total, source_column_index=1)


def test_sample_columns_classified(sample_table, grade_mapping):
    assignments = extract_assignments(sample_table, 2)
    stats = classify_columns(sample_table, 2, assignments, grade_mapping)

    assert stats["Homework 1"].kind is ColumnKind.MIXED
    assert pytest.approx(stats["Homework 1"].average_score, rel=1e-9) == (8 + 9.5 + 7) / 3

    assert stats["Quiz 1"].kind is ColumnKind.MIXED
    assert pytest.approx(stats["Quiz 1"].average_score, rel=1e-9) == 17.0

    assert stats["Lab Report"].kind is ColumnKind.PURE_STATUS
    assert pytest.approx(stats["Lab Report"].average_score, rel=1e-9) == 30.0

    assert stats["Reading Log"].kind is ColumnKind.PURE_STATUS
    assert pytest.approx(stats["Reading Log"].average_score, rel=1e-9) == 55.0


def test_numeric_and_grade_columns_are_mixed():
    assert classify_column(["5", "7"], _assignment(), {}).kind is ColumnKind.MIXED
    assert classify_column(["a", "B", "已提交"], _assignment(), {}).kind is ColumnKind.MIXED


def test_free_text_column_is_pure_status_even_when_mapped():
    stat = classify_column(["需订正", "已提交", "需订正"], _assignment(total="50"), {"需订正": "50"})
    assert stat.kind is ColumnKind.PURE_STATUS
    assert stat.average_score == 25.0


def test_grade_without_numeric_mapping_adds_nothing_to_average():
    stat = classify_column(["A", "B"], _assignment(), {"A": "excellent"})
    assert stat == ColumnStat(kind=ColumnKind.MIXED, average_score=0.0)


def test_blank_markers_and_header_echoes_are_ignored():
    stat = classify_column(["", "-", "HW1", " HW1 ", "已提交"], _assignment(), {"HW1": "100", "-": "100"})
    assert stat.kind is ColumnKind.PURE_STATUS
    assert stat.average_score == 0.0


def test_average_mixes_scores_and_mapped_grades():
    stat = classify_column(["40", "A", "已提交"], _assignment(total="50"), {"A": "90", "已提交": "100"})
    assert stat.kind is ColumnKind.MIXED
    assert pytest.approx(stat.average_score, rel=1e-9) == (40 + 45 + 50) / 3


def test_full_width_digits_do_not_make_a_column_mixed():
    stat = classify_column(["８", "已提交"], _assignment(), {})
    assert stat.kind is ColumnKind.PURE_STATUS
    assert stat.average_score == 0.0
