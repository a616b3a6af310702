from classin_gradebook.parser import RawTable, parse_table
from classin_gradebook.structure import extract_assignments, locate_header_row, student_rows


def _table(rows):
    width = len(rows[0])
    return RawTable(rows=tuple(tuple(row + [""] * (width - len(row))) for row in rows))


def test_locate_header_row_skips_leading_junk():
    junk = [["Gradebook report", "", ""] for _ in range(5)]
    table = _table(junk + [["Student Name", "HW1", "HW2"], ["Max", "10", "10"]])
    assert locate_header_row(table) == 5


def test_locate_header_row_matches_chinese_label(sample_table):
    assert locate_header_row(sample_table) == 2


def test_locate_header_row_falls_back_to_first_row():
    table = _table([["Title", "x"], ["Alice", "5"]])
    assert locate_header_row(table) == 0


def test_locate_header_row_only_scans_first_twenty_rows():
    junk = [["Term summary", ""] for _ in range(20)]
    table = _table(junk + [["Student Name", "HW1"]])
    assert locate_header_row(table) == 0


def test_extract_assignments_from_sample(sample_table):
    assignments = extract_assignments(sample_table, 2)
    assert [a.name for a in assignments] == ["Homework 1", "Quiz 1", "Lab Report", "Reading Log"]
    assert [a.total_marks for a in assignments] == ["10", "20", "50", "100"]
    assert [a.source_column_index for a in assignments] == [1, 2, 3, 4]


def test_extract_assignments_skips_metadata_columns():
    table = parse_table(
        "Student Name,HW1,Teacher Notes,,Quiz\n"
        "Max,10,N/A,5,7.5 pts\n"
        "Category,Coursework,,,Coursework\n"
        "Alice,5,late,3,6\n"
    )
    assignments = extract_assignments(table, 0)
    assert [(a.name, a.total_marks, a.source_column_index) for a in assignments] == [
        ("HW1", "10", 1),
        ("Quiz", "7.5", 4),
    ]


def test_extract_assignments_requires_max_marks_row():
    table = parse_table("Student Name,HW1,HW2\n")
    assert extract_assignments(table, 0) == []


def test_student_rows_skip_footer_and_blank_names(sample_table):
    names = [row[0] for row in student_rows(sample_table, 2)]
    assert names == ["Alice Wang", "Ben Li", "Chloe Zhang", "David Chen"]


def test_student_rows_start_after_category_row():
    table = parse_table("Name,HW\nMax,10\nCategory,Coursework\n,7\nAlice,8\n")
    assert [row[0] for row in student_rows(table, 0)] == ["Alice"]


def test_extract_assignments_ignores_full_width_max_marks():
    table = parse_table("Student Name,HW1,HW2\n满分,１０,10\nCategory,x,x\nAlice,８,8\n")
    assert [(a.name, a.total_marks) for a in extract_assignments(table, 0)] == [("HW2", "10")]
