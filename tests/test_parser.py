from classin_gradebook.export import generate_csv_content
from classin_gradebook.models import TargetRecord
from classin_gradebook.parser import RawTable, parse_line, parse_table


def test_parse_line_respects_quoted_commas():
    assert parse_line('Alice,"Essay, part 2",8') == ["Alice", "Essay, part 2", "8"]


def test_parse_line_collapses_doubled_quotes_and_trims():
    assert parse_line(' Bob ,"He said ""hi""",  9 ') == ["Bob", "He said \"hi\"", "9"]


def test_parse_line_tolerates_unclosed_quote():
    cells = parse_line('Alice,"unterminated, still going')
    assert cells == ["Alice", '"unterminated, still going']


def test_parse_table_drops_blank_lines_and_handles_crlf():
    table = parse_table("a,b,c\r\n\r\n   \r\n1,2,3\n4,5,6\n")
    assert len(table) == 3
    assert table.headers == ("a", "b", "c")
    assert table[2] == ("4", "5", "6")


def test_parse_table_pads_short_rows():
    table = parse_table("Name,HW1,HW2\nAlice,5\nBob\n")
    assert table[1] == ("Alice", "5", "")
    assert table[2] == ("Bob", "", "")
    assert all(len(row) == table.width for row in table.rows)


def test_parse_table_empty_input():
    assert parse_table("") == RawTable()
    assert parse_table("  \n\n").headers == ()


def test_parse_table_strips_byte_order_mark():
    table = parse_table("\ufeffStudent Name,HW1\n")
    assert table[0][0] == "Student Name"


def test_quoted_comma_round_trip():
    record = TargetRecord(
        student_name="a,b",
        assignment_name="Essay, draft",
        assignment_date="01/02/2024",
        marks="5.0",
        total_marks_possible="10.0",
    )
    content = generate_csv_content([record])
    table = parse_table(content)
    assert table[1][0] == "a,b"
    assert table[1][1] == "Essay, draft"
    assert table[1][2] == "01/02/2024"
