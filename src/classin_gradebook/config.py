from typing import FrozenSet, List, Tuple

# First-cell labels that mark the student/assignment header row.
HEADER_MARKERS: Tuple[str, ...] = ("Student Name", "学生姓名", "姓名", "Name")
HEADER_SCAN_LIMIT = 20

# Offsets from the header row: max marks, category label, first student.
MAX_MARKS_OFFSET = 1
CATEGORY_OFFSET = 2
STUDENT_OFFSET = 3

FOOTER_PREFIX = "---"
BLANK_MARKER = "-"
CATEGORY_LABELS: FrozenSet[str] = frozenset({"成绩类别", "Category"})

STANDARD_GRADES: FrozenSet[str] = frozenset({"A*", "A", "B", "C", "D", "E", "F", "G", "U"})

STATUS_SUBMITTED = "已提交"
STATUS_NOT_SUBMITTED = "未提交"
STATUS_LATE_SUBMITTED = "已补交"
LATE_SUBMISSION_PERCENT = 60.0

DEFAULT_CATEGORY = "Coursework"
DATE_FORMAT = "%d/%m/%Y"
ISO_DATE_FORMAT = "%Y-%m-%d"

OUTPUT_COLUMNS: List[str] = [
    "Student Name",
    "Assignment Name",
    "Assignment Date",
    "Category",
    "Marks",
    "Total Marks Possible",
]

EXPORT_PREFIX = "gradebook_export"
