from dataclasses import dataclass
from typing import Dict

from .config import DEFAULT_CATEGORY


@dataclass(frozen=True)
class TargetRecord:
    """One student's mark for one assignment, in the import layout."""

    student_name: str
    assignment_name: str
    assignment_date: str
    marks: str
    total_marks_possible: str
    category: str = DEFAULT_CATEGORY

    def as_dict(self) -> Dict[str, str]:
        return {
            "Student Name": self.student_name,
            "Assignment Name": self.assignment_name,
            "Assignment Date": self.assignment_date,
            "Category": self.category,
            "Marks": self.marks,
            "Total Marks Possible": self.total_marks_possible,
        }
