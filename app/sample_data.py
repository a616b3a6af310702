from classin_gradebook.parser import RawTable, parse_table

# A ClassIn export with the usual clutter: a title row and a class row above
# the header, a max-marks row, a category row, students, then a footer.
SAMPLE_EXPORT = """ClassIn Gradebook Export
Class: Year 9 Science,,,,,
学生姓名,Homework 1,Quiz 1,Lab Report,Reading Log,Comments
满分,10,20分,50,100,
成绩类别,Coursework,Coursework,Coursework,Coursework,
Alice Wang,8,A,已提交,已提交,
Ben Li,9.5,B,未提交,已补交,"Great, keep going"
Chloe Zhang,-,已提交,已提交,需订正,
David Chen,7,未提交,已补交,未提交,
--- End of report ---,,,,,
"""

SAMPLE_FILENAME = "sample_classin_export.csv"


def load_sample_export() -> str:
    return SAMPLE_EXPORT


def load_sample_table() -> RawTable:
    return parse_table(SAMPLE_EXPORT)
