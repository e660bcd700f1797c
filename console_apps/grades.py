from console_apps.config import GradeConfig
from console_apps.schemas import GradeReport, MarkRequest, SubjectCountRequest
from console_apps.utils import Console, ask_until_valid

def calculate_grade(average: float) -> str:
    for grade, threshold in GradeConfig.GRADE_BOUNDARIES:
        if average >= threshold:
            return grade
    return GradeConfig.FAILING_GRADE


def build_report(marks: list[float]) -> GradeReport:
    if not marks:
        raise ValueError("At least one mark is needed to build a report")
    total = sum(marks)
    average = total / len(marks)
    return GradeReport(
        subject_count=len(marks),
        total=total,
        max_total=len(marks) * GradeConfig.MAX_MARK,
        average=average,
        grade=calculate_grade(average),
    )


class GradeCalculator:
    def __init__(self, console: Console):
        self.console = console

    def run(self) -> GradeReport:
        self.console.say("=== Student Grade Calculator ===")

        subject_count = ask_until_valid(
            self.console,
            "Enter number of subjects: ",
            lambda raw_line: SubjectCountRequest(count=raw_line).count,
            "Invalid input. Please enter an integer.",
        )

        marks = []
        for subject in range(1, subject_count + 1):
            marks.append(ask_until_valid(
                self.console,
                f"Enter marks for subject {subject} (0 - {GradeConfig.MAX_MARK}): ",
                lambda raw_line: MarkRequest(mark=raw_line).mark,
                f"Invalid input. Please enter a numeric value (0 - {GradeConfig.MAX_MARK}).",
            ))

        report = build_report(marks)
        self.console.say()
        self.console.say("=== Result ===")
        self.console.say(f"Total Marks      : {report.total:.2f} out of {report.max_total:.2f}")
        self.console.say(f"Average Percent  : {report.average:.2f}%")
        self.console.say(f"Grade            : {report.grade}")
        return report
