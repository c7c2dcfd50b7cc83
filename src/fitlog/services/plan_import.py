"""Parse training plans uploaded as CSV spreadsheets.

Expected layout, one row per exercise::

    day,name,exercise,sets,reps
    A,Upper body,Bench Press,4,6-8
    A,Upper body,Barbell Row,4,8
    B,Lower body,Squat,5,5

Header names are case-insensitive and ``name`` may be omitted (the day
label is used instead). Rows are grouped into days in first-seen order.
"""

import csv
import io
from pathlib import PurePath

from ..core.errors import ValidationError
from ..models.workout import PlanExercise, WorkoutDay

REQUIRED_COLUMNS = ("day", "exercise", "sets", "reps")

ACCEPTED_CONTENT_TYPES = {"text/csv", "application/vnd.ms-excel"}


def check_upload(filename: str | None, content_type: str | None, size: int, max_bytes: int) -> None:
    """Reject uploads that are not CSV or are too large."""
    is_csv = (content_type or "").split(";")[0].strip() in ACCEPTED_CONTENT_TYPES or (
        PurePath(filename or "").suffix.lower() == ".csv"
    )
    if not is_csv:
        raise ValidationError.single("csv", "no CSV file uploaded or invalid file format")
    if size > max_bytes:
        raise ValidationError.single("csv", f"file exceeds {max_bytes // (1024 * 1024)} MB limit")


def parse_plan_csv(text: str) -> list[WorkoutDay]:
    """Turn CSV text into plan days.

    Raises:
        ValidationError: missing columns, no rows, or bad ``sets`` values
    """
    # Spreadsheet exports often start with a BOM
    reader = csv.DictReader(io.StringIO(text.lstrip("\ufeff")))
    if reader.fieldnames is None:
        raise ValidationError.single("csv", "file is empty")

    columns = {name.strip().lower(): name for name in reader.fieldnames if name}
    missing = [col for col in REQUIRED_COLUMNS if col not in columns]
    if missing:
        raise ValidationError.single("csv", f"missing columns: {', '.join(missing)}")

    def cell(row: dict, column: str) -> str:
        source = columns.get(column)
        return (row.get(source) or "").strip() if source else ""

    days: dict[str, WorkoutDay] = {}
    errors = []
    # line 1 is the header
    for line_no, row in enumerate(reader, start=2):
        if not any((value or "").strip() for value in row.values() if isinstance(value, str)):
            continue

        label = cell(row, "day")
        exercise = cell(row, "exercise")
        if not label or not exercise:
            errors.append({"field": f"line {line_no}", "message": "day and exercise are required"})
            continue

        raw_sets = cell(row, "sets")
        try:
            sets = int(raw_sets)
        except ValueError:
            errors.append({"field": f"line {line_no}", "message": f"sets must be an integer, got {raw_sets!r}"})
            continue
        if sets < 0:
            errors.append({"field": f"line {line_no}", "message": "sets must not be negative"})
            continue

        day = days.get(label)
        if day is None:
            day = days[label] = WorkoutDay(day=label, name=cell(row, "name") or label)
        day.exercises.append(PlanExercise(name=exercise, sets=sets, reps=cell(row, "reps")))

    if errors:
        raise ValidationError(errors)
    if not days:
        raise ValidationError.single("csv", "no exercises found")
    return list(days.values())
