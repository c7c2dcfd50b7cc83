"""Tests for CSV plan import."""

import pytest

from fitlog.core.errors import ValidationError
from fitlog.services.plan_import import check_upload, parse_plan_csv

PLAN_CSV = """day,name,exercise,sets,reps
A,Upper body,Bench Press,4,6-8
A,Upper body,Barbell Row,4,8
B,Lower body,Squat,5,5
B,Lower body,Romanian Deadlift,3,10-12
"""


class TestParsePlanCsv:
    """Tests for parse_plan_csv."""

    def test_groups_rows_into_days(self):
        days = parse_plan_csv(PLAN_CSV)

        assert [d.day for d in days] == ["A", "B"]
        assert days[0].name == "Upper body"
        assert [e.name for e in days[0].exercises] == ["Bench Press", "Barbell Row"]
        assert days[1].exercises[1].reps == "10-12"
        assert days[1].exercises[0].sets == 5

    def test_headers_case_insensitive_and_bom(self):
        text = "\ufeffDay,Exercise,Sets,Reps\nMonday,Pull-up,3,max\n"
        [day] = parse_plan_csv(text)

        assert day.day == "Monday"
        # name column missing: falls back to the day label
        assert day.name == "Monday"
        assert day.exercises[0].reps == "max"

    def test_blank_lines_skipped(self):
        text = "day,exercise,sets,reps\nA,Squat,5,5\n,,,\nA,Lunge,3,12\n"
        [day] = parse_plan_csv(text)
        assert len(day.exercises) == 2

    def test_missing_columns(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_plan_csv("day,exercise\nA,Squat\n")
        assert "sets" in exc_info.value.errors[0]["message"]

    def test_empty_file(self):
        with pytest.raises(ValidationError):
            parse_plan_csv("")

    def test_header_only(self):
        with pytest.raises(ValidationError):
            parse_plan_csv("day,exercise,sets,reps\n")

    def test_bad_sets_reports_line(self):
        text = "day,exercise,sets,reps\nA,Squat,five,5\nA,Lunge,-1,12\n"
        with pytest.raises(ValidationError) as exc_info:
            parse_plan_csv(text)

        assert [e["field"] for e in exc_info.value.errors] == ["line 2", "line 3"]


class TestCheckUpload:
    """Tests for upload type and size checks."""

    def test_accepts_csv_extension(self):
        check_upload("plan.CSV", "application/octet-stream", 100, 1000)

    def test_accepts_csv_content_type(self):
        check_upload("plan", "text/csv; charset=utf-8", 100, 1000)
        check_upload(None, "application/vnd.ms-excel", 100, 1000)

    def test_rejects_other_files(self):
        with pytest.raises(ValidationError):
            check_upload("plan.pdf", "application/pdf", 100, 1000)

    def test_rejects_large_files(self):
        with pytest.raises(ValidationError):
            check_upload("plan.csv", "text/csv", 11 * 1024 * 1024, 10 * 1024 * 1024)
