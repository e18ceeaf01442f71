from __future__ import annotations

import io
from datetime import date, timezone

import pandas as pd
import pytest

from src.timesheet_system.timesheet_system.payroll.export import (
    ROW_COLUMNS,
    export_filename,
    rows_to_frame,
    to_csv_bytes,
    to_excel_bytes,
)
from src.timesheet_system.timesheet_system.payroll.service import TimesheetReportService


@pytest.fixture
def report(entries_repo, users_repo):
    svc = TimesheetReportService(entries_repo, users_repo, tz=timezone.utc)
    return svc.build_weekly_report(user_id="u1", week_of=date(2024, 3, 4))


def test_rows_frame_has_one_line_per_allocation(report):
    df = rows_to_frame(report.rows)

    assert list(df.columns) == ROW_COLUMNS
    assert df["Total hours"].tolist() == [8.0, 2.0, 6.0]
    assert df["Weekly total"].tolist() == [8.0, 10.0, 16.0]
    assert df["Overnight"].tolist() == ["", "continues", "from previous day"]


def test_empty_week_still_has_headers():
    assert list(rows_to_frame([]).columns) == ROW_COLUMNS


def test_excel_export_has_timesheet_and_summary_sheets(report):
    sheets = pd.read_excel(io.BytesIO(to_excel_bytes(report)), sheet_name=None)

    assert set(sheets) == {"Timesheet", "Summary"}
    assert len(sheets["Timesheet"]) == 3
    summary = sheets["Summary"].iloc[0]
    assert summary["Total paid hours"] == 16.0
    assert summary["Total pay"] == 480.0
    assert summary["Worked days"] == 2


def test_csv_export_is_excel_friendly(report):
    data = to_csv_bytes(report)

    assert data.startswith(b"\xef\xbb\xbf")
    df = pd.read_csv(io.BytesIO(data), encoding="utf-8-sig")
    assert df["Date"].tolist() == ["2024-03-04", "2024-03-05", "2024-03-06"]


def test_export_filename(report):
    assert export_filename(report, "xlsx") == "timesheet_u1_20240304_20240310.xlsx"
