from __future__ import annotations

import io
from typing import Sequence

import pandas as pd

from .model import DailyRow, WeeklyReport

ROW_COLUMNS = [
    "Date",
    "Job",
    "Start",
    "End",
    "Total hours",
    "Hourly rate",
    "Daily pay",
    "Weekly total",
    "Holiday",
    "Overnight",
    "Night shift",
    "Locked",
]


def _overnight_label(row: DailyRow) -> str:
    if row.is_overnight_start:
        return "continues"
    if row.is_overnight_continuation:
        return "from previous day"
    return ""


def rows_to_frame(rows: Sequence[DailyRow]) -> pd.DataFrame:
    data = [
        {
            "Date": row.work_date.strftime("%Y-%m-%d"),
            "Job": row.location or "-",
            "Start": row.start_display,
            "End": row.end_display,
            "Total hours": float(row.hours),
            "Hourly rate": float(row.hourly_rate),
            "Daily pay": float(row.daily_pay),
            "Weekly total": float(row.running_total),
            "Holiday": "yes" if row.is_holiday else "",
            "Overnight": _overnight_label(row),
            "Night shift": "yes" if row.is_night_shift else "",
            "Locked": "yes" if row.locked else "",
        }
        for row in rows
    ]
    return pd.DataFrame(data, columns=ROW_COLUMNS)


def summary_to_frame(report: WeeklyReport) -> pd.DataFrame:
    s = report.summary
    return pd.DataFrame(
        [
            {
                "Employee": report.full_name,
                "Period start": s.period_start.strftime("%Y-%m-%d"),
                "Period end": s.period_end.strftime("%Y-%m-%d"),
                "Regular": float(s.regular_hours),
                "Holiday paid hours": float(s.holiday_hours),
                "Total paid hours": float(s.total_hours),
                "Total pay": float(s.total_pay),
                "Worked days": s.worked_days,
            }
        ]
    )


def to_excel_bytes(report: WeeklyReport) -> bytes:
    """Build the weekly timesheet workbook in memory (no file on disk)."""
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        rows_to_frame(report.rows).to_excel(writer, index=False, sheet_name="Timesheet")
        summary_to_frame(report).to_excel(writer, index=False, sheet_name="Summary")
    return output.getvalue()


def to_csv_bytes(report: WeeklyReport) -> bytes:
    # utf-8-sig so Excel detects the encoding
    return rows_to_frame(report.rows).to_csv(index=False).encode("utf-8-sig")


def export_filename(report: WeeklyReport, extension: str) -> str:
    w = report.window
    return f"timesheet_{report.user_id}_{w.start.strftime('%Y%m%d')}_{w.end.strftime('%Y%m%d')}.{extension}"
