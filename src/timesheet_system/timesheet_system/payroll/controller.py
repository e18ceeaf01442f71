from __future__ import annotations

import io
import logging
from datetime import date
from functools import wraps

from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import now_local, parse_iso_date
from ..core.exceptions import ValidationError
from ..container import Container
from .export import export_filename, to_csv_bytes, to_excel_bytes
from .model import DailyRow, WeeklyReport

logger = logging.getLogger(__name__)

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _row_to_json(row: DailyRow) -> dict:
    return {
        "date": row.work_date.isoformat(),
        "entryId": row.entry_id,
        "job": row.location,
        "start": row.start_display,
        "end": row.end_display,
        "hours": f"{row.hours:.2f}",
        "hourlyRate": f"{row.hourly_rate:.2f}",
        "dailyPay": f"{row.daily_pay:.2f}",
        "weeklyTotal": f"{row.running_total:.2f}",
        "holiday": row.is_holiday,
        "overnightStart": row.is_overnight_start,
        "overnightContinuation": row.is_overnight_continuation,
        "nightShift": row.is_night_shift,
        "locked": row.locked,
    }


def report_to_json(report: WeeklyReport) -> dict:
    s = report.summary
    return {
        "userId": report.user_id,
        "fullName": report.full_name,
        "periodStart": s.period_start.isoformat(),
        "periodEnd": s.period_end.isoformat(),
        "previousWeek": report.window.previous().start.isoformat(),
        "nextWeek": report.window.next().start.isoformat(),
        "summary": {
            "regularHours": f"{s.regular_hours:.2f}",
            "holidayHours": f"{s.holiday_hours:.2f}",
            "totalHours": f"{s.total_hours:.2f}",
            "totalPay": f"{s.total_pay:.2f}",
            "workedDays": s.worked_days,
        },
        "rows": [_row_to_json(r) for r in report.rows],
        "skippedEntryIds": list(report.skipped_entry_ids),
    }


def register(app: Flask, container: Container) -> None:
    service = container.timesheet_report_service

    def json_errors(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"error": str(e)}), 400
            except Exception:
                logger.exception("Timesheet request failed: %s", request.path)
                return jsonify({"error": "Internal error while building the timesheet"}), 500

        return wrapper

    def _week_of() -> date:
        value = request.args.get("week_of")
        if not value:
            return now_local(container.tz).date()
        try:
            return parse_iso_date(value)
        except ValueError:
            raise ValidationError(f"week_of must be YYYY-MM-DD, got {value!r}")

    @app.route("/api/users/<user_id>/timesheet", methods=["GET"], endpoint="user_timesheet")
    @json_errors
    def user_timesheet(user_id: str):
        report = service.build_weekly_report(user_id=user_id, week_of=_week_of())
        return jsonify(report_to_json(report))

    @app.route("/api/users/<user_id>/timesheet/draft", methods=["GET"], endpoint="user_timesheet_draft")
    @json_errors
    def user_timesheet_draft(user_id: str):
        draft = service.build_timesheet_draft(user_id=user_id, week_of=_week_of())
        return jsonify(draft.to_payload())

    @app.route("/api/users/<user_id>/timesheet.xlsx", methods=["GET"], endpoint="user_timesheet_xlsx")
    @json_errors
    def user_timesheet_xlsx(user_id: str):
        report = service.build_weekly_report(user_id=user_id, week_of=_week_of())
        return send_file(
            io.BytesIO(to_excel_bytes(report)),
            download_name=export_filename(report, "xlsx"),
            as_attachment=True,
            mimetype=XLSX_MIMETYPE,
        )

    @app.route("/api/users/<user_id>/timesheet.csv", methods=["GET"], endpoint="user_timesheet_csv")
    @json_errors
    def user_timesheet_csv(user_id: str):
        report = service.build_weekly_report(user_id=user_id, week_of=_week_of())
        return app.response_class(
            to_csv_bytes(report),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={export_filename(report, 'csv')}"},
        )
