from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.http import json_error, month_year_args, optional_date_arg
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container
from .model import DateRange

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _date_range() -> DateRange:
        return DateRange(
            start=optional_date_arg(request.args.get("start"), "start"),
            end=optional_date_arg(request.args.get("end"), "end"),
        )

    @app.route("/api/evaluations", methods=["GET"], endpoint="api_evaluations")
    def api_evaluations():
        try:
            month, year = month_year_args(request.args)
            results = container.evaluation_service.evaluate_month(month=month, year=year, date_range=_date_range())
            return jsonify({"success": True, "month": month, "year": year, "evaluations": [r.to_dict() for r in results]})
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception:
            logger.exception("Evaluation failed")
            return json_error("Failed to compute evaluation", 500)

    @app.route("/api/evaluations/<employee_id>/self", methods=["GET"], endpoint="api_self_evaluation")
    def api_self_evaluation(employee_id: str):
        try:
            result = container.evaluation_service.evaluate_self(employee_id, date_range=_date_range())
            return jsonify({"success": True, "evaluation": result.to_dict()})
        except NotFoundError as e:
            return json_error(str(e), 404)
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception:
            logger.exception("Self evaluation failed for %s", employee_id)
            return json_error("Failed to compute evaluation", 500)

    @app.route("/api/attendance/summary", methods=["GET"], endpoint="api_attendance_summary")
    def api_attendance_summary():
        try:
            month, year = month_year_args(request.args)
            rows = container.evaluation_service.attendance_summary(month=month, year=year)
            return jsonify({"success": True, "month": month, "year": year, "summary": [r.to_dict() for r in rows]})
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception:
            logger.exception("Attendance summary failed")
            return json_error("Failed to load attendance summary", 500)
