from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.http import json_error
from ..core.exceptions import DuplicateKpiEntryError, ValidationError
from ..container import Container
from .model import KpiEntry

logger = logging.getLogger(__name__)


def _entry_to_dict(e: KpiEntry) -> dict:
    return {
        "id": e.entry_id,
        "userId": e.user_id,
        "userEmail": e.user_email,
        "month": e.month,
        "year": e.year,
        "score": e.score,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/kpi", methods=["POST"], endpoint="api_record_kpi")
    def api_record_kpi():
        payload = request.get_json(silent=True) or {}
        try:
            entry = container.kpi_service.record_score(
                user_id=payload.get("userId") or "",
                user_email=payload.get("userEmail") or "",
                month=payload.get("month"),
                year=payload.get("year"),
                score=payload.get("score"),
            )
            return jsonify({"success": True, "entry": _entry_to_dict(entry)}), 201
        except DuplicateKpiEntryError as e:
            return json_error(str(e), 409)
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception:
            logger.exception("Recording KPI failed")
            return json_error("Failed to record KPI", 500)

    @app.route("/api/kpi/<employee_id>", methods=["GET"], endpoint="api_kpi_history")
    def api_kpi_history(employee_id: str):
        try:
            history = container.kpi_service.history(user_id=employee_id, user_email=request.args.get("email", ""))
            return jsonify(
                {
                    "success": True,
                    "entries": [_entry_to_dict(e) for e in history.entries],
                    "average": history.average,
                }
            )
        except Exception:
            logger.exception("Loading KPI history failed for %s", employee_id)
            return json_error("Failed to fetch KPI records", 500)
