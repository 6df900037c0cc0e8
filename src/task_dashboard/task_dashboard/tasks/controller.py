from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.http import json_error
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/tasks/<task_id>/quality-mark", methods=["POST"], endpoint="api_save_quality_mark")
    def api_save_quality_mark(task_id: str):
        payload = request.get_json(silent=True) or {}
        try:
            mark = container.quality_mark_service.save_quality_mark(task_id, payload.get("mark"))
            return jsonify({"success": True, "taskId": task_id, "qualityMark": mark.value, "locked": mark.is_locked})
        except NotFoundError as e:
            return json_error(str(e), 404)
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception:
            logger.exception("Saving quality mark failed for task %s", task_id)
            return json_error("Failed to save quality mark", 500)
