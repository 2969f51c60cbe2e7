from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..attendance.normalizer import normalize_week_plans
from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_mapping
from ..container import Container
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/weekly-overview", methods=["POST"], endpoint="api_weekly_overview")
    def api_weekly_overview():
        try:
            data = require_mapping(request.get_json(silent=True) or {}, "Request body")
            week_start = parse_iso_date(data.get("week_start") or data.get("weekStart"))
            employee_id = data.get("employee_id")
            plans = normalize_week_plans(data)

            report = container.weekly_service.build(
                week_start=week_start,
                plans=plans,
                employee_id=str(employee_id) if employee_id is not None else None,
            )
            return jsonify({"success": True, **container.weekly_service.to_dict(report)})
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("weekly overview failed")
            return jsonify({"success": False, "message": "Internal error while building the weekly overview"}), 500
