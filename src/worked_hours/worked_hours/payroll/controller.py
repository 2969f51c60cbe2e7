from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..attendance.normalizer import embedded_shift_plan, normalize_attendance, normalize_shift_plan
from ..common.validators import first_present, optional_non_negative, require_mapping
from ..container import Container
from ..core.exceptions import ValidationError
from .rates import RateConfig
from .service import WorkedEntry

logger = logging.getLogger(__name__)


def parse_rate_config(data) -> RateConfig | None:
    if not data:
        return None
    if not isinstance(data, dict):
        raise ValidationError("rates must be an object")
    return RateConfig(
        base_rate=optional_non_negative(first_present(data, ("base_rate", "baseRate")), "Base rate"),
        extra_rate=optional_non_negative(first_present(data, ("extra_rate", "extraRate")), "Extra rate"),
        nocturnal_rate=optional_non_negative(
            first_present(data, ("nocturnal_rate", "nocturnalRate", "noctRate")), "Nocturnal rate"
        ),
    )


def parse_entry(item) -> WorkedEntry:
    if not isinstance(item, dict) or not isinstance(item.get("record"), dict):
        raise ValidationError("Each row needs a record object")
    raw_record = item["record"]
    record = normalize_attendance(raw_record)
    plan = normalize_shift_plan(item.get("plan")) if item.get("plan") is not None else embedded_shift_plan(raw_record)
    return WorkedEntry(record=record, plan=plan)


def register(app: Flask, container: Container) -> None:
    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    @app.route("/api/worked-metrics", methods=["POST"], endpoint="api_worked_metrics")
    def api_worked_metrics():
        try:
            data = request.get_json(silent=True) or {}
            entry = parse_entry(data)
            rates = parse_rate_config(data.get("rates"))
            metrics = container.calculator.compute(entry.record, entry.plan, rates)
            return jsonify({"success": True, "metrics": metrics.as_dict()})
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("worked-metrics computation failed")
            return _error("Internal error while computing worked metrics", 500)

    @app.route("/api/worked-hours/report", methods=["POST"], endpoint="api_worked_hours_report")
    def api_worked_hours_report():
        try:
            data = require_mapping(request.get_json(silent=True) or {}, "Request body")
            rows = data.get("rows")
            if not isinstance(rows, list):
                raise ValidationError("rows must be a list")
            entries = [parse_entry(item) for item in rows]
            rates = parse_rate_config(data.get("rates"))

            report = container.report_service.build_report(entries, rates=rates)
            return jsonify(
                {
                    "success": True,
                    "rows": report.rows,
                    "summary": report.summary,
                    "skipped": report.skipped,
                }
            )
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("worked-hours report failed")
            return _error("Internal error while building the report", 500)
