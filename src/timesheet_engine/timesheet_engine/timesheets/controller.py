from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_iso_date
from ..container import Container
from ..core.exceptions import ConfigurationError, DomainError, MisalignedPeriodError, ValidationError
from ..policy.loader import policy_to_dict
from .schema import bounds_to_dict, evaluation_to_dict, parse_compute_request, period_to_dict

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/timesheets/compute", methods=["POST"], endpoint="api_timesheet_compute")
    def api_timesheet_compute():
        """Validate and total one pay period of entries; nothing is stored."""
        try:
            start_date, weeks, today = parse_compute_request(request.get_json(silent=True))
            report = container.timesheet_service.compute(start_date, weeks, today=today)
        except (ValidationError, ConfigurationError, MisalignedPeriodError) as e:
            return jsonify({"success": False, "errors": [e.to_dict()]}), 400
        except Exception:
            logger.exception("Unexpected error while computing timesheet")
            return jsonify({"success": False, "message": "Internal error while computing timesheet"}), 500

        if not report.ok:
            body = evaluation_to_dict(report.evaluation)
            body.update({"success": False, "errors": [issue.to_dict() for issue in report.issues]})
            return jsonify(body), 400

        return jsonify({"success": True, "payPeriod": period_to_dict(report.period)}), 200

    @app.route("/api/pay-periods/current", methods=["GET"], endpoint="api_current_pay_period")
    def api_current_pay_period():
        try:
            day_s = request.args.get("date")
            day = parse_iso_date(day_s) if day_s else now_local().date()
            bounds = container.timesheet_service.current_period(day)
        except DomainError as e:
            return jsonify({"success": False, "errors": [e.to_dict()]}), 400
        return jsonify({"success": True, "payPeriod": bounds_to_dict(bounds)}), 200

    @app.route("/api/policy", methods=["GET"], endpoint="api_policy")
    def api_policy():
        return jsonify({"success": True, "policy": policy_to_dict(container.policy)}), 200
