from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify, request, session

from ..common.validators import parse_period_days
from ..core.constants import DEFAULT_REPORT_PERIOD_DAYS, MAX_REPORT_PERIOD_DAYS
from ..core.enums import PRIVILEGED_ROLES, Role
from ..core.exceptions import ReportComputationError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def analytics_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return jsonify({"error": "Authentication required"}), 401

            try:
                role = Role(session.get("role"))
            except ValueError:
                role = None
            if role not in PRIVILEGED_ROLES:
                return jsonify({"error": "Insufficient permissions"}), 403

            return view(*args, **kwargs)

        return wrapper

    @app.route("/api/analytics/burnout", methods=["GET"], endpoint="api_burnout_analytics")
    @analytics_required
    def api_burnout_analytics():
        try:
            period = parse_period_days(
                request.args.get("period"),
                default=int(app.config.get("BURNOUT_DEFAULT_PERIOD_DAYS", DEFAULT_REPORT_PERIOD_DAYS)),
                max_days=int(app.config.get("BURNOUT_MAX_PERIOD_DAYS", MAX_REPORT_PERIOD_DAYS)),
            )
            report = container.burnout_report_service.compute_burnout_report(period)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except ReportComputationError as e:
            return jsonify({"error": str(e)}), 500

        return jsonify(report.to_dict()), 200
