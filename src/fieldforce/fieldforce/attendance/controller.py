from __future__ import annotations

from flask import Flask, g, render_template, request

from ..common.logging import get_logger
from ..common.web import error_status, json_error, json_ok, login_required
from ..container import Container
from ..core.enums import DayState
from ..core.exceptions import DomainError
from ..location.geolocation import parse_fix

logger = get_logger(__name__)


def register(app: Flask, container: Container) -> None:
    attendance = container.attendance_service

    @app.route("/app", endpoint="employee_home")
    @login_required
    def employee_home():
        user_id = g.user.id
        return render_template(
            "employee/home.html",
            today=attendance.get_today_ui(user_id),
            history=attendance.history(user_id),
            geo_options=container.geo_options.as_browser_options(),
            poll_seconds=app.config["LOCATION_POLL_SECONDS"],
        )

    @app.route("/app/punch", methods=["POST"], endpoint="api_punch")
    @login_required
    def api_punch():
        """Punch in or out depending on today's state, using the posted fix."""
        try:
            location = parse_fix(request.get_json(silent=True))
            state = attendance.day_state(g.user.id)
            if state == DayState.NO_RECORD:
                attendance.punch_in(location, user=g.user)
                message = "Punched in"
            elif state == DayState.PUNCHED_IN:
                attendance.punch_out(location, user=g.user)
                message = "Punched out"
            else:
                return json_error("Your shift for today is already complete", 400)
        except DomainError as e:
            return json_error(str(e), error_status(e))
        except Exception:
            logger.exception("Punch failed")
            return json_error("System error while recording attendance", 500)

        return json_ok(message, today=attendance.get_today_ui(g.user.id))
