from __future__ import annotations

from flask import Flask, flash, g, redirect, render_template, request, session, url_for

from ..common.logging import get_logger
from ..common.web import error_status, json_error, json_ok, login_required
from ..core.enums import Role
from ..core.exceptions import DomainError
from ..container import Container

logger = get_logger(__name__)

LOGIN_HINT = "Invalid phone number or role. Try 9999999999 (admin) or 8888888888 (employee)."


def _home_for(role: str | None) -> str:
    return url_for("admin_dashboard") if role == Role.ADMIN.value else url_for("employee_home")


def register(app: Flask, container: Container) -> None:
    auth = container.auth_service

    @app.before_request
    def load_session_user():
        # Per request; the core session identity is never touched here.
        g.user = auth.resolve(session.get("user_id"))
        if session.get("user_id") and not g.user:
            session.clear()

    @app.context_processor
    def inject_current_user():
        return {"current_user": g.get("user")}

    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        if "user_id" in session:
            return redirect(_home_for(session.get("role")))

        if request.method == "POST":
            phone = request.form.get("phone", "").strip()
            role = request.form.get("role", Role.EMPLOYEE.value)

            user = auth.authenticate(phone, role)
            if user:
                session["user_id"] = user.id
                session["name"] = user.name
                session["role"] = user.role.value
                return redirect(_home_for(user.role.value))

            flash(LOGIN_HINT, "danger")

        return render_template("login.html", roles=[r.value for r in Role])

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        flash("Signed out.", "info")
        return redirect(url_for("login"))

    @app.route("/api/location", methods=["POST"], endpoint="api_update_location")
    @login_required
    def api_update_location():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        try:
            user = auth.update_location(data.get("lat"), data.get("lng"), user=g.user)
        except DomainError as e:
            return json_error(str(e), error_status(e))
        except Exception:
            logger.exception("Location update failed")
            return json_error("System error while updating location", 500)

        loc = user.last_location
        return json_ok("Location updated", location={"lat": loc.lat, "lng": loc.lng, "timestamp": loc.timestamp.isoformat()})
