from __future__ import annotations

from functools import wraps

from flask import flash, jsonify, redirect, render_template, request, session, url_for

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    LocationUnavailableError,
    NotFoundError,
)


def _wants_json() -> bool:
    return request.is_json or request.path.startswith("/api/")


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            if _wants_json():
                return json_error("Please log in first", 401)
            flash("Please log in to continue.", "warning")
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            if _wants_json():
                return json_error("Please log in first", 401)
            return redirect(url_for("login"))

        if session.get("role") != Role.ADMIN.value:
            if _wants_json():
                return json_error("Admins only", 403)
            current_user = {"name": session.get("name"), "role": session.get("role")}
            return render_template("403.html", current_user=current_user), 403

        return view(*args, **kwargs)

    return wrapper


def error_status(exc: DomainError) -> int:
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, AuthenticationError):
        return 401
    if isinstance(exc, AuthorizationError):
        return 403
    if isinstance(exc, LocationUnavailableError):
        return 422
    return 400


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_ok(message: str, **payload):
    return jsonify({"success": True, "message": message, **payload}), 200
