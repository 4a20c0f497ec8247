from __future__ import annotations

import random

from flask import Flask, flash, g, redirect, render_template, request, url_for

from ..common.logging import get_logger
from ..common.web import admin_required, error_status, json_error, json_ok, login_required
from ..container import Container
from ..core.constants import PROOF_PHOTO_PLACEHOLDER
from ..core.exceptions import DomainError, ValidationError
from ..location.geolocation import parse_fix
from .model import TaskDraft, TaskLocation

logger = get_logger(__name__)


def register(app: Flask, container: Container) -> None:
    tasks = container.task_service

    def _draft_location(form) -> TaskLocation:
        address = form.get("address", "").strip() or "Bangalore"
        lat_s, lng_s = form.get("lat", "").strip(), form.get("lng", "").strip()
        if lat_s and lng_s:
            try:
                return TaskLocation(lat=float(lat_s), lng=float(lng_s), address=address)
            except ValueError:
                raise ValidationError("Task coordinates must be numbers")

        # No geocoder: drop the pin near the configured default center.
        lat0, lng0 = container.dashboard_service.default_center
        return TaskLocation(lat=lat0 + random.uniform(-0.05, 0.05), lng=lng0 + random.uniform(-0.05, 0.05), address=address)

    @app.route("/admin/tasks", methods=["POST"], endpoint="admin_assign_task")
    @admin_required
    def admin_assign_task():
        form = request.form
        try:
            draft = TaskDraft(
                assigned_to=form.get("assigned_to", ""),
                title=form.get("title", ""),
                description=form.get("description", ""),
                location=_draft_location(form),
                due_date=form.get("due_date") or None,
            )
            tasks.assign_task(draft, user=g.user)
            flash("Task assigned.", "success")
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Task assignment failed")
            flash("System error while assigning task", "danger")

        return redirect(url_for("admin_dashboard"))

    @app.route("/app/tasks", endpoint="employee_tasks")
    @login_required
    def employee_tasks():
        mine = tasks.tasks_for(g.user.id)
        return render_template(
            "employee/tasks.html",
            pending=mine.pending,
            completed=mine.completed,
            geo_options=container.geo_options.as_browser_options(),
        )

    @app.route("/app/tasks/<task_id>/complete", methods=["POST"], endpoint="api_complete_task")
    @login_required
    def api_complete_task(task_id: str):
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        try:
            location = parse_fix(data.get("location"))
            task = tasks.complete_task(
                task_id,
                location=location,
                note=data.get("note"),
                photo_url=data.get("photo_url") or PROOF_PHOTO_PLACEHOLDER,
            )
        except DomainError as e:
            return json_error(str(e), error_status(e))
        except Exception:
            logger.exception("Task completion failed")
            return json_error("System error while completing task", 500)

        return json_ok("Task completed", task_id=task.id, completed_at=task.proof.timestamp.isoformat())
