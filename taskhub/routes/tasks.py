# taskhub/routes/tasks.py
from __future__ import annotations
from flask import Blueprint, jsonify, current_app

from .. import get_db
from ..services import tasks as tasks_service
from . import json_body, plain, require_fields, require_query, require_relation_query

tasks_bp = Blueprint("tasks", __name__)


@tasks_bp.get("/tasks")
def list_tasks():
    return jsonify(tasks_service.list_tasks(get_db())), 200


@tasks_bp.get("/tasks/by-project")
def tasks_by_project():
    project_id = require_relation_query("project_id")
    return jsonify(tasks_service.get_project_tasks(get_db(), project_id)), 200


@tasks_bp.post("/tasks")
def create_task():
    """
    POST /tasks
    Body: { title, status, due_date, project_id, description? }
    The owning project must exist (404 otherwise).
    """
    data = json_body()
    require_fields(data, "title", "status", "due_date", "project_id")

    task = tasks_service.create_task(get_db(), data)
    current_app.logger.info("created task %s in project %s", task["id"], task["project_id"])
    return jsonify(task), 201


@tasks_bp.delete("/tasks")
def delete_task():
    task_id = require_query("id")
    tasks_service.delete_task(get_db(), task_id)
    current_app.logger.info("deleted task %s", task_id)
    return plain("Task deleted successfully")


@tasks_bp.post("/tasks/move")
def move_task():
    """
    POST /tasks/move
    Body: { task_id, destination_project_id, origin_project_id? }
    origin_project_id is accepted but has no effect.
    Returns 200 { message, task: { id, title, project_id } }
    """
    data = json_body()
    require_fields(data, "task_id", "destination_project_id")

    if data.get("origin_project_id"):
        current_app.logger.debug("move: ignoring origin_project_id=%s", data["origin_project_id"])

    summary = tasks_service.move_task(get_db(), data["task_id"], data["destination_project_id"])
    current_app.logger.info("moved task %s to project %s", summary["id"], summary["project_id"])
    return jsonify({"message": "Task moved successfully", "task": summary}), 200
