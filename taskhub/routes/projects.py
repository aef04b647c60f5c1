# taskhub/routes/projects.py
from __future__ import annotations
from flask import Blueprint, jsonify, current_app

from .. import get_db
from ..services import projects as projects_service
from . import json_body, plain, require_fields, require_query, require_relation_query

projects_bp = Blueprint("projects", __name__)


# --- routes --------------------------------------------------
@projects_bp.get("/projects")
def list_projects():
    return jsonify(projects_service.list_projects(get_db())), 200


@projects_bp.get("/projects/by-user")
def projects_by_user():
    user_id = require_relation_query("user_id")
    return jsonify(projects_service.get_user_projects(get_db(), user_id)), 200


@projects_bp.post("/projects")
def create_project():
    """
    POST /projects
    Body: { name, start_date, user_id, description?, end_date? }
    The owning user must exist (404 otherwise).
    """
    data = json_body()
    require_fields(data, "name", "start_date", "user_id")

    project = projects_service.create_project(get_db(), data)
    current_app.logger.info("created project %s for user %s", project["id"], project["user_id"])
    return jsonify(project), 201


@projects_bp.delete("/projects")
def delete_project():
    project_id = require_query("id")
    projects_service.delete_project(get_db(), project_id)
    current_app.logger.info("deleted project %s", project_id)
    return plain("Project deleted successfully")
