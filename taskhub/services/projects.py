# taskhub/services/projects.py
from ..core.database import PROJECTS
from ..core.errors import NotFoundError
from ..core.ids import parse_id
from ..models import project as project_model
from .users import get_user


def list_projects(db) -> list[dict]:
    return [project_model.to_dto(d) for d in db[PROJECTS].find()]


def get_user_projects(db, user_id) -> list[dict]:
    """All projects owned by `user_id` (the user itself need not exist)."""
    uid = parse_id(user_id, "user_id")
    return [project_model.to_dto(d) for d in db[PROJECTS].find({"user_id": uid})]


def create_project(db, data: dict) -> dict:
    owner = get_user(db, data["user_id"])
    doc = project_model.new_project(data, owner["_id"])
    db[PROJECTS].insert_one(doc)
    return project_model.to_dto(doc)


def get_project(db, project_id, field: str = "project_id") -> dict:
    doc = db[PROJECTS].find_one({"_id": parse_id(project_id, field)})
    if doc is None:
        raise NotFoundError("Project not found")
    return doc


def delete_project(db, project_id) -> None:
    # tasks keep pointing at the deleted project
    res = db[PROJECTS].delete_one({"_id": parse_id(project_id)})
    if res.deleted_count == 0:
        raise NotFoundError("Project not found")
