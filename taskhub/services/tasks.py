# taskhub/services/tasks.py
from ..core.database import TASKS
from ..core.errors import NotFoundError, ValidationError
from ..core.ids import parse_id
from ..models import task as task_model
from .projects import get_project


def list_tasks(db) -> list[dict]:
    return [task_model.to_dto(d) for d in db[TASKS].find()]


def get_project_tasks(db, project_id) -> list[dict]:
    pid = parse_id(project_id, "project_id")
    return [task_model.to_dto(d) for d in db[TASKS].find({"project_id": pid})]


def create_task(db, data: dict) -> dict:
    project = get_project(db, data["project_id"])
    doc = task_model.new_task(data, project["_id"])
    db[TASKS].insert_one(doc)
    return task_model.to_dto(doc)


def get_task(db, task_id) -> dict:
    doc = db[TASKS].find_one({"_id": parse_id(task_id, "task_id")})
    if doc is None:
        raise NotFoundError("Task not found")
    return doc


def delete_task(db, task_id) -> None:
    res = db[TASKS].delete_one({"_id": parse_id(task_id)})
    if res.deleted_count == 0:
        raise NotFoundError("Task not found")


def move_task(db, task_id, destination_project_id) -> dict:
    """
    Point a task at another project and return a short summary
    ``{id, title, project_id}``.

    Both the task and the destination project must exist. Moving a task to
    the project it already belongs to modifies nothing and is rejected.
    """
    task = get_task(db, task_id)
    destination = get_project(db, destination_project_id, "destination_project_id")
    if task["project_id"] == destination["_id"]:
        raise ValidationError("Task not moved")

    res = db[TASKS].update_one(
        {"_id": task["_id"]},
        {"$set": {"project_id": destination["_id"]}},
    )
    if res.modified_count == 0:
        raise ValidationError("Task not moved")

    return {
        "id": str(task["_id"]),
        "title": task["title"],
        "project_id": str(destination["_id"]),
    }
