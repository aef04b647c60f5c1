from enum import Enum

from .base import copy_optional, render_date, utcnow

OPTIONAL_FIELDS = ("description", "due_date")


class TaskStatus(str, Enum):
    pending = "pending"
    in_progress = "in_progress"
    completed = "completed"


def new_task(data: dict, project_id) -> dict:
    """Build the document to insert. `status` is stored as sent (no enum check)."""
    doc = {
        "title": data["title"],
        "status": data.get("status") or TaskStatus.pending.value,
        "created_date": utcnow(),
        "project_id": project_id,
    }
    return copy_optional(data, doc, OPTIONAL_FIELDS)


def to_dto(doc: dict) -> dict:
    dto = {
        "id": str(doc["_id"]),
        "title": doc["title"],
        "status": doc.get("status", TaskStatus.pending.value),
        "created_date": render_date(doc.get("created_date")),
        "project_id": str(doc["project_id"]),
    }
    if "description" in doc:
        dto["description"] = doc["description"]
    if "due_date" in doc:
        dto["due_date"] = render_date(doc["due_date"])
    return dto
