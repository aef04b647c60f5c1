from bson import ObjectId

from .base import copy_optional, render_date

OPTIONAL_FIELDS = ("description", "end_date")


def new_project(data: dict, user_id: ObjectId) -> dict:
    doc = {
        "name": data["name"],
        "start_date": data["start_date"],
        "user_id": user_id,
    }
    return copy_optional(data, doc, OPTIONAL_FIELDS)


def to_dto(doc: dict) -> dict:
    dto = {
        "id": str(doc["_id"]),
        "name": doc["name"],
        "start_date": render_date(doc.get("start_date")),
        "user_id": str(doc["user_id"]),
    }
    if "description" in doc:
        dto["description"] = doc["description"]
    if "end_date" in doc:
        dto["end_date"] = render_date(doc["end_date"])
    return dto
