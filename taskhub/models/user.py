from .base import render_date, utcnow


def new_user(data: dict) -> dict:
    return {
        "name": data["name"],
        "email": data["email"],
        "created_at": utcnow(),
    }


def to_dto(doc: dict) -> dict:
    return {
        "id": str(doc["_id"]),
        "name": doc["name"],
        "email": doc["email"],
        "created_at": render_date(doc.get("created_at")),
    }
