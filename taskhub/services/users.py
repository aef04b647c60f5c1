# taskhub/services/users.py
from pymongo.errors import DuplicateKeyError

from ..core.database import USERS
from ..core.errors import ConflictError, NotFoundError
from ..core.ids import parse_id
from ..models import user as user_model


def list_users(db) -> list[dict]:
    return [user_model.to_dto(d) for d in db[USERS].find()]


def create_user(db, data: dict) -> dict:
    """Insert a user; the email must not be registered yet."""
    if db[USERS].find_one({"email": {"$eq": data["email"]}}) is not None:
        raise ConflictError("User already exists")

    doc = user_model.new_user(data)
    try:
        db[USERS].insert_one(doc)
    except DuplicateKeyError:
        # lost the race against a concurrent insert of the same email
        raise ConflictError("User already exists")
    return user_model.to_dto(doc)


def get_user(db, user_id) -> dict:
    doc = db[USERS].find_one({"_id": parse_id(user_id, "user_id")})
    if doc is None:
        raise NotFoundError("User not found")
    return doc


def delete_user(db, user_id) -> None:
    # projects owned by the user are left in place
    res = db[USERS].delete_one({"_id": parse_id(user_id)})
    if res.deleted_count == 0:
        raise NotFoundError("User not found")
