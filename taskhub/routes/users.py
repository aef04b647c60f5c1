# taskhub/routes/users.py
from flask import Blueprint, jsonify, current_app

from .. import get_db
from ..services import users as users_service
from ..core.errors import ValidationError
from . import json_body, plain, require_fields, require_query

users_bp = Blueprint("users", __name__)


@users_bp.get("/users")
def list_users():
    return jsonify(users_service.list_users(get_db())), 200


@users_bp.post("/users")
def create_user():
    """
    POST /users
    Body: { name, email }
    Returns:
      201 { id, name, email, created_at }
      400 missing name/email, or email not a string
      409 email already registered
    """
    data = json_body()
    require_fields(data, "name", "email")
    if not isinstance(data["email"], str):
        raise ValidationError("Bad request: email must be a string")

    user = users_service.create_user(get_db(), data)
    current_app.logger.info("created user %s", user["id"])
    return jsonify(user), 201


@users_bp.delete("/users")
def delete_user():
    user_id = require_query("id")
    users_service.delete_user(get_db(), user_id)
    current_app.logger.info("deleted user %s", user_id)
    return plain("User deleted successfully")
