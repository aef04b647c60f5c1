# taskhub/routes/__init__.py
from flask import request

from ..core.errors import NotFoundError, ValidationError, plain_text as plain


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def require_fields(data: dict, *fields: str) -> None:
    """Presence/truthiness check only; no type or format validation."""
    missing = [f for f in fields if not data.get(f)]
    if missing:
        raise ValidationError(f"Bad request: missing {', '.join(missing)}")


def require_query(name: str, error=ValidationError) -> str:
    value = request.args.get(name)
    if not value:
        raise error(f"Bad request: missing {name}")
    return value


def require_relation_query(name: str) -> str:
    # the by-user / by-project lookups answer 404 for a missing parameter
    return require_query(name, error=NotFoundError)


__all__ = ["json_body", "plain", "require_fields", "require_query", "require_relation_query"]
