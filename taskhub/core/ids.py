from bson import ObjectId
from bson.errors import InvalidId

from .errors import ValidationError


def parse_id(value, field: str = "id") -> ObjectId:
    """External string id -> ObjectId. Malformed ids are a client error."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        raise ValidationError(f"Invalid {field}")
