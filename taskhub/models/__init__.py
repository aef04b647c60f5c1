# taskhub/models/__init__.py
"""
Document shapes for the three collections and their DTO mappers.

Each module exposes ``new_<entity>(...)`` (request body -> document to insert)
and ``to_dto(doc)`` (stored document -> JSON-ready dict with string ids).
"""
from .task import TaskStatus
from .base import copy_optional, render_date, utcnow

__all__ = ["TaskStatus", "render_date", "copy_optional", "utcnow"]
