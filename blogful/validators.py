"""
Request-body checks for the article endpoints.

Both validators work on the raw decoded JSON object so that the error
raised names the offending field the way clients expect, instead of a
generic schema error. They return the typed payload the service works with.
"""
from typing import Any, Mapping

from blogful.errors import InvalidField, MissingField, NoUpdatableFields
from blogful.schemas import ArticlePatch, NewArticle

# Order matters: the first missing field is the one reported.
REQUIRED_FIELDS: tuple[str, ...] = ("title", "content", "style")
UPDATABLE_FIELDS: tuple[str, ...] = ("title", "style", "content")


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def validate_create(payload: Mapping[str, Any] | None) -> NewArticle:
    payload = payload or {}
    values: dict[str, str] = {}
    for field in REQUIRED_FIELDS:
        value = payload.get(field)
        if _is_blank(value):
            raise MissingField(field)
        if not isinstance(value, str):
            raise InvalidField(field)
        values[field] = value
    return NewArticle(**values)


def validate_update(payload: Mapping[str, Any] | None) -> ArticlePatch:
    payload = payload or {}
    # Allow-list first; unknown keys are never looked at again.
    supplied = {
        field: payload[field]
        for field in UPDATABLE_FIELDS
        if field in payload and not _is_blank(payload[field])
    }
    if not supplied:
        raise NoUpdatableFields()
    for field, value in supplied.items():
        if not isinstance(value, str):
            raise InvalidField(field)
    return ArticlePatch(**supplied)
