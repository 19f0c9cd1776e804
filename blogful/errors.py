"""
Error kinds raised by the article core.

Each exception carries the HTTP status and the client-facing message; the
handlers registered in ``blogful.main`` turn them into
``{"error": {"message": ...}}`` bodies. Messages are fixed strings so no
internal detail (SQL, tracebacks) can leak into a response.
"""
from typing import Any


class ArticleError(Exception):
    status_code: int = 500
    message: str = "server error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_body(self) -> dict:
        return {"error": {"message": self.message}}


class MissingField(ArticleError):
    status_code = 400

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing '{field}' in request body")


class InvalidField(ArticleError):
    status_code = 400

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"'{field}' must be a string")


class NoUpdatableFields(ArticleError):
    status_code = 400
    message = "Request body must contain either 'title', 'style' or 'content'"


class NotFound(ArticleError):
    status_code = 404

    def __init__(self, article_id: Any) -> None:
        self.article_id = article_id
        super().__init__("Article doesn't exist")


class StoreUnavailable(ArticleError):
    """Any data-access failure; the cause is chained, never rendered."""

    status_code = 500


class InvalidBody(ArticleError):
    """The request body is not valid JSON or not a JSON object."""

    status_code = 400
    message = "Request body must be a JSON object"
