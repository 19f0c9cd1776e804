from pydantic import BaseModel, ConfigDict
from datetime import datetime


# --- Article (write side) ---

class NewArticle(BaseModel):
    """A validated create payload; unknown client keys never get this far."""

    title: str
    content: str
    style: str


class ArticlePatch(BaseModel):
    """
    A validated partial update.

    Only the recognised keys exist on the model, so anything else the client
    sent is dropped before it can be merged into the stored row.
    """

    title: str | None = None
    style: str | None = None
    content: str | None = None

    def changes(self) -> dict[str, str]:
        return self.model_dump(exclude_none=True)


# --- Article (read side) ---

class ArticleResponse(BaseModel):
    id: int
    title: str
    content: str
    style: str
    date_published: datetime
    author_name: str | None = None
    model_config = ConfigDict(from_attributes=True)


# --- Errors ---

class ErrorMessage(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: ErrorMessage
