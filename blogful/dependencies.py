from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blogful.database import get_db
from blogful.store import ArticleStore


def get_article_store(db: AsyncSession = Depends(get_db)) -> ArticleStore:
    """
    FastAPI dependency yielding an ``ArticleStore`` bound to the request's
    session.

    A fresh store is built per request, so no state survives between
    requests. Overriding ``get_db`` in tests is enough to point every store
    at the test database.
    """
    return ArticleStore(db)
