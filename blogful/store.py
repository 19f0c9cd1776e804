"""
Article store — row-level CRUD primitives over the ``blogful_articles`` table.

The store owns persistence only: it assigns ``id`` and ``date_published`` on
insert and joins the author's name on every read. Validation and
sanitisation belong to the service layer.

Every method flushes but never commits; the transaction boundary is owned by
the ``get_db`` dependency. Any SQLAlchemy failure is logged here and
re-raised as ``StoreUnavailable`` with the original error chained.
"""
from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blogful.errors import StoreUnavailable
from blogful.models import Article, User
from blogful.schemas import NewArticle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArticleRow:
    id: int
    title: str
    content: str
    style: str
    date_published: datetime
    author_name: str | None


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _translate_errors(method):
    @functools.wraps(method)
    async def wrapper(self, *args, **kwargs):
        try:
            return await method(self, *args, **kwargs)
        except SQLAlchemyError as exc:
            logger.exception("ArticleStore.%s failed", method.__name__)
            raise StoreUnavailable() from exc

    return wrapper


class ArticleStore:
    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    @staticmethod
    def _select_rows():
        return (
            select(
                Article.id,
                Article.title,
                Article.content,
                Article.style,
                Article.date_published,
                User.fullname.label("author_name"),
            )
            .select_from(Article)
            .outerjoin(User, Article.author_id == User.id)
        )

    @staticmethod
    def _to_row(mapping) -> ArticleRow:
        return ArticleRow(
            id=mapping["id"],
            title=mapping["title"],
            content=mapping["content"],
            style=mapping["style"],
            date_published=_as_utc(mapping["date_published"]),
            author_name=mapping["author_name"],
        )

    @_translate_errors
    async def list(self) -> list[ArticleRow]:
        result = await self._db.execute(self._select_rows().order_by(Article.id))
        return [self._to_row(m) for m in result.mappings().all()]

    @_translate_errors
    async def get_by_id(self, article_id: int) -> ArticleRow | None:
        result = await self._db.execute(self._select_rows().where(Article.id == article_id))
        mapping = result.mappings().one_or_none()
        return self._to_row(mapping) if mapping is not None else None

    @_translate_errors
    async def insert(self, data: NewArticle, author_id: int | None = None) -> ArticleRow:
        article = Article(
            title=data.title,
            content=data.content,
            style=data.style,
            author_id=author_id,
            date_published=datetime.now(timezone.utc),
        )
        self._db.add(article)
        await self._db.flush()

        # Re-read through the join so the author name is populated and the
        # timestamp round-trips exactly as later reads will see it.
        row = await self.get_by_id(article.id)
        if row is None:  # pragma: no cover
            raise StoreUnavailable()
        return row

    @_translate_errors
    async def update_by_id(self, article_id: int, changes: dict[str, str]) -> int:
        if not changes:
            return 0
        result = await self._db.execute(
            update(Article)
            .where(Article.id == article_id)
            .values(**changes)
            .execution_options(synchronize_session=False)
        )
        await self._db.flush()
        return result.rowcount

    @_translate_errors
    async def delete_by_id(self, article_id: int) -> int:
        result = await self._db.execute(
            delete(Article)
            .where(Article.id == article_id)
            .execution_options(synchronize_session=False)
        )
        await self._db.flush()
        return result.rowcount
