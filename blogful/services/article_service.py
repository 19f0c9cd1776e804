"""
Article service — business rules for the Article resource.

Design notes
------------
- Every operation runs Validator -> Sanitizer -> ArticleStore in that order
  and signals failure by raising one of the ``blogful.errors`` kinds; the
  HTTP layer maps them to status codes.
- ``title`` and ``content`` are sanitised on write and again on read, so
  rows written by other tools never reach a client with live markup.
  ``sanitize`` is idempotent, so already-clean rows come back unchanged.
- ``style`` is a label, not free text, and is stored exactly as sent.
- Ids arrive straight from the URL. Anything that is not an integer in
  1..2147483647 (the primary-key range) is reported as ``NotFound``, just
  like an id with no row behind it.
- Functions hold no state between calls; the store passed in carries the
  request's session.
"""
import logging
from typing import Any, Mapping

from blogful.errors import NotFound
from blogful.sanitizer import sanitize
from blogful.store import ArticleRow, ArticleStore
from blogful.validators import validate_create, validate_update

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

# Fields that carry free text and therefore go through the sanitiser.
_FREE_TEXT_FIELDS: frozenset[str] = frozenset({"title", "content"})

# Ids live in an INTEGER primary key; anything larger cannot match a row.
MAX_ARTICLE_ID = 2_147_483_647


def _parse_article_id(raw: Any) -> int:
    """Return *raw* as an int in 1..MAX_ARTICLE_ID, or raise ``NotFound``."""
    if isinstance(raw, bool):
        raise NotFound(raw)
    if isinstance(raw, int):
        article_id = raw
    elif (
        isinstance(raw, str)
        and raw.isascii()
        and raw.isdigit()
        and len(raw) <= len(str(MAX_ARTICLE_ID))
    ):
        article_id = int(raw)
    else:
        raise NotFound(raw)
    if not 1 <= article_id <= MAX_ARTICLE_ID:
        raise NotFound(raw)
    return article_id


def _article_to_dict(row: ArticleRow) -> dict:
    """Serialise a store row to the public article representation."""
    return {
        "id": row.id,
        "title": sanitize(row.title),
        "content": sanitize(row.content),
        "style": row.style,
        "date_published": row.date_published.isoformat(),
        "author_name": row.author_name,
    }


async def _require_row(store: ArticleStore, raw_id: Any) -> ArticleRow:
    article_id = _parse_article_id(raw_id)
    row = await store.get_by_id(article_id)
    if row is None:
        logger.debug("Article %s not found", article_id)
        raise NotFound(article_id)
    return row


# ---------------------------------------------------------------------------
# Public service functions
# ---------------------------------------------------------------------------

async def list_articles(store: ArticleStore) -> list[dict]:
    """Return every article, sanitised. An empty table yields ``[]``."""
    rows = await store.list()
    return [_article_to_dict(row) for row in rows]


async def get_article(store: ArticleStore, article_id: Any) -> dict:
    """Return the article identified by *article_id* or raise ``NotFound``."""
    row = await _require_row(store, article_id)
    return _article_to_dict(row)


async def create_article(
    store: ArticleStore,
    payload: Mapping[str, Any] | None,
    author_id: int | None = None,
) -> dict:
    """
    Validate, sanitise and persist a new article.

    Raises ``MissingField`` naming the first absent required field. The
    store assigns ``id`` and ``date_published``; any client-supplied values
    for those (or for ``author_id``) are ignored because the validator only
    picks out ``title``, ``content`` and ``style``.
    """
    data = validate_create(payload)
    data = data.model_copy(
        update={"title": sanitize(data.title), "content": sanitize(data.content)}
    )
    row = await store.insert(data, author_id=author_id)
    logger.info("Created article id=%s style=%r", row.id, row.style)
    return _article_to_dict(row)


async def update_article(
    store: ArticleStore,
    article_id: Any,
    payload: Mapping[str, Any] | None,
) -> None:
    """
    Apply a partial update to an existing article.

    Existence is checked before the body so that an unknown id is always a
    ``NotFound``, even with an empty body. Only the supplied recognised
    fields are written; everything else keeps its stored value.
    """
    row = await _require_row(store, article_id)
    changes = validate_update(payload).changes()
    for field in changes.keys() & _FREE_TEXT_FIELDS:
        changes[field] = sanitize(changes[field])

    affected = await store.update_by_id(row.id, changes)
    if affected == 0:
        # Deleted between the existence check and the write.
        raise NotFound(row.id)
    logger.info("Updated article id=%s fields=%s", row.id, sorted(changes))


async def delete_article(store: ArticleStore, article_id: Any) -> None:
    """Hard-delete the article identified by *article_id*."""
    row = await _require_row(store, article_id)
    affected = await store.delete_by_id(row.id)
    if affected == 0:
        raise NotFound(row.id)
    logger.info("Deleted article id=%s", row.id)
