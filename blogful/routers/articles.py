from typing import Any

from fastapi import APIRouter, Body, Depends, Response

from blogful.config import settings
from blogful.dependencies import get_article_store
from blogful.schemas import ArticleResponse, ErrorResponse
from blogful.services import article_service
from blogful.store import ArticleStore

router = APIRouter(
    prefix=f"{settings.API_PREFIX}/articles",
    tags=["articles"],
    responses={404: {"model": ErrorResponse}},
)


@router.get("", response_model=list[ArticleResponse])
async def list_articles(store: ArticleStore = Depends(get_article_store)):
    return await article_service.list_articles(store)

# The id stays a string so that "/articles/abc" is a 404 like any unknown id.
@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(article_id: str, store: ArticleStore = Depends(get_article_store)):
    return await article_service.get_article(store, article_id)

@router.post(
    "",
    status_code=201,
    response_model=ArticleResponse,
    responses={400: {"model": ErrorResponse}},
)
async def create_article(
    response: Response,
    # Raw JSON object: the validators name missing fields and ignore unknown keys.
    payload: dict[str, Any] | None = Body(None),
    store: ArticleStore = Depends(get_article_store),
):
    article = await article_service.create_article(store, payload)
    response.headers["Location"] = f"{router.prefix}/{article['id']}"
    return article

@router.patch("/{article_id}", status_code=204, responses={400: {"model": ErrorResponse}})
async def update_article(
    article_id: str,
    payload: dict[str, Any] | None = Body(None),
    store: ArticleStore = Depends(get_article_store),
):
    await article_service.update_article(store, article_id, payload)

@router.delete("/{article_id}", status_code=204)
async def delete_article(article_id: str, store: ArticleStore = Depends(get_article_store)):
    await article_service.delete_article(store, article_id)
