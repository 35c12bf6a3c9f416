"""Whole-namespace endpoints: list and bulk delete."""

from fastapi import APIRouter, Depends, Header, Response, status

from blog_api.application.services import ArticleService
from blog_api.infrastructure.dependencies import get_article_service
from blog_api.presentation.api.errors import translate_errors
from blog_api.presentation.api.renderers import render_articles

router = APIRouter(prefix="/articles", tags=["Articles"])


@router.get("/{user_id}/", response_class=Response)
@router.get("/{user_id}/{sort}", response_class=Response)
async def list_articles(
    user_id: str,
    sort: str | None = None,
    accept: str | None = Header(None),
    service: ArticleService = Depends(get_article_service),
) -> Response:
    """List every article of a user, optionally sorted by timestamp (asc/desc).

    Answers XML when the Accept header asks for text/xml but not JSON.
    """
    with translate_errors():
        articles = await service.list_articles(user_id, sort)
        return render_articles(articles, accept)


@router.delete("/{user_id}/", response_class=Response)
async def delete_articles(
    user_id: str,
    service: ArticleService = Depends(get_article_service),
) -> Response:
    """Delete every article of a user, namespace included."""
    with translate_errors():
        await service.delete_articles(user_id)
    return Response(status_code=status.HTTP_200_OK)
