"""Single-article endpoints: create/overwrite, fetch, delete."""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from pydantic import ValidationError

from blog_api.application.schemas import ArticleCreate, ArticleResponse
from blog_api.application.services import ArticleService
from blog_api.infrastructure.dependencies import get_article_service
from blog_api.presentation.api.errors import translate_errors

router = APIRouter(prefix="/article", tags=["Article"])


def _is_json(content_type: str | None) -> bool:
    media_type = (content_type or "").split(";", 1)[0].strip().lower()
    return media_type == "application/json"


_MISSING_TITLE = {"missing", "string_too_short"}


def _is_missing_title(error) -> bool:
    if tuple(error["loc"][:1]) != ("title",):
        return False
    return error["type"] in _MISSING_TITLE or (error["type"] == "string_type" and error["input"] is None)


def _body_error(exc: ValidationError) -> str:
    # A wrongly typed field is a decoding failure, not a missing title
    if all(_is_missing_title(error) for error in exc.errors()):
        return "missing title"
    return "fail to parse JSON"


@router.post("/{user_id}/", response_model=ArticleResponse)
async def post_article(
    user_id: str,
    request: Request,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create an article, or overwrite the one with the same title."""
    if not _is_json(request.headers.get("content-type")):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid content-type")
    try:
        data = ArticleCreate.model_validate_json(await request.body())
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=_body_error(e))

    with translate_errors():
        article = await service.create_article(user_id, data)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.get("/{user_id}/{title}/", response_model=ArticleResponse)
async def get_article(
    user_id: str,
    title: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by title."""
    with translate_errors():
        article = await service.get_article(user_id, title)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.delete("/{user_id}/{title}/", response_class=Response)
async def delete_article(
    user_id: str,
    title: str,
    service: ArticleService = Depends(get_article_service),
) -> Response:
    """Delete a single article by title."""
    with translate_errors():
        await service.delete_article(user_id, title)
    return Response(status_code=status.HTTP_200_OK)
