"""Top-level API router — aggregates all endpoint routers."""

from fastapi import APIRouter

from blog_api.presentation.api.endpoints.article import router as article_router
from blog_api.presentation.api.endpoints.articles import router as articles_router
from blog_api.presentation.api.endpoints.fallback import router as fallback_router

router = APIRouter()
router.include_router(article_router)
router.include_router(articles_router)
router.include_router(fallback_router)
