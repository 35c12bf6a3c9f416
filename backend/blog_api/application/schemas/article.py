"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class ArticleCreate(BaseModel):
    """Schema for creating or overwriting an article.

    Any client-supplied ``timestamp`` is ignored; the store assigns it.
    """

    title: str = Field(..., min_length=1, examples=["Getting Started"])
    content: str = Field("", examples=["This is a blog article."])


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    title: str
    content: str
    timestamp: datetime | None = None

    model_config = {"from_attributes": True}
