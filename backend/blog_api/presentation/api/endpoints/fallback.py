"""Catch-all handling for the bare root."""

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

router = APIRouter(include_in_schema=False)


@router.api_route("/", methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"])
async def root() -> PlainTextResponse:
    return PlainTextResponse("nothing here...", status_code=status.HTTP_404_NOT_FOUND)
