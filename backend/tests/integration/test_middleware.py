"""Tests for cross-origin headers, rate limiting, and the catch-all routes."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from blog_api.config import Settings
from blog_api.infrastructure.database import create_store_engine
from blog_api.infrastructure.database.repositories import SQLAlchemyArticleStore
from blog_api.main import create_app


async def _client_for(settings: Settings) -> tuple[AsyncClient, SQLAlchemyArticleStore]:
    store = SQLAlchemyArticleStore(create_store_engine(settings.db))
    await store.initialize()
    app = create_app(settings, article_store=store)
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test"), store


@pytest_asyncio.fixture
async def client(tmp_path) -> AsyncIterator[AsyncClient]:
    settings = Settings(_env_file=None, db=str(tmp_path / "blog.db"), rate_limit_per_minute=10_000)
    client, store = await _client_for(settings)
    async with client:
        yield client
    await store.close()


@pytest_asyncio.fixture
async def limited_client(tmp_path) -> AsyncIterator[AsyncClient]:
    settings = Settings(_env_file=None, db=str(tmp_path / "blog.db"), rate_limit_per_minute=2)
    client, store = await _client_for(settings)
    async with client:
        yield client
    await store.close()


@pytest.mark.asyncio
async def test_root_is_not_found(client: AsyncClient):
    response = await client.get("/")
    assert (response.status_code, response.text) == (404, "nothing here...")


@pytest.mark.asyncio
async def test_unknown_route_is_plain_text_404(client: AsyncClient):
    response = await client.get("/nowhere")
    assert response.status_code == 404
    assert response.headers["content-type"].startswith("text/plain")


@pytest.mark.asyncio
async def test_wrong_method_is_plain_text_405(client: AsyncClient):
    response = await client.put("/article/alice/T/")
    assert response.status_code == 405
    assert response.headers["content-type"].startswith("text/plain")


@pytest.mark.asyncio
async def test_options_returns_empty_200(client: AsyncClient):
    response = await client.options("/article/alice/T/")
    assert response.status_code == 200
    assert response.content == b""


@pytest.mark.asyncio
async def test_cors_preflight(client: AsyncClient):
    response = await client.options(
        "/article/alice/",
        headers={
            "Origin": "http://example.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert response.status_code == 200
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-methods"] == "GET, POST, OPTIONS, DELETE"
    assert response.headers["access-control-allow-headers"] == "Content-Type"


@pytest.mark.asyncio
async def test_preflight_with_any_requested_headers_is_empty_200(client: AsyncClient):
    response = await client.options(
        "/article/alice/",
        headers={
            "Origin": "http://example.com",
            "Access-Control-Request-Method": "PUT",
            "Access-Control-Request-Headers": "Authorization, X-Custom",
        },
    )
    assert response.status_code == 200
    assert response.content == b""


@pytest.mark.asyncio
async def test_cors_headers_on_errors(client: AsyncClient):
    response = await client.get("/articles/nobody/", headers={"Origin": "http://example.com"})
    assert response.status_code == 404
    assert response.headers["access-control-allow-origin"] == "*"


@pytest.mark.asyncio
async def test_cors_headers_without_origin(client: AsyncClient):
    response = await client.get("/articles/nobody/")
    assert response.status_code == 404
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-headers"] == "Content-Type"


@pytest.mark.asyncio
async def test_configured_origin_is_echoed(tmp_path):
    settings = Settings(
        _env_file=None,
        db=str(tmp_path / "blog.db"),
        cors_origins=["http://a.example", "http://b.example"],
    )
    client, store = await _client_for(settings)
    async with client:
        listed = await client.get("/", headers={"Origin": "http://b.example"})
        unlisted = await client.get("/", headers={"Origin": "http://evil.example"})
    await store.close()

    assert listed.headers["access-control-allow-origin"] == "http://b.example"
    assert unlisted.headers["access-control-allow-origin"] == "http://a.example"


@pytest.mark.asyncio
async def test_trailing_slash_after_sort_is_not_found(client: AsyncClient):
    await client.post("/article/alice/", json={"title": "T", "content": "C"})

    response = await client.get("/articles/alice/asc/")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_rate_limit_headers_and_rejection(limited_client: AsyncClient):
    first = await limited_client.get("/")
    second = await limited_client.get("/")
    third = await limited_client.get("/")

    assert first.headers["x-ratelimit-limit"] == "2"
    assert first.headers["x-ratelimit-remaining"] == "1"
    assert second.headers["x-ratelimit-remaining"] == "0"
    assert int(third.headers["x-ratelimit-reset"]) > 0
    assert (third.status_code, third.text) == (429, "Limit exceeded")
    assert third.headers["access-control-allow-origin"] == "*"


@pytest.mark.asyncio
async def test_options_does_not_consume_budget(limited_client: AsyncClient):
    for _ in range(5):
        assert (await limited_client.options("/articles/alice/")).status_code == 200

    assert (await limited_client.get("/")).status_code == 404
