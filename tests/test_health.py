import asyncio

import httpx

from app.main import app


def test_root_reports_liveness_as_plain_text() -> None:
    async def run() -> None:
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            resp = await client.get("/")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/plain")
        assert resp.text == "AI Food Creator Backend is running."

    asyncio.run(run())


def test_cors_allows_known_frontend_origin() -> None:
    async def run() -> None:
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            resp = await client.options(
                "/generate-recipe",
                headers={
                    "Origin": "https://ai-food-creator.netlify.app",
                    "Access-Control-Request-Method": "POST",
                },
            )
        assert resp.status_code == 200
        assert resp.headers["access-control-allow-origin"] == "https://ai-food-creator.netlify.app"

    asyncio.run(run())


def test_cors_rejects_unknown_origin() -> None:
    async def run() -> None:
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            preflight = await client.options(
                "/generate-recipe",
                headers={
                    "Origin": "https://evil.example.com",
                    "Access-Control-Request-Method": "POST",
                },
            )
            simple = await client.get("/", headers={"Origin": "https://evil.example.com"})
        assert preflight.status_code == 400
        assert "access-control-allow-origin" not in simple.headers

    asyncio.run(run())


def test_cors_allows_local_development_origin() -> None:
    async def run() -> None:
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            resp = await client.options(
                "/generate-recipe",
                headers={
                    "Origin": "http://localhost:3000",
                    "Access-Control-Request-Method": "POST",
                },
            )
        assert resp.status_code == 200
        assert resp.headers["access-control-allow-origin"] == "http://localhost:3000"

    asyncio.run(run())
