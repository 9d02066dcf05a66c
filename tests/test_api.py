"""Tests for the HTTP API contract (routes, status codes, camelCase bodies)."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.app import App
from src.api import routes
from src.api.main import create_api
from src.soql.validator import ValidationError


@pytest_asyncio.fixture
async def client(app_container: App) -> AsyncIterator[AsyncClient]:
    api = create_api(app_container)
    async with AsyncClient(transport=ASGITransport(app=api), base_url="http://test") as ac:
        yield ac


@pytest.mark.asyncio
async def test_parse_query_success(client: AsyncClient) -> None:
    response = await client.post(
        "/api/parse-query",
        json={"query": "Show me accounts with high revenue", "userId": "005xx", "orgId": "00Dxx"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["soqlQuery"] == (
        "SELECT Id, Name, Industry, Type, CreatedDate FROM Account "
        "WHERE AnnualRevenue > 1000000 AND IsDeleted = false ORDER BY Name LIMIT 1000"
    )
    assert body["objectName"] == "Account"
    assert body["fields"][0] == "Id"
    assert body["source"] == "rules"
    assert body["metadata"]["originalQuery"] == "Show me accounts with high revenue"
    assert body["metadata"]["userId"] == "005xx"
    assert body["metadata"]["orgId"] == "00Dxx"
    assert body["metadata"]["processingTimeMs"] >= 0


@pytest.mark.asyncio
async def test_parse_query_rejects_blank_input(client: AsyncClient) -> None:
    response = await client.post("/api/parse-query", json={"query": "  "})

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "error": "Invalid input",
        "message": "Query is required and must be a non-empty string",
    }


@pytest.mark.asyncio
async def test_parse_query_rejects_missing_body_field(client: AsyncClient) -> None:
    response = await client.post("/api/parse-query", json={"userId": "005xx"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_parse_query_reports_validation_reason(
        client: AsyncClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    def _reject(*_args: Any, **_kwargs: Any) -> Any:
        raise ValidationError("limit exceeds maximum")

    monkeypatch.setattr(routes, "process", _reject)
    response = await client.post("/api/parse-query", json={"query": "accounts"})

    assert response.status_code == 400
    assert response.json()["message"] == "limit exceeds maximum"


@pytest.mark.asyncio
async def test_parse_query_hides_internal_errors(
        client: AsyncClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    def _boom(*_args: Any, **_kwargs: Any) -> Any:
        raise RuntimeError("secret detail")

    monkeypatch.setattr(routes, "process", _boom)
    response = await client.post("/api/parse-query", json={"query": "accounts"})

    assert response.status_code == 500
    assert "secret detail" not in response.text


@pytest.mark.asyncio
async def test_salesforce_schema(client: AsyncClient) -> None:
    response = await client.get("/api/salesforce-schema")

    assert response.status_code == 200
    objects = response.json()["schema"]["objects"]
    assert set(objects) == {"Account", "Contact", "Lead", "Opportunity", "Case", "Task", "Event"}
    assert objects["Account"]["defaultSort"] == ["Name"]
    assert "AnnualRevenue" in objects["Account"]["fields"]


@pytest.mark.asyncio
async def test_health_endpoints(client: AsyncClient) -> None:
    health = await client.get("/health")
    assert health.status_code == 200
    assert health.json()["status"] == "healthy"

    service = await client.get("/api/parse-query/health")
    assert service.status_code == 200
    assert service.json()["llm"] == "not configured"
