"""Tests for the SKU parsing endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient

from tf2sku.config import MAX_BATCH_SIZE, settings
from tf2sku.main import app


@pytest.fixture
async def client():
    """Provide an async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


class TestParseEndpoint:
    async def test_parse_valid_sku(self, client: AsyncClient, decorated_weapon_sku: str) -> None:
        response = await client.post("/sku/parse", json={"sku": decorated_weapon_sku})

        assert response.status_code == 200
        body = response.json()
        assert body["outcome"] == "success"
        assert body["failure"] is None
        data = body["data"]
        assert data["sku"] == decorated_weapon_sku
        assert data["defindex"] == 424
        assert data["quality"] == "DECORATED_WEAPON"
        assert data["wear"] == "FIELD_TESTED"
        assert data["killstreak_tier"] == "PROFESSIONAL"
        assert data["particle"] == 703

    async def test_parse_returns_canonical_sku(self, client: AsyncClient) -> None:
        response = await client.post("/sku/parse", json={"sku": "627;11;footprints-2;sp-28"})

        data = response.json()["data"]
        assert data["sku"] == "627;11;sp-28;footprints-2"
        assert data["strange_parts"] == ["DOMINATIONS"]
        assert data["spells"] == ["HEADLESS_HORSESHOES"]

    async def test_invalid_sku_is_known_failure(self, client: AsyncClient) -> None:
        response = await client.post("/sku/parse", json={"sku": "264;11;bogus"})

        assert response.status_code == 400
        body = response.json()
        assert body["outcome"] == "known_failure"
        assert body["data"] is None
        assert body["failure"]["kind"] == "unknown_attribute"
        assert body["failure"]["detail"] == "SKU: '264;11;bogus'"
        assert body["failure"]["suggestion"]

    async def test_invalid_quality_strict(self, client: AsyncClient) -> None:
        response = await client.post("/sku/parse", json={"sku": "264;99"})

        assert response.status_code == 400
        assert response.json()["failure"]["kind"] == "invalid_quality"

    async def test_invalid_quality_lenient(self, client: AsyncClient) -> None:
        response = await client.post("/sku/parse", json={"sku": "264;99", "lenient": True})

        assert response.status_code == 200
        assert response.json()["data"]["quality"] == "NORMAL"

    async def test_server_default_mode(
        self, client: AsyncClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(settings, "lenient_quality", True)

        response = await client.post("/sku/parse", json={"sku": "264;99"})

        assert response.status_code == 200
        assert response.json()["data"]["sku"] == "264;0"

    async def test_missing_field_is_validation_error(self, client: AsyncClient) -> None:
        response = await client.post("/sku/parse", json={})

        assert response.status_code == 422


class TestBatchEndpoint:
    async def test_batch_mixed_results(self, client: AsyncClient) -> None:
        response = await client.post(
            "/sku/batch",
            json={"skus": ["264;11;kt-3", "264;11;", "5021;6"]},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["outcome"] == "success"
        data = body["data"]
        assert data["parsed"] == 2
        assert data["failed"] == 1

        results = data["results"]
        assert [r["outcome"] for r in results] == ["success", "known_failure", "success"]
        assert results[0]["data"]["sku"] == "264;11;kt-3"
        assert results[1]["failure"]["kind"] == "empty_field"
        assert results[1]["failure"]["suggestion"]
        assert results[2]["data"]["quality"] == "UNIQUE"

    async def test_batch_lenient(self, client: AsyncClient) -> None:
        response = await client.post(
            "/sku/batch",
            json={"skus": ["264;99;kt-3"], "lenient": True},
        )

        data = response.json()["data"]
        assert data["failed"] == 0
        assert data["results"][0]["data"]["sku"] == "264;0;kt-3"

    async def test_empty_batch(self, client: AsyncClient) -> None:
        response = await client.post("/sku/batch", json={"skus": []})

        assert response.status_code == 200
        assert response.json()["data"] == {"results": [], "parsed": 0, "failed": 0}

    async def test_batch_too_large_is_refused(self, client: AsyncClient) -> None:
        skus = ["5021;6"] * (MAX_BATCH_SIZE + 1)

        response = await client.post("/sku/batch", json={"skus": skus})

        assert response.status_code == 400
        body = response.json()
        assert body["outcome"] == "refusal"
        assert body["failure"]["kind"] == "batch_too_large"
