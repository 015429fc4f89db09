"""
Integration tests for the Finance, Health and Metrics endpoints.
"""

import pytest
from httpx import AsyncClient

from moodguard.domain.entities import Emotion


class TestFinanceSummary:
    """Tests for GET /v1/finance/summary endpoint."""

    @pytest.mark.asyncio
    async def test_seeded_summary(self, client: AsyncClient):
        response = await client.get("/v1/finance/summary")

        assert response.status_code == 200

        data = response.json()
        assert data["total_balance"] == pytest.approx(45451.50)
        assert data["total_balance_display"] == "$45,451.50"
        assert data["total_expenses"] == 0
        assert data["pending_count"] == 0
        assert [a["name"] for a in data["accounts"]] == [
            "Main Checking",
            "Savings",
            "Investment Portfolio",
        ]
        assert {b["category"] for b in data["budgets"]} == {"Food", "Entertainment", "Shopping"}
        assert set(data["spending_by_emotion"]) == {e.value for e in Emotion}

    @pytest.mark.asyncio
    async def test_summary_reflects_activity(
        self,
        client: AsyncClient,
        calm_purchase_request: dict,
        angry_purchase_request: dict,
    ):
        await client.post("/v1/transactions", json=calm_purchase_request)
        await client.post("/v1/transactions", json=angry_purchase_request)

        data = (await client.get("/v1/finance/summary")).json()

        assert data["total_expenses"] == pytest.approx(42.5)
        assert data["average_spending"] == pytest.approx(42.5)
        assert data["pending_count"] == 1
        assert data["spending_by_category"] == {"Food": pytest.approx(42.5)}
        assert data["spending_by_emotion"]["neutral"] == pytest.approx(42.5)
        assert data["spending_by_emotion"]["angry"] == 0

    @pytest.mark.asyncio
    async def test_budget_utilization(self, client: AsyncClient):
        data = (await client.get("/v1/finance/summary")).json()
        food = next(b for b in data["budgets"] if b["category"] == "Food")

        assert food["remaining"] == pytest.approx(180)
        assert food["utilization"] == pytest.approx(0.64)
        assert food["exceeded"] is False


class TestInsights:
    """Tests for GET /v1/finance/insights endpoint."""

    @pytest.mark.asyncio
    async def test_empty(self, client: AsyncClient):
        response = await client.get("/v1/finance/insights")

        assert response.status_code == 200
        assert response.json()["insights"] == []

    @pytest.mark.asyncio
    async def test_limit(self, client: AsyncClient, angry_purchase_request: dict):
        # Each held purchase adds an impulse or hold insight
        for _ in range(3):
            await client.post("/v1/transactions", json=angry_purchase_request)

        response = await client.get("/v1/finance/insights", params={"limit": 2})

        assert len(response.json()["insights"]) == 2

    @pytest.mark.asyncio
    async def test_invalid_limit(self, client: AsyncClient):
        response = await client.get("/v1/finance/insights", params={"limit": 0})

        assert response.status_code == 422


class TestHealthAndMetrics:
    """Tests for operational endpoints."""

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["detection_enabled"] is True

    @pytest.mark.asyncio
    async def test_metrics_exposes_evaluations(
        self,
        client: AsyncClient,
        angry_purchase_request: dict,
    ):
        await client.post("/v1/transactions", json=angry_purchase_request)

        response = await client.get("/metrics")

        assert response.status_code == 200
        assert "moodguard_transaction_evaluations_total" in response.text
        assert 'outcome="held"' in response.text
