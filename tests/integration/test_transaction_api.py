"""
Integration tests for the Transaction API endpoints.

These tests verify:
1. POST /v1/transactions - Submit and evaluate a candidate
2. GET /v1/transactions and /v1/transactions/pending - Listings
3. POST /v1/transactions/pending/{id}/approve|reject - Pending workflow
4. Balance, budget and insight side effects
"""

import pytest
from httpx import AsyncClient


async def get_account(client: AsyncClient, account_id: str = "1") -> dict:
    summary = (await client.get("/v1/finance/summary")).json()
    return next(a for a in summary["accounts"] if a["id"] == account_id)


async def get_budget(client: AsyncClient, category: str) -> dict:
    summary = (await client.get("/v1/finance/summary")).json()
    return next(b for b in summary["budgets"] if b["category"] == category)


# =============================================================================
# POST /v1/transactions Tests
# =============================================================================

class TestSubmitTransaction:
    """Tests for POST /v1/transactions endpoint."""

    @pytest.mark.asyncio
    async def test_angry_large_purchase_is_held(
        self,
        client: AsyncClient,
        angry_purchase_request: dict,
    ):
        """
        A risky-tier expense above its threshold should be held.

        angry + $600 gives a threshold of 0.8 x 0.7 x 0.7 = 0.392,
        and a confidence of 0.9 exceeds it.
        """
        response = await client.post("/v1/transactions", json=angry_purchase_request)

        assert response.status_code == 201

        data = response.json()
        assert data["held"] is True
        assert data["evaluated"] is True
        assert data["tier"] == "risky"
        assert data["threshold"] == pytest.approx(0.392)
        assert "calm down" in data["advice"]
        assert "HOLD FOR REVIEW" in data["reason"]
        assert data["transaction"]["id"].startswith("pending-")
        assert data["transaction"]["emotion"] == "angry"

        pending = (await client.get("/v1/transactions/pending")).json()["transactions"]
        assert [t["id"] for t in pending] == [data["transaction"]["id"]]

        committed = (await client.get("/v1/transactions")).json()["transactions"]
        assert committed == []

    @pytest.mark.asyncio
    async def test_held_transaction_does_not_touch_balance(
        self,
        client: AsyncClient,
        angry_purchase_request: dict,
    ):
        await client.post("/v1/transactions", json=angry_purchase_request)

        account = await get_account(client)
        assert account["balance"] == pytest.approx(4250.75)

    @pytest.mark.asyncio
    async def test_calm_purchase_is_committed(
        self,
        client: AsyncClient,
        calm_purchase_request: dict,
    ):
        """Balanced-tier expenses are committed and debit the checking account."""
        response = await client.post("/v1/transactions", json=calm_purchase_request)

        assert response.status_code == 201

        data = response.json()
        assert data["held"] is False
        assert data["evaluated"] is True
        assert data["tier"] == "balanced"
        assert data["transaction"]["id"].startswith("tx-")
        assert data["transaction"]["is_impulse"] is False

        account = await get_account(client)
        assert account["balance"] == pytest.approx(4208.25)

        food = await get_budget(client, "Food")
        assert food["spent"] == pytest.approx(362.5)

    @pytest.mark.asyncio
    async def test_anxious_high_confidence_not_held(self, client: AsyncClient):
        """Cautious-tier emotions never trigger an automatic hold."""
        response = await client.post(
            "/v1/transactions",
            json={
                "amount": 50,
                "category": "Food",
                "description": "Takeaway",
                "emotion": "anxious",
                "emotion_confidence": 0.95,
            },
        )

        data = response.json()
        assert data["held"] is False
        assert data["tier"] == "cautious"

    @pytest.mark.asyncio
    async def test_excited_just_below_threshold_not_held(self, client: AsyncClient):
        response = await client.post(
            "/v1/transactions",
            json={
                "amount": 50,
                "category": "Entertainment",
                "description": "Concert ticket",
                "emotion": "excited",
                "emotion_confidence": 0.5,
            },
        )

        data = response.json()
        assert data["held"] is False
        assert data["threshold"] == pytest.approx(0.504)

    @pytest.mark.asyncio
    async def test_income_is_not_evaluated(self, client: AsyncClient):
        """Inflows skip the hold check and credit the checking account."""
        response = await client.post(
            "/v1/transactions",
            json={
                "amount": 1000,
                "category": "Salary",
                "description": "Paycheck",
                "type": "income",
                "emotion": "angry",
                "emotion_confidence": 1.0,
            },
        )

        data = response.json()
        assert data["held"] is False
        assert data["evaluated"] is False
        assert data["threshold"] is None

        account = await get_account(client)
        assert account["balance"] == pytest.approx(5250.75)

    @pytest.mark.asyncio
    async def test_investment_is_evaluated(self, client: AsyncClient):
        response = await client.post(
            "/v1/transactions",
            json={
                "amount": 2500,
                "category": "Stocks",
                "description": "Meme stock",
                "type": "investment",
                "emotion": "overwhelmed",
                "emotion_confidence": 0.8,
            },
        )

        data = response.json()
        assert data["evaluated"] is True
        assert data["held"] is True

    @pytest.mark.asyncio
    async def test_defaults_to_current_emotion(self, client: AsyncClient):
        """Without an explicit emotion the session's current emotion is used."""
        await client.put("/v1/emotion", json={"emotion": "frustrated", "confidence": 0.95})

        response = await client.post(
            "/v1/transactions",
            json={"amount": 300, "category": "Shopping", "description": "Gadget"},
        )

        data = response.json()
        assert data["transaction"]["emotion"] == "frustrated"
        assert data["transaction"]["emotion_confidence"] == pytest.approx(0.95)
        assert data["held"] is True

    @pytest.mark.asyncio
    async def test_default_state_is_neutral(self, client: AsyncClient):
        response = await client.post(
            "/v1/transactions",
            json={"amount": 900, "category": "Travel", "description": "Flights"},
        )

        data = response.json()
        assert data["transaction"]["emotion"] == "neutral"
        assert data["held"] is False

    @pytest.mark.asyncio
    async def test_detection_disabled_skips_evaluation(
        self,
        client: AsyncClient,
        angry_purchase_request: dict,
    ):
        await client.post("/v1/emotion/toggle")

        response = await client.post("/v1/transactions", json=angry_purchase_request)

        data = response.json()
        assert data["evaluated"] is False
        assert data["held"] is False

    @pytest.mark.asyncio
    async def test_impulse_purchase_flagged(self, client: AsyncClient):
        """A sad expense well above the average expense is flagged as impulse."""
        for _ in range(3):
            await client.post(
                "/v1/transactions",
                json={
                    "amount": 20,
                    "category": "Food",
                    "description": "Lunch",
                    "emotion": "neutral",
                },
            )

        response = await client.post(
            "/v1/transactions",
            json={
                "amount": 100,
                "category": "Shopping",
                "description": "Retail therapy",
                "emotion": "sad",
                "emotion_confidence": 0.9,
            },
        )

        data = response.json()
        assert data["transaction"]["is_impulse"] is True
        assert data["held"] is False

        insights = (await client.get("/v1/finance/insights")).json()["insights"]
        assert insights[0]["title"] == "Possible impulse purchase"
        assert insights[0]["emotion"] == "sad"


class TestSubmitValidation:
    """Validation errors for POST /v1/transactions."""

    @pytest.mark.asyncio
    async def test_unknown_emotion_rejected(self, client: AsyncClient):
        response = await client.post(
            "/v1/transactions",
            json={
                "amount": 10,
                "category": "Food",
                "description": "Snack",
                "emotion": "grumpy",
            },
        )

        assert response.status_code == 422
        data = response.json()
        assert data["error"] == "INVALID_EMOTION"
        assert "request_id" in data

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", [0, -5])
    async def test_non_positive_amount_rejected(self, client: AsyncClient, amount):
        response = await client.post(
            "/v1/transactions",
            json={"amount": amount, "category": "Food", "description": "Snack"},
        )

        assert response.status_code == 422
        data = response.json()
        assert data["error"] == "VALIDATION_ERROR"
        assert any(f["field"].endswith("amount") for f in data["details"]["fields"])

    @pytest.mark.asyncio
    async def test_blank_category_rejected(self, client: AsyncClient):
        response = await client.post(
            "/v1/transactions",
            json={"amount": 10, "category": "   ", "description": "Snack"},
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_confidence_out_of_range_rejected(self, client: AsyncClient):
        response = await client.post(
            "/v1/transactions",
            json={
                "amount": 10,
                "category": "Food",
                "description": "Snack",
                "emotion": "angry",
                "emotion_confidence": 1.5,
            },
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_rejected_input_leaves_state_untouched(self, client: AsyncClient):
        await client.post(
            "/v1/transactions",
            json={"amount": 10, "category": "Food", "description": "Snack", "emotion": "grumpy"},
        )

        committed = (await client.get("/v1/transactions")).json()["transactions"]
        pending = (await client.get("/v1/transactions/pending")).json()["transactions"]
        assert committed == []
        assert pending == []


# =============================================================================
# Pending Workflow Tests
# =============================================================================

class TestPendingWorkflow:
    """Tests for approving and rejecting held transactions."""

    @pytest.mark.asyncio
    async def test_approve_commits_new_record(
        self,
        client: AsyncClient,
        angry_purchase_request: dict,
    ):
        held = (await client.post("/v1/transactions", json=angry_purchase_request)).json()
        pending_id = held["transaction"]["id"]

        response = await client.post(f"/v1/transactions/pending/{pending_id}/approve")

        assert response.status_code == 200

        committed = response.json()
        assert committed["id"] != pending_id
        assert committed["id"].startswith("tx-")
        assert committed["amount"] == pytest.approx(600)
        assert committed["emotion"] == "angry"

        pending = (await client.get("/v1/transactions/pending")).json()["transactions"]
        assert pending == []

        listed = (await client.get("/v1/transactions")).json()["transactions"]
        assert [t["id"] for t in listed] == [committed["id"]]

        account = await get_account(client)
        assert account["balance"] == pytest.approx(3650.75)

        shopping = await get_budget(client, "Shopping")
        assert shopping["spent"] == pytest.approx(875)
        assert shopping["exceeded"] is True

    @pytest.mark.asyncio
    async def test_reject_discards(
        self,
        client: AsyncClient,
        angry_purchase_request: dict,
    ):
        held = (await client.post("/v1/transactions", json=angry_purchase_request)).json()
        pending_id = held["transaction"]["id"]

        response = await client.post(f"/v1/transactions/pending/{pending_id}/reject")

        assert response.status_code == 200
        assert response.json()["id"] == pending_id

        assert (await client.get("/v1/transactions/pending")).json()["transactions"] == []
        assert (await client.get("/v1/transactions")).json()["transactions"] == []

        account = await get_account(client)
        assert account["balance"] == pytest.approx(4250.75)

    @pytest.mark.asyncio
    async def test_approve_unknown_returns_404(self, client: AsyncClient):
        response = await client.post("/v1/transactions/pending/pending-missing/approve")

        assert response.status_code == 404
        assert response.json()["error"] == "PENDING_TRANSACTION_NOT_FOUND"
        assert response.json()["details"] == {"transaction_id": "pending-missing"}

    @pytest.mark.asyncio
    async def test_resolution_is_terminal(
        self,
        client: AsyncClient,
        angry_purchase_request: dict,
    ):
        """A pending transaction can only be resolved once."""
        held = (await client.post("/v1/transactions", json=angry_purchase_request)).json()
        pending_id = held["transaction"]["id"]

        first = await client.post(f"/v1/transactions/pending/{pending_id}/reject")
        second = await client.post(f"/v1/transactions/pending/{pending_id}/approve")

        assert first.status_code == 200
        assert second.status_code == 404

    @pytest.mark.asyncio
    async def test_hold_records_insight(
        self,
        client: AsyncClient,
        angry_purchase_request: dict,
    ):
        await client.post("/v1/transactions", json=angry_purchase_request)

        insights = (await client.get("/v1/finance/insights")).json()["insights"]

        assert insights[0]["title"] == "Transaction held for review"
        assert insights[0]["impact_level"] == "high"
        assert insights[0]["emotion_related"] is True
        assert "$600.00" in insights[0]["description"]


# =============================================================================
# GET /v1/transactions Tests
# =============================================================================

class TestListTransactions:
    """Tests for GET /v1/transactions endpoint."""

    @pytest.mark.asyncio
    async def test_newest_first_and_type_filter(self, client: AsyncClient):
        await client.post(
            "/v1/transactions",
            json={"amount": 15, "category": "Food", "description": "Coffee", "emotion": "happy"},
        )
        await client.post(
            "/v1/transactions",
            json={"amount": 500, "category": "Salary", "description": "Bonus", "type": "income"},
        )

        everything = (await client.get("/v1/transactions")).json()["transactions"]
        assert [t["description"] for t in everything] == ["Bonus", "Coffee"]

        income = (await client.get("/v1/transactions", params={"type": "income"})).json()["transactions"]
        assert [t["description"] for t in income] == ["Bonus"]

    @pytest.mark.asyncio
    async def test_limit(self, client: AsyncClient):
        for i in range(3):
            await client.post(
                "/v1/transactions",
                json={"amount": 5, "category": "Food", "description": f"Snack {i}", "emotion": "content"},
            )

        response = await client.get("/v1/transactions", params={"limit": 2})

        assert response.status_code == 200
        assert len(response.json()["transactions"]) == 2
