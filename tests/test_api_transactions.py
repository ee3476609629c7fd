"""Tests for transactions API endpoints."""

from decimal import Decimal


class TestTransactionsAPI:
    """Test transactions endpoints."""

    def test_list_transactions_empty(self, client):
        """Should return empty list."""
        response = client.get("/api/v1/transactions")
        assert response.status_code == 200
        data = response.json()
        assert data["items"] == []
        assert data["total"] == 0

    def test_list_transactions_with_data(self, client, sample_transactions):
        """Should return transactions, most recent first."""
        response = client.get("/api/v1/transactions")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 4
        dates = [t["date"] for t in data["items"]]
        assert dates == ["2024-03-05", "2024-01-20", "2024-01-15", "2023-12-31"]
        assert data["items"][1]["icon"] == "coffee"

    def test_list_transactions_in_range(self, client, sample_transactions):
        """Should include both bounds."""
        response = client.get("/api/v1/transactions", params={
            "start_date": "2024-01-15",
            "end_date": "2024-01-20"
        })
        assert response.status_code == 200
        dates = [t["date"] for t in response.json()["items"]]
        assert dates == ["2024-01-20", "2024-01-15"]

    def test_list_transactions_half_range(self, client):
        """Both bounds are required together."""
        response = client.get("/api/v1/transactions", params={"start_date": "2024-01-01"})
        assert response.status_code == 422

    def test_create_transaction(self, client, store):
        """Should record a transaction and return its id."""
        response = client.post("/api/v1/transactions", json={
            "amount": "42.10",
            "type": "expense",
            "category": "Food",
            "date": "2024-02-02",
            "note": "Dinner"
        })
        assert response.status_code == 201
        transaction_id = response.json()["id"]

        [txn] = store.list_transactions()
        assert txn.id == transaction_id
        assert txn.amount == Decimal("42.10")
        assert txn.note == "Dinner"

    def test_create_transaction_negative_amount(self, client, store):
        """Amounts must be positive."""
        response = client.post("/api/v1/transactions", json={
            "amount": -5,
            "type": "expense",
            "category": "Food",
            "date": "2024-02-02"
        })
        assert response.status_code == 422
        assert store.list_transactions() == []

    def test_create_transaction_huge_amount(self, client, store):
        """Amounts beyond the column bound are rejected, not a server error."""
        response = client.post("/api/v1/transactions", json={
            "amount": "1e30",
            "type": "expense",
            "category": "Food",
            "date": "2024-02-02"
        })
        assert response.status_code == 422
        assert store.list_transactions() == []

    def test_create_transaction_malformed_date(self, client, store):
        """Dates with trailing garbage are rejected."""
        response = client.post("/api/v1/transactions", json={
            "amount": 5,
            "type": "expense",
            "category": "Food",
            "date": "2024-01-15garbage"
        })
        assert response.status_code == 422
        assert store.list_transactions() == []

    def test_create_transaction_blank_category(self, client, store):
        """Whitespace-only categories fail store validation."""
        response = client.post("/api/v1/transactions", json={
            "amount": 5,
            "type": "expense",
            "category": "  ",
            "date": "2024-02-02"
        })
        assert response.status_code == 422
        assert "category" in response.json()["detail"]

    def test_amount_serialized_as_decimal(self, client, sample_transactions):
        """Amounts round-trip without float drift."""
        response = client.get("/api/v1/transactions")
        amounts = [Decimal(str(t["amount"])) for t in response.json()["items"]]
        assert Decimal("12.50") in amounts

    def test_delete_transaction(self, client, sample_transactions):
        """Should delete a transaction."""
        response = client.delete(f"/api/v1/transactions/{sample_transactions[0]}")
        assert response.status_code == 204
        assert client.get("/api/v1/transactions").json()["total"] == 3

    def test_delete_missing_transaction(self, client):
        """Deleting an unknown id is not an error."""
        response = client.delete("/api/v1/transactions/9999")
        assert response.status_code == 204
