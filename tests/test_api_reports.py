"""Tests for report and maintenance API endpoints."""

from decimal import Decimal


class TestReportsAPI:
    """Test report endpoints."""

    def test_monthly_totals(self, client, sample_transactions):
        response = client.get("/api/v1/reports/monthly-totals", params={"year": 2024})
        assert response.status_code == 200
        data = response.json()
        assert [m["month"] for m in data] == ["01", "03"]
        assert Decimal(str(data[0]["income"])) == Decimal("100")
        assert Decimal(str(data[0]["expense"])) == Decimal("30")

    def test_monthly_totals_requires_year(self, client):
        response = client.get("/api/v1/reports/monthly-totals")
        assert response.status_code == 422

    def test_category_totals(self, client, sample_transactions):
        response = client.get("/api/v1/reports/category-totals", params={
            "start_date": "2024-01-01",
            "end_date": "2024-12-31"
        })
        assert response.status_code == 200
        data = response.json()
        assert [(c["type"], c["category"]) for c in data] == [
            ("expense", "Food"),
            ("income", "Salary"),
            ("income", "Freelance"),
        ]
        assert data[0]["color"] == "#FF7675"

    def test_balance(self, client, sample_transactions):
        response = client.get("/api/v1/reports/balance")
        assert response.status_code == 200
        assert Decimal(str(response.json()["balance"])) == Decimal("107.50")

    def test_summary(self, client, sample_transactions):
        response = client.get("/api/v1/reports/summary", params={
            "start_date": "2024-03-01",
            "end_date": "2024-03-31"
        })
        assert response.status_code == 200
        data = response.json()
        assert Decimal(str(data["income"])) == Decimal("50")
        assert Decimal(str(data["net"])) == Decimal("50")

    def test_monthly_report(self, client, sample_transactions):
        response = client.get("/api/v1/reports/monthly", params={"year": 2024, "month": 1})
        assert response.status_code == 200
        data = response.json()
        assert data["summary"]["end_date"] == "2024-01-31"
        assert len(data["transactions"]) == 2

    def test_monthly_report_bad_month(self, client):
        response = client.get("/api/v1/reports/monthly", params={"year": 2024, "month": 13})
        assert response.status_code == 422

    def test_annual_report(self, client, sample_transactions):
        response = client.get("/api/v1/reports/annual", params={"year": 2024})
        assert response.status_code == 200
        data = response.json()
        assert len(data["months"]) == 2
        salary = next(c for c in data["categories"] if c["category"] == "Salary")
        assert len(salary["transactions"]) == 1


class TestMaintenanceAPI:
    """Test the reset endpoint."""

    def test_reset(self, client, store, sample_transactions, gifts_category):
        response = client.post("/api/v1/maintenance/reset")
        assert response.status_code == 204

        assert client.get("/api/v1/transactions").json()["total"] == 0
        assert client.get("/api/v1/categories").json()["total"] == 8


class TestReportsSchema:
    """Report routes are documented in the OpenAPI schema."""

    def test_every_report_route_has_description(self, client):
        paths = client.get("/openapi.json").json()["paths"]
        report_paths = [p for p in paths if p.startswith("/api/v1/reports/")]

        assert len(report_paths) == 6
        for path in report_paths:
            assert paths[path]["get"].get("description"), path
