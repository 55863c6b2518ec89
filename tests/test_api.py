"""
Tests for calculation API endpoints.
"""

from datetime import date


class TestHealthAPI:
    """Test health endpoint."""

    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestRentAPI:
    """Test rent projection endpoint."""

    def test_rent_projection(self, client):
        response = client.post(
            "/api/calculate/rent",
            json={
                "monthly_rent": 1000,
                "analysis_years": 2,
                "annual_rent_increase": 0,
                "start_year": 2024,
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["projection"]["total_paid"] == 24000
        assert [y["year"] for y in data["projection"]["years"]] == [2024, 2025]
        assert len(data["projection"]["years"][0]["months"]) == 12
        assert [r["year_range"] for r in data["compact_rows"]] == ["2024", "2025"]

    def test_rent_compact_rows_use_default_budget(self, client):
        response = client.post(
            "/api/calculate/rent",
            json={"monthly_rent": 1500, "analysis_years": 10, "start_year": 2024},
        )
        rows = response.json()["compact_rows"]
        assert len(rows) == 5
        assert rows[0]["year_range"] == "2024-2025"
        assert rows[-1]["cumulative_total"] == 180000

    def test_rent_max_rows(self, client):
        response = client.post(
            "/api/calculate/rent",
            json={
                "monthly_rent": 1500,
                "analysis_years": 10,
                "start_year": 2024,
                "max_rows": 0,
            },
        )
        assert len(response.json()["compact_rows"]) == 10

    def test_rent_start_year_defaults_to_current_year(self, client):
        response = client.post(
            "/api/calculate/rent",
            json={"monthly_rent": 1500, "analysis_years": 1},
        )
        assert response.json()["projection"]["years"][0]["year"] == date.today().year

    def test_rent_not_computable(self, client):
        response = client.post(
            "/api/calculate/rent",
            json={"monthly_rent": 0, "analysis_years": 5, "annual_rent_increase": 2.5},
        )
        assert response.status_code == 200
        assert response.json() == {"projection": None, "compact_rows": []}

    def test_rent_growth_beyond_float_range(self, client):
        response = client.post(
            "/api/calculate/rent",
            json={
                "monthly_rent": 1000,
                "analysis_years": 120,
                "annual_rent_increase": 100000,
            },
        )
        assert response.status_code == 200
        assert response.json() == {"projection": None, "compact_rows": []}

    def test_rent_rejects_unknown_rounding(self, client):
        response = client.post(
            "/api/calculate/rent",
            json={"monthly_rent": 1000, "analysis_years": 2, "round_to": "dollars"},
        )
        assert response.status_code == 422


class TestMortgageAPI:
    """Test mortgage amortization endpoint."""

    def test_mortgage_schedule(self, client):
        response = client.post(
            "/api/calculate/mortgage",
            json={
                "purchase_price": 800000,
                "down_payment_percentage": 20,
                "annual_interest_rate": 5.0,
                "amortization_years": 25,
            },
        )
        assert response.status_code == 200
        data = response.json()
        schedule = data["amortization"]
        assert 3700 < schedule["monthly_payment"] < 3750
        assert len(schedule["months"]) == 300
        assert schedule["months"][-1]["balance_end"] == 0
        assert len(data["yearly"]) == 25
        assert [r["year_range"] for r in data["compact_rows"]] == [
            "1-5",
            "6-10",
            "11-15",
            "16-20",
            "21-25",
        ]

    def test_mortgage_fractional_years_not_computable(self, client):
        response = client.post(
            "/api/calculate/mortgage",
            json={
                "purchase_price": 800000,
                "down_payment_percentage": 20,
                "annual_interest_rate": 5.0,
                "amortization_years": 25.5,
            },
        )
        assert response.status_code == 200
        assert response.json() == {"amortization": None, "yearly": [], "compact_rows": []}

    def test_mortgage_invalid_down_payment(self, client):
        response = client.post(
            "/api/calculate/mortgage",
            json={
                "purchase_price": 800000,
                "down_payment_percentage": 150,
                "annual_interest_rate": 5.0,
                "amortization_years": 25,
            },
        )
        assert response.json()["amortization"] is None

    def test_mortgage_term_beyond_float_range(self, client):
        response = client.post(
            "/api/calculate/mortgage",
            json={
                "purchase_price": 100000,
                "down_payment_percentage": 20,
                "annual_interest_rate": 5.0,
                "amortization_years": 150000,
            },
        )
        assert response.status_code == 200
        assert response.json()["amortization"] is None

    def test_mortgage_missing_field(self, client):
        response = client.post(
            "/api/calculate/mortgage",
            json={"purchase_price": 800000},
        )
        assert response.status_code == 422
