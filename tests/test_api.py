"""Tests for FastAPI endpoints."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from fastapi.testclient import TestClient

from terrain.main import app
from terrain.routers.market import analysis_cache

NSCLC_REQUEST = {
    "indication": "Non-Small Cell Lung Cancer",
    "geography": ["US"],
    "development_stage": "phase2",
    "pricing_assumption": "base",
    "launch_year": 2028,
}


@pytest.fixture
def client():
    """Test client with an empty analysis cache."""
    analysis_cache.clear()
    with TestClient(app, raise_server_exceptions=True) as c:
        yield c
    analysis_cache.clear()


class TestHealthEndpoints:
    def test_root(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.json()["name"] == "Terrain API"

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"


class TestMarketSizingEndpoint:
    def test_analyze_market(self, client):
        resp = client.post("/api/analyze/market", json=NSCLC_REQUEST)
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        data = body["data"]
        assert len(data["revenue_projection"]) == 10
        assert data["revenue_projection"][0]["year"] == 2028
        assert len(data["geography_breakdown"]) == 1
        assert data["indication_validated"] is True
        assert data["summary"]["tam_us"]["unit"] in ("B", "M", "K")

    def test_defaults_applied(self, client):
        resp = client.post("/api/analyze/market", json={
            "indication": "AML", "geography": ["US"], "development_stage": "phase1",
        })
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["input"]["pricing_assumption"] == "base"
        assert data["revenue_projection"][0]["year"] == 2028

    def test_repeat_request_hits_cache(self, client):
        first = client.post("/api/analyze/market", json=NSCLC_REQUEST).json()
        reordered = dict(reversed(list(NSCLC_REQUEST.items())))
        second = client.post("/api/analyze/market", json=reordered).json()
        assert first["cache_hit"] is False
        assert second["cache_hit"] is True
        assert first["data"] == second["data"]

    def test_unknown_indication_404(self, client):
        resp = client.post("/api/analyze/market", json={
            **NSCLC_REQUEST, "indication": "Totally Fake Disease XYZ123",
        })
        assert resp.status_code == 404
        assert "indication not found" in resp.json()["detail"].lower()

    def test_empty_geography_422(self, client):
        resp = client.post("/api/analyze/market", json={**NSCLC_REQUEST, "geography": []})
        assert resp.status_code == 422

    def test_missing_stage_422(self, client):
        body = {k: v for k, v in NSCLC_REQUEST.items() if k != "development_stage"}
        resp = client.post("/api/analyze/market", json=body)
        assert resp.status_code == 422

    def test_bad_launch_year_422(self, client):
        resp = client.post("/api/analyze/market", json={**NSCLC_REQUEST, "launch_year": 3000})
        assert resp.status_code == 422


class TestIndicationEndpoints:
    def test_search(self, client):
        resp = client.get("/api/indications", params={"q": "lung"})
        assert resp.status_code == 200
        assert resp.json()[0]["name"] == "Non-Small Cell Lung Cancer"

    def test_search_requires_query(self, client):
        resp = client.get("/api/indications")
        assert resp.status_code == 422

    def test_lookup_by_synonym(self, client):
        resp = client.get("/api/indications/NSCLC")
        assert resp.status_code == 200
        body = resp.json()
        assert body["name"] == "Non-Small Cell Lung Cancer"
        assert body["us_prevalence"] == 235000
        assert "EGFR-mutant" in body["subtypes"]

    def test_lookup_name_with_slash(self, client):
        resp = client.get("/api/indications/HIV/AIDS")
        assert resp.status_code == 200
        assert resp.json()["name"] == "HIV/AIDS"

    def test_lookup_unknown_404(self, client):
        resp = client.get("/api/indications/Totally Fake Disease XYZ123")
        assert resp.status_code == 404

    def test_analyze_distinct_disease_404(self, client):
        resp = client.post("/api/analyze/market", json={**NSCLC_REQUEST, "indication": "Small Cell Lung Cancer"})
        assert resp.status_code == 404
        assert "Small Cell Lung Cancer" in resp.json()["detail"]
