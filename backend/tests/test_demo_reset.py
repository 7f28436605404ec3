"""
Tests for demo endpoints. Demo reset is only available when DEMO_MODE=true.
"""
import pytest
from fastapi.testclient import TestClient

from main import app
from seed import seed_data


client = TestClient(app)


class TestDemoStatusEndpoint:
    """Test GET /demo/status reflects DEMO_MODE"""

    def test_demo_status_true(self, monkeypatch):
        monkeypatch.setenv("DEMO_MODE", "TRUE")
        assert client.get("/demo/status").json() == {"demoMode": True}

    def test_demo_status_unset(self, monkeypatch):
        monkeypatch.delenv("DEMO_MODE", raising=False)
        assert client.get("/demo/status").json() == {"demoMode": False}


class TestDemoResetEndpoint:
    """Test POST /demo/reset is gated by DEMO_MODE and behaves correctly."""

    def test_demo_reset_endpoint_disabled_when_demo_mode_false(self, monkeypatch):
        """When DEMO_MODE is false, POST /demo/reset returns 404."""
        monkeypatch.setenv("DEMO_MODE", "false")

        resp = client.post("/demo/reset")
        assert resp.status_code == 404
        assert "detail" in resp.json()

    def test_demo_reset_endpoint_disabled_when_demo_mode_unset(self, monkeypatch):
        """When DEMO_MODE is unset, POST /demo/reset returns 404."""
        monkeypatch.delenv("DEMO_MODE", raising=False)

        resp = client.post("/demo/reset")
        assert resp.status_code == 404

    def test_demo_reset_restores_records_when_demo_mode_true(self, monkeypatch):
        """When DEMO_MODE=true, reset discards added and deleted records."""
        monkeypatch.setenv("DEMO_MODE", "true")
        seed_data()

        client.delete("/records/rec2")
        client.post(
            "/records",
            json={"doctorName": "Doc", "diagnosis": "Cold", "treatment": "Rest"},
        )
        before = client.get("/records").json()
        assert len(before) == 3
        assert "rec2" not in {r["id"] for r in before}

        reset_resp = client.post("/demo/reset")
        assert reset_resp.status_code == 200
        assert reset_resp.json() == {"status": "ok"}

        after = client.get("/records").json()
        assert [r["id"] for r in after] == ["rec1", "rec2", "rec3"]
