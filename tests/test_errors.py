"""
Tests for error handling: structured error responses, HTTP status codes,
and the custom exception classes.
"""
import pytest
from fastapi.testclient import TestClient

from habitlog.core.errors import CORRELATION_HEADER, EntryNotFoundError, HabitLogException
from habitlog.main import app
from habitlog.services import domains

V1 = "/api/v1"


# ---------------------------------------------------------------------------
# Unit tests on exception classes
# ---------------------------------------------------------------------------

class TestExceptionClasses:
    def test_entry_not_found_error(self):
        err = EntryNotFoundError(domain="water", entry_id=42)
        assert err.http_status == 404
        assert err.code == "ENTRY_NOT_FOUND"
        assert "42" in err.message
        d = err.to_dict()
        assert d["details"] == {"domain": "water", "id": 42}

    def test_base_defaults_to_500(self):
        err = HabitLogException("boom")
        assert err.http_status == 500
        assert err.code == "INTERNAL_ERROR"

    def test_to_dict_without_details(self):
        d = HabitLogException("boom").to_dict()
        assert d == {"code": "INTERNAL_ERROR", "message": "boom"}


# ---------------------------------------------------------------------------
# Integration tests on HTTP error responses
# ---------------------------------------------------------------------------

class TestNotFound:
    @pytest.mark.parametrize("domain, payload", [
        ("water", {"amountMl": 1}),
        ("sunlight", {"minutes": 1}),
        ("meditation", {"minutes": 1}),
        ("sleep", {"hours": 1, "quality": 1}),
        ("physical-activity", {"modality": "run", "durationMinutes": 1}),
        ("tasks", {"title": "x", "date": "2026-10-14"}),
    ])
    def test_put_missing_has_envelope(self, client, domain, payload):
        r = client.put(f"{V1}/{domain}/999999", json=payload)
        assert r.status_code == 404
        body = r.json()
        assert body["code"] == "ENTRY_NOT_FOUND"
        assert body["details"]["id"] == 999999

    @pytest.mark.parametrize("domain", [
        "water", "sunlight", "meditation", "sleep", "physical-activity", "tasks",
    ])
    def test_delete_missing(self, client, domain):
        r = client.delete(f"{V1}/{domain}/999999")
        assert r.status_code == 404
        assert r.json()["code"] == "ENTRY_NOT_FOUND"


class TestValidationErrors:
    def test_field_errors_listed(self, client):
        r = client.post(f"{V1}/water", json={"amountMl": 0})
        assert r.status_code == 422
        body = r.json()
        assert body["code"] == "VALIDATION_ERROR"
        fields = [e["field"] for e in body["details"]["errors"]]
        assert any("amountMl" in f for f in fields)

    def test_bad_week_start(self, client):
        r = client.get(f"{V1}/water/week", params={"week_start": "monday"})
        assert r.status_code == 422
        assert r.json()["code"] == "VALIDATION_ERROR"

    def test_non_integer_id(self, client):
        r = client.delete(f"{V1}/water/abc")
        assert r.status_code == 422


class TestUnhandledErrors:
    def test_500_carries_correlation_id(self, client, monkeypatch):
        def boom(db, day):
            raise RuntimeError("storage unavailable")

        monkeypatch.setattr(domains.water, "daily_total", boom)
        with TestClient(app, raise_server_exceptions=False) as c:
            r = c.get(f"{V1}/water/today")
        assert r.status_code == 500
        body = r.json()
        assert body["code"] == "INTERNAL_ERROR"
        assert "storage unavailable" not in body["message"]
        assert body["details"]["correlation_id"] == r.headers[CORRELATION_HEADER]


class TestIntegerBounds:
    @pytest.mark.parametrize("domain, payload", [
        ("water", {"amountMl": 2**63}),
        ("sunlight", {"minutes": 2**31}),
        ("meditation", {"minutes": 2**63}),
        ("physical-activity", {"modality": "run", "durationMinutes": 2**31}),
    ])
    def test_oversized_body_value_is_422(self, client, domain, payload):
        r = client.post(f"{V1}/{domain}", json=payload)
        assert r.status_code == 422
        assert r.json()["code"] == "VALIDATION_ERROR"

    def test_largest_int32_is_accepted(self, client):
        r = client.post(f"{V1}/water", json={"amountMl": 2_147_483_647})
        assert r.status_code == 201

    @pytest.mark.parametrize("entry_id", [0, 2**31, 2**63])
    def test_out_of_range_path_id_is_422(self, client, entry_id):
        r = client.put(f"{V1}/water/{entry_id}", json={"amountMl": 1})
        assert r.status_code == 422
        body = r.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert any("entry_id" in e["field"] for e in body["details"]["errors"])

    @pytest.mark.parametrize("domain", [
        "water", "sunlight", "meditation", "sleep", "physical-activity", "tasks",
    ])
    def test_oversized_delete_id_is_422(self, client, domain):
        r = client.delete(f"{V1}/{domain}/{2**63}")
        assert r.status_code == 422
        assert r.json()["code"] == "VALIDATION_ERROR"
