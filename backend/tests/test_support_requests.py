"""Tests for support request service and HTTP API."""

from datetime import UTC, datetime

import pytest

from app.services.support_requests.exceptions import SupportRequestNotFound
from app.services.support_requests.support_request_service import SupportRequestService

PAYLOAD = {
    "date": "2025-05-01T16:00:00Z",
    "location": "San José, Barrio Escalante",
    "detail": "Printer network setup for the office",
}


class TestSupportRequestService:
    async def test_create_list_delete(self, session):
        service = SupportRequestService(session)
        created = await service.create_support_request(
            date=datetime(2025, 5, 1, 16, tzinfo=UTC),
            location="San José, Barrio Escalante",
            detail="Printer network setup",
        )

        items, total = await service.list_support_requests()
        assert (total, items[0].id) == (1, created.id)

        await service.delete_support_request(created.id)
        with pytest.raises(SupportRequestNotFound):
            await service.get_support_request(created.id)
        assert await service.list_support_requests() == ([], 0)


class TestSupportRequestEndpoints:
    async def test_create_returns_date_in_api_timezone(self, client):
        response = await client.post("/api/v1/support-requests", json=PAYLOAD)

        assert response.status_code == 201
        # America/Costa_Rica is UTC-6
        assert response.json()["date"] == "2025-05-01T10:00:00-06:00"

    async def test_naive_date_is_read_as_local_time(self, client):
        response = await client.post("/api/v1/support-requests", json={**PAYLOAD, "date": "2025-05-01T10:00:00"})

        assert response.json()["date"] == "2025-05-01T10:00:00-06:00"

    @pytest.mark.parametrize("field", ["location", "detail"])
    async def test_short_text_is_rejected(self, client, field):
        response = await client.post("/api/v1/support-requests", json={**PAYLOAD, field: "Too short"})

        assert response.status_code == 422

    async def test_date_is_required(self, client):
        payload = {k: v for k, v in PAYLOAD.items() if k != "date"}

        response = await client.post("/api/v1/support-requests", json=payload)

        assert response.status_code == 422

    async def test_get_and_update(self, client):
        support_request_id = (await client.post("/api/v1/support-requests", json=PAYLOAD)).json()["id"]

        response = await client.put(
            f"/api/v1/support-requests/{support_request_id}",
            json={"detail": "Printer and router setup for the office"},
        )

        assert response.status_code == 200
        fetched = (await client.get(f"/api/v1/support-requests/{support_request_id}")).json()
        assert fetched["detail"] == "Printer and router setup for the office"
        assert fetched["location"] == PAYLOAD["location"]

    async def test_update_rejects_null(self, client):
        support_request_id = (await client.post("/api/v1/support-requests", json=PAYLOAD)).json()["id"]

        response = await client.put(f"/api/v1/support-requests/{support_request_id}", json={"location": None})

        assert response.status_code == 422

    async def test_list_newest_first(self, client):
        for detail in ("First visit request", "Second visit request"):
            await client.post("/api/v1/support-requests", json={**PAYLOAD, "detail": detail})

        body = (await client.get("/api/v1/support-requests")).json()

        assert body["total"] == 2
        assert [s["detail"] for s in body["support_requests"]] == ["Second visit request", "First visit request"]

    async def test_unknown_returns_404(self, client):
        assert (await client.get("/api/v1/support-requests/999")).status_code == 404
        update = await client.put("/api/v1/support-requests/999", json={"detail": "Nothing to update"})
        assert update.status_code == 404
        assert (await client.delete("/api/v1/support-requests/999")).status_code == 404
