"""Integration tests for the /api/v1/events endpoints."""


class TestEventCRUD:
    async def test_save_and_get(self, client, group_one):
        resp = await client.put("/api/v1/events/2025-01-31", json={
            "note": "Übergabe",
            "has_vacation": True,
            "colleagues": ["Anna", " Ben ", ""],
            "is_afz": False,
        })
        assert resp.status_code == 200
        data = resp.json()
        assert data["date"] == "2025-01-31"
        assert data["shift"] == "Früh"
        assert data["colleagues"] == ["Anna", "Ben"]
        assert data["is_personal_vacation"] is False

        resp = await client.get("/api/v1/events/2025-01-31")
        assert resp.status_code == 200
        assert resp.json()["note"] == "Übergabe"
        assert resp.json()["colleagues"] == ["Anna", "Ben"]

    async def test_off_day_clamp(self, client, group_one):
        resp = await client.put("/api/v1/events/2025-02-03", json={
            "note": "Ausflug",
            "has_vacation": True,
            "colleagues": ["Anna"],
            "is_afz": True,
        })
        assert resp.status_code == 200
        data = resp.json()
        assert data["shift"] == "Frei"
        assert data["has_vacation"] is False
        assert data["colleagues"] == []
        assert data["is_afz"] is False

    async def test_empty_entry_is_deleted(self, client, group_one):
        await client.put("/api/v1/events/2025-01-31", json={"note": "Arzt"})
        resp = await client.put("/api/v1/events/2025-01-31", json={"note": "  "})
        assert resp.status_code == 204

        resp = await client.get("/api/v1/events/2025-01-31")
        assert resp.status_code == 404

    async def test_afz_on_off_day_only_is_not_stored(self, client, group_one):
        resp = await client.put("/api/v1/events/2025-02-03", json={"is_afz": True})
        assert resp.status_code == 204
        resp = await client.get("/api/v1/events/2025-02-03")
        assert resp.status_code == 404

    async def test_delete(self, client, group_one):
        await client.put("/api/v1/events/2025-01-31", json={"note": "Arzt"})
        resp = await client.delete("/api/v1/events/2025-01-31")
        assert resp.status_code == 204
        assert (await client.get("/api/v1/events/2025-01-31")).status_code == 404

    async def test_delete_missing(self, client, group_one):
        resp = await client.delete("/api/v1/events/2025-01-31")
        assert resp.status_code == 204

    async def test_invalid_date_key(self, client, group_one):
        resp = await client.put("/api/v1/events/31.01.2025", json={"note": "Arzt"})
        assert resp.status_code == 422
        assert "YYYY-MM-DD" in resp.json()["detail"]

    async def test_list_by_year(self, client, group_one):
        await client.put("/api/v1/events/2025-03-12", json={"note": "B"})
        await client.put("/api/v1/events/2025-01-31", json={"note": "A"})
        await client.put("/api/v1/events/2026-01-02", json={"note": "C"})

        resp = await client.get("/api/v1/events/", params={"year": 2025})
        assert resp.status_code == 200
        assert [e["date"] for e in resp.json()] == ["2025-01-31", "2025-03-12"]

        resp = await client.get("/api/v1/events/")
        assert len(resp.json()) == 3

    async def test_editor_keeps_personal_vacation(self, client, group_one):
        await client.post("/api/v1/vacations/", json={"start": "2025-03-06", "end": "2025-03-06"})
        resp = await client.put("/api/v1/events/2025-03-06", json={"note": "Ostsee"})
        assert resp.status_code == 200
        assert resp.json()["is_personal_vacation"] is True
        assert resp.json()["note"] == "Ostsee"


class TestEventOverview:
    async def test_blocks_and_entries_by_month(self, client, group_one):
        await client.post("/api/v1/vacations/", json={"start": "2025-03-03", "end": "2025-03-07"})
        await client.put("/api/v1/events/2025-03-12", json={"note": "Arzt"})
        await client.put("/api/v1/events/2025-05-02", json={"note": "Konzert"})

        resp = await client.get("/api/v1/events/overview", params={"year": 2025})
        assert resp.status_code == 200
        months = resp.json()["months"]
        assert [m["month"] for m in months] == [3, 5]
        assert months[0]["items"][0] == {
            "type": "vacation", "start": "2025-03-06", "end": "2025-03-07", "days": 2,
        }
        assert months[0]["items"][1]["type"] == "event"
        assert months[0]["items"][1]["event"]["note"] == "Arzt"

    async def test_include_birthdays(self, client, group_one):
        await client.put("/api/v1/birthdays/", json={"month": 6, "day": 14, "name": "Lena"})

        resp = await client.get("/api/v1/events/overview", params={"year": 2025})
        assert resp.json()["months"] == []

        resp = await client.get(
            "/api/v1/events/overview",
            params={"year": 2025, "include_birthdays": True},
        )
        item = resp.json()["months"][0]["items"][0]
        assert item["date"] == "2025-07-14"
        assert item["birthday"] == "Lena"
        assert item["event"] is None
