"""Tests for the /camps and /popular endpoints."""

from __future__ import annotations

from greencare.store import CAMPS


class TestCampCrud:
    def test_create_camp(self, client, fake_pb, sample_camp_data):
        response = client.post("/camps", json={**sample_camp_data, "targetAudience": "families"})

        assert response.status_code == 201
        body = response.json()
        assert body["campName"] == "Riverside Health Camp"
        assert body["campFees"] == 25.0
        assert body["participantCount"] == 0
        assert body["targetAudience"] == "families"
        stored = fake_pb.collection(CAMPS).records[body["id"]]
        assert stored["camp_fees"] == 25.0
        assert stored["healthcare_professional"] == "Dr. Amina Rahman"
        assert stored["details"] == {"target_audience": "families"}
        assert "target_audience" not in stored

    def test_negative_fee_is_rejected(self, client, sample_camp_data):
        response = client.post("/camps", json={**sample_camp_data, "campFees": -1})

        assert response.status_code == 422

    def test_get_and_list(self, client, make_camp):
        camp_id = make_camp(name="Hillside", fees=12.5)

        assert client.get(f"/camps/{camp_id}").json()["campFees"] == 12.5
        assert [c["id"] for c in client.get("/camps").json()] == [camp_id]

    def test_get_missing_camp_is_404(self, client):
        response = client.get("/camps/nope")

        assert response.status_code == 404
        assert response.json() == {"detail": "Camp 'nope' not found"}

    def test_update_camp(self, client, make_camp):
        camp_id = make_camp(count=4)

        response = client.patch(f"/camps/{camp_id}", json={"location": "Town Hall", "participantCount": 1})

        assert response.status_code == 200
        assert response.json()["location"] == "Town Hall"
        assert response.json()["participantCount"] == 1

    def test_descriptive_extras_survive_reads_and_updates(self, client, fake_pb, sample_camp_data):
        camp_id = client.post("/camps", json={**sample_camp_data, "targetAudience": "families"}).json()["id"]

        response = client.patch(f"/camps/{camp_id}", json={"languages": "en,bn"})

        assert response.status_code == 200
        assert fake_pb.collection(CAMPS).records[camp_id]["details"] == {
            "target_audience": "families",
            "languages": "en,bn",
        }
        fetched = client.get(f"/camps/{camp_id}").json()
        assert fetched["targetAudience"] == "families"
        assert fetched["languages"] == "en,bn"

    def test_update_with_empty_body_is_422(self, client, make_camp):
        response = client.patch(f"/camps/{make_camp()}", json={})

        assert response.status_code == 422
        assert response.json() == {"detail": "No fields to update"}

    def test_update_cannot_change_id(self, client, make_camp):
        response = client.patch(f"/camps/{make_camp()}", json={"id": "other"})

        assert response.status_code == 422

    def test_delete_camp(self, client, make_camp):
        camp_id = make_camp()

        response = client.delete(f"/camps/{camp_id}")

        assert response.status_code == 200
        assert response.json() == {"message": f"Camp '{camp_id}' deleted successfully"}
        assert client.get(f"/camps/{camp_id}").status_code == 404


class TestPopularCamps:
    def test_default_limit_is_six(self, client, make_camp):
        for i in range(8):
            make_camp(name=f"Camp {i}", count=i)

        response = client.get("/popular")

        assert response.status_code == 200
        counts = [c["participantCount"] for c in response.json()]
        assert counts == [7, 6, 5, 4, 3, 2]

    def test_explicit_limit(self, client, make_camp):
        make_camp(name="Small", count=1)
        make_camp(name="Big", count=9)

        response = client.get("/popular", params={"limit": 1})

        assert [c["campName"] for c in response.json()] == ["Big"]

    def test_zero_limit_is_rejected(self, client):
        assert client.get("/popular", params={"limit": 0}).status_code == 422

    def test_no_camps(self, client):
        assert client.get("/popular").json() == []
