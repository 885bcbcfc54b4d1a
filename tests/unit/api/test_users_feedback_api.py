"""Tests for the /users and /feedback endpoints."""

from __future__ import annotations

from greencare.store import USERS


class TestUsers:
    def test_register_then_reregister(self, client):
        payload = {"email": "ana@example.com", "name": "Ana", "profilePicture": "https://img.example/ana.png"}

        first = client.post("/users", json=payload)
        second = client.post("/users", json=payload)

        assert first.status_code == 201
        assert first.json()["message"] == "User registered successfully"
        assert first.json()["user"]["profilePicture"] == "https://img.example/ana.png"
        assert second.status_code == 200
        assert second.json()["message"] == "User already registered"
        assert second.json()["user"]["id"] == first.json()["user"]["id"]

    def test_get_user(self, client):
        client.post("/users", json={"email": "ana@example.com", "name": "Ana"})

        response = client.get("/users/ana@example.com")

        assert response.status_code == 200
        assert response.json()["name"] == "Ana"

    def test_get_unknown_user_is_404(self, client):
        assert client.get("/users/ghost@example.com").status_code == 404

    def test_malformed_email_is_422(self, client, fake_pb):
        response = client.post("/users", json={"email": "@", "name": "Nobody"})

        assert response.status_code == 422
        assert fake_pb.collection(USERS).records == {}


class TestFeedback:
    def test_submit_and_list(self, client, make_camp):
        camp_id = make_camp()

        response = client.post("/feedback", json={"campId": camp_id, "rating": 5, "comment": "Very helpful"})

        assert response.status_code == 201
        assert response.json()["campId"] == camp_id
        listed = client.get("/feedback").json()
        assert [f["comment"] for f in listed] == ["Very helpful"]

    def test_rating_out_of_range(self, client, make_camp):
        response = client.post("/feedback", json={"campId": make_camp(), "rating": 6})

        assert response.status_code == 422

    def test_unknown_camp_is_404(self, client):
        assert client.post("/feedback", json={"campId": "nope", "rating": 4}).status_code == 404
