"""
HTTP-level tests for the signup, login and banner endpoints.
"""

from unittest.mock import AsyncMock, patch

import pytest

from auth.jwt import decode_token

SALE = {
    "id": "b1",
    "title": "Sale",
    "description": "50% off",
    "timer": 30,
    "url": "http://x",
}


def _signup(client, username="alice", password="s3cr3t"):
    return client.post("/signup", json={"username": username, "password": password})


def _login(client, username="alice", password="s3cr3t"):
    return client.post("/login", json={"username": username, "password": password})


class TestAuthEndpoints:
    def test_signup_login_scenario(self, client, settings):
        resp = _signup(client)
        assert resp.status_code == 201
        assert resp.json() == {"message": "User created successfully"}

        resp = _login(client)
        assert resp.status_code == 200
        token = resp.json()["token"]
        assert token
        assert decode_token(token, settings.jwt_secret)["user_id"] == 1

        resp = _login(client, password="wrong")
        assert resp.status_code == 401
        assert resp.json() == {"error": "Invalid credentials"}

    def test_signup_never_returns_secret(self, client):
        body = _signup(client).text
        assert "s3cr3t" not in body
        assert "$2b$" not in body

    def test_duplicate_signup_conflicts(self, client):
        assert _signup(client).status_code == 201

        resp = _signup(client, password="other")
        assert resp.status_code == 409
        assert resp.json() == {"error": "Username already exists"}

        assert _login(client).status_code == 200
        assert _login(client, password="other").status_code == 401

    def test_login_failures_are_indistinguishable(self, client):
        _signup(client)
        wrong_password = _login(client, password="wrong")
        unknown_user = _login(client, username="mallory")

        assert wrong_password.status_code == unknown_user.status_code == 401
        assert wrong_password.json() == unknown_user.json()

    @pytest.mark.parametrize(
        "body",
        [
            {"username": "bob"},
            {"password": "s3cr3t"},
            {"username": "bob", "password": ""},
            {"username": "", "password": "s3cr3t"},
            {"username": "bob", "password": "s3cr3t", "admin": True},
        ],
    )
    def test_signup_rejects_bad_body(self, client, body):
        resp = client.post("/signup", json=body)
        assert resp.status_code == 400
        assert resp.json()["error"] == "Missing or invalid fields"

        assert _login(client, username="bob").status_code == 401

    def test_signup_rejects_overlong_password(self, client):
        resp = _signup(client, password="x" * 73)
        assert resp.status_code == 400
        assert resp.json()["fields"] == ["password"]


class TestBannerEndpoints:
    def test_create_and_fetch_scenario(self, client):
        resp = client.post("/banner", json=SALE)
        assert resp.status_code == 200
        assert resp.json() == {
            "message": "Banner created successfully",
            "id": "b1",
            "status": "created",
        }

        resp = client.get("/banner", params={"id": "b1"})
        assert resp.status_code == 200
        assert resp.json() == {
            "title": "Sale",
            "description": "50% off",
            "timer": 30,
            "url": "http://x",
        }

    def test_second_post_replaces_banner(self, client):
        client.post("/banner", json=SALE)
        updated = {**SALE, "title": "Clearance", "timer": 5, "url": "http://y"}

        resp = client.post("/banner", json=updated)
        assert resp.status_code == 200
        assert resp.json()["status"] == "updated"
        assert resp.json()["message"] == "Banner updated successfully"

        body = client.get("/banner", params={"id": "b1"}).json()
        assert body == {
            "title": "Clearance",
            "description": "50% off",
            "timer": 5,
            "url": "http://y",
        }

    def test_fetch_unknown_banner(self, client):
        resp = client.get("/banner", params={"id": "nope"})
        assert resp.status_code == 404
        assert resp.json() == {"error": "Banner not found"}

    @pytest.mark.parametrize("params", [{}, {"id": ""}, {"id": "   "}])
    def test_fetch_requires_id(self, client, params):
        resp = client.get("/banner", params=params)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Banner ID is required"}

    @pytest.mark.parametrize("field", ["id", "title", "description", "timer", "url"])
    def test_missing_field_rejected_without_write(self, client, field):
        body = {k: v for k, v in SALE.items() if k != field}
        resp = client.post("/banner", json=body)
        assert resp.status_code == 400
        assert resp.json()["fields"] == [field]

        assert client.get("/banner", params={"id": "b1"}).status_code == 404

    @pytest.mark.parametrize("field", ["title", "description", "url"])
    def test_blank_field_rejected(self, client, field):
        resp = client.post("/banner", json={**SALE, field: "   "})
        assert resp.status_code == 400
        assert client.get("/banner", params={"id": "b1"}).status_code == 404

    @pytest.mark.parametrize("timer", [True, "30", 30.5, -1, None])
    def test_timer_must_be_non_negative_integer(self, client, timer):
        resp = client.post("/banner", json={**SALE, "timer": timer})
        assert resp.status_code == 400
        assert resp.json()["fields"] == ["timer"]
        assert client.get("/banner", params={"id": "b1"}).status_code == 404

    def test_timer_zero_accepted(self, client):
        assert client.post("/banner", json={**SALE, "timer": 0}).status_code == 200
        assert client.get("/banner", params={"id": "b1"}).json()["timer"] == 0

    def test_unknown_field_rejected(self, client):
        resp = client.post("/banner", json={**SALE, "color": "red"})
        assert resp.status_code == 400
        assert resp.json()["fields"] == ["color"]


class TestTransport:
    def test_cors_allows_any_origin(self, client):
        resp = client.get("/banner", params={"id": "nope"}, headers={"Origin": "http://example.com"})
        assert resp.headers["access-control-allow-origin"] == "*"

    def test_process_time_header(self, client):
        resp = client.get("/banner", params={"id": "nope"})
        assert "x-process-time" in resp.headers

    def test_unexpected_error_is_opaque_500(self, client):
        with patch("banners.service.get_banner", new_callable=AsyncMock) as mock_get:
            mock_get.side_effect = RuntimeError("password=hunter2 at 10.0.0.5")
            resp = client.get(
                "/banner",
                params={"id": "b1"},
                headers={"Origin": "http://example.com"},
            )

        assert resp.status_code == 500
        assert resp.json() == {"error": "Internal server error"}
        assert "hunter2" not in resp.text
        assert resp.headers["access-control-allow-origin"] == "*"
