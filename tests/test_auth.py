"""Tests for /api/auth — signup and login."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from fastapi.testclient import TestClient

from storefront.utils.security import decode_token
from tests.conftest import signup


class TestSignup:
    def test_returns_token_and_public_user(self, client: TestClient) -> None:
        body = signup(client, name="Ala", email="ala@example.com")
        assert set(body["user"]) == {"id", "name", "email"}
        assert body["user"]["name"] == "Ala"
        assert body["user"]["email"] == "ala@example.com"

    def test_token_identity_matches_stored_user(self, client: TestClient, data_dir: Path) -> None:
        body = signup(client)
        payload = decode_token(body["token"])
        stored = json.loads((data_dir / "users.json").read_text())["users"][0]
        assert payload["id"] == stored["id"] == body["user"]["id"]
        assert payload["email"] == stored["email"]
        assert payload["name"] == stored["name"]

    def test_stores_hash_and_empty_cart(self, client: TestClient, data_dir: Path) -> None:
        signup(client, password="secret123")
        stored = json.loads((data_dir / "users.json").read_text())["users"][0]
        assert stored["passwordHash"] != "secret123"
        assert stored["cart"] == []

    def test_missing_field(self, client: TestClient) -> None:
        resp = client.post("/api/auth/signup", json={"name": "Ala", "email": "a@x.io"})
        assert resp.status_code == 400
        assert resp.json() == {"error": "name, email, password required"}

    def test_empty_field(self, client: TestClient) -> None:
        resp = client.post(
            "/api/auth/signup", json={"name": "", "email": "a@x.io", "password": "pw"}
        )
        assert resp.status_code == 400

    def test_no_body(self, client: TestClient) -> None:
        resp = client.post("/api/auth/signup")
        assert resp.status_code == 400
        assert "error" in resp.json()

    def test_malformed_json(self, client: TestClient) -> None:
        resp = client.post(
            "/api/auth/signup",
            content="{oops",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400
        assert "error" in resp.json()

    def test_duplicate_email_any_case(self, client: TestClient, data_dir: Path) -> None:
        signup(client, email="ala@example.com")
        resp = client.post(
            "/api/auth/signup",
            json={"name": "Other", "email": "ALA@Example.COM", "password": "x"},
        )
        assert resp.status_code == 409
        assert resp.json() == {"error": "Email already registered"}
        assert len(json.loads((data_dir / "users.json").read_text())["users"]) == 1


class TestLogin:
    def _login(self, client: TestClient, **body: Any):
        return client.post("/api/auth/login", json=body)

    def test_success(self, client: TestClient) -> None:
        created = signup(client, email="ala@example.com", password="secret123")
        resp = self._login(client, email="ala@example.com", password="secret123")
        assert resp.status_code == 200
        body = resp.json()
        assert body["user"] == created["user"]
        assert decode_token(body["token"])["id"] == created["user"]["id"]

    def test_email_is_case_insensitive(self, client: TestClient) -> None:
        signup(client, email="ala@example.com", password="secret123")
        resp = self._login(client, email="Ala@Example.com", password="secret123")
        assert resp.status_code == 200

    def test_wrong_password(self, client: TestClient) -> None:
        signup(client, email="ala@example.com", password="secret123")
        resp = self._login(client, email="ala@example.com", password="secret124")
        assert resp.status_code == 401
        assert resp.json() == {"error": "Invalid credentials"}

    def test_unknown_email(self, client: TestClient) -> None:
        signup(client, email="ala@example.com", password="secret123")
        resp = self._login(client, email="ola@example.com", password="secret123")
        assert resp.status_code == 401
        assert resp.json() == {"error": "Invalid credentials"}

    def test_missing_field(self, client: TestClient) -> None:
        resp = self._login(client, email="ala@example.com")
        assert resp.status_code == 400
        assert resp.json() == {"error": "email, password required"}
