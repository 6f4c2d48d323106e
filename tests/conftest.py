"""Shared pytest fixtures and test helpers for storefront tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from storefront.data.store import JsonStore
from storefront.main import create_app
from storefront.utils import settings


@pytest.fixture(autouse=True)
def _fast_bcrypt(monkeypatch: pytest.MonkeyPatch) -> None:
    """Lowest bcrypt cost so signup/login tests stay fast."""
    monkeypatch.setattr(settings, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "data"


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    """Public directory with an app shell and one static asset."""
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<!doctype html><title>Storefront</title>")
    (public / "app.js").write_text("console.log('storefront');")
    return public


@pytest.fixture
def store(data_dir: Path) -> JsonStore:
    """Initialized store with empty collections."""
    s = JsonStore(str(data_dir))
    s.init()
    return s


@pytest.fixture
def client(data_dir: Path, public_dir: Path):
    """TestClient over a fresh app; the lifespan creates the data files."""
    app = create_app(data_dir=str(data_dir), public_dir=str(public_dir), seed_catalog=False)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def user(client: TestClient) -> dict[str, Any]:
    return signup(client)


@pytest.fixture
def headers(user: dict[str, Any]) -> dict[str, str]:
    return auth_headers(user["token"])


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def signup(
    client: TestClient,
    name: str = "Ala",
    email: str = "ala@example.com",
    password: str = "secret123",
) -> dict[str, Any]:
    """Sign up through the API, asserting success."""
    resp = client.post(
        "/api/auth/signup", json={"name": name, "email": email, "password": password}
    )
    assert resp.status_code == 200, resp.text
    return resp.json()


def create_item(
    client: TestClient,
    headers: dict[str, str],
    **fields: Any,
) -> dict[str, Any]:
    """Create an item through the API, asserting success."""
    body = {"title": "Pen", "price": 1.5, "category": "office", **fields}
    resp = client.post("/api/items", json=body, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()
