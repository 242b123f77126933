"""
Shared fixtures: a throwaway SQLite database per test and an API client
bound to it.
"""

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from storefront_auth.api.server import create_app
from storefront_auth.config import Config
from storefront_auth.db import init_db


TEST_SECRET = "test-jwt-secret"


@pytest.fixture
def cfg(tmp_path: Path) -> Config:
    return Config(
        JWT_SECRET=TEST_SECRET,
        API_KEY="test-api-key",
        DB_DSN=str(tmp_path / "storefront.sqlite"),
    )


@pytest.fixture
def db_cfg(cfg: Config) -> Config:
    """Config whose database already has the schema."""
    init_db(cfg.DB_DSN)
    return cfg


@pytest.fixture
def client(cfg: Config) -> Iterator[TestClient]:
    """API client; entering the context runs startup (schema creation)."""
    with TestClient(create_app(cfg)) as c:
        yield c


@pytest.fixture
def registered_user(client: TestClient) -> dict:
    user = {"name": "Alice", "email": "alice@example.com", "password": "correct horse"}
    r = client.post("/register", json=user)
    assert r.status_code == 201
    return {**user, "userId": r.json()["userId"]}


@pytest.fixture
def auth_header(client: TestClient, registered_user: dict) -> dict:
    r = client.post(
        "/login",
        json={"email": registered_user["email"], "password": registered_user["password"]},
    )
    assert r.status_code == 200
    return {"Authorization": f"Bearer {r.json()['token']}"}
