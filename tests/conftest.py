"""Shared fixtures: a seeded store with a pinned calendar and a web client."""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from hr_dashboard.main import app
from hr_dashboard.store import DomainStateStore, StoreRegistry

TODAY = date(2025, 2, 20)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def store() -> DomainStateStore:
    return DomainStateStore.from_seed(today=lambda: TODAY)


@pytest.fixture
def registry(monkeypatch) -> StoreRegistry:
    reg = StoreRegistry(factory=lambda: DomainStateStore.from_seed(today=lambda: TODAY))
    monkeypatch.setattr(app.state, "stores", reg)
    return reg


@pytest.fixture
def client(registry):
    with TestClient(app) as c:
        yield c


def login(client: TestClient, email: str, role: str, password: str = "anything"):
    return client.post(
        "/login",
        data={"email": email, "password": password, "role": role},
        follow_redirects=False,
    )


@pytest.fixture
def admin_client(client):
    res = login(client, "admin@softwify.com", "admin")
    assert res.status_code == 302
    return client


@pytest.fixture
def employee_client(client):
    res = login(client, "john.smith@softwify.com", "employee")
    assert res.status_code == 302
    return client


def workspace_store(registry: StoreRegistry) -> DomainStateStore:
    """The single store a test client has created."""
    assert len(registry) == 1
    ws_id = next(iter(registry._workspaces))
    return registry.get_or_create(ws_id)
