"""Shared fixtures for the court plan tests."""

import pytest
from fastapi.testclient import TestClient

from api.deps import get_service
from config.settings import Settings
from core.state import GamePlan, Player, Schedule
from main import create_app
from scheduler.service import CourtPlanService
from utils.loader import InMemoryPlanStore


@pytest.fixture
def schedule() -> Schedule:
    return Schedule()


@pytest.fixture
def plan() -> GamePlan:
    """Plan with a three-player roster and an empty schedule."""
    return GamePlan(
        id="plan-1",
        name="Season Opener",
        players=[
            Player(id="p1", name="Alice", jerseyNumber="7"),
            Player(id="p2", name="Bea", jerseyNumber="11", position="C"),
            Player(id="p3", name="Cam"),
        ],
    )


@pytest.fixture
def store() -> InMemoryPlanStore:
    return InMemoryPlanStore()


@pytest.fixture
def service(store) -> CourtPlanService:
    svc = CourtPlanService(store)
    svc.load()
    return svc


@pytest.fixture
def client(service):
    app = create_app(Settings(api_key=None, allowed_hosts=["*"], max_body_bytes=0))
    app.dependency_overrides[get_service] = lambda: service
    with TestClient(app) as c:
        yield c
