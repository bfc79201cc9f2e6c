"""Tests for the API dependencies."""

from concurrent.futures import ThreadPoolExecutor

from api import deps
from utils.loader import InMemoryPlanStore


def test_get_service_builds_one_service_across_threads(monkeypatch):
    built = []

    def make_store(path):
        store = InMemoryPlanStore()
        built.append(store)
        return store

    monkeypatch.setattr(deps, "_service", None)
    monkeypatch.setattr(deps, "JsonPlanStore", make_store)

    with ThreadPoolExecutor(max_workers=8) as pool:
        services = list(pool.map(lambda _: deps.get_service(), range(32)))

    assert len(built) == 1
    assert all(s is services[0] for s in services)
