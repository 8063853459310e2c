"""Tests for seeding the repository when the application starts."""
import json

import pytest
from fastapi.testclient import TestClient

from cityinfo.main import app
from cityinfo.config import get_settings
from cityinfo.core.dependencies import (
    get_city_query_service,
    get_city_repository,
    get_point_of_interest_query_service,
)
from cityinfo.infrastructure.persistence.seed import SeedDataError

pytestmark = pytest.mark.integration

_CACHED_PROVIDERS = (
    get_settings,
    get_city_repository,
    get_city_query_service,
    get_point_of_interest_query_service,
)


@pytest.fixture
def fresh_providers():
    """Drop cached settings, repository and services around the test."""
    app.dependency_overrides.clear()
    for provider in _CACHED_PROVIDERS:
        provider.cache_clear()
    yield
    for provider in _CACHED_PROVIDERS:
        provider.cache_clear()


class TestSeedFileAtStartup:
    """CITIES_SEED_FILE decides what the running app serves."""

    def test_serves_cities_from_seed_file(self, tmp_path, monkeypatch, fresh_providers, sample_city_data):
        seed_file = tmp_path / "cities.json"
        seed_file.write_text(json.dumps([sample_city_data]), encoding="utf-8")
        monkeypatch.setenv("CITIES_SEED_FILE", str(seed_file))

        with TestClient(app) as client:
            cities = client.get("/api/cities").json()
            point = client.get("/api/cities/10/pointsofinterest/6")
            new_york = client.get("/api/cities/1")

        assert [c["name"] for c in cities] == ["Tokyo"]
        assert point.status_code == 200
        assert point.json()["name"] == "Tokyo Tower"
        assert new_york.status_code == 404

    def test_serves_built_in_fixture_without_seed_file(self, monkeypatch, fresh_providers):
        monkeypatch.delenv("CITIES_SEED_FILE", raising=False)

        with TestClient(app) as client:
            cities = client.get("/api/cities").json()

        assert [c["name"] for c in cities] == ["New York", "Paris"]

    def test_malformed_seed_file_fails_startup(self, tmp_path, monkeypatch, fresh_providers):
        seed_file = tmp_path / "broken.json"
        seed_file.write_text("[{", encoding="utf-8")
        monkeypatch.setenv("CITIES_SEED_FILE", str(seed_file))

        with pytest.raises(SeedDataError):
            with TestClient(app):
                pass

    def test_duplicate_ids_in_seed_file_fail_startup(self, tmp_path, monkeypatch, fresh_providers):
        seed_file = tmp_path / "dupes.json"
        seed_file.write_text(
            json.dumps([{"id": 1, "name": "Rome"}, {"id": 1, "name": "Milan"}]),
            encoding="utf-8",
        )
        monkeypatch.setenv("CITIES_SEED_FILE", str(seed_file))

        with pytest.raises(ValueError, match="Duplicate city id 1"):
            with TestClient(app):
                pass
