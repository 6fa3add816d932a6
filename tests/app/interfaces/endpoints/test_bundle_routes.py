from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from yourel.application.services.bundle_service import BundleService
from yourel.infrastructure.repositories.file_bundle_repository import (
    FileBundleRepository,
)
from yourel.interfaces.service_dependencies import get_bundle_service
from yourel.main import app


@pytest.fixture
def bundle_file(tmp_path: Path) -> Generator[Path, None, None]:
    filepath = tmp_path / "bundles.json"
    service = BundleService(FileBundleRepository(filepath))
    app.dependency_overrides[get_bundle_service] = lambda: service
    try:
        yield filepath
    finally:
        app.dependency_overrides.pop(get_bundle_service, None)


def test_create_get_and_delete_bundle(client: TestClient, bundle_file: Path) -> None:
    response = client.post(
        "/api/bundles",
        json={
            "name": " Portfolios ",
            "websites": [
                {"url": "https://a.vercel.app/"},
                {"url": "b.netlify.app"},
                {"url": "a.vercel.app"},
            ],
        },
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["bundle"]["name"] == "Portfolios"
    assert data["site_filters"] == "site:a.vercel.app OR site:b.netlify.app"
    bundle_id = data["bundle"]["id"]

    listed = client.get("/api/bundles").json()["data"]["bundles"]
    assert [bundle["id"] for bundle in listed] == [bundle_id]

    fetched = client.get(f"/api/bundles/{bundle_id}").json()["data"]
    assert fetched["bundle"]["id"] == bundle_id

    assert client.delete(f"/api/bundles/{bundle_id}").status_code == 200
    assert client.get(f"/api/bundles/{bundle_id}").status_code == 404


def test_bundle_without_sites_is_rejected(client: TestClient, bundle_file: Path) -> None:
    response = client.post("/api/bundles", json={"name": "empty", "websites": []})

    assert response.status_code == 422
    assert response.json()["code"] == 422


def test_unknown_bundle_is_not_found(client: TestClient, bundle_file: Path) -> None:
    response = client.delete("/api/bundles/missing")

    assert response.status_code == 404
