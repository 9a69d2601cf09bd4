"""Tests for the FastAPI service mode."""

from __future__ import annotations

from pathlib import Path

import pytest

pytest.importorskip("fastapi")
pytest.importorskip("httpx")

from fastapi.testclient import TestClient

from solscrape.errors import NoFilesFoundError
from solscrape.models import AggregationResult
from solscrape.service import create_app


class _StubScraper:
    def __init__(self) -> None:
        self.calls: list[dict[str, object]] = []

    def scrape(self, source: str, *, local: bool = False, **overrides: object) -> AggregationResult:
        self.calls.append({"source": source, "local": local, **overrides})
        if source == "empty":
            raise NoFilesFoundError()
        return AggregationResult(
            output_path=Path("/tmp/out/repo_scraped.sol"),
            file_count=2,
            line_count=10,
            files_processed=("src/A.sol", "src/B.sol"),
        )


@pytest.fixture
def scraper() -> _StubScraper:
    return _StubScraper()


@pytest.fixture
def client(scraper: _StubScraper) -> TestClient:
    return TestClient(create_app(lambda: scraper))  # type: ignore[arg-type, return-value]


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_scrape_endpoint(client: TestClient, scraper: _StubScraper) -> None:
    response = client.post(
        "/scrape",
        json={"source": "./contracts", "local": True, "include_test": True},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["output_path"].endswith("repo_scraped.sol")
    assert data["file_count"] == 2
    assert data["line_count"] == 10
    assert data["files_processed"] == ["src/A.sol", "src/B.sol"]
    assert scraper.calls[0]["source"] == "./contracts"
    assert scraper.calls[0]["local"] is True
    assert scraper.calls[0]["include_test"] is True


def test_scrape_endpoint_maps_scrape_errors(client: TestClient) -> None:
    response = client.post("/scrape", json={"source": "empty"})

    assert response.status_code == 400
    assert "No Solidity files found" in response.json()["detail"]
