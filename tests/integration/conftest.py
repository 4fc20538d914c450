from collections.abc import Callable, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.api.application import create_app
from app.config.settings import Settings


def _test_settings(**overrides: object) -> Settings:
    values: dict[str, object] = {
        "llm_provider": "example",
        "pdf_engine": "pdfplumber",
        "log_level": "WARNING",
        "cors_allow_origins": "",
    }
    values.update(overrides)
    return Settings(**values)  # type: ignore[arg-type]


@pytest.fixture()
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture()
def app(test_settings: Settings) -> FastAPI:
    return create_app(test_settings)


@pytest.fixture()
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def server_error_client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Client that returns 500 responses instead of re-raising server exceptions."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture()
def make_client() -> Generator[Callable[..., TestClient], None, None]:
    """Build a client for an app with custom settings overrides."""
    clients: list[TestClient] = []

    def _make(**overrides: object) -> TestClient:
        test_client = TestClient(create_app(_test_settings(**overrides)))
        clients.append(test_client)
        return test_client

    yield _make
    for test_client in clients:
        test_client.close()
