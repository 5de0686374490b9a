import pytest
from fastapi.testclient import TestClient
from lpmodel.main import create_app


@pytest.fixture()
def client() -> TestClient:
    """
    Creates a fresh FastAPI app and TestClient for each test.
    This avoids shared state between tests.
    """
    app = create_app()
    return TestClient(app)


@pytest.fixture(autouse=True)
def _default_backend_env(monkeypatch):
    """Keep backend selection independent of the developer's shell."""
    monkeypatch.delenv("LPMODEL_BACKEND", raising=False)
    monkeypatch.delenv("LPMODEL_TIME_LIMIT", raising=False)
