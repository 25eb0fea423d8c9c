"""
Pytest fixtures for proxy service tests
"""

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from upstream_samples import CREDENTIAL_ENV_VARS, HIRA_BASE_PATH, HIRA_HOST, NAVER_HOST


@pytest.fixture(autouse=True)
def clear_credential_env(monkeypatch):
    """Keep the host environment from leaking credentials into tests"""
    for name in CREDENTIAL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_settings():
    """Build settings pointing at fake upstream hosts"""
    def _make(**overrides) -> Settings:
        values = {
            "ncp_id": "test-ncp-id",
            "ncp_key": "test-ncp-key",
            "hira_service_key": "test-hira-key",
            "naver_base_url": f"https://{NAVER_HOST}",
            "hira_base_url": f"http://{HIRA_HOST}{HIRA_BASE_PATH}",
            "upstream_timeout": 5.0,
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)
    return _make


@pytest.fixture
def settings(make_settings) -> Settings:
    return make_settings()


@pytest.fixture
def client(settings):
    """Test client with every credential configured"""
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def unconfigured_client(make_settings):
    """Test client with no credentials at all"""
    settings = make_settings(ncp_id=None, ncp_key=None, hira_service_key=None)
    with TestClient(create_app(settings)) as test_client:
        yield test_client
