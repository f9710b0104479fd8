"""Shared fixtures for the Event Manager API tests."""

from dataclasses import replace

import pytest
from fastapi.testclient import TestClient

from learn.event.core.config import settings
from learn.event.main import create_app


@pytest.fixture
def test_settings():
    """Settings with fixed documentation paths, independent of the environment."""
    return replace(
        settings,
        project_name="Event Manager API",
        api_version="1.0.0",
        docs_enabled=True,
        api_docs_path="/v3/api-docs",
        swagger_ui_path="/swagger-ui",
        log_file=None,
    )


@pytest.fixture
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
