"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from doccompare.interfaces.api.app import create_app
from doccompare.interfaces.api.middleware.cors import CORSMiddleware
from doccompare.interfaces.api.resources.health import HealthResource
from doccompare.interfaces.api.resources.versions import (
    VersionComparisonResource,
    VersionTextResource,
)


@pytest.fixture
def app(compare_versions, get_version_text):
    """Falcon ASGI app wired to the in-memory stores."""
    return create_app(
        comparison_resource=VersionComparisonResource(compare_versions),
        text_resource=VersionTextResource(get_version_text),
        health_resource=HealthResource(),
        middleware=[CORSMiddleware(["http://localhost:3000"])],
    )


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
