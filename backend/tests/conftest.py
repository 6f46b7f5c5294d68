from datetime import date

import pytest
from fastapi.testclient import TestClient

from propdesk.core.config import Settings, get_settings
from propdesk.main import app
from propdesk.services.repository import SampleRepository, get_repository
from propdesk.services.summaries import get_today

TODAY = date(2026, 10, 1)


@pytest.fixture
def repository():
    return SampleRepository.from_sample_data()


@pytest.fixture
def client(repository):
    app.dependency_overrides[get_settings] = lambda: Settings(submit_delay_ms=0)
    app.dependency_overrides[get_repository] = lambda: repository
    app.dependency_overrides[get_today] = lambda: TODAY
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
