from __future__ import annotations

import pytest
import requests

from tests.helpers import HOST, FakeAdapter
from xminds_client.config import ClientSettings
from xminds_client.services import XMindsService


@pytest.fixture
def adapter() -> FakeAdapter:
    return FakeAdapter()


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings(host=HOST, user_agent="tests/1.0", refresh_token="refresh-1")


@pytest.fixture
def client(settings, adapter):
    session = requests.Session()
    session.mount(HOST, adapter)
    service = XMindsService(settings, session=session)
    yield service
    service.close()
