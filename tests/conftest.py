"""
Shared pytest fixtures for the CV generator test suite.
No fixture here launches a browser; the producer is faked unless a test
explicitly asks for Chromium.
"""
import sys
import os

_tests_dir = os.path.dirname(__file__)
_root_dir = os.path.join(_tests_dir, "..")
for _p in (_tests_dir, _root_dir):
    if _p not in sys.path:
        sys.path.insert(0, _p)


import pytest
from fastapi.testclient import TestClient

from factories import FakeProducer, make_logo

from web.config import get_settings
from web.services.cv_renderer import CvRenderer
from web.services.cv_service import CvService
from web.services.layouts import CLASSIC, Organization


@pytest.fixture
def organization():
    return Organization(
        name_ar="حنين الشرق للإستقدام",
        name_en="Haneen Al Sharq Recruitment",
        email="office@example.com",
        address_ar="الرياض",
        phones=("050 000 0001", "050 000 0002"),
    )


@pytest.fixture
def renderer(organization):
    return CvRenderer(layout=CLASSIC, organization=organization)


@pytest.fixture
def logo():
    return make_logo()


@pytest.fixture
def fake_producer():
    return FakeProducer()


@pytest.fixture
def cv_service(renderer, fake_producer, logo):
    return CvService(renderer, fake_producer, logo)


@pytest.fixture
def client(cv_service):
    from web.app import app

    original = app.state.cv_service
    app.state.cv_service = cv_service
    try:
        yield TestClient(app)
    finally:
        app.state.cv_service = original


@pytest.fixture
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
