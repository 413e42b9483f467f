from __future__ import annotations

import os

import pytest

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")

from nextmastery import create_app


class TestConfig:
    TESTING = True
    SECRET_KEY = "test-secret-key"
    SITE_NAME = "Next.js Mastery"
    SITE_TAGLINE = "Every method, every concept"
    CODEBLOCK_STYLE = "monokai"
    LOG_LEVEL = "DEBUG"


@pytest.fixture(scope="function")
def app():
    """Create a fresh app for every test function."""
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()
