import pytest

from social_api import create_app
from social_api.config.settings import TestingConfig
from social_api.domain.entities.account import Account


@pytest.fixture()
def app(tmp_path):
    """Create a new app backed by a fresh SQLite file for each test."""

    class _Config(TestingConfig):
        DATABASE_URL = f"sqlite:///{tmp_path / 'social_media.db'}"

    app = create_app(_Config)
    yield app
    app.config["service_container"].shutdown()


@pytest.fixture()
def client(app):
    """A test client for the app."""
    return app.test_client()


@pytest.fixture()
def container(app):
    return app.config["service_container"]


@pytest.fixture()
def account_service(container):
    return container.get_account_service()


@pytest.fixture()
def message_service(container):
    return container.get_message_service()


@pytest.fixture()
def registered_account(account_service):
    """An account that exists in the store."""
    return account_service.create_account(Account(username="testuser1", password="password"))
