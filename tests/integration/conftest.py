"""
Fixtures for HTTP-level tests: the app runs with a container holding
in-memory fakes instead of MongoDB and SNS.
"""
import pytest
from fastapi.testclient import TestClient

from user_api.di.base_container import BaseContainer
from user_api.di.container import set_container
from user_api.di.providers.user_provider import UserProvider
from user_api.domain.notifications.user_notifier import UserNotifier
from user_api.domain.repositories.user_repository import UserRepository
from tests.fakes import InMemoryUserRepository, RecordingNotifier


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def container(user_repository, notifier):
    container = BaseContainer()
    container.register_singleton(UserRepository, user_repository)
    container.register_singleton(UserNotifier, notifier)
    UserProvider.register(container)
    return container


@pytest.fixture
def client(container, monkeypatch):
    """Create test client with the fake container installed."""
    from user_api.main import app

    # Leave pytest's log capture in place
    monkeypatch.setattr("user_api.main.configure_logging", lambda: None)
    set_container(container)
    try:
        with TestClient(app) as c:
            yield c
    finally:
        set_container(None)
