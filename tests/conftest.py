"""
Shared pytest fixtures for user_api tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest

from user_api.domain.models.user import User


@pytest.fixture(autouse=True)
def fast_hashing():
    """Use the minimum bcrypt cost in tests; hashing at the default cost is slow."""
    mock = MagicMock()
    mock.bcrypt_rounds = 4
    with patch("user_api.core.security.get_settings", return_value=mock):
        yield mock


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_user_db",
        "NOTIFIER_BACKEND": "sns",
        "SNS_TOPIC": "arn:aws:sns:us-east-1:000000000000:user-updated",
        "AWS_REGION": "us-east-1",
        "ENDPOINT": "http://localhost:4566",
        "LOG_FORMAT": "text",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Settings double for code that takes a Settings instance."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.user_collection_name = "users"
    mock.notifier_backend = "sns"
    mock.sns_topic = "arn:aws:sns:us-east-1:000000000000:user-updated"
    mock.aws_region = "us-east-1"
    mock.sns_endpoint = ""
    mock.kafka_bootstrap_servers = "localhost:9092"
    mock.kafka_topic = "user-updated"
    mock.log_level = "INFO"
    mock.log_format = "text"
    return mock


def make_user(
    nickname: str = "testnick1",
    country: str = "UK",
    email: str = "test@test.com",
    password: str = "password",
    user_id: str = "5ea7208049e00ddb76994ede",
) -> User:
    return User(
        id=user_id,
        email=email,
        country=country,
        nickname=nickname,
        last_name="lastName",
        first_name="firstName",
        password=password,
    )


@pytest.fixture
def user_factory():
    return make_user
