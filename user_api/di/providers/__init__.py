from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .notification_provider import NotificationProvider
from .user_provider import UserProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "NotificationProvider",
    "UserProvider",
]
