# Standard library imports
import logging
from typing import Optional

# Local application imports
from ..core.config import Settings, get_settings
from ..infrastructure.db.mongo_connection import ensure_user_indexes
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    NotificationProvider,
    RepositoryProvider,
    UserProvider,
)

logger = logging.getLogger(__name__)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Notifiers (NotificationProvider) - depends on settings only
    4. Use cases (UserProvider) - depend on repositories and notifiers
    """
    
    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.register_singleton("settings", settings or get_settings())
        self.setup()
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → notifiers → use cases
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        NotificationProvider.register(self)
        UserProvider.register(self)
    
    async def startup(self) -> None:
        """Create collection indexes"""
        await ensure_user_indexes(self.get("user_collection"))
    
    async def shutdown(self) -> None:
        """Close the notifier (if it holds a connection) and the MongoDB client"""
        notifier = self.get("user_notifier")
        close = getattr(notifier, "close", None)
        if close is not None:
            close()
        self.get("mongo_client").close()
        logger.info("Closed MongoDB client")


# Global container instance (singleton pattern)
_container: Optional[BaseContainer] = None


def get_container() -> BaseContainer:
    """
    Get the global DI container instance (singleton pattern)
    
    Returns:
        Container with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def set_container(container: Optional[BaseContainer]) -> None:
    """Replace the global container (None resets it)"""
    global _container
    _container = container
