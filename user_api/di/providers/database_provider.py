from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import create_mongo_client, get_user_collection

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for DB connections"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the MongoDB client and the users collection.
        This is the ONLY place where database connections are created.
        """
        settings = container.get("settings")
        client = create_mongo_client(settings)
        
        container.register_singleton("mongo_client", client)
        container.register_singleton("user_collection", get_user_collection(client, settings))
