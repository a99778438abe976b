# Standard library imports
import logging

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import ASCENDING, IndexModel
from pymongo.errors import PyMongoError

# Local application imports
from ...core.config import Settings
from ...domain.constants import UserFields

logger = logging.getLogger(__name__)


def create_mongo_client(settings: Settings) -> AsyncIOMotorClient:
    """
    Create the MongoDB client for the configured URI
    
    The client keeps its own connection pool and is safe to share between
    concurrent requests; create one per process.
    
    Args:
        settings: Application settings
        
    Returns:
        Motor client (connects lazily)
    """
    return AsyncIOMotorClient(settings.mongo_uri)


def get_user_collection(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB
    
    Returns:
        MongoDB collection for users
    """
    return client[settings.mongo_database_name][settings.user_collection_name]


async def ensure_user_indexes(user_collection: AsyncIOMotorCollection) -> None:
    """
    Create the nickname and email indexes if they do not exist yet
    
    The indexes are not unique; nickname uniqueness is only pre-checked by
    the create use case. Failures are logged and do not stop startup.
    """
    indexes = [
        IndexModel([(UserFields.NICKNAME, ASCENDING)], name="nickname_idx"),
        IndexModel([(UserFields.EMAIL, ASCENDING)], name="email_idx"),
    ]
    try:
        created = await user_collection.create_indexes(indexes)
        logger.info(f"Ensured user indexes: {created}")
    except PyMongoError as e:
        logger.error(f"Failed to create user indexes: {e}")
