# Standard library imports
import logging
from typing import List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.models.filter import UserFilter
from ...domain.constants import UserFields
from ...domain.exceptions import StorageError

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(self, user_collection: AsyncIOMotorCollection) -> None:
        self.user_collection = user_collection
    
    async def find_all(self) -> List[User]:
        """
        Find every user
        
        Returns:
            List of User domain models, passwords included
        """
        try:
            return [self._document_to_user(document) async for document in self.user_collection.find({})]
        except PyMongoError as e:
            raise StorageError(str(e)) from e
    
    async def find_all_by_filter(self, user_filter: UserFilter) -> List[User]:
        """
        Find users matching every populated filter field
        
        Args:
            user_filter: Equality predicates; empty filter matches all
            
        Returns:
            List of User domain models with password cleared
        """
        query = self._build_query(user_filter)
        
        results = []
        try:
            async for document in self.user_collection.find(query):
                try:
                    user = self._document_to_user(document)
                except ValueError as e:
                    logger.error(f"Skipping undecodable user document: {e}")
                    continue
                results.append(user.without_password())
        except PyMongoError as e:
            raise StorageError(str(e)) from e
        return results
    
    async def find_by_nickname(self, nickname: str) -> Optional[User]:
        """
        Find user by nickname
        
        Args:
            nickname: Nickname to search for
            
        Returns:
            First matching User domain model, None if there is none
        """
        try:
            document = await self.user_collection.find_one({UserFields.NICKNAME: nickname})
        except PyMongoError as e:
            raise StorageError(str(e)) from e
        
        if document is None:
            return None
        return self._document_to_user(document)
    
    async def save(self, user: User) -> User:
        """
        Insert a new user
        
        Args:
            user: User with id and password hash already assigned
            
        Returns:
            The stored User
        """
        if not user.id:
            raise ValueError("User id must be assigned before save")
        
        try:
            await self.user_collection.insert_one(self._user_to_dict(user))
        except PyMongoError as e:
            raise StorageError(str(e)) from e
        return user
    
    async def update_by_nickname(self, nickname: str, user: User) -> int:
        """
        Overwrite all profile fields and the password hash of a user
        
        The _id of the matched document is never touched.
        
        Args:
            nickname: Nickname selecting the document
            user: New field values
            
        Returns:
            Matched document count (0 when no user has this nickname)
        """
        user_dict = self._user_to_dict(user)
        user_dict.pop(UserFields.MONGO_ID, None)
        
        try:
            update_result = await self.user_collection.update_one(
                {UserFields.NICKNAME: nickname},
                {"$set": user_dict},
            )
        except PyMongoError as e:
            raise StorageError(str(e)) from e
        return update_result.matched_count
    
    async def delete(self, nickname: str) -> None:
        """
        Delete the user with this nickname
        
        Args:
            nickname: Nickname of the user to delete
        """
        try:
            await self.user_collection.delete_one({UserFields.NICKNAME: nickname})
        except PyMongoError as e:
            raise StorageError(str(e)) from e
    
    @staticmethod
    def _build_query(user_filter: Optional[UserFilter]) -> dict:
        """Equality conjunction over the populated filter fields"""
        if user_filter is None:
            return {}
        return dict(user_filter.predicates())
    
    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        
        return User(
            id=str(document[UserFields.MONGO_ID]),
            email=document.get(UserFields.EMAIL, ""),
            country=document.get(UserFields.COUNTRY, ""),
            nickname=document.get(UserFields.NICKNAME, ""),
            last_name=document.get(UserFields.LAST_NAME, ""),
            first_name=document.get(UserFields.FIRST_NAME, ""),
            password=document.get(UserFields.PASSWORD, ""),
        )
    
    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document
        
        Args:
            user: User domain model
            
        Returns:
            Dictionary ready for MongoDB storage
        """
        user_dict = {
            UserFields.EMAIL: user.email,
            UserFields.COUNTRY: user.country,
            UserFields.NICKNAME: user.nickname,
            UserFields.LAST_NAME: user.last_name,
            UserFields.FIRST_NAME: user.first_name,
            UserFields.PASSWORD: user.password,
        }
        
        if user.id:
            try:
                user_dict[UserFields.MONGO_ID] = ObjectId(user.id)
            except (InvalidId, TypeError):
                user_dict[UserFields.MONGO_ID] = user.id
        
        return user_dict
