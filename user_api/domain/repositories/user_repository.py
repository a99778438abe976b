from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.user import User
from ..models.filter import UserFilter


class UserRepository(ABC):
    """
    Repository interface - defines contract for user data access.
    
    Implementations raise StorageError on any store failure and must be
    safe to share across concurrent requests.
    """
    
    @abstractmethod
    async def find_all(self) -> List[User]:
        """Return every stored user"""
        pass
    
    @abstractmethod
    async def find_all_by_filter(self, user_filter: UserFilter) -> List[User]:
        """Return users matching every populated filter field, passwords cleared"""
        pass
    
    @abstractmethod
    async def find_by_nickname(self, nickname: str) -> Optional[User]:
        """Return the first user with this nickname, or None"""
        pass
    
    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a new user; id and password hash are already set"""
        pass
    
    @abstractmethod
    async def update_by_nickname(self, nickname: str, user: User) -> int:
        """Overwrite fields of the user with this nickname; returns matched count"""
        pass
    
    @abstractmethod
    async def delete(self, nickname: str) -> None:
        """Delete the user with this nickname; no-op when absent"""
        pass
