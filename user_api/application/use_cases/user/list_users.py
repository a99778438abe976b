# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.filter import UserFilter
from ...dto.user_dto import UserResponse


class ListUsersUseCase:
    """Use case for listing users matching an optional filter"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_filter: UserFilter) -> List[UserResponse]:
        """
        List users matching every populated filter field
        
        Args:
            user_filter: Filter decoded from the query string; empty matches all
            
        Returns:
            List of UserResponse objects without passwords (empty list if none)
            
        Raises:
            StorageError: If the repository fails
        """
        users = await self.user_repository.find_all_by_filter(user_filter)
        return [UserResponse.from_domain(user.without_password()) for user in users]
