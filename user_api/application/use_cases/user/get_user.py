# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import UserNotFoundError
from ...dto.user_dto import UserResponse


class GetUserUseCase:
    """Use case for fetching a single user by nickname"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, nickname: str) -> UserResponse:
        """
        Get a user by nickname
        
        The stored password hash is part of the response, unlike listing.
        
        Args:
            nickname: Nickname of the user
            
        Returns:
            UserResponse with user information
            
        Raises:
            UserNotFoundError: If no user has this nickname
            StorageError: If the repository fails
        """
        user = await self.user_repository.find_by_nickname(nickname)
        if user is None:
            raise UserNotFoundError(nickname)
        
        return UserResponse.from_domain(user)
