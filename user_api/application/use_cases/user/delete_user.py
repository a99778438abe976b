# Local application imports
from ....domain.repositories.user_repository import UserRepository


class DeleteUserUseCase:
    """Use case for deleting a user by nickname"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, nickname: str) -> None:
        """
        Delete a user; deleting an unknown nickname is not an error
        
        Args:
            nickname: Nickname of the user
            
        Raises:
            StorageError: If the repository fails
        """
        await self.user_repository.delete(nickname)
