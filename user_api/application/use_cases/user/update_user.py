# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.notifications.user_notifier import UserNotifier
from ....core.security import hash_password
from ...dto.user_dto import UserRequest

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Use case for overwriting a user by nickname and notifying the change"""
    
    def __init__(self, user_repository: UserRepository, user_notifier: UserNotifier) -> None:
        self.user_repository = user_repository
        self.user_notifier = user_notifier
    
    async def execute(self, nickname: str, request: UserRequest) -> int:
        """
        Update the user with this nickname
        
        No existence check is made first: when nothing matches, nothing is
        written and no notification is sent.
        
        Args:
            nickname: Nickname from the path, selects the document
            request: Decoded body, overwrites all fields
            
        Returns:
            Number of matched users (0 or 1)
            
        Raises:
            StorageError: If the repository fails
            NotifyError: If publishing the updated user fails
        """
        user = request.to_domain()
        user.password = hash_password(user.password)
        
        matched = await self.user_repository.update_by_nickname(nickname, user)
        
        if matched > 0:
            await self.user_notifier.publish(user)
        else:
            logger.info(f"No user with nickname {nickname} to update, skipping notification")
        
        return matched
