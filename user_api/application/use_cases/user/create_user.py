# Standard library imports
import logging

# External package imports
from bson import ObjectId

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import UserConflictError, UserValidationError
from ....domain.validation import validate_user
from ....core.security import hash_password
from ...dto.user_dto import UserRequest, UserResponse

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for creating a new user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    def _generate_user_id(self) -> str:
        """
        Generate a fresh store identifier
        
        Returns:
            24-character hex ObjectId string
        """
        return str(ObjectId())
    
    async def execute(self, request: UserRequest) -> UserResponse:
        """
        Create a new user
        
        The nickname check and the insert are two separate store calls, so
        two concurrent creates with the same nickname can both succeed.
        
        Args:
            request: Decoded user creation request
            
        Returns:
            UserResponse for the created user (no password)
            
        Raises:
            UserValidationError: If any field rule fails
            UserConflictError: If the nickname is already taken
            StorageError: If the repository fails
        """
        new_user = request.to_domain()
        
        violations = validate_user(new_user)
        if violations:
            raise UserValidationError(violations)
        
        # Check if user already exists
        existing_user = await self.user_repository.find_by_nickname(new_user.nickname)
        if existing_user is not None:
            raise UserConflictError(new_user.nickname)
        
        new_user.password = hash_password(new_user.password)
        new_user.id = self._generate_user_id()
        
        saved_user = await self.user_repository.save(new_user)
        logger.info(f"Created user {saved_user.nickname} with id {saved_user.id}")
        
        return UserResponse.from_domain(saved_user.without_password())
