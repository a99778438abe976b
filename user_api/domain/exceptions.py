"""
Domain exceptions raised by use cases and adapters.

Exception hierarchy:
    UserApiError (base)
    ├── UserDecodeError       - request body is not a decodable user
    ├── UserValidationError   - one or more required/email rules failed
    ├── UserNotFoundError     - no user with the requested nickname
    ├── UserConflictError     - nickname already taken on create
    ├── StorageError          - persistence port failure
    └── NotifyError           - notification port failure

The API layer maps each of these to a status code once, in
api.exception_handlers.
"""
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .validation import FieldViolation


class UserApiError(Exception):
    """Base exception for all user API domain errors"""

    def __init__(self, description: str = "An error occurred"):
        self.description = description
        super().__init__(self.description)


class UserDecodeError(UserApiError):
    """Raised when a request body cannot be decoded into a user"""


class UserValidationError(UserApiError):
    """Raised when a decoded user breaks one or more field rules"""

    def __init__(self, violations: Sequence["FieldViolation"]):
        self.violations = list(violations)
        super().__init__("\n".join(v.message for v in self.violations))


class UserNotFoundError(UserApiError):
    """Raised when no user matches the requested nickname"""

    def __init__(self, nickname: str):
        self.nickname = nickname
        super().__init__(f"user with nickname {nickname} not found!")


class UserConflictError(UserApiError):
    """Raised when creating a user whose nickname already exists"""

    def __init__(self, nickname: str):
        self.nickname = nickname
        super().__init__(f"user with nick name {nickname} already exist!")


class StorageError(UserApiError):
    """Raised by repository implementations when the store fails"""


class NotifyError(UserApiError):
    """Raised by notifier implementations when publishing fails"""
