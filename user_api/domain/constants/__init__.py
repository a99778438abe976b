"""Constants for domain model field names"""

from .user_fields import UserFields

__all__ = [
    "UserFields",
]
