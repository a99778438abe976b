from dataclasses import dataclass, replace
from typing import Optional


@dataclass
class User:
    """
    Pure domain model for User entity - no external dependencies.
    
    ``id`` is the store identifier: assigned once before insert, never
    changed and never sent to clients. ``nickname`` is the business key.
    ``password`` holds the bcrypt hash once the user has been through
    create or update.
    """
    id: Optional[str]
    email: str
    country: str
    nickname: str
    last_name: str
    first_name: str
    password: str = ""

    def without_password(self) -> "User":
        """Copy of this user with the password cleared"""
        return replace(self, password="")
